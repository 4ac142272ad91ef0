import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from randsearch.quick import (
    KEY_RANGE,
    generate_array,
    main,
    median_of_medians,
    partition,
    quickselect,
    quicksort,
    time_quickselect,
    time_quicksort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=80)


def test_median_of_medians_small_group():
    assert median_of_medians([5, 1, 3]) == 3


def test_median_of_medians_even_group_takes_lower_middle():
    assert median_of_medians([4, 1, 3, 2]) == 2


def test_median_of_medians_of_range():
    assert median_of_medians(list(range(25))) == 12


def test_median_of_medians_empty():
    with pytest.raises(ValueError):
        median_of_medians([])


@given(st.lists(st.integers(), min_size=1, max_size=200))
def test_median_of_medians_is_member(values):
    result = median_of_medians(values)
    assert result in values
    assert min(values) <= result <= max(values)


@pytest.mark.parametrize("depth, max_depth", [(0, 30), (5, 5), (0, 0)])
@given(values=st.lists(st.integers(-50, 50), min_size=1, max_size=60))
def test_partition_invariant(depth, max_depth, values):
    work = list(values)
    index = partition(work, 0, len(work) - 1, depth, max_depth, random.Random(1))
    pivot = work[index]
    assert all(v <= pivot for v in work[:index])
    assert all(v > pivot for v in work[index + 1:])
    assert sorted(work) == sorted(values)


def test_partition_bad_range():
    with pytest.raises(IndexError):
        partition([1, 2, 3], 2, 5, 0, 30, random.Random(0))


@pytest.mark.parametrize("max_depth", [0, 2, 30])
@given(values=int_lists)
def test_quicksort_sorts(max_depth, values):
    work = list(values)
    quicksort(work, max_depth, random.Random(7))
    assert work == sorted(values)


@given(values=st.lists(st.integers(-1000, 1000), min_size=1, max_size=80), data=st.data())
def test_quickselect_matches_sorted(values, data):
    k = data.draw(st.integers(0, len(values) - 1))
    for max_depth in (0, 30):
        assert quickselect(list(values), k, max_depth, random.Random(3)) == sorted(values)[k]


@pytest.mark.parametrize("k", [-1, 3])
def test_quickselect_out_of_range(k):
    with pytest.raises(IndexError):
        quickselect([1, 2, 3], k)


def test_generate_array_range_and_reproducible():
    first = generate_array(500, random.Random(42))
    second = generate_array(500, random.Random(42))
    assert first == second
    assert len(first) == 500
    assert all(0 <= v < KEY_RANGE for v in first)


def test_generate_array_negative():
    with pytest.raises(ValueError):
        generate_array(-1)


def test_time_quicksort_sorts_in_place():
    values = generate_array(300, random.Random(5))
    expected = sorted(values)
    elapsed = time_quicksort(values, 30, random.Random(5))
    assert elapsed >= 0.0
    assert values == expected


def test_time_quickselect_leaves_input_untouched():
    values = generate_array(200, random.Random(9))
    snapshot = list(values)
    elapsed = time_quickselect(values, 30, 10, random.Random(9))
    assert elapsed >= 0.0
    assert values == snapshot


def test_time_quickselect_errors():
    with pytest.raises(ValueError):
        time_quickselect([], 30, 5)
    with pytest.raises(ValueError):
        time_quickselect([1, 2], 30, 0)


def test_main_prints_report(capsys):
    assert main(["--sizes", "50", "3000", "--trials", "3", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "--- Sample Size: 50 ---" in out
    assert "--- Sample Size: 3000 ---" in out
    assert "3K" in out
    lines = out.splitlines()
    assert any(line.startswith("quicksort ") for line in lines)
    assert any(line.startswith("quickselect ") for line in lines)