import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from randsearch.skiplist import SearchResult, SkipList, generate_unique_keys, main


def test_insert_and_duplicate():
    sl = SkipList(rng=random.Random(0))
    assert sl.insert(5) is True
    assert sl.insert(5) is False
    assert len(sl) == 1
    assert 5 in sl


def test_search_empty():
    sl = SkipList(rng=random.Random(0))
    assert sl.search(10) == SearchResult(False, 0)
    assert 10 not in sl


@given(st.lists(st.integers(-10_000, 10_000), max_size=150))
def test_iteration_is_sorted_set(keys):
    sl = SkipList(rng=random.Random(1))
    for key in keys:
        sl.insert(key)
    assert list(sl) == sorted(set(keys))
    assert len(sl) == len(set(keys))
    assert sl.level <= sl.max_level


@given(
    st.lists(st.integers(-500, 500), min_size=1, max_size=100, unique=True),
    st.integers(-600, 600),
)
def test_search_consistent_with_membership(keys, probe):
    sl = SkipList(rng=random.Random(2))
    for key in keys:
        sl.insert(key)
    result = sl.search(probe)
    assert result.found == (probe in keys)
    assert 0 <= result.traversed <= len(keys)
    if result.found:
        assert result.traversed >= 1


def test_random_level_extremes():
    assert SkipList(max_level=7, p=0.0, rng=random.Random(0)).random_level() == 0
    assert SkipList(max_level=7, p=1.0, rng=random.Random(0)).random_level() == 7


def test_random_level_bounded():
    sl = SkipList(max_level=3, p=0.9, rng=random.Random(4))
    levels = {sl.random_level() for _ in range(500)}
    assert levels <= {0, 1, 2, 3}
    assert 3 in levels


@pytest.mark.parametrize("kwargs", [{"max_level": -1}, {"p": 1.5}, {"p": -0.1}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        SkipList(**kwargs)


def test_generate_unique_keys():
    keys = generate_unique_keys(100, 1, random.Random(3))
    assert sorted(keys) == list(range(1, 201, 2))
    assert keys == generate_unique_keys(100, 1, random.Random(3))


def test_generate_unique_keys_negative():
    with pytest.raises(ValueError):
        generate_unique_keys(-2)


def test_main_prints_report(capsys):
    assert main(["--sizes", "200", "--searches", "100", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "--- Sample Size: 200 ---" in out
    assert "Done generating skiplist with 200 elements." in out
    assert "Average traversed nodes:" in out
    assert "Skiplist time:" in out