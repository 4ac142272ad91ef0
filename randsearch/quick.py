"""Randomised quicksort and quickselect with a median-of-medians fallback."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import MutableSequence, Sequence

GROUP_SIZE = 5
DEFAULT_MAX_DEPTH = 30
DEFAULT_TRIALS = 1000
DEFAULT_SIZES = (10_000_000, 20_000_000, 40_000_000, 80_000_000, 160_000_000)
KEY_RANGE = 1_000_000_000


def _group_median(group: Sequence[int]) -> int:
    ordered = sorted(group)
    return ordered[(len(ordered) - 1) // 2]


def median_of_medians(values: Sequence[int]) -> int:
    """Return the median of the medians of groups of five, applied repeatedly."""
    current = list(values)
    if not current:
        raise ValueError("median_of_medians() of an empty sequence")
    while len(current) > GROUP_SIZE:
        current = [
            _group_median(current[start:start + GROUP_SIZE])
            for start in range(0, len(current), GROUP_SIZE)
        ]
    return _group_median(current)


def partition(
    values: MutableSequence[int],
    left: int,
    right: int,
    depth: int,
    max_depth: int,
    rng: random.Random | None = None,
) -> int:
    """Partition ``values[left:right + 1]`` around a pivot and return its final index.

    The pivot is random until ``depth`` reaches ``max_depth``; from then on it
    is the median of medians of the range.
    """
    if not 0 <= left <= right < len(values):
        raise IndexError(f"invalid range [{left}, {right}] for {len(values)} values")
    if rng is None:
        rng = random.Random()

    if depth >= max_depth:
        chosen = median_of_medians(values[left:right + 1])
        index = values.index(chosen, left, right + 1)
    else:
        index = rng.randint(left, right)

    values[index], values[right] = values[right], values[index]
    pivot = values[right]
    store = left
    for scan in range(left, right):
        if values[scan] <= pivot:
            values[store], values[scan] = values[scan], values[store]
            store += 1
    values[right] = values[store]
    values[store] = pivot
    return store


def _quicksort(values, left, right, max_depth, depth, rng):
    while left < right:
        index = partition(values, left, right, depth, max_depth, rng)
        if index - left < right - index:
            _quicksort(values, left, index - 1, max_depth, depth + 1, rng)
            left = index + 1
        else:
            _quicksort(values, index + 1, right, max_depth, depth + 1, rng)
            right = index - 1


def quicksort(
    values: MutableSequence[int],
    max_depth: int = DEFAULT_MAX_DEPTH,
    rng: random.Random | None = None,
) -> None:
    """Sort ``values`` in place."""
    if rng is None:
        rng = random.Random()
    _quicksort(values, 0, len(values) - 1, max_depth, 0, rng)


def quickselect(
    values: MutableSequence[int],
    k: int,
    max_depth: int = DEFAULT_MAX_DEPTH,
    rng: random.Random | None = None,
) -> int:
    """Return the ``k``-th smallest value (0-based), reordering ``values`` in place."""
    if not 0 <= k < len(values):
        raise IndexError(f"k={k} out of range for {len(values)} values")
    if rng is None:
        rng = random.Random()
    left, right = 0, len(values) - 1
    while True:
        index = partition(values, left, right, 0, max_depth, rng)
        offset = index - left
        if offset == k:
            return values[index]
        if offset < k:
            k -= offset + 1
            left = index + 1
        else:
            right = index - 1


def time_quickselect(
    values: Sequence[int],
    max_depth: int = DEFAULT_MAX_DEPTH,
    trials: int = DEFAULT_TRIALS,
    rng: random.Random | None = None,
) -> float:
    """Average CPU seconds of quickselect for a random rank on copies of ``values``."""
    if not values:
        raise ValueError("cannot time quickselect on an empty sequence")
    if trials < 1:
        raise ValueError("trials must be at least 1")
    if rng is None:
        rng = random.Random()
    total = 0.0
    for _ in range(trials):
        k = rng.randrange(len(values))
        copy = list(values)
        start = time.process_time()
        quickselect(copy, k, max_depth, rng)
        total += time.process_time() - start
    return total / trials


def time_quicksort(
    values: MutableSequence[int],
    max_depth: int = DEFAULT_MAX_DEPTH,
    rng: random.Random | None = None,
) -> float:
    """Sort ``values`` in place and return the CPU seconds it took."""
    if rng is None:
        rng = random.Random()
    start = time.process_time()
    quicksort(values, max_depth, rng)
    return time.process_time() - start


def generate_array(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ``n`` random integers in ``[0, 1_000_000_000)``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if rng is None:
        rng = random.Random()
    return [rng.randrange(KEY_RANGE) for _ in range(n)]


def _size_label(n: int) -> str:
    if n % 1_000_000 == 0:
        return f"{n // 1_000_000}M"
    if n % 1_000 == 0:
        return f"{n // 1_000}K"
    return str(n)


def main(argv: Sequence[str] | None = None) -> int:
    """Benchmark quickselect and quicksort over several array sizes."""
    parser = argparse.ArgumentParser(description="Benchmark quickselect and quicksort.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if any(n < 1 for n in args.sizes):
        parser.error("sizes must be positive")
    if args.trials < 1:
        parser.error("trials must be positive")

    rng = random.Random(args.seed)
    select_times: list[float] = []
    sort_times: list[float] = []
    for n in args.sizes:
        values = generate_array(n, rng)
        print(f"\n--- Sample Size: {n} ---")
        print("Testing quickselect...")
        avg_select = time_quickselect(values, args.max_depth, args.trials, rng)
        select_times.append(avg_select)
        print(f"Avg. quickselect time: {avg_select:.6f} seconds")

        print("Testing quicksort...")
        sort_time = time_quicksort(values, args.max_depth, rng)
        sort_times.append(sort_time)
        print(f"Quicksort time: {sort_time:.6f} seconds")

    print(f"{'':<15} " + " ".join(f"{_size_label(n):<10}" for n in args.sizes))
    print(f"{'quicksort':<15} " + " ".join(f"{t:<10.6f}" for t in sort_times))
    print(f"{'quickselect':<15} " + " ".join(f"{t:<10.6f}" for t in select_times))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())