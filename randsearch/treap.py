"""Treap keyed by integers with hash-derived priorities and a search-cost benchmark."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import NamedTuple

DEFAULT_SIZES = (5_000_000, 10_000_000, 20_000_000)
DEFAULT_SEARCHES = 1_000_000
_MASK = 0xFFFFFFFF


def hash_wang(key: int) -> int:
    """Thomas Wang's 32-bit integer hash of ``key`` taken as an unsigned 32-bit value."""
    x = key & _MASK
    x = (x ^ 61) ^ (x >> 16)
    x = (x + (x << 3)) & _MASK
    x ^= x >> 4
    x = (x * 0x27D4EB2D) & _MASK
    x ^= x >> 15
    return x


class SearchPath(NamedTuple):
    """Keys visited while searching, and whether the target was found."""

    keys: list[int]
    found: bool


class _Node:
    __slots__ = ("key", "priority", "left", "right")

    def __init__(self, key: int, priority: int) -> None:
        self.key = key
        self.priority = priority
        self.left: _Node | None = None
        self.right: _Node | None = None


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


class Treap:
    """Binary search tree on keys that is a max-heap on priorities."""

    def __init__(self, priority: Callable[[int], int] = hash_wang) -> None:
        self._priority = priority
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        self._root, inserted = self._insert(self._root, key)
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: _Node | None, key: int) -> tuple[_Node, bool]:
        if node is None:
            return _Node(key, self._priority(key)), True
        if key < node.key:
            node.left, inserted = self._insert(node.left, key)
            if node.left.priority > node.priority:
                node = _rotate_right(node)
        elif key > node.key:
            node.right, inserted = self._insert(node.right, key)
            if node.right.priority > node.priority:
                node = _rotate_left(node)
        else:
            return node, False
        return node, inserted

    def count_comparisons(self, key: int) -> int:
        """Number of probes to find ``key``, counting the final empty link on a miss."""
        count = 0
        node = self._root
        while True:
            count += 1
            if node is None or node.key == key:
                return count
            node = node.left if key < node.key else node.right

    def search_path(self, key: int) -> SearchPath:
        """Keys visited from the root while looking for ``key``."""
        visited: list[int] = []
        node = self._root
        while node is not None:
            visited.append(node.key)
            if key == node.key:
                return SearchPath(visited, True)
            node = node.left if key < node.key else node.right
        return SearchPath(visited, False)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search_path(key).found

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, priority)`` pairs in key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.priority
            node = node.right

    def __iter__(self) -> Iterator[int]:
        return (key for key, _ in self.items())


def generate(n: int, rng: random.Random | None = None) -> tuple[Treap, list[int]]:
    """Build a treap of ``n`` distinct random keys below ``10 * n``.

    Returns the treap and the keys in the order they were inserted.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if rng is None:
        rng = random.Random()
    treap = Treap()
    used: list[int] = []
    while len(used) < n:
        key = rng.randrange(10 * n)
        if treap.insert(key):
            used.append(key)
    return treap, used


def generate_unused_keys(
    n: int, used_keys: Sequence[int], rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` distinct keys below ``10 * len(used_keys)`` that are not in ``used_keys``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if rng is None:
        rng = random.Random()
    max_key = 10 * len(used_keys)
    taken = {key for key in used_keys if 0 <= key < max_key}
    if n > max_key - len(taken):
        raise ValueError(f"only {max_key - len(taken)} unused keys are available, {n} requested")
    unused: list[int] = []
    while len(unused) < n:
        candidate = rng.randrange(max_key)
        if candidate not in taken:
            taken.add(candidate)
            unused.append(candidate)
    return unused


def average(values: Iterable[float]) -> float:
    """Arithmetic mean, or 0.0 for no values."""
    items = list(values)
    return sum(items) / len(items) if items else 0.0


def main(argv: Sequence[str] | None = None) -> int:
    """Measure the average search cost in treaps of several sizes."""
    parser = argparse.ArgumentParser(description="Benchmark treap searches.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--searches", type=int, default=DEFAULT_SEARCHES)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if any(n < 1 for n in args.sizes):
        parser.error("sizes must be positive")
    if args.searches < 2:
        parser.error("searches must be at least 2")

    rng = random.Random(args.seed)
    for n in args.sizes:
        start = time.process_time()
        print(f"\n--- Sample Size: {n} ---")
        treap, used_keys = generate(n, rng)
        print(f"Done generating treap with {n} elements.")
        probes = min(args.searches // 2, n)
        unused_keys = generate_unused_keys(probes, used_keys, rng)

        print("\nSearching used keys...")
        used_costs = [treap.count_comparisons(key) for key in used_keys[:probes]]
        print("\nSearching unused keys...")
        unused_costs = [treap.count_comparisons(key) for key in unused_keys]

        overall = (average(unused_costs) + average(used_costs)) / 2
        print(f"Average traversed nodes: {overall:.2f}")
        print(f"Treap time: {time.process_time() - start:.6f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())