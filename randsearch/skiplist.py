"""Skip list of integer keys with a node-traversal search benchmark."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterator, Sequence
from typing import NamedTuple

DEFAULT_MAX_LEVEL = 25
DEFAULT_P = 0.5
DEFAULT_SIZES = (5_000_000, 10_000_000, 20_000_000)
DEFAULT_SEARCHES = 1_000_000


class SearchResult(NamedTuple):
    """Outcome of a lookup: whether the key was found and how many nodes were visited."""

    found: bool
    traversed: int


class _Node:
    __slots__ = ("key", "forward")

    def __init__(self, key: int | None, level: int) -> None:
        self.key = key
        self.forward: list[_Node | None] = [None] * (level + 1)


class SkipList:
    """An ordered set of keys stored in a probabilistic skip list."""

    def __init__(
        self,
        max_level: int = DEFAULT_MAX_LEVEL,
        p: float = DEFAULT_P,
        rng: random.Random | None = None,
    ) -> None:
        if max_level < 0:
            raise ValueError("max_level must not be negative")
        if not 0.0 <= p <= 1.0:
            raise ValueError("p must lie in [0, 1]")
        self.max_level = max_level
        self.p = p
        self.level = 0
        self._rng = rng if rng is not None else random.Random()
        self._header = _Node(None, max_level)
        self._size = 0

    def random_level(self) -> int:
        """Draw a node level: each extra level with probability ``p``, capped at ``max_level``."""
        level = 0
        while level < self.max_level and self._rng.random() < self.p:
            level += 1
        return level

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        update = [self._header] * (self.max_level + 1)
        node = self._header
        for i in range(self.level, -1, -1):
            while (nxt := node.forward[i]) is not None and nxt.key < key:
                node = nxt
            update[i] = node

        nxt = node.forward[0]
        if nxt is not None and nxt.key == key:
            return False

        level = self.random_level()
        if level > self.level:
            self.level = level
        new = _Node(key, level)
        for i in range(level + 1):
            new.forward[i] = update[i].forward[i]
            update[i].forward[i] = new
        self._size += 1
        return True

    def search(self, key: int) -> SearchResult:
        """Look up ``key``, counting the nodes stepped onto along the way."""
        node = self._header
        traversed = 0
        for i in range(self.level, -1, -1):
            while (nxt := node.forward[i]) is not None and nxt.key < key:
                node = nxt
                traversed += 1
        candidate = node.forward[0]
        if candidate is None:
            return SearchResult(False, traversed)
        return SearchResult(candidate.key == key, traversed + 1)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key).found

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._header.forward[0]
        while node is not None:
            yield node.key
            node = node.forward[0]


def generate_unique_keys(
    n: int, start: int = 1, rng: random.Random | None = None
) -> list[int]:
    """Return ``start, start + 2, ...`` (``n`` keys) in random order."""
    if n < 0:
        raise ValueError("n must not be negative")
    if rng is None:
        rng = random.Random()
    keys = list(range(start, start + 2 * n, 2))
    rng.shuffle(keys)
    return keys


def main(argv: Sequence[str] | None = None) -> int:
    """Measure average traversed nodes for hits and misses in skip lists of several sizes."""
    parser = argparse.ArgumentParser(description="Benchmark skip list searches.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--searches", type=int, default=DEFAULT_SEARCHES)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if any(n < 1 for n in args.sizes):
        parser.error("sizes must be positive")
    if args.searches < 2:
        parser.error("searches must be at least 2")

    rng = random.Random(args.seed)
    half = args.searches // 2
    for n in args.sizes:
        start = time.process_time()
        print(f"\n--- Sample Size: {n} ---")
        keys = generate_unique_keys(n, 1, rng)
        skiplist = SkipList(rng=rng)
        for key in keys:
            skiplist.insert(key)
        print(f"Done generating skiplist with {n} elements.")

        print("Searching used keys...")
        success_total = sum(skiplist.search(rng.choice(keys)).traversed for _ in range(half))
        print("Searching unused keys...")
        fail_total = sum(
            skiplist.search(2 * rng.randrange(2 * n)).traversed for _ in range(half)
        )

        print(f"{fail_total / half:.2f}")
        print(f"{success_total / half:.2f}")
        print(f"Average traversed nodes: {(fail_total + success_total) / args.searches:.2f}")
        print(f"Skiplist time: {time.process_time() - start:.6f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())