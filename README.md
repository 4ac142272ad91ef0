# randsearch

Benchmarks for three randomized algorithms and data structures, in pure Python
with no third-party dependencies:

- `randsearch.quick`: quickselect and quicksort with random pivots. Once the
  recursion depth reaches a limit, the pivot is the median of medians of groups
  of five instead.
- `randsearch.skiplist`: a skip list of integer keys whose searches report how many
  nodes they visited.
- `randsearch.treap`: a treap whose node priorities come from `hash_wang`, a 32-bit
  integer hash of the key. Its searches report how many probes they took.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line benchmarks

Each benchmark is its own command. Every command accepts `--seed N` to make the
run repeatable.

```
randsearch-quick [--sizes N ...] [--max-depth D] [--trials T] [--seed S]
randsearch-skiplist [--sizes N ...] [--searches M] [--seed S]
randsearch-treap [--sizes N ...] [--searches M] [--seed S]
```

`randsearch-quick` works on arrays of random integers below 1,000,000,000. For each
array size it prints:

- the average CPU time of quickselect for a random rank, over `--trials` runs
  (default 1000) on fresh copies of the array;
- the CPU time of one full quicksort.

It ends with a table of both timings per size. `--max-depth` (default 30) sets the
depth at which the pivot choice switches to median of medians.

`randsearch-skiplist` inserts the keys 1, 3, 5, … in shuffled order. It then runs
`--searches` lookups (default 1,000,000): half for keys that are present and half for
random even keys, which are never present. It prints the average nodes traversed for
the misses, then for the hits, then the overall average, and finally the CPU time.

`randsearch-treap` builds a treap of distinct random keys below `10 * N`. It then
counts the probes for up to `--searches // 2` present keys and as many absent keys,
and prints the mean of the two averages and the CPU time.

The default sizes run into the millions of elements, so expect long run times.
Pass smaller `--sizes` for a quick look.

## Library use

```python
import random

from randsearch.quick import median_of_medians, quickselect, quicksort
from randsearch.skiplist import SkipList, generate_unique_keys
from randsearch.treap import Treap, generate, generate_unused_keys, hash_wang

rng = random.Random(1)

values = [5, 3, 9, 1, 7]
quickselect(list(values), 2, 30, rng)   # 0-based rank 2, the third smallest: 5
data = list(values)
quicksort(data, 30, rng)                 # sorts data in place
median_of_medians(values)                # approximate median used as a pivot

skip = SkipList(25, 0.5, rng)
for key in generate_unique_keys(100, 1, rng):
    skip.insert(key)                     # returns False for a duplicate
found, traversed = skip.search(51)       # SearchResult(found, traversed)
51 in skip, len(skip), list(skip)[:3]    # membership, size, keys in order

treap = Treap(hash_wang)
treap.insert(42)
42 in treap                              # True
treap.count_comparisons(7)               # probes, counting the empty link on a miss
treap.search_path(42)                    # SearchPath(keys=[42], found=True)
list(treap.items())                      # (key, priority) pairs in key order

tree, used = generate(1000, rng)         # treap of 1000 distinct keys below 10000
absent = generate_unused_keys(500, used, rng)
```

`quickselect` raises `IndexError` for a rank outside the sequence.
`generate_unused_keys` raises `ValueError` when it is asked for more absent keys than
the range holds.

## What it does not do

The skip list and the treap only insert and look up keys. They have no deletion, and
they hold nothing beyond integer keys. Nothing is saved between runs. The benchmarks
print plain text and produce no files or charts.