"""Randomized quickselect and quicksort, a skip list and a treap, with benchmark commands."""

__version__ = "0.1.0"
__all__ = ["quick", "skiplist", "treap"]