"""Sequential quicksort and a threaded sample sort built on it."""

from __future__ import annotations

from bisect import bisect_right
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import Iterable, List, Sequence


def simple_quicksort(values: Iterable[int]) -> List[int]:
    """Return the values sorted by a plain, not-in-place quicksort.

    The pivot is the middle element; elements equal to it are gathered
    once and placed between the sorted smaller and larger parts.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = items[len(items) // 2]
    left = [v for v in items if v < pivot]
    right = [v for v in items if v > pivot]
    pivot_count = len(items) - len(left) - len(right)
    return simple_quicksort(left) + [pivot] * pivot_count + simple_quicksort(right)


def _partition(chunk: Sequence[int], pivots: Sequence[int]) -> List[List[int]]:
    """Split a chunk into one bucket per pivot interval, keeping order."""
    buckets: List[List[int]] = [[] for _ in range(len(pivots) + 1)]
    for value in chunk:
        # First bucket whose pivot is greater than the value; else the last.
        buckets[bisect_right(pivots, value)].append(value)
    return buckets


def sample_sort(values: Iterable[int], threads: int) -> List[int]:
    """Sort with ``threads`` workers by splitting the data around pivots.

    Pivots are taken at evenly spaced positions of the input. Every worker
    first distributes its share of the input into buckets bounded by the
    pivots; bucket ``j`` of all workers is then gathered and sorted by
    worker ``j``, and the sorted buckets are concatenated.
    """
    if threads < 1:
        raise ValueError(f"thread count must be at least 1, got {threads}")
    data = list(values)
    size = len(data)
    if size == 0:
        return []

    step = size // threads
    pivots = sorted(data[step * i] for i in range(threads - 1))
    chunks = [data[i * size // threads:(i + 1) * size // threads] for i in range(threads)]

    with ThreadPoolExecutor(max_workers=threads) as pool:
        partitioned = list(pool.map(lambda chunk: _partition(chunk, pivots), chunks))
        gathered = [
            list(chain.from_iterable(parts[j] for parts in partitioned))
            for j in range(threads)
        ]
        sorted_buckets = list(pool.map(simple_quicksort, gathered))

    return list(chain.from_iterable(sorted_buckets))


def sort(values: Iterable[int], threads: int = 0) -> List[int]:
    """Sort sequentially when ``threads`` is 0, otherwise with a sample sort."""
    if threads < 0:
        raise ValueError(f"thread count must not be negative, got {threads}")
    if threads == 0:
        return simple_quicksort(values)
    return sample_sort(values, threads)