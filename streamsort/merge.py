"""Streaming merge sort over a balanced binary tree of merge tasks.

Every leaf task reads two windows of the input, sorts them once at start
and merges them. Every other task merges the streams of its two children
through bounded fifos, and the root writes the fully merged sequence into
an output link large enough to hold all of it.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from streamsort.fifo import IntFifo
from streamsort.intfile import load_ints
from streamsort.sorting import sort
from streamsort.timer import Stopwatch
from streamsort.verify import SortCheckError, check_sorted_file

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_TASK_COUNT = 7
DEFAULT_LINK_CAPACITY = 64


@dataclass(eq=False)
class Link:
    """A fifo connecting a producer task to a consumer task.

    A missing producer means the link holds input data; a missing consumer
    means the link receives the final output.
    """

    buffer: IntFifo
    prod: Optional["MergeTask"] = None
    cons: Optional["MergeTask"] = None

    def is_alive(self) -> bool:
        """True while the link holds data or its producer may still write."""
        if len(self.buffer) > 0:
            return True
        return self.prod is not None and not self.prod.killed


@dataclass(eq=False)
class MergeTask:
    """A task merging its two input links into its single output link."""

    id: int
    pred: List[Link] = field(default_factory=list)
    succ: List[Link] = field(default_factory=list)
    killed: bool = False

    @property
    def name(self) -> str:
        return f"merge_{self.id}"

    def start(self, threads: int = 0) -> None:
        """Sort every input link that has no producer task."""
        for link in self.pred:
            if link.prod is None:
                link.buffer = IntFifo.from_values(sort(list(link.buffer), threads))

    def run(self) -> bool:
        """Merge what is available; True once the task has no more work."""
        if len(self.pred) < 2 or len(self.succ) < 1:
            return True

        left, right = self.pred[0].buffer, self.pred[1].buffer
        parent = self.succ[0].buffer

        while len(left) > 0 and len(right) > 0 and not parent.is_full():
            if left.peek(0) < right.peek(0):
                parent.push(left.pop())
            else:
                parent.push(right.pop())

        if not self.pred[1].is_alive():
            while len(left) > 0 and not parent.is_full():
                parent.push(left.pop())
        if not self.pred[0].is_alive():
            while len(right) > 0 and not parent.is_full():
                parent.push(right.pop())

        return self.is_depleted()

    def is_depleted(self) -> bool:
        """True when every input is empty and no producer may write more."""
        return all(
            (link.prod is None or link.prod.killed) and len(link.buffer) == 0
            for link in self.pred
        )


def _is_balanced_tree_size(task_count: int) -> bool:
    return task_count >= 1 and (task_count + 1) & task_count == 0


def build_merge_tree(
    values: Sequence[int],
    task_count: int = DEFAULT_TASK_COUNT,
    link_capacity: int = DEFAULT_LINK_CAPACITY,
) -> List[MergeTask]:
    """Build a balanced tree of merge tasks; the root comes first.

    Task ``i`` (counting from 1) consumes from tasks ``2i`` and ``2i+1``.
    Each leaf gets two input windows of ``len(values) // leaves // 2``
    elements; values beyond the last full window are not loaded.
    """
    if not _is_balanced_tree_size(task_count):
        raise ValueError(
            f"task count must be one less than a power of two, got {task_count}"
        )
    if link_capacity < 1:
        raise ValueError(f"link capacity must be at least 1, got {link_capacity}")

    data = list(values)
    tasks = [MergeTask(id=i) for i in range(1, task_count + 1)]
    leaves = (task_count + 1) // 2
    window = len(data) // leaves // 2

    for task in tasks:
        for child_id in (2 * task.id, 2 * task.id + 1):
            if child_id <= task_count:
                child = tasks[child_id - 1]
                link = Link(IntFifo(link_capacity), prod=child, cons=task)
                child.succ.append(link)
                task.pred.append(link)

    for task in tasks:
        if not task.pred:
            base = 2 * window * (task.id - leaves)
            for i in range(2):
                start = base + window * i
                task.pred.append(
                    Link(IntFifo.from_values(data[start:start + window]), cons=task)
                )

    root = tasks[0]
    root.succ.append(Link(IntFifo(len(data)), prod=root))
    return tasks


def _link_state(tasks: Sequence[MergeTask]) -> Tuple[int, ...]:
    return tuple(len(link.buffer) for task in tasks for link in task.pred + task.succ)


def run_pipeline(tasks: Sequence[MergeTask], threads: int = 0) -> None:
    """Start every task, then run them until all have terminated.

    ``threads`` is handed to the initial sort of the input windows. Tasks
    run leaves first in each round; RuntimeError is raised if a round makes
    no progress.
    """
    for task in tasks:
        task.start(threads)

    order = sorted(tasks, key=lambda t: t.id, reverse=True)
    while not all(task.killed for task in order):
        before = _link_state(order)
        killed_any = False
        for task in order:
            if not task.killed and task.run():
                task.killed = True
                killed_any = True
        if not killed_any and _link_state(order) == before:
            raise RuntimeError("merge pipeline stalled without making progress")


def merge_sort(
    values: Sequence[int],
    task_count: int = DEFAULT_TASK_COUNT,
    link_capacity: int = DEFAULT_LINK_CAPACITY,
    threads: int = 0,
) -> List[int]:
    """Sort values through a streaming merge tree and return the result."""
    tasks = build_merge_tree(values, task_count, link_capacity)
    run_pipeline(tasks, threads)
    return list(tasks[0].succ[0].buffer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Sort a binary file of integers with a streaming merge tree."
    )
    parser.add_argument("input", help="file of 32-bit integers to sort")
    parser.add_argument("--tasks", type=int, default=DEFAULT_TASK_COUNT,
                        help="number of merge tasks (2^k - 1)")
    parser.add_argument("--link-capacity", type=int, default=DEFAULT_LINK_CAPACITY,
                        help="capacity of links between tasks")
    parser.add_argument("--threads", type=int, default=0,
                        help="threads for the initial sort (0 sorts sequentially)")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        values = load_ints(args.input)
        watch = Stopwatch()
        watch.reset()
        result = merge_sort(values, args.tasks, args.link_capacity, args.threads)
        elapsed = watch.seconds()
        print(f"{elapsed:.6f}")
        check_sorted_file(args.input, result)
    except SortCheckError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"Cannot sort {args.input}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())