"""Sort the integers of a binary file, time it and verify the result."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Sequence, Tuple, Union

from streamsort.intfile import load_ints
from streamsort.sorting import sort
from streamsort.timer import Stopwatch
from streamsort.verify import SortCheckError, check_sorted_file

PathLike = Union[str, "os.PathLike[str]"]


def sort_file(path: PathLike, threads: int = 0) -> Tuple[List[int], float]:
    """Sort a file's integers; return the sorted values and seconds spent.

    The result is checked against the file; SortCheckError is raised when
    it differs.
    """
    values = load_ints(path)
    watch = Stopwatch()
    watch.reset()
    result = sort(values, threads)
    elapsed = watch.seconds()
    check_sorted_file(path, result)
    return result, elapsed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Sort a binary file of integers.")
    parser.add_argument("input", help="file of 32-bit integers to sort")
    parser.add_argument(
        "--threads", type=int, default=0, help="worker threads (0 sorts sequentially)"
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        _, elapsed = sort_file(args.input, args.threads)
    except SortCheckError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Cannot sort {args.input}: {exc}", file=sys.stderr)
        return 1
    print(f"{elapsed:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())