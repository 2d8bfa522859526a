"""Checking a sorted sequence against the data it was sorted from."""

from __future__ import annotations

import logging
import os
from typing import List, Sequence, Tuple, Union

from streamsort.intfile import load_ints

PathLike = Union[str, "os.PathLike[str]"]

log = logging.getLogger(__name__)


class SortCheckError(Exception):
    """Raised when sorted output does not match its sorted reference."""

    def __init__(
        self,
        message: str,
        expected_length: int,
        actual_length: int,
        mismatches: Sequence[Tuple[int, int, int]] = (),
    ) -> None:
        super().__init__(message)
        self.expected_length = expected_length
        self.actual_length = actual_length
        self.mismatches: List[Tuple[int, int, int]] = list(mismatches)


def check_sorted(reference: Sequence[int], values: Sequence[int]) -> int:
    """Check that ``values`` equals ``reference`` sorted; return the length.

    Raises SortCheckError listing every (index, got, expected) difference.
    """
    if len(values) != len(reference):
        raise SortCheckError(
            f"Different length of sorted ({len(values)}) and reference "
            f"arrays ({len(reference)}).",
            expected_length=len(reference),
            actual_length=len(values),
        )
    log.info("Input length OK.")

    expected = sorted(reference)
    mismatches = [
        (index, got, want)
        for index, (got, want) in enumerate(zip(values, expected))
        if got != want
    ]
    if mismatches:
        details = "; ".join(
            f"index {i}: got {got}, expected {want}" for i, got, want in mismatches
        )
        raise SortCheckError(
            f"Sorted output differs from reference: {details}",
            expected_length=len(reference),
            actual_length=len(values),
            mismatches=mismatches,
        )
    log.info("No difference between sorted and reference arrays.")
    return len(values)


def check_sorted_file(path: PathLike, values: Sequence[int]) -> int:
    """Check ``values`` against the sorted contents of an integer file."""
    return check_sorted(load_ints(path), values)