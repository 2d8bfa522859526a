"""Binary files of 32-bit signed integers, little-endian, with no header."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Iterable, List, Union

PathLike = Union[str, "os.PathLike[str]"]

_ITEM = struct.Struct("<i")
ITEM_SIZE = _ITEM.size


def count_ints(path: PathLike) -> int:
    """Number of integers stored in a file, without reading them."""
    size = Path(path).stat().st_size
    if size % ITEM_SIZE:
        raise ValueError(f"{path}: size {size} is not a multiple of {ITEM_SIZE}")
    return size // ITEM_SIZE


def _unpack(raw: bytes) -> List[int]:
    return [value for (value,) in _ITEM.iter_unpack(raw)]


def load_ints(path: PathLike) -> List[int]:
    """Read every integer in a file."""
    raw = Path(path).read_bytes()
    if len(raw) % ITEM_SIZE:
        raise ValueError(f"{path}: size {len(raw)} is not a multiple of {ITEM_SIZE}")
    return _unpack(raw)


def load_window(path: PathLike, offset: int, count: int) -> List[int]:
    """Read up to ``count`` integers starting at element ``offset``."""
    if offset < 0 or count < 0:
        raise ValueError("offset and count must not be negative")
    with open(path, "rb") as fh:
        fh.seek(offset * ITEM_SIZE)
        raw = fh.read(count * ITEM_SIZE)
    usable = len(raw) - len(raw) % ITEM_SIZE
    return _unpack(raw[:usable])


def store_ints(path: PathLike, values: Iterable[int]) -> int:
    """Write integers to a file, replacing it; returns how many were written."""
    items = list(values)
    try:
        raw = b"".join(_ITEM.pack(v) for v in items)
    except struct.error as exc:
        raise ValueError(f"value does not fit in 32 bits: {exc}") from None
    Path(path).write_bytes(raw)
    return len(items)