"""Reading and writing of PPM images (plain P3 and raw P6)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

_WHITESPACE = b" \t\n\r\v\f"
_WRITER_COMMENT = "# written by streamsort PPM writer"


class PPMError(ValueError):
    """Raised when a file is not a PPM image or is malformed."""


@dataclass(frozen=True)
class PPMImage:
    """An RGB image with rows stored bottom-up, three bytes per pixel."""

    width: int
    height: int
    pixels: bytes
    max_value: int = 255
    comments: Tuple[str, ...] = field(default=())


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def peek(self) -> int:
        return self.data[self.pos] if self.pos < len(self.data) else -1

    def getc(self) -> int:
        c = self.peek()
        if c >= 0:
            self.pos += 1
        return c

    def skip_whitespace(self) -> None:
        while 0 <= self.peek() and self.peek() in _WHITESPACE:
            self.pos += 1

    def read_int(self) -> int:
        self.skip_whitespace()
        start = self.pos
        if self.peek() in (ord("+"), ord("-")):
            self.pos += 1
        while 0 <= self.peek() and chr(self.peek()).isdigit():
            self.pos += 1
        token = self.data[start:self.pos]
        try:
            return int(token)
        except ValueError:
            raise PPMError(f"expected an integer at byte {start}") from None

    def read_comment(self) -> str:
        start = self.pos
        while self.peek() >= 0 and self.peek() not in b"\n\r":
            self.pos += 1
        text = self.data[start:self.pos].decode("latin-1")
        self.skip_whitespace()
        return text.strip()


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _read_header_comments(reader: _Reader) -> List[str]:
    comments: List[str] = []
    c = reader.getc()
    if c in (ord("\n"), ord("\r")):
        while reader.peek() == ord("#"):
            reader.getc()
            comments.append(reader.read_comment())
    return comments


def read_ppm(path: PathLike) -> PPMImage:
    """Load a P3 or P6 image; the first row of the file becomes the last row."""
    reader = _Reader(Path(path).read_bytes())
    c = reader.getc()
    if c in (ord("P"), ord("p")):
        c = reader.getc()
    if c not in (ord("3"), ord("6")):
        raise PPMError(f"{path} is not a PPM file")
    plain = c == ord("3")

    comments = _read_header_comments(reader)
    width = reader.read_int()
    height = reader.read_int()
    max_value = reader.read_int()
    if width <= 0 or height <= 0:
        raise PPMError(f"invalid image size {width}x{height}")
    if max_value <= 0:
        raise PPMError(f"invalid maximum value {max_value}")

    row_bytes = width * 3
    if plain:
        samples = [
            _truncating_div(reader.read_int() * 255, max_value) & 0xFF
            for _ in range(row_bytes * height)
        ]
        raw = bytes(samples)
    else:
        reader.getc()
        raw = reader.data[reader.pos:reader.pos + row_bytes * height]
        if len(raw) < row_bytes * height:
            raise PPMError(f"{path} ends before all pixel data was read")

    rows = [raw[r * row_bytes:(r + 1) * row_bytes] for r in range(height)]
    return PPMImage(
        width=width,
        height=height,
        pixels=b"".join(reversed(rows)),
        max_value=max_value,
        comments=tuple(comments),
    )


def write_ppm(path: PathLike, width: int, height: int, data: bytes) -> None:
    """Write bottom-up RGB data as a plain-text P3 image."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}x{height}")
    pixels = bytes(data)
    if len(pixels) < width * height * 3:
        raise ValueError(
            f"need {width * height * 3} bytes of pixel data, got {len(pixels)}"
        )
    row_bytes = width * 3
    lines = ["P3", _WRITER_COMMENT, f"{width} {height}", "255"]
    for v in range(height - 1, -1, -1):
        row = pixels[v * row_bytes:(v + 1) * row_bytes]
        lines.append("".join(f"{row[i]} {row[i + 1]} {row[i + 2]} "
                             for i in range(0, row_bytes, 3)))
    with open(path, "w", encoding="ascii") as fh:
        fh.write("\n".join(lines) + "\n\n")