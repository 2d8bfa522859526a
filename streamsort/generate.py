"""Generate a binary file of integers following a chosen pattern."""

from __future__ import annotations

import enum
import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from streamsort.intfile import store_ints

log = logging.getLogger(__name__)

RAND_MAX = 2**31 - 1


class Pattern(enum.Enum):
    """How generated values are laid out."""

    UNIFORM_RANDOM = "uniform random"
    INCREASING = "increasing"
    DECREASING = "decreasing"
    CONSTANT = "constant"


_PATTERN_OPTIONS = {
    "--uniform-random": Pattern.UNIFORM_RANDOM,
    "--increasing": Pattern.INCREASING,
    "--decreasing": Pattern.DECREASING,
    "--constant": Pattern.CONSTANT,
}


@dataclass(frozen=True)
class GenerateOptions:
    """Settings of one generation run."""

    filename: str
    size: int
    pattern: Pattern
    value: int = 0


class UsageError(Exception):
    """Raised when the command line does not allow generation."""

    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__("\n".join(messages))
        self.messages: List[str] = list(messages)


def _atoi(text: str) -> int:
    """Leading integer of a string, or 0 when there is none."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def parse_arguments(argv: Sequence[str]) -> GenerateOptions:
    """Parse options (without the program name) into generation settings.

    Unknown arguments are ignored. A second pattern option is ignored with
    a warning. Missing settings raise UsageError listing every problem.
    """
    filename: Optional[str] = None
    size = 0
    pattern: Optional[Pattern] = None
    value = 0

    args = iter(argv)
    for arg in args:
        if arg in ("--output", "--size"):
            operand = next(args, None)
            if operand is None:
                raise UsageError([f"Option {arg} requires a value."])
            if arg == "--output":
                filename = operand
            else:
                size = _atoi(operand)
            continue

        chosen = _PATTERN_OPTIONS.get(arg)
        if chosen is None:
            continue
        if pattern is not None:
            log.warning(
                'Output pattern already defined as %s. Ignoring pattern option "%s"',
                pattern.value,
                arg,
            )
            continue
        pattern = chosen
        if chosen is Pattern.CONSTANT:
            operand = next(args, None)
            if operand is None:
                raise UsageError(["Option --constant requires a value."])
            value = _atoi(operand)

    messages = []
    if filename is None:
        messages.append("Missing output filename. Use option --output /path/to/filename.")
    if size == 0:
        messages.append("Missing number of numbers to generate. Use option --size 123456.")
    elif size < 0:
        messages.append(f"Invalid number of numbers to generate: {size}.")
    if pattern is None:
        messages.append(
            "Missing output pattern to generate. Use one of options --uniform-random, "
            "--increasing, --decreasing or --constant <value>."
        )
    if messages:
        raise UsageError(messages)

    assert filename is not None and pattern is not None
    return GenerateOptions(filename=filename, size=size, pattern=pattern, value=value)


def generate_values(options: GenerateOptions, rng: Optional[random.Random] = None) -> List[int]:
    """Produce ``options.size`` values following ``options.pattern``."""
    size = options.size
    if options.pattern is Pattern.UNIFORM_RANDOM:
        source = rng if rng is not None else random.Random()
        return [source.randint(0, RAND_MAX) for _ in range(size)]
    if options.pattern is Pattern.INCREASING:
        return list(range(size))
    if options.pattern is Pattern.DECREASING:
        return list(range(size - 1, -1, -1))
    return [options.value] * size


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_arguments(args)
    except UsageError as exc:
        for message in exc.messages:
            print(message, file=sys.stderr)
        return 1
    values = generate_values(options, random.Random())
    try:
        store_ints(options.filename, values)
    except (OSError, ValueError) as exc:
        print(f"Cannot write {options.filename}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())