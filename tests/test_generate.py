import logging
import random

import pytest

from streamsort.generate import (
    RAND_MAX,
    GenerateOptions,
    Pattern,
    UsageError,
    generate_values,
    main,
    parse_arguments,
)
from streamsort.intfile import load_ints


def test_parse_full_command_line():
    options = parse_arguments(["--output", "out.bin", "--size", "16", "--increasing"])
    assert options == GenerateOptions("out.bin", 16, Pattern.INCREASING, 0)


def test_parse_constant_reads_its_value():
    options = parse_arguments(["--constant", "42", "--output", "f", "--size", "3"])
    assert options.pattern is Pattern.CONSTANT
    assert options.value == 42


def test_parse_size_takes_leading_digits():
    options = parse_arguments(["--output", "f", "--size", "12abc", "--decreasing"])
    assert options.size == 12


def test_parse_ignores_unknown_arguments():
    options = parse_arguments(["--bogus", "--output", "f", "--size", "2", "--uniform-random"])
    assert options.pattern is Pattern.UNIFORM_RANDOM


def test_second_pattern_is_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="streamsort.generate"):
        options = parse_arguments(
            ["--output", "f", "--size", "2", "--increasing", "--decreasing"]
        )
    assert options.pattern is Pattern.INCREASING
    assert any("--decreasing" in record.getMessage() for record in caplog.records)


def test_parse_reports_every_missing_setting():
    with pytest.raises(UsageError) as info:
        parse_arguments([])
    assert len(info.value.messages) == 3
    assert any("--output" in m for m in info.value.messages)


def test_parse_size_zero_is_an_error():
    with pytest.raises(UsageError):
        parse_arguments(["--output", "f", "--size", "0", "--increasing"])


def test_parse_missing_operand_is_an_error():
    with pytest.raises(UsageError):
        parse_arguments(["--output"])


def test_generate_increasing_and_decreasing():
    inc = generate_values(GenerateOptions("f", 10, Pattern.INCREASING))
    dec = generate_values(GenerateOptions("f", 10, Pattern.DECREASING))
    assert inc == list(range(10))
    assert dec == list(reversed(inc))


def test_generate_constant():
    values = generate_values(GenerateOptions("f", 5, Pattern.CONSTANT, 7))
    assert values == [7] * 5


def test_generate_random_is_in_range_and_seeded():
    options = GenerateOptions("f", 200, Pattern.UNIFORM_RANDOM)
    first = generate_values(options, random.Random(3))
    second = generate_values(options, random.Random(3))
    assert first == second
    assert len(first) == 200
    assert all(0 <= v <= RAND_MAX for v in first)


def test_main_writes_file(tmp_path):
    target = tmp_path / "data.bin"
    status = main(["--output", str(target), "--size", "8", "--decreasing"])
    assert status == 0
    assert load_ints(target) == list(range(7, -1, -1))


def test_main_usage_error_returns_one(tmp_path, capsys):
    assert main(["--size", "4"]) == 1
    assert "Missing output filename" in capsys.readouterr().err