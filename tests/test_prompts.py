import math

import pytest

from crossbow_toolkit.prompts import banner, parse_double, parse_operator


def test_banner_text():
    lines = banner().split("\n")
    assert lines[1] == "CLI - CALCULATOR"
    assert lines[0] == lines[2] == "=" * len("CLI - CALCULATOR")
    assert banner().endswith("\n\n")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("2.5\n", 2.5),
        ("  7\n", 7.0),
        ("-3\n", -3.0),
        ("1e3\n", 1e3),
        (".5\n", 0.5),
        ("42", 42.0),
        ("+8.25\n", 8.25),
    ],
)
def test_parse_double_valid(line, expected):
    assert parse_double(line) == expected


def test_parse_double_hex():
    assert parse_double("0x1p4\n") == float.fromhex("0x1p4")
    assert parse_double("-0x10\n") == -float.fromhex("0x10")


def test_parse_double_special_values():
    assert math.isinf(parse_double("inf\n"))
    assert parse_double("-Infinity\n") < 0
    assert math.isnan(parse_double("nan\n"))


@pytest.mark.parametrize(
    "line", ["abc\n", "\n", "", "5 \n", "1.5x\n", "1e\n", "0x\n", "1_0\n", "--1\n"]
)
def test_parse_double_invalid(line):
    with pytest.raises(ValueError):
        parse_double(line)


@pytest.mark.parametrize(
    "line, expected", [("+\n", "+"), ("/", "/"), ("*extra\n", "*"), ("%\n", "%")]
)
def test_parse_operator_takes_first_char(line, expected):
    assert parse_operator(line) == expected


@pytest.mark.parametrize("line", ["\n", ""])
def test_parse_operator_empty_raises(line):
    with pytest.raises(ValueError):
        parse_operator(line)