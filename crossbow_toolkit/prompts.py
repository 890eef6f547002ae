"""Banner and input parsing for the calculator prompts."""

from __future__ import annotations

import re

_BANNER = "=" * 16 + "\nCLI - CALCULATOR\n" + "=" * 16 + "\n\n"

_DECIMAL = re.compile(
    r"[ \t\n\v\f\r]*[+-]?"
    r"(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?"
    r")"
)


def banner() -> str:
    """Return the calculator banner."""
    return _BANNER


def parse_double(line: str) -> float:
    """Parse a whole input line as a number.

    Leading whitespace is allowed; after the number only the line end may follow.
    """
    text = line[:-1] if line.endswith("\n") else line
    match = _DECIMAL.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid number: {line!r}")
    number = text.lstrip(" \t\n\v\f\r")
    unsigned = number.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        sign = -1.0 if number.startswith("-") else 1.0
        mantissa = unsigned if "p" in unsigned.lower() else unsigned + "p0"
        return sign * float.fromhex(mantissa)
    if unsigned[:3].lower() == "nan":
        return float(number[: len(number) - len(unsigned)] + "nan")
    return float(number)


def parse_operator(line: str) -> str:
    """Return the first character of a non-empty input line."""
    if not line or line[0] == "\n":
        raise ValueError("empty operator input")
    return line[0]