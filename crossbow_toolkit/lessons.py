"""Small exercises: identity report, access check, grading, menus and invoices."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

SECRET_KEY = 1234
INVOICE_FILE = "invoice_data.txt"

_INVOICE_LINES = (
    "Invoice ID: 2026-01",
    "Customer: Crossbw Tech",
    "Total: $1,500.50",
    "Items: Flashdisk Sandisk 32GB, Mouse Wireless Logitech M185",
)

_MENU_MESSAGES = {
    1: "Status: All systems operational on Linux Fedora.",
    2: "Action: Rebooting The System!",
    3: "Action: Shutting down, Goodbye!",
}

_CUSTOMER_NAME_SIZE = 30


def validate_initial(text: str) -> str:
    """Return the single letter typed on an input line.

    Leading whitespace is skipped; the letter must be the only character
    before the end of the line.
    """
    stripped = text.lstrip(" \t\n\v\f\r")
    initial = stripped[:1]
    if not (initial.isascii() and initial.isalpha()):
        raise ValueError("Invalid input! Please enter a single alphabet character!")
    if stripped[1:] not in ("", "\n"):
        raise ValueError("Too many characters! Please enter only one letter!")
    return initial


def identity_report(initial: str, age: int) -> str:
    """Return the report of an initial, its character code and an age."""
    return (
        "\n====== Memory Analysis Report ======\n"
        f"Initial (Char)  : [{initial}]\n"
        f"Initial (ASCII) : {ord(initial)}\n"
        f"Age             : {age}\n"
    )


def check_access(code: int) -> str:
    """Return the access message for a security code."""
    if code == SECRET_KEY:
        return "ACCESS GRANTED: Welcome Home!"
    return "ACCESS DENIED: Intruders detected!"


def grade(score: int) -> str:
    """Return the grade line for an exam score from 0 to 100."""
    if 90 <= score <= 100:
        return "Grade: A (Excellent!)"
    if 75 <= score < 90:
        return "Grade: B (Good Job!)"
    if 0 <= score < 75:
        return "Grade: C (Keep Learning!)"
    raise ValueError("Invalid score entered!")


def system_menu_message(choice: int) -> str:
    """Return the message for a system menu choice."""
    try:
        return _MENU_MESSAGES[choice]
    except KeyError:
        raise ValueError(f"Unknown command code [{choice}].") from None


def countdown(start: int = 10) -> Iterator[int]:
    """Yield the numbers from ``start`` down to 1."""
    yield from range(start, 0, -1)


@dataclass
class Invoice:
    """A simple invoice record."""

    id: int
    customer_name: str
    total_amount: float
    item_count: int

    def __post_init__(self) -> None:
        if len(self.customer_name.encode("utf-8")) >= _CUSTOMER_NAME_SIZE:
            raise ValueError(
                f"customer name longer than {_CUSTOMER_NAME_SIZE - 1} bytes"
            )

    def describe(self) -> str:
        """Return the invoice as labelled lines."""
        return (
            f"Invoice ID   : {self.id}\n"
            f"Customer     : {self.customer_name}\n"
            f"Total Amount : ${self.total_amount:.2f}\n"
            f"Item Count   : {self.item_count}\n"
        )


def write_invoice_file(path: PathLike = INVOICE_FILE) -> None:
    """Write the sample invoice to a text file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in _INVOICE_LINES)


def read_invoice_file(path: PathLike = INVOICE_FILE) -> list[str]:
    """Return the lines of a text file without their line ends."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]