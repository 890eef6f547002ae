"""Interactive command-line calculator with optional persistent history."""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO, TypeVar, Union

from .calculator import operation_for
from .history import History
from .prompts import banner, parse_double, parse_operator

T = TypeVar("T")

DEFAULT_HISTORY_FILE = "history.dat"
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise _EndOfInput
    return line


def _ask(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str,
    parse: Callable[[str], T],
    error: str,
) -> T:
    while True:
        stdout.write(prompt)
        try:
            return parse(_read_line(stdin))
        except ValueError:
            stdout.write(error)


def _calculate(stdout: TextIO, history: History, n1: float, n2: float, op: str) -> None:
    try:
        operation = operation_for(op)
    except ValueError:
        stdout.write("[ERROR] Invalid operator!\n")
        return
    if op == "/" and n2 == 0:
        stdout.write("[ERROR] Division by zero!\nResult: undefined\n")
        return
    result = operation(n1, n2)
    stdout.write(f"Result: {result:.2f}\n")
    history.add(n1, n2, op, result)


def _history_menu(stdin: TextIO, stdout: TextIO, history: History) -> None:
    stdout.write(history.render())
    stdout.write("\n[Options] (c)lear all, (d)elete one, or (any) to continue: ")
    choice = _read_line(stdin)[:1]
    if choice == "c":
        history.clear()
        stdout.write("History cleared!\n")
    elif choice == "d":
        stdout.write("Enter index to delete: ")
        match = _INTEGER_PREFIX.match(_read_line(stdin))
        number = int(match.group(1)) if match else 0
        try:
            history.delete_at(number - 1)
        except IndexError as exc:
            stdout.write(f"[ERROR] {exc}\n")
        else:
            stdout.write(f"Record at index {number} deleted successfully\n")


def _session(stdin: TextIO, stdout: TextIO, history: History) -> None:
    while True:
        stdout.write(banner())
        n1 = _ask(stdin, stdout, "The first number: ", parse_double,
                  "[ERROR] Invalid number!\n")
        n2 = _ask(stdin, stdout, "The second number: ", parse_double,
                  "[ERROR] Invalid number!\n")
        op = _ask(stdin, stdout, "Choose operator (+ - * /): ", parse_operator,
                  "[ERROR] Invalid operator input!\n")
        _calculate(stdout, history, n1, n2, op)

        stdout.write("\nContinue? y/N or press 'h' for history: ")
        choice = _read_line(stdin)[:1]
        if choice in ("h", "H"):
            _history_menu(stdin, stdout, history)
        if choice not in ("y", "Y"):
            return


def run(
    stdin: TextIO,
    stdout: TextIO,
    history_path: Union[str, "os.PathLike[str]"] = DEFAULT_HISTORY_FILE,
) -> int:
    """Run the calculator on the given streams and return the exit status."""
    path = Path(history_path)
    stdout.write("Enable persistent history saving? (y/N): \n")
    consent = stdin.readline()[:1]
    allow_save = consent in ("y", "Y")

    history = History()
    if allow_save:
        history.load(path)

    try:
        _session(stdin, stdout, history)
    except _EndOfInput:
        pass

    if allow_save:
        try:
            history.save(path)
        except OSError:
            stdout.write("[ERROR] Cannot create save file!\n")
    else:
        try:
            path.unlink()
        except OSError:
            pass
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="cli-calculator", description="Interactive calculator with history."
    )
    parser.add_argument(
        "--history-file",
        default=DEFAULT_HISTORY_FILE,
        help="file used to keep history between runs",
    )
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, args.history_file)


if __name__ == "__main__":
    sys.exit(main())