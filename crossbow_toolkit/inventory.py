"""Items entered by the user, stored in and loaded from a binary database."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

PathLike = Union[str, "os.PathLike[str]"]

BANNER = "=" * 30 + "\nCROSSBOW TECH - PERSISTENT ERP\n" + "=" * 30 + "\n"
DEFAULT_DATABASE = "database.dat"

NAME_SIZE = 30
_COUNT = struct.Struct("<i")
# Name field, padding to a 4-byte boundary, price, quantity.
_ITEM = struct.Struct(f"<{NAME_SIZE}s2xii")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class Item:
    """One stock item."""

    name: str
    price: int
    qty: int

    def __post_init__(self) -> None:
        encoded = self.name.encode("utf-8")
        if len(encoded) >= NAME_SIZE:
            raise ValueError(f"item name longer than {NAME_SIZE - 1} bytes: {self.name!r}")
        if b"\0" in encoded:
            raise ValueError("item name may not contain NUL characters")
        for field in ("price", "qty"):
            value = getattr(self, field)
            if not _INT_MIN <= value <= _INT_MAX:
                raise ValueError(f"{field} out of range: {value}")

    def pack(self) -> bytes:
        return _ITEM.pack(self.name.encode("utf-8"), self.price, self.qty)

    @classmethod
    def unpack(cls, data: bytes) -> "Item":
        raw_name, price, qty = _ITEM.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(name=name, price=price, qty=qty)

    def __str__(self) -> str:
        return f"{self.name} | Price: ${self.price} | Quantity: {self.qty}"


def save_items(items: Iterable[Item], path: PathLike = DEFAULT_DATABASE) -> None:
    """Write the item count followed by every item to ``path``."""
    items = list(items)
    with open(path, "wb") as handle:
        handle.write(_COUNT.pack(len(items)))
        handle.write(b"".join(item.pack() for item in items))


def load_items(path: PathLike = DEFAULT_DATABASE) -> list[Item]:
    """Read the items stored in ``path``.

    Raises FileNotFoundError when there is no database and ValueError when the
    file is too short to hold its item count.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    if len(data) < _COUNT.size:
        raise ValueError("database is truncated")
    (count,) = _COUNT.unpack_from(data)
    body = data[_COUNT.size:]
    wanted = min(max(count, 0), len(body) // _ITEM.size)
    return [
        Item.unpack(body[i * _ITEM.size:(i + 1) * _ITEM.size]) for i in range(wanted)
    ]


def format_items(items: Iterable[Item]) -> str:
    """Return the listing shown after loading the database."""
    lines = ["", "=== Loading Data from Disk ==="]
    lines.extend(f"Item {number}: {item}" for number, item in enumerate(items, start=1))
    return "\n".join(lines) + "\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def run(stdin: TextIO, stdout: TextIO, path: PathLike = DEFAULT_DATABASE) -> int:
    """Ask for items, store them in ``path``, then show what was stored."""
    stdout.write(BANNER)
    stdout.write("How many items to input? ")
    tokens = _tokens(stdin)
    try:
        count = _next_int(tokens, "item count")
        if count < 0:
            raise ValueError(f"invalid item count: {count}")
        items = []
        for number in range(1, count + 1):
            stdout.write(f"\nItem #{number} name : ")
            name = _next_token(tokens)
            stdout.write(f"Item #{number} price : ")
            price = _next_int(tokens, "price")
            stdout.write(f"Item #{number} quantity : ")
            qty = _next_int(tokens, "quantity")
            items.append(Item(name=name, price=price, qty=qty))
    except ValueError as exc:
        stdout.write(f"\n[ERROR] {exc}\n")
        return 1

    try:
        save_items(items, path)
    except OSError:
        pass
    else:
        stdout.write(f">> Data saved to {Path(path).name}\n")

    try:
        loaded = load_items(path)
    except OSError:
        stdout.write("No database found!\n")
    else:
        stdout.write(format_items(loaded))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="persistent-erp", description="Enter items and store them on disk."
    )
    parser.add_argument("--database", default=DEFAULT_DATABASE)
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, args.database)


if __name__ == "__main__":
    sys.exit(main())