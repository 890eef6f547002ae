"""Calculation history kept in memory and stored in a binary file."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_COUNT = struct.Struct("<i")
# Three doubles, the operator byte, then padding to an 8-byte boundary.
_RECORD = struct.Struct("<3dc7x")


@dataclass(frozen=True)
class CalcRecord:
    """One finished calculation."""

    n1: float
    n2: float
    op: str
    result: float

    def pack(self) -> bytes:
        return _RECORD.pack(self.n1, self.n2, self.result, self.op.encode("latin-1"))

    @classmethod
    def unpack(cls, data: bytes) -> "CalcRecord":
        n1, n2, result, op = _RECORD.unpack(data)
        return cls(n1=n1, n2=n2, op=op.decode("latin-1"), result=result)

    def __str__(self) -> str:
        return f"{self.n1:.2f} {self.op} {self.n2:.2f} = {self.result:.2f}"


class History:
    """An ordered list of calculation records."""

    def __init__(self) -> None:
        self.records: list[CalcRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CalcRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> CalcRecord:
        return self.records[index]

    def add(self, n1: float, n2: float, op: str, result: float) -> CalcRecord:
        """Append a calculation and return its record."""
        record = CalcRecord(n1=n1, n2=n2, op=op, result=result)
        self.records.append(record)
        return record

    def clear(self) -> None:
        """Remove every record."""
        self.records.clear()

    def delete_at(self, index: int) -> CalcRecord:
        """Remove and return the record at the zero-based ``index``."""
        if not self.records:
            raise IndexError("History is empty!")
        if not 0 <= index < len(self.records):
            raise IndexError(
                f"Invalid index! Range is 1 to {len(self.records)} index"
            )
        return self.records.pop(index)

    def save(self, path: PathLike) -> None:
        """Write the record count followed by every record to ``path``."""
        with open(path, "wb") as handle:
            handle.write(_COUNT.pack(len(self.records)))
            handle.write(b"".join(record.pack() for record in self.records))

    def load(self, path: PathLike) -> None:
        """Replace the records with those stored in ``path``.

        A file that cannot be opened or holds no count leaves the history as it is.
        """
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            return
        if len(data) < _COUNT.size:
            return
        (count,) = _COUNT.unpack_from(data)
        body = data[_COUNT.size:]
        available = len(body) // _RECORD.size
        wanted = min(max(count, 0), available)
        self.records = [
            CalcRecord.unpack(body[i * _RECORD.size:(i + 1) * _RECORD.size])
            for i in range(wanted)
        ]

    def render(self) -> str:
        """Return the history as the text shown to the user."""
        lines = ["", "=== Calculation History ==="]
        if not self.records:
            lines.append("No history available.")
        else:
            lines.extend(
                f"{number}. {record}"
                for number, record in enumerate(self.records, start=1)
            )
        lines.append("=" * 30)
        return "\n".join(lines) + "\n"