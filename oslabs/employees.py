"""Employee records stored as fixed-size binary structures, and salary reports."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from operator import attrgetter
from typing import BinaryIO, Iterable, Iterator

NAME_SIZE = 10
"""Size of the name field in bytes, terminating NUL included."""

_RECORD = struct.Struct("<i10s2xd")
RECORD_SIZE = _RECORD.size
"""Size of one stored record in bytes."""

_SEPARATOR = "-------------------------------------------"


@dataclass(frozen=True)
class Employee:
    """One employee record: identification number, name and hours worked."""

    num: int
    name: str
    hours: float

    def to_bytes(self) -> bytes:
        """Pack the record into its fixed binary layout."""
        encoded = self.name.encode("utf-8")
        if len(encoded) >= NAME_SIZE or b"\0" in encoded:
            raise ValueError(
                f"employee name must fit in {NAME_SIZE - 1} bytes: {self.name!r}"
            )
        try:
            return _RECORD.pack(self.num, encoded, self.hours)
        except struct.error as exc:
            raise ValueError(f"cannot store employee {self.num!r}: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> "Employee":
        """Unpack a record from exactly RECORD_SIZE bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"an employee record takes {RECORD_SIZE} bytes, got {len(data)}"
            )
        num, raw_name, hours = _RECORD.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(num, name, hours)


@dataclass(frozen=True)
class EmployeeReport:
    """A report line: an employee together with the salary earned."""

    num: int
    name: str
    hours: float
    salary: float


def iter_employees(stream: BinaryIO) -> Iterator[Employee]:
    """Yield records from a binary stream; a trailing partial record is ignored."""
    while True:
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) < RECORD_SIZE:
            return
        yield Employee.from_bytes(chunk)


def read_employees(path: str | os.PathLike[str]) -> list[Employee]:
    """Read every record stored in a binary file."""
    with open(path, "rb") as stream:
        return list(iter_employees(stream))


def write_employees(path: str | os.PathLike[str], employees: Iterable[Employee]) -> int:
    """Write records to a binary file, replacing it; return how many were written."""
    records = [employee.to_bytes() for employee in employees]
    with open(path, "wb") as stream:
        stream.write(b"".join(records))
    return len(records)


def make_report_rows(employees: Iterable[Employee], rate: float) -> list[EmployeeReport]:
    """Compute each employee's salary at an hourly rate, ordered by number."""
    rows = (
        EmployeeReport(emp.num, emp.name, emp.hours, emp.hours * rate)
        for emp in employees
    )
    return sorted(rows, key=attrgetter("num"))


def format_report(source_name: str, rows: Iterable[EmployeeReport]) -> str:
    """Render the salary report text for rows read from source_name."""
    lines = [
        f'Report for file "{source_name}"',
        "",
        f"{'Num':<10}{'Name':<15}{'Hours':<10}Salary",
        _SEPARATOR,
    ]
    lines.extend(
        f"{row.num:<10}{row.name:<15}{row.hours:<10.2f}{row.salary:.2f}"
        for row in rows
    )
    return "\n".join(lines) + "\n"