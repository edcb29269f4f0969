"""Create a binary employee file from records typed on standard input."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Iterator, TextIO

from oslabs.employees import Employee, write_employees


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def prompt_employees(count: int, stream: TextIO, out: TextIO) -> list[Employee]:
    """Ask for count records, reading whitespace-separated answers from stream."""
    tokens = _tokens(stream)
    employees = []
    for index in range(1, count + 1):
        out.write(f"\nRecord #{index}:\n")
        out.write("Number: ")
        out.flush()
        num = int(_next_token(tokens))
        out.write("Employee name: ")
        out.flush()
        name = _next_token(tokens)
        out.write("Hours worked: ")
        out.flush()
        hours = float(_next_token(tokens))
        employees.append(Employee(num, name, hours))
    return employees


def create_file(path: str | os.PathLike[str], employees: Iterable[Employee]) -> int:
    """Write the records to a new binary file and return how many were written."""
    return write_employees(path, employees)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: creator <file_name> <record_count>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: creator <file_name> <record_count>")
        return 1

    filename, count_text = args
    count = int(count_text)

    try:
        handle = open(filename, "wb")
    except OSError:
        print(f"Error creating file: {filename}")
        return 1

    with handle:
        print(f"Creating binary file: {filename}")
        print(f"Record count: {count}")
        for employee in prompt_employees(count, sys.stdin, sys.stdout):
            handle.write(employee.to_bytes())

    print(f"\nFile {filename} successfully created with {count} records.")
    return 0


if __name__ == "__main__":
    sys.exit(main())