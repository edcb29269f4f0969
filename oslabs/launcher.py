"""Interactive driver that runs the creator and reporter commands in turn."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Iterator, TextIO

from oslabs.employees import iter_employees


def display_binary_file(path: str | os.PathLike[str], out: TextIO) -> int:
    """Print the records of a binary employee file and return how many there were."""
    try:
        stream = open(path, "rb")
    except OSError:
        out.write(f"Error opening file: {os.fspath(path)}\n")
        return 0

    count = 0
    with stream:
        out.write("\nBinary file contents:\n")
        out.write("ID\tName\t\tHours\n")
        out.write("------------------------\n")
        for emp in iter_employees(stream):
            out.write(f"{emp.num}\t{emp.name}\t\t{emp.hours:g}\n")
            count += 1
    out.write(f"Total records: {count}\n")
    return count


def display_text_file(path: str | os.PathLike[str], out: TextIO) -> None:
    """Print the lines of a text file."""
    try:
        stream = open(path, encoding="utf-8")
    except OSError:
        out.write(f"Error opening file: {os.fspath(path)}\n")
        return

    with stream:
        out.write("\nReport contents:\n")
        for line in stream:
            out.write(line.rstrip("\n") + "\n")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _launch(label: str, command: list[str]) -> bool:
    print(f"Launching {label} with parameters: {' '.join(command)}", flush=True)
    try:
        subprocess.run(command, check=False)
    except OSError as exc:
        print(f"Error launching {label}. Error code: {exc.errno}")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Ask for file names, run the creator and reporter, and show their results."""
    parser = argparse.ArgumentParser(
        prog="launcher",
        description="Create an employee file and a salary report interactively.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    binary_name = _ask("Enter binary file name: ", tokens)
    record_count = int(_ask("Enter number of records: ", tokens))

    creator = [sys.executable, "-m", "oslabs.creator", binary_name, str(record_count)]
    if not _launch("Creator", creator):
        return 1

    display_binary_file(binary_name, sys.stdout)

    print()
    report_name = _ask("Enter report file name: ", tokens)
    rate = float(_ask("Enter hourly rate: ", tokens))

    reporter = [sys.executable, "-m", "oslabs.reporter", binary_name, report_name, f"{rate:f}"]
    if not _launch("Reporter", reporter):
        return 1

    display_text_file(report_name, sys.stdout)

    print("\nOperation completed. Press Enter to exit...", end="", flush=True)
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())