"""Produce a salary report from a binary employee file."""

from __future__ import annotations

import os
import sys

from oslabs.employees import (
    EmployeeReport,
    format_report,
    make_report_rows,
    read_employees,
)


def _write_report(
    report_path: str | os.PathLike[str],
    source_name: str,
    rows: list[EmployeeReport],
) -> None:
    with open(report_path, "w", encoding="utf-8") as report:
        report.write(format_report(source_name, rows))


def create_report(
    binary_path: str | os.PathLike[str],
    report_path: str | os.PathLike[str],
    rate: float,
) -> list[EmployeeReport]:
    """Read the binary file, write its salary report, and return the report rows."""
    rows = make_report_rows(read_employees(binary_path), rate)
    _write_report(report_path, os.fspath(binary_path), rows)
    return rows


def main(argv: list[str] | None = None) -> int:
    """Command entry point: reporter <binary_file_name> <report_name> <hourly_rate>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: reporter <binary_file_name> <report_name> <hourly_rate>")
        return 1

    binary_name, report_name, rate_text = args
    rate = float(rate_text)

    try:
        employees = read_employees(binary_name)
    except OSError:
        print(f"Error opening file: {binary_name}")
        return 1

    rows = make_report_rows(employees, rate)
    try:
        _write_report(report_name, binary_name, rows)
    except OSError:
        print(f"Error creating report file: {report_name}")
        return 1

    print(f"Report successfully created in file: {report_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())