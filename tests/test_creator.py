import io

import pytest

from oslabs.creator import create_file, main, prompt_employees
from oslabs.employees import Employee, read_employees


def test_prompt_employees_reads_tokens_across_lines():
    stream = io.StringIO("101 Emp1\n40\n102 Emp2 37.5\n")
    out = io.StringIO()
    employees = prompt_employees(2, stream, out)
    assert employees == [Employee(101, "Emp1", 40.0), Employee(102, "Emp2", 37.5)]
    text = out.getvalue()
    assert "Record #1:" in text
    assert "Record #2:" in text
    assert text.count("Hours worked: ") == 2


def test_prompt_employees_zero_records():
    out = io.StringIO()
    assert prompt_employees(0, io.StringIO(""), out) == []
    assert out.getvalue() == ""


def test_prompt_employees_end_of_input():
    with pytest.raises(EOFError):
        prompt_employees(1, io.StringIO("1 Emp1"), io.StringIO())


def test_prompt_employees_bad_number():
    with pytest.raises(ValueError):
        prompt_employees(1, io.StringIO("abc Emp1 40"), io.StringIO())


def test_create_file_round_trip(tmp_path):
    path = tmp_path / "staff.bin"
    employees = [Employee(103, "Emp3", 42.0), Employee(101, "Emp1", 40.0)]
    assert create_file(path, employees) == 2
    assert read_employees(path) == employees


def test_main_creates_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "staff.bin"
    monkeypatch.setattr("sys.stdin", io.StringIO("101 Emp1 40\n102 Emp2 37.5\n"))
    assert main([str(path), "2"]) == 0
    assert read_employees(path) == [
        Employee(101, "Emp1", 40.0),
        Employee(102, "Emp2", 37.5),
    ]
    output = capsys.readouterr().out
    assert f"Creating binary file: {path}" in output
    assert "Record count: 2" in output
    assert f"File {path} successfully created with 2 records." in output


def test_main_wrong_argument_count(capsys):
    assert main(["only_one"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_cannot_create_file(tmp_path, capsys):
    target = tmp_path / "missing_dir" / "staff.bin"
    assert main([str(target), "1"]) == 1
    assert "Error creating file" in capsys.readouterr().out