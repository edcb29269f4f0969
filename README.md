# oslabs

Three small programs about processes, threads and synchronization. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Employee records and salary reports

Employee records are stored in a binary file as fixed-size records of 24 bytes each. A record holds the following fields, in little-endian order:

- a 32-bit number
- a name of at most 9 UTF-8 bytes, padded with NUL bytes to 10
- 2 bytes of padding
- the hours worked, as a 64-bit float

When a file is read, an incomplete record at its end is ignored.

Create a file and enter its records. For each record the program asks for the number, the name and the hours. It reads the answers as whitespace-separated words from standard input:

```
oslabs-creator staff.bin 3
```

Write a text report. The rows are sorted by employee number. Each row gives the employee's number, name, hours and salary, which is the hours times the hourly rate. Hours and salary are printed with two decimals:

```
oslabs-reporter staff.bin report.txt 15
```

Run both steps in a row with the launcher:

```
oslabs-launcher
```

The launcher asks for the binary file name and the record count. It then runs the creator as a child process under the same Python interpreter and prints the records in the file. Next it asks for the report file name and the hourly rate, runs the reporter the same way, and prints the report. At the end it waits for Enter before it exits.

The same functions are available from code:

- `oslabs.employees`: `Employee` (with `to_bytes` and `Employee.from_bytes`), `EmployeeReport`, `iter_employees`, `read_employees`, `write_employees`, `make_report_rows` and `format_report`.
- `oslabs.creator`: `prompt_employees` and `create_file`.
- `oslabs.reporter`: `create_report(binary_path, report_path, rate)`, which writes the report and returns its rows.
- `oslabs.launcher`: `display_binary_file` and `display_text_file`.

## Minimum, maximum and average in threads

```
oslabs-minmax
```

The program reads an array size and then the elements. One thread finds the first minimum and the first maximum. A second thread computes the integer average, truncated toward zero. Both threads pause briefly after each step. The program then replaces the minimum and maximum elements with the average and prints the array.

From code, `oslabs.minmax.process(values, delay=None)` runs both threads. It returns an `ArrayStats` with `values`, `average`, `min_index` and `max_index`. The steps are also available one by one as `find_min_max`, `compute_average` and `replace_extremes`. An empty array raises `ValueError`.

## Marker threads

```
oslabs-marker
```

The program reads an array size and a number of marker threads. Each marker picks cells at random and writes its number into the free ones. Every marker has its own seeded random generator. When a marker hits a cell that is already taken, it reports how many cells it has marked and waits.

Once every active marker is waiting, the program prints the array and asks which marker to terminate. That marker clears its cells, the array is printed again, and the other markers carry on. If you enter an invalid or already terminated number, the program prints a message and lets the markers carry on. The session ends when no markers remain.

From code, `oslabs.marker.MarkerBoard` drives a session step by step with these methods:

- `start`
- `wait_all_blocked`
- `terminate`, which returns the number of cells freed and raises `ValueError` for an invalid marker
- `resume`
- `snapshot`
- `active_markers`

`run_session(size, marker_count, choose, out)` runs a whole session, taking each choice from a callable. The helpers `create_array`, `mark_element` and `clear_marks` work on plain lists.