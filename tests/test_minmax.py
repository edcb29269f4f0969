import io

import pytest

from oslabs.minmax import (
    ArrayStats,
    compute_average,
    find_min_max,
    main,
    process,
    replace_extremes,
)


def test_basic_initialization():
    stats = ArrayStats([3, 1, 5, 2, 4])
    assert stats.size == 5
    assert stats.values[0] == 3
    assert stats.values[1] == 1
    assert stats.average == 0
    assert stats.min_index == 0
    assert stats.max_index == 0


def test_find_min_max():
    stats = ArrayStats([3, 1, 5, 2, 4])
    assert find_min_max(stats, 0) == (1, 2)
    assert stats.min_index == 1
    assert stats.max_index == 2
    assert stats.values[stats.min_index] == 1
    assert stats.values[stats.max_index] == 5


def test_compute_average():
    stats = ArrayStats([3, 1, 5, 2, 4])
    assert compute_average(stats, 0) == 3
    assert stats.average == 3


def test_integration():
    stats = process([3, 1, 5, 2, 4], delay=0)
    assert stats.values == [3, 3, 3, 2, 4]


def test_all_equal_elements():
    stats = process([5, 5, 5], delay=0)
    assert stats.min_index == 0
    assert stats.max_index == 0
    assert stats.average == 5
    assert stats.values == [5, 5, 5]


def test_large_array():
    size = 100
    stats = process(list(range(size, 0, -1)), delay=0)
    assert stats.min_index == size - 1
    assert stats.max_index == 0
    assert stats.average == 50
    assert stats.values[0] == 50
    assert stats.values[size - 1] == 50
    assert stats.values[1:size - 1] == list(range(size - 1, 1, -1))


def test_negative_numbers():
    stats = ArrayStats([-3, -1, -5, -2, -4])
    find_min_max(stats, 0)
    compute_average(stats, 0)
    assert stats.min_index == 2
    assert stats.max_index == 1
    assert stats.values[stats.min_index] == -5
    assert stats.values[stats.max_index] == -1
    assert stats.average == -3


def test_average_truncates_toward_zero():
    stats = ArrayStats([-1, -2])
    assert compute_average(stats, 0) == -1


def test_first_extreme_wins_on_ties():
    stats = ArrayStats([2, 1, 9, 1, 9])
    assert find_min_max(stats, 0) == (1, 2)


def test_replace_extremes_same_index():
    stats = ArrayStats([7], average=7)
    assert replace_extremes(stats) == [7]


def test_process_does_not_modify_input():
    values = [3, 1, 5, 2, 4]
    process(values, delay=0)
    assert values == [3, 1, 5, 2, 4]


@pytest.mark.parametrize("function", [find_min_max, compute_average])
def test_empty_array_rejected(function):
    with pytest.raises(ValueError):
        function(ArrayStats([]), 0)


def test_process_empty_rejected():
    with pytest.raises(ValueError):
        process([], delay=0)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 1 5 2 4\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2] == "Array after replacing min and max elements with average value:"
    assert lines[-1] == "3 3 3 2 4 "


def test_main_rejects_invalid_size(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert "Invalid array size" in capsys.readouterr().out


def test_main_missing_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    with pytest.raises(EOFError):
        main([])