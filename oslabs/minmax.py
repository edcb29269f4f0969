"""Find an array's extremes and its mean in two threads, then replace the extremes."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Iterator, TextIO

MIN_MAX_DELAY = 0.007
"""Pause in seconds after each comparison made while searching for the extremes."""

AVERAGE_DELAY = 0.012
"""Pause in seconds after each element added while computing the mean."""


@dataclass
class ArrayStats:
    """An array of integers together with the results computed from it."""

    values: list[int] = field(default_factory=list)
    average: int = 0
    min_index: int = 0
    max_index: int = 0

    @property
    def size(self) -> int:
        """Number of elements in the array."""
        return len(self.values)


def _require_values(stats: ArrayStats) -> None:
    if not stats.values:
        raise ValueError("the array must hold at least one element")


def _truncating_division(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def find_min_max(stats: ArrayStats, delay: float = MIN_MAX_DELAY) -> tuple[int, int]:
    """Store the indices of the first minimum and first maximum; return them."""
    _require_values(stats)
    stats.min_index = 0
    stats.max_index = 0
    print("Min_max thread started")

    values = stats.values
    for index, value in enumerate(values[1:], start=1):
        if value < values[stats.min_index]:
            stats.min_index = index
        time.sleep(delay)
        if value > values[stats.max_index]:
            stats.max_index = index
        time.sleep(delay)

    print(f"Minimum element: {values[stats.min_index]}")
    print(f"Maximum element: {values[stats.max_index]}")
    print("Min_max thread finished")
    return stats.min_index, stats.max_index


def compute_average(stats: ArrayStats, delay: float = AVERAGE_DELAY) -> int:
    """Store the integer mean of the array, truncated toward zero, and return it."""
    _require_values(stats)
    print("Average thread started")

    total = 0
    for value in stats.values:
        total += value
        time.sleep(delay)

    stats.average = _truncating_division(total, stats.size)
    print(f"Average value: {stats.average}")
    print("Average thread finished")
    return stats.average


def replace_extremes(stats: ArrayStats) -> list[int]:
    """Overwrite the minimum and maximum elements with the mean; return the array."""
    _require_values(stats)
    stats.values[stats.min_index] = stats.average
    if stats.min_index != stats.max_index:
        stats.values[stats.max_index] = stats.average
    return stats.values


def process(values: list[int], delay: float | None = None) -> ArrayStats:
    """Run both computations in parallel threads, then replace the extremes.

    With delay left as None each thread keeps its own pause; otherwise both
    use the given pause.
    """
    stats = ArrayStats(list(values))
    _require_values(stats)

    min_max_delay = MIN_MAX_DELAY if delay is None else delay
    average_delay = AVERAGE_DELAY if delay is None else delay

    workers = [
        threading.Thread(target=find_min_max, args=(stats, min_max_delay)),
        threading.Thread(target=compute_average, args=(stats, average_delay)),
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    replace_extremes(stats)
    return stats


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read an array from standard input, process it and print the result."""
    del argv
    tokens = _tokens(sys.stdin)

    print("Enter array size: ", end="", flush=True)
    size = _next_int(tokens)
    if size <= 0:
        print("Invalid array size")
        return 1

    print(f"Enter {size} elements:")
    values = [_next_int(tokens) for _ in range(size)]

    stats = process(values)

    print("Array after replacing min and max elements with average value:")
    print("".join(f"{value} " for value in stats.values))
    return 0


if __name__ == "__main__":
    sys.exit(main())