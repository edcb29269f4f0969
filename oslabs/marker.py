"""Marker threads that compete to claim cells of a shared array.

Each marker picks cells at random and claims the free ones. When it hits a
claimed cell it reports and waits. Once every active marker is waiting, the
controller terminates one marker, which frees its cells, and lets the rest
carry on. This repeats until no marker is left.
"""

from __future__ import annotations

import random
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, TextIO

DEFAULT_DELAY = 0.005
"""Pause in seconds before and after a marker writes to a cell."""

_INVALID_CHOICE = "Invalid thread number or thread already terminated"


def create_array(size: int) -> list[int]:
    """Return a list of size zeros, all cells unclaimed."""
    if size < 0:
        raise ValueError(f"array size must not be negative: {size}")
    return [0] * size


def mark_element(array: list[int], index: int, marker: int) -> bool:
    """Claim array[index] for marker if it is in range and free."""
    if not 0 <= index < len(array):
        return False
    if array[index] != 0:
        return False
    array[index] = marker
    return True


def clear_marks(array: list[int], marker: int) -> int:
    """Free every cell claimed by marker and return how many were freed."""
    cleared = 0
    for index, value in enumerate(array):
        if value == marker:
            array[index] = 0
            cleared += 1
    return cleared


@dataclass(eq=False)
class _Marker:
    number: int
    thread: threading.Thread | None = None
    marked: int = 0
    cleared: int = 0
    active: bool = True
    blocked: bool = False
    resume_requested: bool = False
    terminate_requested: bool = False


class MarkerBoard:
    """A shared array and the marker threads working on it."""

    def __init__(self, size: int, marker_count: int, delay: float = DEFAULT_DELAY) -> None:
        if size < 1:
            raise ValueError(f"array size must be positive: {size}")
        if marker_count < 0:
            raise ValueError(f"marker count must not be negative: {marker_count}")
        self._array = create_array(size)
        self._delay = delay
        self._markers = [_Marker(number) for number in range(1, marker_count + 1)]
        self._array_lock = threading.Lock()
        self._state = threading.Condition()
        self._out_lock = threading.Lock()
        self._started = threading.Event()
        self._launched = False
        self.out: TextIO = sys.stdout

    @property
    def marker_count(self) -> int:
        """Number of markers the board was created with."""
        return len(self._markers)

    def _emit(self, text: str) -> None:
        with self._out_lock:
            self.out.write(text)
            self.out.flush()

    def start(self) -> None:
        """Launch every marker thread and let them all begin at once."""
        if self._launched:
            raise RuntimeError("the markers have already been started")
        self._launched = True
        for marker in self._markers:
            marker.thread = threading.Thread(
                target=self._run,
                args=(marker,),
                name=f"marker-{marker.number}",
                daemon=True,
            )
            marker.thread.start()
        self._started.set()

    def _try_mark(self, marker: _Marker, index: int) -> bool:
        with self._array_lock:
            if self._array[index] != 0:
                return False
            time.sleep(self._delay)
            self._array[index] = marker.number
            marker.marked += 1
            time.sleep(self._delay)
            return True

    def _run(self, marker: _Marker) -> None:
        self._started.wait()
        rng = random.Random(marker.number)
        size = len(self._array)

        while True:
            with self._state:
                if marker.terminate_requested:
                    break
            index = rng.randrange(size)
            if self._try_mark(marker, index):
                continue

            self._emit(
                f"Thread {marker.number} info:\n"
                f"- Thread number: {marker.number}\n"
                f"- Marked elements: {marker.marked}\n"
                f"- Can't mark element at index: {index}\n"
            )
            with self._state:
                marker.blocked = True
                self._state.notify_all()
                self._state.wait_for(
                    lambda: marker.resume_requested or marker.terminate_requested
                )
                if marker.terminate_requested:
                    break
                marker.resume_requested = False

        with self._array_lock:
            marker.cleared = clear_marks(self._array, marker.number)

    def wait_all_blocked(self, timeout: float | None = None) -> bool:
        """Wait until every active marker is stuck; False if the timeout ran out."""
        if not self._launched:
            raise RuntimeError("the markers have not been started")
        with self._state:
            return self._state.wait_for(
                lambda: all(m.blocked for m in self._markers if m.active),
                timeout,
            )

    def terminate(self, number: int) -> int:
        """Stop marker number, wait for it, and return how many cells it freed."""
        if not self._launched:
            raise RuntimeError("the markers have not been started")
        with self._state:
            if not 1 <= number <= len(self._markers) or not self._markers[number - 1].active:
                raise ValueError(_INVALID_CHOICE)
            marker = self._markers[number - 1]
            marker.terminate_requested = True
            self._state.notify_all()

        assert marker.thread is not None
        marker.thread.join()

        with self._state:
            marker.active = False
            marker.blocked = False
            self._state.notify_all()
        return marker.cleared

    def resume(self) -> None:
        """Let every active marker continue claiming cells."""
        with self._state:
            for marker in self._markers:
                if marker.active:
                    marker.blocked = False
                    marker.resume_requested = True
            self._state.notify_all()

    def snapshot(self) -> list[int]:
        """Return a copy of the shared array."""
        with self._array_lock:
            return list(self._array)

    def active_markers(self) -> list[int]:
        """Return the numbers of the markers still running, in order."""
        with self._state:
            return [marker.number for marker in self._markers if marker.active]

    def _shutdown(self) -> None:
        for number in self.active_markers():
            self.terminate(number)


def _format_array(values: Sequence[int]) -> str:
    return "Array content: " + "".join(f"{value} " for value in values) + "\n"


def run_session(
    size: int,
    marker_count: int,
    choose: Callable[[list[int]], int],
    out: TextIO,
) -> list[int]:
    """Run markers until all are terminated; return the numbers in termination order.

    choose receives the numbers of the active markers and returns the number
    of the marker to terminate.
    """
    board = MarkerBoard(size, marker_count, DEFAULT_DELAY)
    board.out = out
    terminated: list[int] = []
    board.start()
    try:
        while board.active_markers():
            board.wait_all_blocked()
            board._emit(_format_array(board.snapshot()))
            board._emit(f"Enter thread number to terminate (1-{marker_count}): ")
            number = choose(board.active_markers())
            try:
                board.terminate(number)
            except ValueError:
                board._emit(f"{_INVALID_CHOICE}\n")
            else:
                terminated.append(number)
                board._emit(_format_array(board.snapshot()))
            board.resume()
    finally:
        board._shutdown()
    board._emit("All threads terminated. Program completed.\n")
    return terminated


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read the array size and marker count from standard input and run a session."""
    del argv
    tokens = _tokens(sys.stdin)

    print("Enter array size: ", end="", flush=True)
    size = _next_int(tokens)
    if size <= 0:
        print("Invalid array size")
        return 1

    print("Enter number of marker threads: ", end="", flush=True)
    marker_count = _next_int(tokens)
    if marker_count < 0:
        print("Invalid number of marker threads")
        return 1

    run_session(size, marker_count, lambda _active: _next_int(tokens), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())