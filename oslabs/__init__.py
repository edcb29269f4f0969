"""Exercises on processes, threads and synchronization: employee record files and salary reports, threaded array statistics and marker threads."""

__version__ = "0.1.0"