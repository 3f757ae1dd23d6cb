"""Ownership examples: filling lists, a two-form macro and shared job progress."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable

FILL_VALUES = (22, 44, 66)


def fill_vec(vec: Iterable[int] = ()) -> list[int]:
    """Return a new list holding ``vec`` followed by 22, 44 and 66.

    The argument is left untouched, so the caller can keep using it.
    """
    return [*vec, *FILL_VALUES]


def my_macro(*args: object) -> str:
    """Print and return a line; with no argument or with one value to show."""
    match args:
        case ():
            line = "Check out my macro!"
        case (value,):
            line = f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")
    print(line)
    return line


def greet(name: str) -> str:
    """Return a greeting for ``name``."""
    return f"Hello {name}"


class JobStatus:
    """A count of completed jobs that several threads may update."""

    def __init__(self, jobs_completed: int = 0) -> None:
        if jobs_completed < 0:
            raise ValueError("jobs_completed cannot be negative")
        self._lock = threading.Lock()
        self._jobs_completed = jobs_completed

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._jobs_completed

    def complete_job(self) -> int:
        """Record one more completed job and return the new count."""
        with self._lock:
            self._jobs_completed += 1
            return self._jobs_completed

    def __repr__(self) -> str:
        return f"JobStatus(jobs_completed={self.jobs_completed})"


def run_jobs(status: JobStatus, count: int = 10, delay: float = 0.25) -> threading.Thread:
    """Start a thread that completes ``count`` jobs, sleeping ``delay`` before each."""
    if count < 0:
        raise ValueError("count cannot be negative")
    if delay < 0:
        raise ValueError("delay cannot be negative")

    def _work() -> None:
        for _ in range(count):
            time.sleep(delay)
            status.complete_job()

    worker = threading.Thread(target=_work, daemon=True)
    worker.start()
    return worker


def wait_for_jobs(status: JobStatus, target: int = 10, poll: float = 0.5) -> int:
    """Print a waiting line every ``poll`` seconds until ``target`` jobs are done.

    Returns how many times it had to wait.
    """
    if poll < 0:
        raise ValueError("poll cannot be negative")
    waits = 0
    while status.jobs_completed < target:
        print("waiting... ")
        waits += 1
        time.sleep(poll)
    return waits