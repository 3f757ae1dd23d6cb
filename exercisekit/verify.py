"""Checking exercises: compile-only and test exercises, in order."""

from __future__ import annotations

import itertools
import sys
import threading
from collections.abc import Iterable

from .exercise import Exercise, Mode

_GREEN = "32"
_RED = "31"


class ExerciseFailure(Exception):
    """Raised when an exercise does not compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


def _emoji(symbol: str, fallback: str) -> str:
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        symbol.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return symbol


def _style(text: str, color: str) -> str:
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is not None and isatty():
        return f"\x1b[{color}m{text}\x1b[0m"
    return text


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _success(text: str) -> None:
    print(_style(f"{_emoji('✅', '✓')} {text}", _GREEN))


def _failure(text: str) -> None:
    print(_style(f"{_emoji('⚠️ ', '!')} {text}", _RED))


class _Spinner:
    """A terminal spinner with a message; silent when stderr is not a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str, interval: float = 0.1) -> None:
        self._stream = sys.stderr
        self._message = message
        self._interval = interval
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        isatty = getattr(self._stream, "isatty", None)
        if isatty is not None and isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def __enter__(self) -> _Spinner:
        return self

    def __exit__(self, *exc_info) -> None:
        self.finish_and_clear()

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                line = f"{frame} {self._message}"
            self._stream.write(f"\r\x1b[2K{line}")
            self._stream.flush()
            if self._stop.wait(self._interval):
                return

    def finish_and_clear(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write("\r\x1b[2K")
        self._stream.flush()


def verify(start_at: Iterable[Exercise]) -> None:
    """Check each exercise in turn, stopping at the first that fails."""
    for exercise in start_at:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that the exercise compiles."""
    try:
        with _Spinner(f"Compiling {exercise}..."):
            compiled = exercise.compile()
        if compiled.returncode != 0:
            _failure(f"Compilation of {exercise} failed! Compiler error message:\n")
            print(_decode(compiled.stderr))
            raise ExerciseFailure(exercise)
        _success(f"Successfully compiled {exercise}!")
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Compile the exercise's tests and check that they pass."""
    try:
        ran = None
        with _Spinner(f"Testing {exercise}...") as spinner:
            compiled = exercise.compile()
            if compiled.returncode == 0:
                spinner.set_message(f"Running {exercise}...")
                ran = exercise.run()
        if ran is None:
            _failure(f"Compiling of {exercise} failed! Please try again. Here's the output:")
            print(_decode(compiled.stderr))
            raise ExerciseFailure(exercise)
        if ran.returncode != 0:
            _failure(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(_decode(ran.stdout))
            raise ExerciseFailure(exercise)
        _success(f"Successfully tested {exercise}!")
    finally:
        exercise.clean()