"""Command-line entry point: verify, watch or run the exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, parse_exercise_list
from .run import run
from .verify import ExerciseFailure, verify

PROG = "exercisekit"
INFO_FILE = "info.toml"
DEFAULT_OUT = "default_out.txt"
WATCH_DIR = Path("./exercises")
DEBOUNCE_SECONDS = 2.0
CLEAR_SCREEN = "\x1bc"

BANNER = "\n".join(
    [
        "       welcome to...",
        "                        _          _    _ _   ",
        "   _____  _____ _ __ ___(_)___  ___| | _(_) |_ ",
        "  / _ \\ \\/ / _ \\ '__/ __| / __|/ _ \\ |/ / | __|",
        " |  __/>  <  __/ | | (__| \\__ \\  __/   <| | |_ ",
        "  \\___/_/\\_\\___|_|  \\___|_|___/\\___|_|\\_\\_|\\__|",
    ]
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A collection of small exercises to get you used to writing and reading code",
    )
    subparsers = parser.add_subparsers(dest="command")

    verify_parser = subparsers.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_parser.set_defaults(subcommand="verify")

    watch_parser = subparsers.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_parser.set_defaults(subcommand="watch")

    run_parser = subparsers.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_parser.add_argument("file", nargs="?")
    run_parser.add_argument("-t", "--test", action="store_true", help="Run the file as a test")
    run_parser.set_defaults(subcommand="run")
    return parser


def _ends_with(path: Path, suffix: Path) -> bool:
    """Tell whether ``path`` ends with the components of ``suffix``."""
    suffix_parts = Path(suffix).parts
    if not suffix_parts or len(suffix_parts) > len(path.parts):
        return False
    return path.parts[-len(suffix_parts):] == suffix_parts


def find_exercise(exercises: Iterable[Exercise], filename: str | os.PathLike) -> Exercise:
    """Return the exercise whose path the given existing file ends with."""
    try:
        target = Path(filename).resolve(strict=True)
    except OSError:
        raise LookupError(f"no exercise found for {filename}") from None
    match = next((e for e in exercises if _ends_with(target, e.path)), None)
    if match is None:
        raise LookupError(f"no exercise found for {filename}")
    return match


def _exercises_from(exercises: Iterable[Exercise], path: Path) -> list[Exercise]:
    """Return the exercises starting at the one that ``path`` ends with."""
    return list(itertools.dropwhile(lambda e: not _ends_with(path, e.path), exercises))


def _clear_screen(stream: TextIO | None = None) -> None:
    """Reset the terminal with the ANSI full-reset sequence."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SCREEN + "\n")
    out.flush()


def _verify_quietly(exercises: Iterable[Exercise]) -> None:
    try:
        verify(exercises)
    except ExerciseFailure:
        pass


class _ChangeHandler(FileSystemEventHandler):
    """Queue the paths of files that were created or written."""

    def __init__(self, events: queue.Queue[Path]) -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _next_batch(events: queue.Queue[Path], quiet: float = DEBOUNCE_SECONDS) -> list[Path]:
    """Wait for a change, then gather more until ``quiet`` seconds pass without one."""
    batch = [events.get()]
    while True:
        try:
            batch.append(events.get(timeout=quiet))
        except queue.Empty:
            break
    return list(dict.fromkeys(batch))


def watch(exercises: Sequence[Exercise]) -> None:
    """Verify all exercises, then re-verify from each edited exercise onwards."""
    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), str(WATCH_DIR), recursive=True)
    observer.start()
    try:
        _clear_screen()
        _verify_quietly(exercises)
        while True:
            for path in _next_batch(events):
                if path.suffix == ".rs" and path.exists():
                    _clear_screen()
                    _verify_quietly(_exercises_from(exercises, path.resolve()))
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    subcommand = getattr(args, "subcommand", None)

    if subcommand is None:
        print()
        print(BANNER)
        print()

    info = Path(INFO_FILE)
    if not info.exists():
        print(f"{PROG} must be run from the exercises directory")
        print(f"Try `cd` into the directory that holds {INFO_FILE}!")
        return 1

    exercises = parse_exercise_list(info.read_text(encoding="utf-8"))

    if subcommand == "run":
        if args.file is None:
            print("Please supply a file name!")
            return 1
        try:
            exercise = find_exercise(exercises, args.file)
        except LookupError:
            print("No exercise found for your file name!")
            return 1
        try:
            run(exercise)
        except ExerciseFailure:
            return 1
    elif subcommand == "verify":
        try:
            verify(exercises)
        except ExerciseFailure:
            return 1
    elif subcommand == "watch":
        try:
            watch(exercises)
        except KeyboardInterrupt:
            return 0
    else:
        print(Path(DEFAULT_OUT).read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())