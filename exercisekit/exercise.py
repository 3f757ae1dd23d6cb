"""Exercise descriptions and the compiler invocations that check them."""

from __future__ import annotations

import os
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Return the path of the binary built for the current process."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class Exercise:
    """A single exercise file and the way it is checked."""

    path: Path
    mode: Mode

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if not isinstance(self.mode, Mode):
            object.__setattr__(self, "mode", Mode(self.mode))

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> subprocess.CompletedProcess:
        """Compile the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args.extend([str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS])
        try:
            return subprocess.run(args, capture_output=True, check=False)
        except OSError as exc:
            raise RuntimeError("Failed to run 'compile' command.") from exc

    def run(self) -> subprocess.CompletedProcess:
        """Run the binary produced by :meth:`compile`."""
        try:
            return subprocess.run([temp_file()], capture_output=True, check=False)
        except OSError as exc:
            raise RuntimeError("Failed to run 'run' command") from exc

    def clean(self) -> None:
        """Remove the temporary binary, if there is one."""
        try:
            os.remove(temp_file())
        except OSError:
            pass


def parse_exercise_list(text: str) -> list[Exercise]:
    """Parse the TOML exercise list into exercises, in file order."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
        return [Exercise(Path(entry["path"]), Mode(entry["mode"])) for entry in entries]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r}") from None