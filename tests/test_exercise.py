import subprocess
import tomllib
from pathlib import Path
from unittest import mock

import pytest

from exercisekit.exercise import Exercise, Mode, parse_exercise_list, temp_file


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _done(code=0):
    return subprocess.CompletedProcess([], code, b"", b"")


def test_clean():
    Path(temp_file()).touch()
    exercise = Exercise(Path("example.rs"), Mode.TEST)
    exercise.clean()
    assert not Path(temp_file()).exists()


def test_clean_without_file_is_quiet():
    exercise = Exercise(Path("example.rs"), Mode.COMPILE)
    exercise.clean()
    assert not Path(temp_file()).exists()


def test_temp_file_uses_process_id():
    import os

    assert temp_file() == f"./temp_{os.getpid()}"


def test_str_is_path():
    assert str(Exercise(Path("exercises/if/if1.rs"), Mode.TEST)) == "exercises/if/if1.rs"


def test_string_arguments_are_converted():
    exercise = Exercise("a.rs", "compile")
    assert exercise.path == Path("a.rs")
    assert exercise.mode is Mode.COMPILE


def test_parse_exercise_list():
    text = """
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/if/if1.rs"
mode = "test"
"""
    exercises = parse_exercise_list(text)
    assert exercises == [
        Exercise(Path("exercises/variables/variables1.rs"), Mode.COMPILE),
        Exercise(Path("exercises/if/if1.rs"), Mode.TEST),
    ]


def test_parse_rejects_unknown_mode():
    with pytest.raises(ValueError):
        parse_exercise_list('[[exercises]]\npath = "a.rs"\nmode = "Compile"\n')


def test_parse_rejects_missing_field():
    with pytest.raises(ValueError, match="mode"):
        parse_exercise_list('[[exercises]]\npath = "a.rs"\n')


def test_parse_rejects_missing_list():
    with pytest.raises(ValueError, match="exercises"):
        parse_exercise_list("title = 'x'\n")


def test_parse_rejects_bad_toml():
    with pytest.raises(tomllib.TOMLDecodeError):
        parse_exercise_list("[[exercises")


def test_compile_mode_arguments():
    with mock.patch("subprocess.run", return_value=_done()) as run:
        result = Exercise(Path("a.rs"), Mode.COMPILE).compile()
    assert result.returncode == 0
    assert run.call_args.args[0] == ["rustc", "a.rs", "-o", temp_file(), "--color", "always"]


def test_test_mode_arguments():
    with mock.patch("subprocess.run", return_value=_done()) as run:
        Exercise(Path("a.rs"), Mode.TEST).compile()
    assert run.call_args.args[0] == [
        "rustc", "--test", "a.rs", "-o", temp_file(), "--color", "always",
    ]


def test_run_executes_temp_binary():
    with mock.patch("subprocess.run", return_value=_done(3)) as run:
        result = Exercise(Path("a.rs"), Mode.COMPILE).run()
    assert result.returncode == 3
    assert run.call_args.args[0] == [temp_file()]


def test_compile_without_compiler_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(RuntimeError, match="compile"):
            Exercise(Path("a.rs"), Mode.COMPILE).compile()


def test_run_without_binary_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(RuntimeError, match="run"):
            Exercise(Path("a.rs"), Mode.COMPILE).run()