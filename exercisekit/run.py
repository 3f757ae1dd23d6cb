"""Running a single exercise and showing its output."""

from __future__ import annotations

from .exercise import Exercise, Mode
from .verify import ExerciseFailure, _decode, _failure, _Spinner, _success, test


def run(exercise: Exercise) -> None:
    """Test or compile-and-run the exercise, according to its mode."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise, run it and print what it wrote."""
    try:
        ran = None
        with _Spinner(f"Compiling {exercise}...") as spinner:
            compiled = exercise.compile()
            spinner.set_message(f"Running {exercise}...")
            if compiled.returncode == 0:
                ran = exercise.run()
        if ran is None:
            _failure(f"Compilation of {exercise} failed! Compiler error message:\n")
            print(_decode(compiled.stderr))
            raise ExerciseFailure(exercise)
        print(_decode(ran.stdout))
        if ran.returncode != 0:
            print(_decode(ran.stderr))
            _failure(f"Ran {exercise} with errors")
            raise ExerciseFailure(exercise)
        _success(f"Successfully ran {exercise}")
    finally:
        exercise.clean()