# exercisekit

A small command-line companion for working through a series of programming
exercises. It reads an exercise list, compiles each exercise with `rustc`,
runs it or its tests, and tells you which one to fix next. It can also watch
the `exercises/` directory and re-check your work every time you save.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## The exercise list

`exercisekit` must be started from a directory holding an `info.toml` file.
Each entry names an exercise file and how it is checked:

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/if/if1.rs"
mode = "test"
```

- `compile`: the exercise must compile (and, with `run`, its program must
  exit successfully).
- `test`: the exercise is built with `rustc --test` and the resulting test
  binary must exit successfully.

If `info.toml` is missing the command prints a reminder and exits with
status 1. The compiled binary is written to `./temp_<pid>` in the current
directory and removed after each check.

## Usage

```
exercisekit                 # print the welcome banner and the contents of default_out.txt
exercisekit verify          # check every exercise in order (alias: v)
exercisekit watch           # re-verify whenever a file under exercises/ changes (alias: w)
exercisekit run FILE        # compile and run, or test, a single exercise (alias: r)
```

`verify` stops at the first exercise that fails, prints the compiler or test
output, and exits with status 1. `watch` verifies everything once, then, each
time a `.rs` file under `exercises/` is created or written (changes are
gathered until two seconds pass without another), clears the screen and
verifies again starting from the exercise that was edited; stop it with
Ctrl-C. `run` resolves `FILE`, looks for the listed exercise whose path it
ends with, and exits with status 1 if no file name is given, no exercise
matches, or the exercise fails. A `compile` exercise is run and its output
shown; a `test` exercise is tested. The `-t`/`--test` option is accepted but
the exercise's own mode decides how it is checked.

## Library use

The same steps are available from Python:

```python
from pathlib import Path
from exercisekit.exercise import parse_exercise_list
from exercisekit.verify import verify, ExerciseFailure

exercises = parse_exercise_list(Path("info.toml").read_text())
try:
    verify(exercises)
except ExerciseFailure as failure:
    print("stopped at", failure.exercise)
```

- `exercisekit.exercise`: `Mode`, `Exercise` (with `compile`, `run` and
  `clean`), `temp_file` and `parse_exercise_list`.
- `exercisekit.verify`: `verify`, `compile_only`, `test` and
  `ExerciseFailure`.
- `exercisekit.run`: `run` and `compile_and_run` for a single exercise.
- `exercisekit.cli`: `main`, `find_exercise` and `watch`.

## Worked solutions

The package also carries worked solutions to the exercises themselves:

- `exercisekit.basics`: `calculate_apple_price`, `times_two`, `bigger`,
  `is_even`, `sale_price`, `square`, `ring_calls`, `classify_character`,
  `array_verdict`, `describe_cat`.
- `exercisekit.errors`: `generate_nametag_text`, `total_cost`, `afford`,
  `read_and_validate`, `pop_too_much`, and `PositiveNonzeroInteger`, which
  raises `ZeroError` or `NegativeError` (both `CreationError`).
- `exercisekit.iterators`: `divide` (raising `NotDivisibleError` or
  `DivideByZeroError`), `divide_all`, `capitalize_first`, `capitalize_words`,
  `capitalize_join`, `factorial`, `offset_sums`.
- `exercisekit.models`: the messages `Quit`, `Echo`, `Move`, `ChangeColor`
  and the `State` that processes them, `Point`, `ColorClassicStruct`,
  `ColorTupleStruct`, `UnitStruct`, `Order`, `create_order_template`, and
  small string and module helpers.
- `exercisekit.ownership`: `fill_vec`, `my_macro`, `greet`, `JobStatus`,
  `run_jobs`, `wait_for_jobs`.

## What it does not do

The package does not ship the exercise files, `info.toml` or
`default_out.txt`; they must be in the directory the command is run from.
It does not compile anything itself: `rustc` must be installed and on the
`PATH`.