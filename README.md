# rustdrill

A Python library for working through a directory of small, compiler-checked
exercises. Each exercise is a single source file that is compiled with
`rustc` (or checked with `cargo clippy`), run, and reported on. An exercise
counts as finished once it builds, its checks pass, and the `I AM NOT DONE`
marker comment has been removed from the file.

The package also holds worked lessons: reference solutions to the exercise
topics written as ordinary Python.

## Installing

```
pip install .
```

Building exercises needs `rustc` on your `PATH`; clippy exercises also need
`cargo`. Python 3.11 or later is required.

## The exercise list

Exercises are described in a TOML file, usually `info.toml`, in their
recommended order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable before using it."
```

`mode` is one of:

- `compile` – build the file as a program and run it;
- `test` – build it as a test harness and run it with `--show-output`;
- `clippy` – write `./exercises/clippy/Cargo.toml`, build the file, then
  require `cargo clippy` to pass with warnings denied.

## Using it

```python
from rustdrill.exercise import load_exercises
from rustdrill.verify import verify, VerificationFailed

exercises = load_exercises("info.toml")
try:
    verify(exercises, verbose=False)
except VerificationFailed as failure:
    print("stopped at:", failure.exercise.name)
    print(failure.exercise.hint)
```

### `rustdrill.exercise`

- `load_exercises(path="info.toml")` reads the list into `Exercise` objects.
- `Exercise` has `name`, `path`, `mode` (a `Mode`: `COMPILE`, `TEST`,
  `CLIPPY`) and `hint`; `Exercise.from_dict(data)` builds one from a table.
  `str(exercise)` is its path.
- `Exercise.compile()` returns a `CompiledExercise` or raises `CompileError`.
  The binary is written to a temporary file in the current directory, named
  by `temp_file()` and removed by `clean()`.
- `CompiledExercise.run()` returns an `ExerciseOutput` (`stdout`, `stderr`)
  or raises `RunError`. `close()`, or leaving a `with` block, removes the
  binary. Both errors derive from `ExerciseError` and carry the captured
  output as `.output`.
- `Exercise.state()` returns the `ContextLine`s (`line`, `number`,
  `important`) within two lines of the pending marker, or an empty list once
  the marker is gone. `Exercise.looks_done()` tells whether it is gone.

### `rustdrill.verify`

- `verify(exercises, verbose=False)` checks exercises in order, printing
  progress, and raises `VerificationFailed` at the first one that fails to
  build, run or pass, or that still carries the marker.
- `test(exercise, verbose=False)` builds and runs one test exercise without
  asking about the marker; it raises `CompileError` or `RunError` on failure.
  With `verbose` the test output is printed.
- `prompt_for_completion(exercise, prompt_output=None)` returns `True` when
  the exercise is done; otherwise it prints the lines around the marker and
  returns `False`.

### `rustdrill.ui`

`warn(message)` and `success(message)` print red and green status lines;
`red`, `green`, `blue` and `bold` style text. Colour is used when standard
output is a terminal, or when `CLICOLOR_FORCE` is set to something other than
`0`; `CLICOLOR=0` or `TERM=dumb` turn it off. Set `NO_EMOJI` to replace emoji
with plain characters.

## Worked lessons

`rustdrill.lessons` holds these modules:

- `quizzes` – `calculate_apple_price`, `times_two`, `greet`
- `strings`, `branching`, `functions`, `primitives` – small value functions
- `structs` – `ColorClassic`, `ColorTuple`, `UnitStruct`, `Order`, `Package`
- `enums` – message types and a `State` that processes them
- `generics` – `Wrapper` and `ReportCard`
- `traits` – `append_bar` for strings and lists of strings
- `errors`, `advanced_errors` – `generate_nametag_text`, `total_cost`,
  `spend_tokens`, `parse_pos_nonzero`, `parse_positive`, `Climate.parse`
- `iterators` – capitalising, `divide`, `factorial`, progress counting
- `baskets`, `options`, `ownership`, `modules` – collections and optional values
- `shared`, `threads` – `offset_sums`, a cons list, and `run_jobs`

```python
from rustdrill.lessons.quizzes import calculate_apple_price
from rustdrill.lessons.advanced_errors import Climate

calculate_apple_price(65)          # 65
Climate.parse("Munich,2015,23.1")  # Climate(city='Munich', year=2015, temp=23.1)
```

## What it does not do

rustdrill is a library only. It installs no command: there is no
command-line runner, no `list`, `run` or `hint` subcommand, and no watch mode
that re-verifies exercises when files change. Programs that want those build
them on `load_exercises`, `verify` and `Exercise.state`.