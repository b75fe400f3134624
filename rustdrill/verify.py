"""Checking exercises in order and reporting their progress."""

from __future__ import annotations

from typing import Iterable

from .exercise import CompiledExercise, CompileError, Exercise, ExerciseError, Mode, RunError
from .ui import _Spinner, blue, bold, no_emoji, success, warn


class VerificationFailed(Exception):
    """An exercise did not compile, run or pass, or is still pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one left."""
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    finished = _compile_and_test(exercise, True, verbose)
                case Mode.COMPILE:
                    finished = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    finished = _compile_only(exercise)
        except ExerciseError as exc:
            raise VerificationFailed(exercise) from exc
        if not finished:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, False, verbose)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompileError as exc:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.message = f"Running {exercise}..."
            try:
                output = compiled.run()
            except RunError as exc:
                spinner.finish_and_clear()
                warn(f"Ran {exercise} with errors")
                print(exc.output.stdout)
                print(exc.output.stderr)
                raise
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except RunError as exc:
                spinner.finish_and_clear()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(exc.output.stdout)
                raise
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    context = exercise.state()
    if not context:
        return True

    plain = no_emoji()
    if exercise.mode is Mode.CLIPPY:
        if plain:
            message = "The code is compiling, and Clippy is happy!"
        else:
            message = "The code is compiling, and 📎 Clippy 📎 is happy!"
    elif exercise.mode is Mode.TEST:
        message = "The code is compiling, and the tests pass!"
    else:
        message = "The code is compiling!"

    print()
    print(f"~*~ {message} ~*~" if plain else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for line in context:
        text = bold(line.line) if line.important else line.line
        print(f"{blue(bold(f'{line.number:>2}'))} {blue('|')}  {text}")

    return False