"""Checking exercises in order and prompting about pending ones."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from rustdrills.exercise import (
    CompilationError,
    CompiledExercise,
    ExecutionError,
    Exercise,
    Mode,
)
from rustdrills.ui import success, warn

_SUCCESS_MESSAGES = {
    Mode.COMPILE: "The code is compiling!",
    Mode.TEST: "The code is compiling, and the tests pass!",
    Mode.CLIPPY: "The code is compiling, and 📎 Clippy 📎 is happy!",
}

_SEPARATOR = "===================="


class VerificationFailed(Exception):
    """An exercise failed or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one not finished."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
        elif exercise.mode is Mode.COMPILE:
            finished = _compile_and_run_interactively(exercise)
        else:
            finished = _compile_only(exercise)
        if not finished:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's tests; raise VerificationFailed if they fail."""
    if not _compile_and_test(exercise, interactive=False, verbose=verbose):
        raise VerificationFailed(exercise)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except CompilationError as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        return None


def _compile_only(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        compiled.close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        status.update(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExecutionError as err:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                return False
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _console().status(f"Testing {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        with compiled:
            try:
                output = compiled.run()
            except ExecutionError as err:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(err.output.stdout)
                return False
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    state = exercise.state()
    if state.done():
        return True

    console = _console()
    separator = Text(_SEPARATOR, style="bold")

    print()
    print(f"🎉 🎉  {_SUCCESS_MESSAGES[exercise.mode]} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator)
        print(prompt_output)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False