"""Running a single exercise without the completion prompt."""

from __future__ import annotations

from rich.console import Console

from rustdrills.exercise import CompilationError, ExecutionError, Exercise, Mode
from rustdrills.ui import success, warn
from rustdrills.verify import VerificationFailed, test


class RunFailed(Exception):
    """Building or running the exercise failed."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run (or test) one exercise; raise RunFailed on failure."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    console = Console(highlight=False, soft_wrap=True)
    with console.status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except CompilationError as err:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise RunFailed(exercise) from err
        status.update(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExecutionError as err:
                status.stop()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from err
    print(output.stdout)
    success(f"Successfully ran {exercise}")