"""Exercises: loading, compiling, running and checking completion."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Name of the binary built for this process."""
    return f"./temp_{os.getpid()}"


def clean() -> None:
    """Remove the temporary binary, if present."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """Compiling (or linting) an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class ExecutionError(Exception):
    """Running a compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _output(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExecutionError if it fails."""
        return self.exercise._execute()

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = field(default="")

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc(self, *extra: str) -> list[str]:
        return ["rustc", *extra, str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]

    def _cargo_toml(self) -> str:
        return (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise CompilationError on failure."""
        if self.mode is Mode.COMPILE:
            completed = subprocess.run(self._rustc(), capture_output=True)
        elif self.mode is Mode.TEST:
            completed = subprocess.run(self._rustc("--test"), capture_output=True)
        else:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(self._cargo_toml(), encoding="utf-8")
            # Build a binary too so clippy exercises can be run afterwards.
            subprocess.run(self._rustc(), capture_output=True)
            subprocess.run(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
                capture_output=True,
            )
            completed = subprocess.run(
                [
                    "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                    *RUSTC_COLOR_ARGS, "--", "-D", "warnings",
                ],
                capture_output=True,
            )
        if completed.returncode != 0:
            clean()
            raise CompilationError(_output(completed))
        return CompiledExercise(self)

    def _execute(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        completed = subprocess.run(args, capture_output=True)
        output = _output(completed)
        if completed.returncode != 0:
            raise ExecutionError(output)
        return output

    def state(self) -> State:
        """Read the source and locate the pending marker, if any."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise ValueError(f"pending marker in {self.path} does not sit on one line")
        first = max(matched - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : matched + CONTEXT + 1], start=first)
            )
        )


def load_exercises(path) -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]