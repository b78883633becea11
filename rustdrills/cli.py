"""Command-line entry point: verify, watch, run and hint."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Callable, Sequence
from itertools import dropwhile
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustdrills.exercise import Exercise, load_exercises
from rustdrills.run import RunFailed, run
from rustdrills.verify import VerificationFailed, verify

_VERSION = "0.1.0"
_INFO_FILE = "info.toml"
_DEFAULT_OUT = "default_out.txt"
_WATCH_DIR = "./exercises"
_DEBOUNCE_SECONDS = 2.0
_CLEAR_SCREEN = "\x1bc"

_BANNER = """
       welcome to...

   r u s t d r i l l s
"""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="rustdrills",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    parser.set_defaults(command=None)
    commands = parser.add_subparsers(dest="subcommand")

    verify_parser = commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_parser.set_defaults(command="verify")

    watch_parser = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_parser.set_defaults(command="watch")

    run_parser = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_parser.add_argument("name")
    run_parser.set_defaults(command="run")

    hint_parser = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_parser.add_argument("name")
    hint_parser.set_defaults(command="hint")
    return parser


def _find(exercises: Sequence[Exercise], name: str) -> Exercise | None:
    return next((exercise for exercise in exercises if exercise.name == name), None)


def _celebration_symbol() -> str:
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower()
    return "🎉" if encoding.startswith("utf") else "★"


def _print_completion() -> None:
    symbol = _celebration_symbol()
    print(f"{symbol} All exercises completed! {symbol}")
    print()
    print("We hope you enjoyed learning about the various aspects of Rust!")
    print("If you noticed any issues, please don't hesitate to report them.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read the contributing guidelines.")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, carry out the command and return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    if args.command is None:
        print(_BANNER)

    if not Path(_INFO_FILE).exists():
        print(f"{parser.prog} must be run from the directory holding {_INFO_FILE}")
        print("Try `cd` into that directory!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(_INFO_FILE)
    verbose = args.nocapture

    if args.command in ("run", "hint"):
        exercise = _find(exercises, args.name)
        if exercise is None:
            print("No exercise found for your given name!")
            return 1
        if args.command == "hint":
            print(exercise.hint)
        else:
            try:
                run(exercise, verbose)
            except RunFailed:
                return 1
    elif args.command == "verify":
        try:
            verify(exercises, verbose)
        except VerificationFailed:
            return 1
    elif args.command == "watch":
        try:
            watch(exercises, verbose)
        except OSError as err:
            print(f"watch error: {err}")
        else:
            _print_completion()
    else:
        print(Path(_DEFAULT_OUT).read_text(encoding="utf-8"))
    return 0


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        completed = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return completed.returncode == 0


def spawn_watch_shell(failed_hint: Callable[[], str | None]) -> threading.Thread:
    """Start a background reader of stdin that answers `hint` with the current hint."""
    print("Type 'hint' to get help")

    def shell() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                return
            if not line:
                return
            if line.strip() == "hint":
                hint = failed_hint()
                if hint is not None:
                    print(hint)
            else:
                print(f"unknown command: {line}")

    thread = threading.Thread(target=shell, daemon=True)
    thread.start()
    return thread


class _HintCell:
    """Thread-safe holder of the hint for the exercise that failed last."""

    def __init__(self, hint: str) -> None:
        self._lock = threading.Lock()
        self._hint = hint

    def set(self, hint: str) -> None:
        with self._lock:
            self._hint = hint

    def __call__(self) -> str | None:
        with self._lock:
            return self._hint


class _ChangeForwarder(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[str]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def _forward(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(os.fsdecode(event.src_path))


def _debounced(changes: queue.Queue[str]) -> list[str]:
    pending = [changes.get()]
    while True:
        try:
            pending.append(changes.get(timeout=_DEBOUNCE_SECONDS))
        except queue.Empty:
            break
    return list(dict.fromkeys(pending))


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = Path(suffix).parts
    return bool(parts) and path.parts[-len(parts):] == parts


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> None:
    """Verify, then re-verify from the edited exercise on every change until all pass."""
    changes: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeForwarder(changes), _WATCH_DIR, recursive=True)
    observer.start()
    try:
        print(_CLEAR_SCREEN, flush=True)
        try:
            verify(exercises, verbose)
            return
        except VerificationFailed as err:
            failed_hint = _HintCell(err.exercise.hint)
        spawn_watch_shell(failed_hint)
        while True:
            for changed in _debounced(changes):
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                pending = dropwhile(
                    lambda exercise: not _ends_with(filepath, exercise.path), exercises
                )
                print(_CLEAR_SCREEN, flush=True)
                try:
                    verify(pending, verbose)
                    return
                except VerificationFailed as err:
                    failed_hint.set(err.exercise.hint)
    finally:
        observer.stop()
        observer.join()