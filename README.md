# rustdrills

A command-line checker for a guided set of small exercises. Each exercise
is a single Rust source file that you fix, finish or extend. `rustdrills`
compiles it, runs it or runs its tests, and tells you whether it passes.
When you have finished, it moves you on to the next exercise.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH`. Exercises in clippy mode also need `cargo` with
  clippy installed.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Getting started

Run the command from an exercise directory, which is a directory that holds
`info.toml`. If you start it anywhere else, it prints a message and exits with
status 1. It also exits with status 1 if `rustc --version` cannot be run.

```
rustdrills
```

With no subcommand it prints a welcome banner and then the contents of
`default_out.txt` from the current directory.

## Commands

| Command | Alias | What it does |
|---|---|---|
| `rustdrills verify` | `v` | Checks the exercises in the order that `info.toml` lists them and stops at the first one that is not finished |
| `rustdrills watch` | `w` | Runs `verify`, then checks again each time a `.rs` file under `./exercises` is created or changed |
| `rustdrills run NAME` | `r` | Compiles and runs one exercise, or runs its tests |
| `rustdrills hint NAME` | `h` | Prints the hint for one exercise |

Options:

- `--nocapture`, placed before the subcommand, prints what test exercises
  write to standard output:

  ```
  rustdrills --nocapture run NAME
  ```

- `--version` prints the version.

### watch

`watch` first clears the screen and verifies every exercise. If they all
pass, it prints a congratulation message and ends. Otherwise it waits for
changes. It groups changes that arrive within two seconds of each other. For
every changed `.rs` file it verifies again, starting at the first exercise
whose path the changed file's path ends with. If no exercise matches the
changed file, nothing is left to check and `watch` ends as if all had passed.

While `watch` waits, type `hint` and press Enter to see the hint for the
exercise that failed most recently. It answers any other input with
`unknown command`.

## How exercises are described

`info.toml` lists the exercises in order. Each entry has four fields:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` is one of:

- `compile`: build the file with `rustc` and run the program.
- `test`: build the file with `rustc --test` and run its tests.
- `clippy`: write `./exercises/clippy/Cargo.toml` for the exercise, build
  the file, then run `cargo clippy` with every warning treated as an error.
  `verify` only lints these exercises. `run` also runs the built program.

The built program is written to `./temp_<process id>` and is deleted once
it has run.

## Marking an exercise as finished

Each exercise holds a comment line:

```
// I AM NOT DONE
```

While that line is there, `verify` and `watch` stop at the exercise even when
it compiles and its tests pass. They show the two lines before and after the
marker so you can keep experimenting. Delete the line to move on to the next
exercise. `run` never stops at the marker.

## Exit status

- 1 when `run` or `verify` finds an exercise that fails to compile, fails its
  tests or exits with an error.
- 1 when `run` or `hint` is given a name that no exercise has.
- 1 when `info.toml` is missing, `rustc` cannot be run, or the command line
  is invalid.
- 0 otherwise.

## Using it from Python

- `rustdrills.exercise.load_exercises(path)` reads `info.toml` into a list
  of `Exercise` objects (`name`, `path`, `mode`, `hint`).
- `Exercise.compile()` returns a `CompiledExercise` and raises
  `CompilationError` if the build fails. `CompiledExercise.run()` returns an
  `ExerciseOutput` (`stdout`, `stderr`) and raises `ExecutionError` if the
  program fails. Use the compiled exercise as a context manager, or call
  `close()`, so that the temporary binary is removed.
- `Exercise.state()` returns a `State`. `State.done()` is true when the file
  has no marker. Otherwise `State.context` holds the `ContextLine` entries
  around the marker.
- `rustdrills.verify.verify(exercises, verbose)` raises `VerificationFailed`
  at the first exercise that is not finished. `rustdrills.run.run(exercise,
  verbose)` raises `RunFailed`.

The `rustdrills.drills` sub-package holds short worked examples in Python of
the concepts that the exercises practise, one module per topic:
`variables`, `functions`, `conditionals`, `primitive_types`, `strings`,
`quizzes`, `structs`, `enums`, `move_semantics`, `option`, `modules`,
`macros`, `generics`, `traits`, `conversions`, `clippy`, `threads`,
`error_handling` and `standard_library_types`.

## What it does not do

The package does not include the exercise files, `info.toml` or
`default_out.txt`. You need to provide an exercise directory that holds
them.