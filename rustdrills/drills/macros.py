"""A helper that accepts no value or one value."""

from __future__ import annotations


def my_macro(*args: object) -> str:
    """Print and return a message; with one argument, include it."""
    match args:
        case ():
            line = "Check out my macro!"
        case (value,):
            line = f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"expected at most one argument, got {len(args)}")
    print(line)
    return line