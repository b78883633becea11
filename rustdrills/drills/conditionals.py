"""Choosing between values."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"