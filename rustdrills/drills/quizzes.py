"""Quizzes covering the earlier sections."""

from __future__ import annotations


def calculate_apple_price(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


def string_values() -> tuple[str, ...]:
    """The values produced by a series of string operations."""
    return (
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    )


def times_two(num: int) -> int:
    return num * 2


def my_macro(*args: str) -> str:
    """Greet a repeated word: all arguments "world!" or all "goodbye!"."""
    for word, greeting in (("world!", "Hello world!"), ("goodbye!", "Hello goodbye!")):
        if all(arg == word for arg in args):
            return greeting
    raise ValueError(f"no rule matches arguments {args!r}")