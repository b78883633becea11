"""Bindings, mutability, shadowing and constants."""

from __future__ import annotations

NUMBER = 3


def variables1() -> list[str]:
    """A simple immutable binding."""
    x = 5
    return [f"x has the value {x}"]


def variables2() -> list[str]:
    """A typed binding compared against a value."""
    x = 5
    return ["Ten!" if x == 10 else "Not ten!"]


def variables3() -> list[str]:
    """A binding that is reassigned."""
    lines = []
    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")
    return lines


def variables4() -> list[str]:
    """A binding given a type and an initial value."""
    x = 666
    return [f"Number {x}"]


def variables5() -> list[str]:
    """A name rebound from text to a number."""
    lines = []
    number = "3"
    lines.append(f"Number {number}")
    number = int(number)
    lines.append(f"Number {number}")
    return lines


def variables6() -> list[str]:
    """A module-level constant."""
    return [f"Number {NUMBER}"]