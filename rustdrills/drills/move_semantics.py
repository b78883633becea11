"""Passing lists into and out of functions."""

from __future__ import annotations

_FILL = (22, 44, 66)


def fill_vec(vec: list[int]) -> list[int]:
    """A new list holding the given values followed by the fill values."""
    return [*vec, *_FILL]


def fill_vec_in_place(vec: list[int]) -> None:
    """Append the fill values to the given list."""
    vec.extend(_FILL)


def make_filled_vec() -> list[int]:
    """A freshly created list holding the fill values."""
    return list(_FILL)