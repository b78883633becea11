"""Working with values that may be absent."""

from __future__ import annotations


def print_number(maybe_number: int | None) -> str:
    """The printed line for a number; raise ValueError if there is none."""
    if maybe_number is None:
        raise ValueError("no number to print")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def compute_numbers() -> list[int]:
    """Five numbers derived from their positions."""
    return [(index * 1235 + 2) // (4 * 16) for index in range(5)]


def describe_optional(value: str | None) -> str:
    if value is not None:
        return f"the value of optional value is: {value}"
    return "The optional value doesn't contain anything!"


def drain_values(values: list[int | None]) -> list[str]:
    """Pop every value off the end of the list, describing each one."""
    lines = []
    while values:
        value = values.pop()
        if value is None:
            raise ValueError("found an empty slot")
        lines.append(f"current value: {value}")
    return lines