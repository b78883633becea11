"""Containers and records over any value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's grade, numeric or alphabetical."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"