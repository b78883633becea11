"""Names exposed from nested namespaces."""

from __future__ import annotations

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def make_sausage() -> str:
    line = "sausage!"
    print(line)
    return line


def favorite_snacks() -> str:
    """The line naming the favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"