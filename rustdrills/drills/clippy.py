"""Small programs that pass the linter's checks."""

from __future__ import annotations


def clippy1() -> list[str]:
    """Compare two close floats by their difference rather than equality."""
    x = 1.2331
    y = 1.2332
    lines = []
    if abs(y - x) > 0.0:
        lines.append("Success!")
    for line in lines:
        print(line)
    return lines


def clippy2() -> list[str]:
    """Add an optional value to a running total when it is present."""
    res = 42
    option: int | None = 12
    if option is not None:
        res += option
    line = str(res)
    print(line)
    return [line]