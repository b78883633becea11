"""Coloured status lines for warnings and successes."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _symbol(console: Console, fancy: str, plain: str) -> str:
    return fancy if console.encoding.lower().startswith("utf") else plain


def _emit(fancy: str, plain: str, message: str, style: str) -> None:
    console = _console()
    symbol = _symbol(console, fancy, plain)
    console.print(Text.assemble((symbol, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")