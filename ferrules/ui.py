"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console

console = Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    prefix = "!" if no_emoji() else "⚠️ "
    line = f"{prefix} {message}"
    console.print(line, style="red")
    return line


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    prefix = "✓" if no_emoji() else "✅"
    line = f"{prefix} {message}"
    console.print(line, style="green")
    return line