"""Coloured one-line status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


def _announce(symbol: str, fallback: str, message: str, colour: str) -> None:
    mark = fallback if no_emoji() else symbol
    _console().print(Text.assemble((mark, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✅", "✓", message, "green")