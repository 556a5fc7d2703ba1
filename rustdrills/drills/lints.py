"""Corrected versions of code that a linter would reject."""

from __future__ import annotations

import sys

EPSILON = sys.float_info.epsilon


def floats_differ(x: float, y: float) -> bool:
    """Compare floats with a tolerance instead of exact inequality."""
    return abs(y - x) > EPSILON


def add_optional(total: int, option: int | None) -> int:
    """Add the optional value to the total when there is one."""
    if option is not None:
        total += option
    return total