"""Quad codes and small numeric helpers."""

from __future__ import annotations

import sys

EPSILON = sys.float_info.epsilon


def code_to_str(code: int, length: int) -> str:
    """Render a quad code as base-4 digits, lowest two bits first, for `length` bits."""
    return "".join(str((code >> offset) & 3) for offset in range(0, length, 2))


def nearly_equal(a: float, b: float) -> bool:
    """Compare two floats with a tolerance relative to the smaller magnitude."""
    return abs(a - b) <= min(abs(a), abs(b)) * EPSILON


def pow2(x: float) -> float:
    """Return x squared."""
    return x * x