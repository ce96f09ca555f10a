"""Coordinate projection and segment helpers used when building VPQ-tree indexes."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

WORLD_HALF_EXTENT = 20037508.3427892
_MERCATOR_SCALE = 20037508.34

Bounds = Tuple[float, float, float, float]


def lonlat_to_mercator(x: float, y: float) -> Tuple[float, float]:
    """Project longitude/latitude degrees to Web Mercator metres."""
    mx = x * _MERCATOR_SCALE / 180
    my = (math.log(math.tan(((90 + y) * math.pi) / 360)) / (math.pi / 180)) * _MERCATOR_SCALE / 180
    return mx, my


def segment_orientation(x0: float, y0: float, x1: float, y1: float) -> Optional[str]:
    """Classify a segment: "0" rising or flat, "1" falling, None if undefined (NaN)."""
    if (x1 >= x0 and y1 >= y0) or (x1 <= x0 and y1 <= y0):
        return "0"
    if (x1 < x0 and y1 > y0) or (x1 > x0 and y1 < y0):
        return "1"
    return None


def segment_bounds(x0: float, y0: float, x1: float, y1: float) -> Bounds:
    """Return (x_min, y_min, x_max, y_max) of a segment."""
    return min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)


def bounding_box(points: Iterable[Tuple[float, float]]) -> Bounds:
    """Return (x_min, y_min, x_max, y_max) of a non-empty sequence of points."""
    iterator = iter(points)
    try:
        x_min, y_min = next(iterator)
    except StopIteration:
        raise ValueError("bounding box of no points") from None
    x_max, y_max = x_min, y_min
    for x, y in iterator:
        x_min = min(x_min, x)
        x_max = max(x_max, x)
        y_min = min(y_min, y)
        y_max = max(y_max, y)
    return x_min, y_min, x_max, y_max