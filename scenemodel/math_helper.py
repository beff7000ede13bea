"""Small geometric helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def distance_between_points(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the Euclidean distance between two points of equal dimension."""
    if len(p1) != len(p2):
        raise ValueError("points must have the same dimension")
    return math.dist(p1, p2)


def deg2rad(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg * (math.pi / 180.0)


def rad2deg(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad * (180.0 / math.pi)