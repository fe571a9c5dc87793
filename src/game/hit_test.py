"""Point-in-shape tests and click resolution.

Every shape is axis-aligned and centred on (shape.x, shape.y).

The triangle test is deliberately the same box as the square: a coarse
rectangular approximation of the drawn triangle, not an exact test. Game
feel is tuned around that generous hit area.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from config import RECTANGLE_ASPECT
from game.entities import Shape


def point_in_shape(
    x: float, y: float, shape: Shape, *, rectangle_aspect: float = RECTANGLE_ASPECT
) -> bool:
    dx = x - shape.x
    dy = y - shape.y
    half = shape.size / 2

    if shape.type == "circle":
        return math.hypot(dx, dy) <= half
    if shape.type == "triangle":
        return abs(dx) < half and -half < dy < half
    if shape.type == "square":
        return abs(dx) < half and abs(dy) < half
    if shape.type == "rectangle":
        width = shape.size * rectangle_aspect
        return abs(dx) < width / 2 and abs(dy) < half
    return False


def find_hit_index(
    x: float,
    y: float,
    shapes: Sequence[Shape],
    *,
    rectangle_aspect: float = RECTANGLE_ASPECT,
) -> Optional[int]:
    """Index of the shape a click at (x, y) lands on, or None.

    Scans newest to oldest so the most recently spawned shape wins when
    shapes overlap.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    for i in range(len(shapes) - 1, -1, -1):
        if point_in_shape(x, y, shapes[i], rectangle_aspect=rectangle_aspect):
            return i
    return None


__all__ = ["point_in_shape", "find_hit_index"]
