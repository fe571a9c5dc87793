from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Character:
    """The runner that crosses the playfield left to right.

    Purely cosmetic: it never collides with shapes.
    """

    x: float
    y: float
    size: float
    speed: float


@dataclass
class Shape:
    x: float
    y: float
    type: str
    size: float
    speed: float  # leftward drift per frame
    alpha: float = 1.0  # always opaque for now; reserved for fade effects


@dataclass
class Playfield:
    """Bounded region the character and shapes move in (canvas pixels)."""

    width: float
    height: float

    @property
    def center_y(self) -> float:
        return self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height


__all__ = ["Character", "Shape", "Playfield"]
