"""Probabilistic shape spawning at the right edge of the playfield.

Each call is one Bernoulli draw: with probability `spawn_rate` a candidate
position is picked just past the right edge, at a uniformly random height
kept one shape size away from the top and bottom. The candidate is dropped
(no retry this frame) when it lands closer than `min_distance` to any shape
already on the field. Spacing is only checked at spawn time; shapes drifting
afterwards are not pushed apart.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

import numpy as np

from game.entities import Playfield, Shape


def _too_close(
    shapes: Sequence[Shape], x: float, y: float, min_distance: float
) -> bool:
    if not shapes or min_distance <= 0:
        return False
    positions = np.array([(s.x, s.y) for s in shapes], dtype=float)
    distances = np.hypot(positions[:, 0] - x, positions[:, 1] - y)
    return bool(np.any(distances < min_distance))


class ShapeSpawner:
    def __init__(
        self,
        *,
        shape_types: Sequence[str],
        spawn_rate: float,
        shape_size: float,
        shape_speed: float,
        min_distance: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.shape_types = tuple(shape_types)
        self.spawn_rate = spawn_rate
        self.shape_size = shape_size
        self.shape_speed = shape_speed
        self.min_distance = min_distance
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, cfg, rng: Optional[random.Random] = None) -> "ShapeSpawner":
        return cls(
            shape_types=cfg.shape_types,
            spawn_rate=cfg.shape_spawn_rate,
            shape_size=cfg.shape_size,
            shape_speed=cfg.shape_speed,
            min_distance=cfg.min_shape_distance,
            rng=rng,
        )

    def candidate_position(self, field: Playfield) -> tuple[float, float]:
        size = self.shape_size
        x = field.width + size
        y = self.rng.random() * max(0.0, field.height - size * 2) + size
        return x, y

    def maybe_spawn(self, shapes: List[Shape], field: Playfield) -> Optional[Shape]:
        """Try to append one new shape to `shapes`. Returns it, or None."""
        if self.rng.random() >= self.spawn_rate:
            return None

        x, y = self.candidate_position(field)
        if _too_close(shapes, x, y, self.min_distance):
            return None

        shape = Shape(
            x=x,
            y=y,
            type=self.rng.choice(self.shape_types),
            size=self.shape_size,
            speed=self.shape_speed,
        )
        shapes.append(shape)
        return shape


__all__ = ["ShapeSpawner"]
