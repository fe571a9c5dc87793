"""Per-frame simulation step: move the character, spawn, drift and retire shapes."""

from __future__ import annotations

from typing import List

from game.entities import Character, Playfield, Shape
from game.spawner import ShapeSpawner


def update_character(character: Character, field: Playfield) -> None:
    character.x += character.speed
    if character.x > field.width + character.size:
        character.x = -character.size
    # Re-centred every frame so a resized playfield is picked up
    character.y = field.center_y


def update_shapes(shapes: List[Shape]) -> None:
    """Drift every shape left and drop the ones fully past the left edge.

    Mutates `shapes` in place; survivors keep their spawn order.
    """
    for shape in shapes:
        shape.x -= shape.speed
    shapes[:] = [s for s in shapes if s.x + s.size >= 0]


def step(
    character: Character,
    shapes: List[Shape],
    field: Playfield,
    spawner: ShapeSpawner,
) -> None:
    update_character(character, field)
    spawner.maybe_spawn(shapes, field)
    update_shapes(shapes)


__all__ = ["update_character", "update_shapes", "step"]
