"""2D pygame drawing of the playfield from a `Snapshot`.

Draws the faint background grid, the character and every shape. Target-type
shapes get the turquoise palette, everything else coral.
"""

from __future__ import annotations

import pygame

from config import (
    COLOR_BG,
    COLOR_CHARACTER,
    COLOR_CHARACTER_EYES,
    COLOR_GRID,
    COLOR_OTHER,
    COLOR_OTHER_OUTLINE,
    COLOR_TARGET,
    COLOR_TARGET_OUTLINE,
    GRID_SPACING,
    RECTANGLE_ASPECT,
)
from game.entities import Character, Shape
from game.state import Snapshot


def shape_polygon(shape: Shape, rectangle_aspect: float = RECTANGLE_ASPECT):
    """Outline points for polygonal shapes (None for circles)."""
    x, y, s = shape.x, shape.y, shape.size
    half = s / 2
    if shape.type == "triangle":
        return [(x, y - half), (x - half, y + half), (x + half, y + half)]
    if shape.type == "square":
        return [(x - half, y - half), (x + half, y - half), (x + half, y + half), (x - half, y + half)]
    if shape.type == "rectangle":
        hw = s * rectangle_aspect / 2
        return [(x - hw, y - half), (x + hw, y - half), (x + hw, y + half), (x - hw, y + half)]
    return None


class PlayfieldRenderer:
    def __init__(self, *, grid_spacing: int = GRID_SPACING, rectangle_aspect: float = RECTANGLE_ASPECT):
        self.grid_spacing = grid_spacing
        self.rectangle_aspect = rectangle_aspect

    def draw(self, surface: pygame.Surface, snap: Snapshot) -> None:  # pragma: no cover - visual
        surface.fill(COLOR_BG)
        self._draw_background(surface, snap.width, snap.height)
        self._draw_character(surface, snap.character)
        for shape in snap.shapes:
            self._draw_shape(surface, shape, shape.type == snap.target_shape)

    def _draw_background(self, surface, width, height) -> None:  # pragma: no cover - visual
        w, h = int(width), int(height)
        for y in range(0, h, self.grid_spacing):
            pygame.draw.line(surface, COLOR_GRID, (0, y), (w, y))
        for x in range(0, w, self.grid_spacing):
            pygame.draw.line(surface, COLOR_GRID, (x, 0), (x, h))

    def _draw_character(self, surface, char: Character) -> None:  # pragma: no cover - visual
        center = (int(char.x), int(char.y))
        radius = int(char.size / 2)
        pygame.draw.circle(surface, COLOR_CHARACTER, center, radius)
        # Eyes
        pygame.draw.circle(surface, COLOR_CHARACTER_EYES, (center[0] - 10, center[1] - 10), 5)
        pygame.draw.circle(surface, COLOR_CHARACTER_EYES, (center[0] + 10, center[1] - 10), 5)
        pygame.draw.circle(surface, COLOR_TARGET_OUTLINE, center, radius + 2, 3)

    def _draw_shape(self, surface, shape: Shape, is_target: bool) -> None:  # pragma: no cover - visual
        fill = COLOR_TARGET if is_target else COLOR_OTHER
        outline = COLOR_TARGET_OUTLINE if is_target else COLOR_OTHER_OUTLINE
        if shape.alpha < 1.0:
            fill = tuple(int(c * shape.alpha) for c in fill)
        points = shape_polygon(shape, self.rectangle_aspect)
        if points is None:
            center = (int(shape.x), int(shape.y))
            radius = int(shape.size / 2)
            pygame.draw.circle(surface, fill, center, radius)
            pygame.draw.circle(surface, outline, center, radius, 3)
            return
        pygame.draw.polygon(surface, fill, points)
        pygame.draw.polygon(surface, outline, points, 3)


__all__ = ["PlayfieldRenderer", "shape_polygon"]
