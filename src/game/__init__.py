"""Game package: re-export the round engine for simpler imports.

Callers can import public types from `game` directly, e.g.:

    from game import RoundController, Shape, find_hit_index

The playable pygame scene stays in `game.shapescene` so the headless core
can be used without touching display code.
"""

from .entities import Character, Shape, Playfield
from .hit_test import point_in_shape, find_hit_index
from .spawner import ShapeSpawner
from .scoring import combo_points, apply_click
from .state import (
    GameState,
    Snapshot,
    DisplayState,
    Feedback,
    RoundSummary,
    target_label,
)
from .game_loop import GameLoopDriver
from .round_controller import RoundController

__all__ = [
    "Character",
    "Shape",
    "Playfield",
    "point_in_shape",
    "find_hit_index",
    "ShapeSpawner",
    "combo_points",
    "apply_click",
    "GameState",
    "Snapshot",
    "DisplayState",
    "Feedback",
    "RoundSummary",
    "target_label",
    "GameLoopDriver",
    "RoundController",
]
