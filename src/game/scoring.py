"""Click outcome rules: score, combo and power updates."""

from __future__ import annotations

import math
from fractions import Fraction

from config import COLOR_OTHER, COLOR_TARGET, GameConfig
from game.entities import Shape
from game.state import Feedback, GameState


def combo_points(base_points: int, multiplier: float, combo: int) -> int:
    """Points for the `combo`-th consecutive correct click (combo >= 1).

    10 base at 1.5x gives 10, 15, 22, 33, ... Exact rational arithmetic, so
    long streaks grow into big ints instead of overflowing a float.
    """
    return math.floor(base_points * Fraction(multiplier) ** (max(1, combo) - 1))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def apply_correct(state: GameState, cfg: GameConfig, shape: Shape) -> Feedback:
    combo = max(0, state.combo) + 1
    points = combo_points(cfg.correct_shape_points, cfg.combo_multiplier, combo)
    state.combo = combo
    state.score = max(0, state.score + points)
    state.power = _clamp(state.power + cfg.correct_shape_power, 0, cfg.max_power)
    return Feedback(f"+ {points}", COLOR_TARGET, shape.x, shape.y, correct=True)


def apply_incorrect(state: GameState, cfg: GameConfig, shape: Shape) -> Feedback:
    state.combo = 0
    state.score = max(0, state.score - cfg.wrong_shape_penalty)
    state.power = _clamp(state.power - cfg.wrong_shape_power_loss, 0, cfg.max_power)
    return Feedback(
        f"- {cfg.wrong_shape_penalty}", COLOR_OTHER, shape.x, shape.y, correct=False
    )


def apply_click(state: GameState, cfg: GameConfig, shape: Shape) -> Feedback:
    if shape.type == state.target_shape:
        return apply_correct(state, cfg, shape)
    return apply_incorrect(state, cfg, shape)


__all__ = ["combo_points", "apply_correct", "apply_incorrect", "apply_click"]
