from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

WIDTH = 960
HEIGHT = 540
FPS = 60
RESIZABLE = True
MUTE = False
CAPTION = "Shape Collector"

# Round timer (seconds)
INITIAL_TIME = 30

# Scoring
CORRECT_SHAPE_POINTS = 10
WRONG_SHAPE_PENALTY = 5
COMBO_MULTIPLIER = 1.5  # each extra combo step multiplies the base points

# Power meter
MAX_POWER = 100
CORRECT_SHAPE_POWER = 10
WRONG_SHAPE_POWER_LOSS = 15

# Character (pixels / pixels per frame)
CHARACTER_SPEED = 2
CHARACTER_SIZE = 60
CHARACTER_START_X = 50

# Shapes
SHAPE_SPAWN_RATE = 0.02  # probability per frame (0-1)
SHAPE_SPEED = 3
SHAPE_SIZE = 50
MIN_SHAPE_DISTANCE = 100
SHAPE_TYPES = ("circle", "triangle", "square", "rectangle")
# Rectangles are this much wider than they are tall
RECTANGLE_ASPECT = 1.5

# Feedback popups (seconds / pixels per second)
FEEDBACK_LIFETIME = 0.8
FEEDBACK_RISE_SPEED = 40.0
FEEDBACK_OFFSET_Y = 30

# Colours
COLOR_BG = (26, 26, 46)
COLOR_GRID = (32, 60, 74)
GRID_SPACING = 50
COLOR_TARGET = (64, 224, 208)
COLOR_TARGET_OUTLINE = (0, 206, 209)
COLOR_OTHER = (255, 107, 107)
COLOR_OTHER_OUTLINE = (255, 71, 87)
COLOR_CHARACTER = (64, 224, 208)
COLOR_CHARACTER_EYES = (26, 26, 46)
COLOR_TEXT = (220, 220, 220)
COLOR_POWER_BAR = (64, 224, 208)
COLOR_POWER_BAR_BG = (40, 40, 64)


@dataclass
class GameConfig:
    """All tunables a round needs, defaulting to the module constants.

    Override any field at construction, e.g. ``GameConfig(initial_time=10)``.
    """

    initial_time: int = INITIAL_TIME
    correct_shape_points: int = CORRECT_SHAPE_POINTS
    wrong_shape_penalty: int = WRONG_SHAPE_PENALTY
    combo_multiplier: float = COMBO_MULTIPLIER
    max_power: float = MAX_POWER
    correct_shape_power: float = CORRECT_SHAPE_POWER
    wrong_shape_power_loss: float = WRONG_SHAPE_POWER_LOSS
    character_speed: float = CHARACTER_SPEED
    character_size: float = CHARACTER_SIZE
    character_start_x: float = CHARACTER_START_X
    shape_spawn_rate: float = SHAPE_SPAWN_RATE
    shape_speed: float = SHAPE_SPEED
    shape_size: float = SHAPE_SIZE
    min_shape_distance: float = MIN_SHAPE_DISTANCE
    shape_types: Tuple[str, ...] = SHAPE_TYPES
    rectangle_aspect: float = RECTANGLE_ASPECT

    def __post_init__(self) -> None:
        self.shape_types = tuple(self.shape_types)

    def validate(self) -> "GameConfig":
        """Raise ValueError on values no round can run with. Returns self."""
        if not self.shape_types:
            raise ValueError("shape_types must not be empty")
        unknown = [t for t in self.shape_types if t not in SHAPE_TYPES]
        if unknown:
            raise ValueError(f"unknown shape types: {unknown}")
        if not 0.0 <= self.shape_spawn_rate <= 1.0:
            raise ValueError("shape_spawn_rate must be within [0, 1]")
        if self.combo_multiplier <= 0:
            raise ValueError("combo_multiplier must be positive")
        for name in ("max_power", "shape_size", "character_size", "rectangle_aspect"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in (
            "initial_time",
            "correct_shape_points",
            "wrong_shape_penalty",
            "correct_shape_power",
            "wrong_shape_power_loss",
            "min_shape_distance",
            "shape_speed",
            "character_speed",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        return self
