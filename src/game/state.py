"""Round state plus the read-only views handed to renderers and UI bindings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple

from game.entities import Character, Playfield, Shape

# Round phases
IDLE = "idle"
RUNNING = "running"
ENDED = "ended"


@dataclass
class GameState:
    """Everything one round mutates. Owned by the RoundController only."""

    character: Character
    playfield: Playfield
    target_shape: str
    phase: str = IDLE
    score: int = 0
    combo: int = 0
    time_left: int = 0
    power: float = 0.0
    shapes: List[Shape] = field(default_factory=list)

    @property
    def running(self) -> bool:
        return self.phase == RUNNING


@dataclass(frozen=True)
class Feedback:
    """Transient "+15" / "-5" label for the renderer; safe to drop."""

    text: str
    color: Tuple[int, int, int]
    x: float
    y: float
    correct: bool


@dataclass(frozen=True)
class DisplayState:
    score: int
    time_left: int
    combo: int
    power_percent: float


@dataclass(frozen=True)
class RoundSummary:
    score: int
    combo: int


@dataclass(frozen=True)
class Snapshot:
    """Per-frame copy of what a renderer needs. Mutating it changes nothing."""

    character: Character
    shapes: Tuple[Shape, ...]
    target_shape: str
    width: float
    height: float
    phase: str

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(
            character=replace(state.character),
            shapes=tuple(replace(s) for s in state.shapes),
            target_shape=state.target_shape,
            width=state.playfield.width,
            height=state.playfield.height,
            phase=state.phase,
        )


def target_label(target_shape: str) -> str:
    """Task banner text, e.g. ``"Collect Triangles"``."""
    return f"Collect {target_shape.capitalize()}s"


def format_display(display: DisplayState) -> dict:
    """Strings for the on-screen score/timer/combo/power bindings."""
    return {
        "score": str(display.score),
        "time": str(display.time_left),
        "combo": f"{display.combo}x",
        "power": f"{display.power_percent:.0f}%",
    }


__all__ = [
    "IDLE",
    "RUNNING",
    "ENDED",
    "GameState",
    "Feedback",
    "DisplayState",
    "RoundSummary",
    "Snapshot",
    "target_label",
    "format_display",
]
