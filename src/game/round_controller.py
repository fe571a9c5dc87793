"""Round lifecycle: Idle -> Running -> Ended, plus the countdown and clicks.

The controller is the only owner of `GameState`. It wires a frame loop and a
one-second interval onto an injected `Scheduler`, so the whole round can be
driven synchronously (tests call `scheduler.advance(...)`).

Hooks (all optional, all called on the scheduler's thread):

- ``on_display(DisplayState)`` after start, each click and each timer tick
- ``on_feedback(Feedback)`` after each resolved click
- ``on_round_end(RoundSummary)`` when the timer runs out
- ``on_frame(Snapshot, dt_ms)`` after each simulation step

A hook that raises is reported and ignored; it never breaks the round.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from config import HEIGHT, WIDTH, GameConfig
from core.scheduler import Scheduler
from game import simulation
from game.entities import Character, Playfield
from game.game_loop import GameLoopDriver
from game.hit_test import find_hit_index
from game.scoring import apply_click
from game.spawner import ShapeSpawner
from game.state import (
    ENDED,
    IDLE,
    RUNNING,
    DisplayState,
    Feedback,
    GameState,
    RoundSummary,
    Snapshot,
)

TIMER_PERIOD_MS = 1000


class RoundController:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        width: float = WIDTH,
        height: float = HEIGHT,
        on_display: Optional[Callable[[DisplayState], None]] = None,
        on_feedback: Optional[Callable[[Feedback], None]] = None,
        on_round_end: Optional[Callable[[RoundSummary], None]] = None,
        on_frame: Optional[Callable[[Snapshot, float], None]] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.scheduler = scheduler or Scheduler()
        self.rng = rng or random.Random()
        self.playfield = Playfield(width, height)

        self.on_display = on_display
        self.on_feedback = on_feedback
        self.on_round_end = on_round_end
        self.on_frame = on_frame

        self.spawner = ShapeSpawner.from_config(self.config, rng=self.rng)
        self.loop = GameLoopDriver(
            self.scheduler,
            on_step=self._step,
            is_active=lambda: self.state.running,
            on_frame=self._frame_rendered,
        )
        self._timer: Optional[int] = None
        self.state = self._fresh_state(self.config.shape_types[0], IDLE)

    # ------------------------------------------------------------------
    def _fresh_state(self, target: str, phase: str) -> GameState:
        cfg = self.config
        character = Character(
            x=cfg.character_start_x,
            y=self.playfield.center_y,
            size=cfg.character_size,
            speed=cfg.character_speed,
        )
        return GameState(
            character=character,
            playfield=self.playfield,
            target_shape=target,
            phase=phase,
            time_left=max(0, int(cfg.initial_time)),
        )

    def _emit(self, name: str, hook, *args) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception as e:
            print(f"[Round] {name} hook failed: {e!r}")

    def _cancel_callbacks(self) -> None:
        self.loop.stop()
        self.scheduler.clear_interval(self._timer)
        self._timer = None

    # ------------------------------------------------------------------
    @property
    def phase(self) -> str:
        return self.state.phase

    def start(self) -> None:
        """Begin a new round, replacing whatever round was there before."""
        self._cancel_callbacks()
        target = self.rng.choice(self.config.shape_types)
        self.state = self._fresh_state(target, RUNNING)
        print(
            f"[Round] started: collect {target}s, {self.state.time_left}s on the clock"
        )
        self._emit("display", self.on_display, self.display_state())
        self.loop.start()
        self._timer = self.scheduler.set_interval(self._tick_timer, TIMER_PERIOD_MS)

    def stop(self) -> None:
        """Abort from any phase back to Idle; the timer and loop are cancelled."""
        self._cancel_callbacks()
        if self.state.phase != IDLE:
            print(f"[Round] stopped with {self.state.time_left}s left")
        self.state.phase = IDLE

    def resize(self, width: float, height: float) -> None:
        self.playfield.width = max(0.0, float(width))
        self.playfield.height = max(0.0, float(height))

    # ------------------------------------------------------------------
    def _tick_timer(self) -> None:
        state = self.state
        if not state.running:
            self.scheduler.clear_interval(self._timer)
            self._timer = None
            return
        state.time_left = max(0, state.time_left - 1)
        self._emit("display", self.on_display, self.display_state())
        if state.time_left == 0:
            self._end_round()

    def _end_round(self) -> None:
        self._cancel_callbacks()
        state = self.state
        state.phase = ENDED
        print(f"[Round] over: score {state.score}, combo {state.combo}x")
        self._emit(
            "round_end", self.on_round_end, RoundSummary(state.score, state.combo)
        )

    def _step(self, dt_ms: float) -> None:
        if not self.state.running:
            return
        simulation.step(
            self.state.character, self.state.shapes, self.playfield, self.spawner
        )

    def _frame_rendered(self, dt_ms: float) -> None:
        if self.on_frame is not None:
            self._emit("frame", self.on_frame, self.snapshot(), dt_ms)

    # ------------------------------------------------------------------
    def click(self, x: float, y: float) -> Optional[Feedback]:
        """Resolve a click in playfield coordinates; None when nothing was hit."""
        state = self.state
        if not state.running or not self.playfield.contains(x, y):
            return None
        index = find_hit_index(
            x, y, state.shapes, rectangle_aspect=self.config.rectangle_aspect
        )
        if index is None:
            return None
        shape = state.shapes.pop(index)
        feedback = apply_click(state, self.config, shape)
        self._emit("feedback", self.on_feedback, feedback)
        self._emit("display", self.on_display, self.display_state())
        return feedback

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state)

    def display_state(self) -> DisplayState:
        state = self.state
        return DisplayState(
            score=state.score,
            time_left=state.time_left,
            combo=state.combo,
            power_percent=state.power / self.config.max_power * 100,
        )


__all__ = ["RoundController", "TIMER_PERIOD_MS"]
