"""Playable shape-collector scene.

Wires the round controller to the playfield renderer, the HUD and the sound
cues, and translates pygame input into Start / Stop / click calls:

- Space / Enter, or a click while no round runs: start a round
- Backspace: stop the round (back to idle)
- Left click during a round: resolve the click against the shapes
"""

from __future__ import annotations

import random
import time
from typing import Optional

import pygame

from config import HEIGHT, WIDTH, GameConfig
from core.scene import Scene
from core.scheduler import Scheduler
from game.round_controller import RoundController
from game.state import ENDED, Feedback, RoundSummary, Snapshot
from render.playfield_renderer import PlayfieldRenderer
from sound.sound_utils import Sounds
from ui.hud import Hud

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class ShapeScene(Scene):
    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        width: int = WIDTH,
        height: int = HEIGHT,
        load_sounds: bool = True,
    ) -> None:
        super().__init__()
        start_time = time.perf_counter()

        self.hud = Hud()
        self.controller = RoundController(
            config,
            scheduler=scheduler,
            rng=rng,
            width=width,
            height=height,
            on_display=self.hud.on_display,
            on_feedback=self._on_feedback,
            on_round_end=self._on_round_end,
            on_frame=self._on_frame,
        )
        self.renderer = PlayfieldRenderer(
            rectangle_aspect=self.controller.config.rectangle_aspect
        )
        self.last_snapshot: Snapshot = self.controller.snapshot()
        self.updaters.append(self.hud.update)

        if load_sounds:
            self._load_sounds()
        self.log_timing("Shape scene setup", start_time, time.perf_counter())

    def _load_sounds(self) -> None:
        if not Sounds.ensure_init():
            return
        Sounds.register_tone("correct", 880, 90)
        Sounds.register_tone("wrong", 220, 160)
        Sounds.register_tone("round_end", 523, 400)

    # ------------------------------------------------------------ hooks
    def _on_feedback(self, feedback: Feedback) -> None:
        self.hud.on_feedback(feedback)
        Sounds.play("correct" if feedback.correct else "wrong")

    def _on_round_end(self, summary: RoundSummary) -> None:
        self.hud.on_round_end(summary)
        self.last_snapshot = self.controller.snapshot()
        Sounds.play("round_end")

    def _on_frame(self, snapshot: Snapshot, dt_ms: float) -> None:
        self.last_snapshot = snapshot

    # ------------------------------------------------------------ controls
    def start_round(self) -> None:
        self.controller.start()
        self.hud.on_round_start(self.controller.state.target_shape)
        self.last_snapshot = self.controller.snapshot()

    def stop_round(self) -> None:
        self.controller.stop()
        self.hud.clear()
        self.last_snapshot = self.controller.snapshot()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in START_KEYS:
                self.start_round()
            elif event.key == pygame.K_BACKSPACE:
                self.stop_round()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.controller.state.running:
                self.controller.click(*event.pos)
            else:
                self.start_round()

    def resize(self, width: int, height: int) -> None:
        self.controller.resize(width, height)

    # ------------------------------------------------------------ render
    def hint(self) -> Optional[str]:
        if self.controller.state.running:
            return None
        if self.controller.phase == ENDED:
            return "Click or press Space to play again"
        return "Click or press Space to start"

    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        snap = self.last_snapshot
        if not self.controller.state.running:
            snap = self.controller.snapshot()
        self.renderer.draw(surface, snap)
        self.hud.draw(surface, hint=self.hint())


__all__ = ["ShapeScene"]
