"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, pumps pygame events and the clock.
- Scheduler: the single cooperative time source; the engine advances it by
  each frame's elapsed milliseconds, which fires the round timer and the
  pending frame callback.
- Scene: owns gameplay, HUD and drawing.
"""

from __future__ import annotations

import pygame

from config import CAPTION, FPS, HEIGHT, RESIZABLE, WIDTH
from core.scheduler import Scheduler
from game.shapescene import ShapeScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        flags = pygame.RESIZABLE if RESIZABLE else 0
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()
        self.scheduler = Scheduler()

        width, height = self.screen.get_size()
        self.scene = ShapeScene(scheduler=self.scheduler, width=width, height=height)
        print("[Engine] initialized")

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.scene.resize(event.w, event.h)
                continue
            try:
                self.scene.handle_event(event)
            except Exception as e:
                print(f"[Engine] event handler failed: {e!r}")
        return True

    # ------------------------------------------------------------------
    def update(self, dt_ms: float):
        # Timer ticks and the simulation frame both come from here
        self.scheduler.advance(dt_ms)
        self.scene.update(dt_ms / 1000.0)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render(pygame.display.get_surface())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            self.update(dt_ms)
            self.render()
        self.scene.stop_round()
        pygame.quit()
