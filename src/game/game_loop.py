"""Frame-driven loop: one simulation step per display frame while a round runs.

The driver never owns time. It asks the scheduler for the next frame after
each one, the same way a browser animation loop re-requests itself, and
cancels the pending request on stop so no stale frame can touch a reset
round.
"""

from __future__ import annotations

from typing import Callable, Optional

from core.scheduler import Scheduler


class GameLoopDriver:
    def __init__(
        self,
        scheduler: Scheduler,
        *,
        on_step: Callable[[float], None],
        is_active: Callable[[], bool],
        on_frame: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.scheduler = scheduler
        self.on_step = on_step
        self.is_active = is_active
        self.on_frame = on_frame

        self._handle: Optional[int] = None
        self._generation = 0
        self.running = False
        self.last_frame_time = 0.0
        self.last_dt = 0.0  # ms; bookkeeping for future time-based effects
        self.frame_count = 0

    def start(self) -> None:
        self.stop()
        self._generation += 1
        self.running = True
        self.last_frame_time = self.scheduler.now()
        self.last_dt = 0.0
        self.frame_count = 0
        self._request(self._generation)

    def stop(self) -> None:
        self.running = False
        self.scheduler.cancel_frame(self._handle)
        self._handle = None

    def _request(self, generation: int) -> None:
        self._handle = self.scheduler.request_frame(
            lambda now: self._frame(now, generation)
        )

    def _frame(self, now: float, generation: int) -> None:
        if generation != self._generation or not self.running:
            return
        self._handle = None
        if not self.is_active():
            self.running = False
            return

        self.last_dt = now - self.last_frame_time
        self.last_frame_time = now
        self.frame_count += 1

        self.on_step(self.last_dt)
        # The step (or a hook) may have ended or restarted the round
        if generation != self._generation or not self.running:
            return
        if self.on_frame is not None:
            self.on_frame(self.last_dt)
        if generation == self._generation and self.running:
            self._request(generation)


__all__ = ["GameLoopDriver"]
