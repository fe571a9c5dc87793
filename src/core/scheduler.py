"""Cooperative frame & interval scheduler.

Stands in for the display's animation-frame requests and a one-second
interval timer. Nothing here sleeps or spawns threads: time only moves when
someone calls `advance(dt_ms)`. The engine pumps it with the pygame clock;
tests pump it with exact millisecond steps so a 30 second round can be
simulated instantly.

Per `advance()`:
- every interval occurrence that became due fires, earliest first (a large
  step can fire the same interval several times);
- then every frame callback that was pending *before* the call runs once
  with the current time. Frames requested from inside a frame callback wait
  for the next `advance()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

FrameCallback = Callable[[float], None]
IntervalCallback = Callable[[], None]


@dataclass
class _Interval:
    callback: IntervalCallback
    period: float
    next_due: float


class Scheduler:
    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)
        self._next_handle = 1
        self._frames: Dict[int, FrameCallback] = {}
        self._intervals: Dict[int, _Interval] = {}

    def _new_handle(self) -> int:
        handle = self._next_handle
        self._next_handle += 1
        return handle

    def now(self) -> float:
        return self._now

    # ------------------------------------------------------------------
    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._new_handle()
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: int | None) -> None:
        if handle is not None:
            self._frames.pop(handle, None)

    def set_interval(self, callback: IntervalCallback, period_ms: float) -> int:
        if period_ms <= 0:
            raise ValueError("interval period must be positive")
        handle = self._new_handle()
        self._intervals[handle] = _Interval(
            callback=callback, period=float(period_ms), next_due=self._now + period_ms
        )
        return handle

    def clear_interval(self, handle: int | None) -> None:
        if handle is not None:
            self._intervals.pop(handle, None)

    # ------------------------------------------------------------------
    def pending_frames(self) -> int:
        return len(self._frames)

    def active_intervals(self) -> int:
        return len(self._intervals)

    def advance(self, dt_ms: float) -> None:
        """Move the clock forward by `dt_ms` and run whatever became due."""
        self._now += max(0.0, float(dt_ms))

        while True:
            due = [
                (iv.next_due, handle)
                for handle, iv in self._intervals.items()
                if iv.next_due <= self._now
            ]
            if not due:
                break
            _, handle = min(due)
            iv = self._intervals[handle]
            iv.next_due += iv.period
            iv.callback()

        # Swap first so callbacks can request the next frame safely
        pending, self._frames = self._frames, {}
        for callback in pending.values():
            callback(self._now)


__all__ = ["Scheduler", "FrameCallback", "IntervalCallback"]
