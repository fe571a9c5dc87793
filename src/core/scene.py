from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

import pygame

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    """Base scene: per-frame updaters, an event hook and a render hook.

    The engine owns the window and clock; scenes own everything else.
    """

    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float) -> None:
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event: pygame.event.Event) -> None:
        pass

    def resize(self, width: int, height: int) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        pass

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = True) -> None:
        """Print how long a setup phase took."""
        if log:
            print(f"{message} took {end_time - start_time:.6f} seconds")
