"""HUD: score / timer / combo / power meter, task banner, feedback popups and
the end-of-round message.

The HUD only listens: it is fed through the round controller's
``on_display``, ``on_feedback`` and ``on_round_end`` hooks and never
touches game state. Fonts are created lazily on first draw so the
bookkeeping side can be used without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from config import (
    COLOR_POWER_BAR,
    COLOR_POWER_BAR_BG,
    COLOR_TEXT,
    FEEDBACK_LIFETIME,
    FEEDBACK_OFFSET_Y,
    FEEDBACK_RISE_SPEED,
)
from game.state import (
    DisplayState,
    Feedback,
    RoundSummary,
    format_display,
    target_label,
)


@dataclass
class FeedbackPopup:
    text: str
    color: Tuple[int, int, int]
    x: float
    y: float
    age: float = 0.0


class Hud:
    def __init__(
        self,
        *,
        lifetime: float = FEEDBACK_LIFETIME,
        rise_speed: float = FEEDBACK_RISE_SPEED,
        font_size: int = 28,
    ) -> None:
        self.lifetime = lifetime
        self.rise_speed = rise_speed
        self.font_size = font_size
        self.display = DisplayState(score=0, time_left=0, combo=0, power_percent=0.0)
        self.banner = ""
        self.summary: Optional[RoundSummary] = None
        self.popups: List[FeedbackPopup] = []
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    # ------------------------------------------------------------ hooks
    def on_round_start(self, target_shape: str) -> None:
        self.banner = target_label(target_shape)
        self.summary = None
        self.popups.clear()

    def on_display(self, display: DisplayState) -> None:
        self.display = display

    def on_feedback(self, feedback: Feedback) -> None:
        self.popups.append(
            FeedbackPopup(
                feedback.text,
                feedback.color,
                feedback.x,
                feedback.y - FEEDBACK_OFFSET_Y,
            )
        )

    def on_round_end(self, summary: RoundSummary) -> None:
        self.summary = summary

    def clear(self) -> None:
        self.banner = ""
        self.summary = None
        self.popups.clear()

    # ------------------------------------------------------------ state
    def update(self, dt: float) -> None:
        """Float popups upward and drop expired ones (`dt` in seconds)."""
        for p in self.popups:
            p.age += dt
            p.y -= self.rise_speed * dt
        self.popups = [p for p in self.popups if p.age < self.lifetime]

    def status_lines(self) -> List[str]:
        text = format_display(self.display)
        lines = [
            f"Score {text['score']}   Time {text['time']}   Combo {text['combo']}   Power {text['power']}"
        ]
        if self.banner:
            lines.append(self.banner)
        return lines

    def game_over_text(self) -> Optional[str]:
        if self.summary is None:
            return None
        return (
            f"Game Over!  Final Score: {self.summary.score}"
            f"  Final Combo: {self.summary.combo}x"
        )

    # ------------------------------------------------------------ draw
    def _ensure_fonts(self) -> None:  # pragma: no cover - visual
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self.font_size)
            self._big_font = pygame.font.Font(None, self.font_size * 2)

    def draw(self, surface: pygame.Surface, hint: Optional[str] = None) -> None:  # pragma: no cover - visual
        self._ensure_fonts()
        width, height = surface.get_size()

        y = 10
        for line in self.status_lines():
            img = self._font.render(line, True, COLOR_TEXT)
            surface.blit(img, (10, y))
            y += img.get_height() + 4

        # Power meter along the bottom edge
        bar = pygame.Rect(10, height - 24, width - 20, 14)
        pygame.draw.rect(surface, COLOR_POWER_BAR_BG, bar)
        fill = bar.copy()
        fill.width = int(bar.width * max(0.0, min(100.0, self.display.power_percent)) / 100)
        pygame.draw.rect(surface, COLOR_POWER_BAR, fill)

        for p in self.popups:
            img = self._font.render(p.text, True, p.color)
            alpha = max(0, int(255 * (1.0 - p.age / self.lifetime)))
            img.set_alpha(alpha)
            surface.blit(img, img.get_rect(center=(int(p.x), int(p.y))))

        over = self.game_over_text()
        if over:
            img = self._big_font.render(over, True, COLOR_TEXT)
            surface.blit(img, img.get_rect(center=(width // 2, height // 2)))
        if hint:
            img = self._font.render(hint, True, COLOR_TEXT)
            surface.blit(img, img.get_rect(center=(width // 2, height // 2 + 50)))


__all__ = ["Hud", "FeedbackPopup"]
