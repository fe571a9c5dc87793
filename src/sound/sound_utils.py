"""Sound registry and tone synthesis for pygame.mixer.

Keeps a tiny registry so the rest of the code can trigger cues by key
without juggling Sound objects. The game ships no audio files: cues are
short sine tones generated with numpy.

Usage:

    from sound.sound_utils import Sounds

    Sounds.ensure_init()  # safe to call many times
    Sounds.register_tone("correct", 880, 90)
    Sounds.play("correct")

All operations fail gracefully if the mixer can't initialize; errors are
printed once and calls become no-ops.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
import pygame

from config import MUTE


def tone_samples(
    frequency: float,
    duration_ms: int,
    *,
    sample_rate: int = 44100,
    channels: int = 2,
    volume: float = 0.4,
) -> np.ndarray:
    """16-bit sine tone with a linear fade-out, shaped (n,) or (n, channels)."""
    n = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(n) / sample_rate
    envelope = np.linspace(1.0, 0.0, n)
    amp = max(0.0, min(1.0, float(volume))) * 32767
    wave = (np.sin(2 * np.pi * frequency * t) * envelope * amp).astype(np.int16)
    if channels > 1:
        wave = np.repeat(wave[:, None], channels, axis=1)
    return np.ascontiguousarray(wave)


class Sounds:
    """Static manager for short SFX.

    Notes
    -----
    - Initializes pygame.mixer lazily on first use.
    - Stores sounds by a string key (e.g., "correct").
    - All methods are safe even if audio isn't available; they just no-op.
    """

    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: set = set()

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = 44100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer if needed. Returns True on success."""
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
            return cls._inited
        except Exception as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._failed_init = True
            return False

    @classmethod
    def is_available(cls) -> bool:
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def register_tone(
        cls, key: str, frequency: float, duration_ms: int, *, volume: float = 0.4
    ) -> Optional[pygame.mixer.Sound]:
        """Synthesize a tone and register it under `key`."""
        if not cls.ensure_init():
            return None
        sample_rate, _fmt, channels = pygame.mixer.get_init()
        samples = tone_samples(
            frequency,
            duration_ms,
            sample_rate=sample_rate,
            channels=channels,
            volume=volume,
        )
        try:
            snd = pygame.sndarray.make_sound(samples)
        except Exception as e:  # pragma: no cover - mixer format dependent
            print(f"[Sounds] Failed to build tone '{key}': {e}")
            return None
        cls._sounds[key] = snd
        return snd

    @classmethod
    def clear(cls) -> None:
        cls._sounds.clear()

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds

    @classmethod
    def play(
        cls, key: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Channel]:
        """Play a registered sound by key. Returns the channel or None."""
        if MUTE or not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            # Print only once per missing key to avoid spam
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        if volume is not None:
            ch.set_volume(max(0.0, min(1.0, float(volume))))
        ch.play(snd)
        return ch


__all__ = ["Sounds", "tone_samples"]
