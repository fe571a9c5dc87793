import os

# pygame must import headless in CI
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from config import GameConfig
from core.scheduler import Scheduler
from game.entities import Shape
from game.round_controller import RoundController


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def quiet_cfg():
    """No spawning, so tests place every shape themselves."""
    return GameConfig(shape_spawn_rate=0.0)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def controller(quiet_cfg, scheduler, rng):
    return RoundController(quiet_cfg, scheduler=scheduler, rng=rng, width=800, height=600)


@pytest.fixture
def make_shape():
    def _make(x=100.0, y=100.0, type="square", size=50.0, speed=3.0):
        return Shape(x=x, y=y, type=type, size=size, speed=speed)

    return _make
