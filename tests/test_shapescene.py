import random

import pygame
import pytest

from config import GameConfig
from core.scheduler import Scheduler
from game.entities import Shape
from game.shapescene import ShapeScene
from game.state import ENDED, IDLE, RUNNING


@pytest.fixture
def scene():
    return ShapeScene(
        config=GameConfig(shape_spawn_rate=0.0, initial_time=3),
        scheduler=Scheduler(),
        rng=random.Random(5),
        width=800,
        height=600,
        load_sounds=False,
    )


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_space_starts_and_backspace_stops(scene):
    scene.handle_event(_key(pygame.K_SPACE))
    assert scene.controller.phase == RUNNING
    assert scene.hud.banner.startswith("Collect ")
    scene.handle_event(_key(pygame.K_BACKSPACE))
    assert scene.controller.phase == IDLE
    assert scene.hud.banner == ""


def test_click_while_idle_starts_round(scene):
    scene.handle_event(_click((10, 10)))
    assert scene.controller.phase == RUNNING


def test_click_during_round_scores_and_shows_popup(scene):
    scene.start_round()
    target = scene.controller.state.target_shape
    scene.controller.state.shapes.append(Shape(x=400, y=300, type=target, size=50, speed=3))
    scene.handle_event(_click((400, 300)))
    assert scene.controller.state.score == 10
    assert scene.hud.display.score == 10
    assert scene.hud.popups[0].text == "+ 10"


def test_round_end_reaches_hud(scene):
    scene.start_round()
    scene.controller.scheduler.advance(3000)
    assert scene.controller.phase == ENDED
    assert scene.hud.game_over_text() is not None
    assert scene.hint() == "Click or press Space to play again"


def test_frames_refresh_last_snapshot(scene):
    scene.start_round()
    scene.controller.scheduler.advance(16)
    assert scene.last_snapshot.character.x == scene.controller.state.character.x


def test_update_ages_popups(scene):
    scene.start_round()
    target = scene.controller.state.target_shape
    scene.controller.state.shapes.append(Shape(x=400, y=300, type=target, size=50, speed=3))
    scene.controller.click(400, 300)
    scene.update(5.0)
    assert scene.hud.popups == []


def test_resize_forwards_to_playfield(scene):
    scene.resize(1024, 700)
    assert scene.controller.snapshot().width == 1024
