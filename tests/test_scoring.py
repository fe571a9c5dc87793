import pytest

from config import GameConfig
from game.entities import Character, Playfield, Shape
from game.scoring import apply_click, combo_points
from game.state import GameState


@pytest.fixture
def state():
    return GameState(
        character=Character(x=50, y=300, size=60, speed=2),
        playfield=Playfield(800, 600),
        target_shape="circle",
    )


def _shape(type):
    return Shape(x=200, y=150, type=type, size=50, speed=3)


@pytest.mark.parametrize("combo,points", [(1, 10), (2, 15), (3, 22), (4, 33), (5, 50)])
def test_combo_points_scale_exponentially(combo, points):
    assert combo_points(10, 1.5, combo) == points


def test_correct_clicks_build_combo(state, cfg):
    totals = []
    for _ in range(4):
        fb = apply_click(state, cfg, _shape("circle"))
        totals.append(state.score)
        assert fb.correct
    assert state.combo == 4
    assert totals == [10, 25, 47, 80]
    assert fb.text == "+ 33"
    assert (fb.x, fb.y) == (200, 150)


def test_incorrect_resets_combo_and_never_goes_negative(state, cfg):
    state.score = 3
    state.combo = 6
    fb = apply_click(state, cfg, _shape("square"))
    assert not fb.correct
    assert fb.text == "- 5"
    assert state.combo == 0
    assert state.score == 0
    for _ in range(10):
        apply_click(state, cfg, _shape("triangle"))
    assert state.score == 0


def test_power_clamped_to_range(state):
    cfg = GameConfig(max_power=25, correct_shape_power=10, wrong_shape_power_loss=15)
    for _ in range(5):
        apply_click(state, cfg, _shape("circle"))
        assert 0 <= state.power <= 25
    assert state.power == 25
    apply_click(state, cfg, _shape("square"))
    assert state.power == 10
    apply_click(state, cfg, _shape("square"))
    assert state.power == 0


def test_correct_then_incorrect(state, cfg):
    apply_click(state, cfg, _shape("circle"))
    apply_click(state, cfg, _shape("rectangle"))
    assert state.combo == 0
    assert state.score == cfg.correct_shape_points - cfg.wrong_shape_penalty


def test_long_streak_at_large_multiplier_stays_exact(state):
    cfg = GameConfig(combo_multiplier=10.0)
    for _ in range(400):
        fb = apply_click(state, cfg, _shape("circle"))
    assert state.combo == 400
    assert fb.text == f"+ {10 ** 400}"
    assert state.score == sum(10 ** k for k in range(1, 401))


def test_long_streak_at_default_multiplier(state, cfg):
    for _ in range(2000):
        apply_click(state, cfg, _shape("circle"))
    assert state.combo == 2000
    assert state.score > 0
    assert combo_points(10, 1.5, 2000) > combo_points(10, 1.5, 1999)
