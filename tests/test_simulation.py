import random

from game.entities import Character, Playfield, Shape
from game.simulation import step, update_character, update_shapes
from game.spawner import ShapeSpawner


def _character(x=50.0):
    return Character(x=x, y=0.0, size=60, speed=2)


def test_character_moves_right_and_recentres():
    c = _character()
    update_character(c, Playfield(800, 600))
    assert c.x == 52
    assert c.y == 300


def test_character_wraps_after_leaving_right_edge():
    c = _character(x=859)
    field = Playfield(800, 600)
    update_character(c, field)
    assert c.x == -60


def test_character_follows_resize():
    c = _character()
    field = Playfield(800, 600)
    update_character(c, field)
    field.height = 400
    update_character(c, field)
    assert c.y == 200


def test_shapes_drift_left_and_retire_in_order():
    a = Shape(x=-45, y=10, type="circle", size=50, speed=3)  # -48 + 50 >= 0 survives
    b = Shape(x=-48, y=20, type="square", size=50, speed=3)  # -51 + 50 < 0 retires
    c = Shape(x=400, y=30, type="triangle", size=50, speed=3)
    shapes = [a, b, c]
    original = shapes
    update_shapes(shapes)
    assert shapes is original
    assert shapes == [a, c]
    assert a.x == -48 and c.x == 397


def test_retired_shape_never_comes_back():
    shape = Shape(x=-48, y=10, type="circle", size=50, speed=3)
    shapes = [shape]
    update_shapes(shapes)
    assert shapes == []
    update_shapes(shapes)
    assert shapes == []


def test_step_tolerates_empty_field():
    spawner = ShapeSpawner(
        shape_types=("circle",),
        spawn_rate=0.0,
        shape_size=50,
        shape_speed=3,
        min_distance=100,
        rng=random.Random(0),
    )
    c = _character()
    shapes = []
    step(c, shapes, Playfield(800, 600), spawner)
    assert shapes == []
    assert c.x == 52


def test_step_spawns_then_moves_new_shape():
    spawner = ShapeSpawner(
        shape_types=("square",),
        spawn_rate=1.0,
        shape_size=50,
        shape_speed=3,
        min_distance=100,
        rng=random.Random(0),
    )
    shapes = []
    step(_character(), shapes, Playfield(800, 600), spawner)
    assert len(shapes) == 1
    assert shapes[0].x == 847
