import pytest

from dinorun.game.constants import SCREEN_WIDTH, FLOOR, PLAYER_COLUMN
from dinorun.game.field import ObstacleField
from dinorun.game.obstacle import Obstacle, ObstacleVariant
from dinorun.game.player import Player
from dinorun.game.rng import RandomProvider
from dinorun.graphics.commands import Frame

from tests.conftest import ScriptedRandom


def make_field(*xs, threshold=0.9):
    field = ObstacleField(threshold)
    for x in xs:
        field.add(Obstacle(x=x))
    return field


def test_reset_leaves_one_static_obstacle_a_screen_ahead():
    field = make_field(3, 4, 5)

    field.reset(RandomProvider(seed=1))

    assert len(field) == 1
    assert field[0].x == SCREEN_WIDTH
    assert field[0].y == FLOOR
    assert field[0].variant is ObstacleVariant.STATIC


def test_retire_single_obstacle():
    field = make_field(5)

    assert field.retire_passed(11, 5) == 1
    assert len(field) == 0


def test_retire_is_inclusive_at_cutoff():
    field = make_field(5, 6, 7, 40)

    removed = field.retire_passed(11, 5)

    assert removed == 2
    assert [o.x for o in field] == [7, 40]


def test_retire_keeps_order():
    field = make_field(30, 2, 50, 1, 60)

    field.retire_passed(10, 5)

    assert [o.x for o in field] == [30, 50, 60]


def test_no_spawn_while_lead_is_long():
    field = make_field(10 + 72)
    rng = ScriptedRandom()

    assert field.maybe_spawn(10, 0, rng) is None
    assert len(field) == 1


def test_spawns_one_screen_ahead_when_lead_runs_short():
    field = make_field(10 + 71)
    rng = ScriptedRandom(ints=[4, FLOOR - 1], floats=[-1.0])

    spawned = field.maybe_spawn(10, 0, rng)

    assert spawned is field[-1]
    assert spawned.x == 10 + SCREEN_WIDTH + 4
    assert len(field) == 2


def test_half_screen_threshold():
    rng = ScriptedRandom(ints=[0, FLOOR - 1], floats=[-1.0])

    assert make_field(50, threshold=0.5).maybe_spawn(10, 0, rng) is None
    assert make_field(49, threshold=0.5).maybe_spawn(10, 0, rng) is not None


def test_spawn_measures_from_rightmost_obstacle():
    field = make_field(200, 60)

    assert field.rightmost.x == 200
    assert field.maybe_spawn(100, 0, ScriptedRandom()) is None


def test_spawn_passes_score_through():
    field = make_field(20)
    rng = ScriptedRandom(ints=[0, FLOOR - 2], floats=[0.5])

    spawned = field.maybe_spawn(10, 75, rng)

    assert rng.float_calls == [(-1.5, 75 * 0.02)]
    assert spawned.variant is ObstacleVariant.MOVING


def test_empty_field_is_not_papered_over():
    with pytest.raises(ValueError):
        ObstacleField().maybe_spawn(0, 0, ScriptedRandom())


def test_any_collision():
    player = Player(x=15, y=FLOOR)
    field = make_field(60, 15 + PLAYER_COLUMN)

    assert field.any_collision(player)

    field.retire_passed(100, 70)
    assert [o.x for o in field] == [60]
    assert not field.any_collision(player)


def test_advance_all_draws_in_creation_order():
    field = ObstacleField()
    field.add(Obstacle(x=40))
    field.add(Obstacle(x=30, y=FLOOR - 2, velocity=1.0))
    frame = Frame()

    field.advance_all(10, frame)

    assert [(g.column, g.row) for g in frame.glyphs()] == [(30, FLOOR), (19, FLOOR - 2)]
    assert [o.x for o in field] == [40, 29]
