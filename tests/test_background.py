import pytest

from kataster.arena import ARENA_HEIGHT, ARENA_WIDTH
from kataster.background import Starfield


def test_time_advances_when_running():
    field = Starfield(count=5)
    field.update(0.5)
    field.update(0.25, paused=False)
    assert field.time == pytest.approx(0.75)


def test_time_frozen_when_paused():
    field = Starfield(count=5)
    field.update(0.5)
    field.update(3.0, paused=True)
    assert field.time == pytest.approx(0.5)


def test_negative_delta_rejected():
    with pytest.raises(ValueError):
        Starfield(count=1).update(-0.1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Starfield(count=-1)


def test_star_count_matches():
    assert len(Starfield(count=37).stars()) == 37


def test_stars_stay_inside_arena():
    field = Starfield(count=100, seed=3)
    for delta in (0.0, 1.0, 50.0, 1000.0):
        field.update(delta)
        for star in field.stars():
            assert -ARENA_WIDTH / 2 <= star.x < ARENA_WIDTH / 2
            assert -ARENA_HEIGHT / 2 <= star.y < ARENA_HEIGHT / 2
            assert 0.0 < star.brightness <= 1.0


def test_same_seed_same_stars():
    first = Starfield(count=20, seed=9)
    second = Starfield(count=20, seed=9)
    assert len(first.stars()) == 20
    assert first.stars() == second.stars()
    first.update(2.5)
    second.update(2.5)
    assert first.stars() == second.stars()
    assert first.stars() != Starfield(count=20, seed=10).stars()


def test_stars_move_only_when_running():
    field = Starfield(count=20, seed=1)
    start = field.stars()
    field.update(1.0, paused=True)
    assert field.stars() == start
    field.update(1.0)
    assert field.stars() != start