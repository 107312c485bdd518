import pytest

from kataster.arena import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    Body,
    GameLayer,
    Timer,
    TimerMode,
    new_arena,
    wrap_position,
)


def test_once_timer_finishes_and_stays_finished():
    timer = Timer(1.0)
    timer.tick(0.5)
    assert not timer.finished()
    timer.tick(0.5)
    assert timer.finished()
    timer.tick(0.5)
    assert timer.finished()
    assert timer.elapsed == timer.duration


def test_timer_reset_clears_state():
    timer = Timer(1.0)
    timer.tick(2.0)
    timer.reset()
    assert not timer.finished()
    assert timer.elapsed == 0.0


def test_repeating_timer_finishes_only_on_wrap_tick():
    timer = Timer(0.5, TimerMode.REPEATING)
    timer.tick(0.6)
    assert timer.finished()
    assert timer.elapsed < timer.duration
    timer.tick(0.1)
    assert not timer.finished()


def test_set_duration_keeps_elapsed():
    timer = Timer(5.0)
    timer.tick(1.0)
    timer.set_duration(4.0)
    assert timer.duration == 4.0
    assert timer.elapsed == 1.0


def test_timer_rejects_negative_values():
    with pytest.raises(ValueError):
        Timer(-1.0)
    with pytest.raises(ValueError):
        Timer(1.0).tick(-0.1)


def test_new_arena():
    arena = new_arena()
    assert arena.score == 0
    assert arena.asteroid_spawn_timer.duration == 5.0
    assert arena.asteroid_spawn_timer.mode is TimerMode.ONCE


def test_wrap_left_edge_moving_left():
    body = Body(x=-ARENA_WIDTH / 2 - 1, y=0.0, vx=-5.0)
    assert wrap_position(body)
    assert body.x == ARENA_WIDTH / 2


def test_no_wrap_when_moving_back_inside():
    body = Body(x=-ARENA_WIDTH / 2 - 1, y=0.0, vx=5.0)
    assert not wrap_position(body)
    assert body.x == -ARENA_WIDTH / 2 - 1


def test_wrap_both_axes():
    body = Body(x=ARENA_WIDTH / 2 + 1, y=ARENA_HEIGHT / 2 + 1, vx=1.0, vy=1.0)
    assert wrap_position(body)
    assert (body.x, body.y) == (-ARENA_WIDTH / 2, -ARENA_HEIGHT / 2)


def test_wrap_bottom_edge():
    body = Body(x=0.0, y=-ARENA_HEIGHT / 2 - 3, vy=-1.0)
    assert wrap_position(body)
    assert body.y == ARENA_HEIGHT / 2


def test_collision_requires_mutual_layers():
    a = Body(0.0, 0.0, radius=5.0, layer=GameLayer.LASER,
             mask=frozenset({GameLayer.ASTEROID}))
    b = Body(1.0, 0.0, radius=5.0, layer=GameLayer.PLAYER,
             mask=frozenset({GameLayer.LASER}))
    assert not a.collides_with(b)
    c = Body(1.0, 0.0, radius=5.0, layer=GameLayer.ASTEROID,
             mask=frozenset({GameLayer.LASER}))
    assert a.collides_with(c)
    assert c.collides_with(a)


def test_collision_requires_overlap():
    mask = frozenset({GameLayer.ASTEROID})
    a = Body(0.0, 0.0, radius=5.0, layer=GameLayer.ASTEROID, mask=mask)
    b = Body(100.0, 0.0, radius=5.0, layer=GameLayer.ASTEROID, mask=mask)
    assert not a.collides_with(b)