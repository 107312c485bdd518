"""Asteroids: sizes, spawning over time and splitting when hit."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional

from kataster.arena import ARENA_HEIGHT, ARENA_WIDTH, Arena, Body, GameLayer

MAX_ASTEROIDS = 20

_ASTEROID_MASK = frozenset({GameLayer.ASTEROID, GameLayer.PLAYER, GameLayer.LASER})


class AsteroidSize(enum.Enum):
    BIG = "Big"
    MEDIUM = "Medium"
    SMALL = "Small"

    def __str__(self) -> str:
        return self.value

    def score(self) -> int:
        """Points earned for destroying an asteroid of this size."""
        return {AsteroidSize.BIG: 40, AsteroidSize.MEDIUM: 20, AsteroidSize.SMALL: 10}[self]

    def split(self) -> Optional[tuple[AsteroidSize, float]]:
        """Size of the fragments and their spawn radius, or None if it does not split."""
        if self is AsteroidSize.BIG:
            return AsteroidSize.MEDIUM, 20.0
        if self is AsteroidSize.MEDIUM:
            return AsteroidSize.SMALL, 10.0
        return None

    def radius(self) -> float:
        """Collision radius, half the sprite width."""
        return {
            AsteroidSize.BIG: 101.0 / 2.0,
            AsteroidSize.MEDIUM: 43.0 / 2.0,
            AsteroidSize.SMALL: 28.0 / 2.0,
        }[self]


@dataclass(frozen=True)
class AsteroidSpawn:
    size: AsteroidSize
    x: float
    y: float
    vx: float
    vy: float
    angvel: float


@dataclass
class Asteroid:
    size: AsteroidSize
    body: Body

    @property
    def name(self) -> str:
        return f"Asteroid {self.size}"


def asteroid_from_spawn(spawn: AsteroidSpawn) -> Asteroid:
    body = Body(
        x=spawn.x,
        y=spawn.y,
        vx=spawn.vx,
        vy=spawn.vy,
        angvel=spawn.angvel,
        radius=spawn.size.radius(),
        layer=GameLayer.ASTEROID,
        mask=_ASTEROID_MASK,
    )
    return Asteroid(size=spawn.size, body=body)


def tick_spawner(
    arena: Arena, delta: float, asteroid_count: int, rng: random.Random
) -> Optional[AsteroidSpawn]:
    """Advance the spawn timer; return a new big asteroid when one is due."""
    timer = arena.asteroid_spawn_timer
    timer.tick(delta)
    if not timer.finished():
        return None
    timer.reset()
    if asteroid_count >= MAX_ASTEROIDS:
        return None
    timer.set_duration(max(0.8 * timer.duration, 0.1))
    half_width = ARENA_WIDTH / 2.0
    half_height = ARENA_HEIGHT / 2.0
    if rng.randrange(2) == 0:
        x, y = rng.uniform(-half_width, half_width), half_height
    else:
        x, y = -half_width, rng.uniform(-half_height, half_height)
    vx = rng.uniform(-ARENA_WIDTH / 4.0, ARENA_WIDTH / 4.0)
    vy = rng.uniform(-ARENA_HEIGHT / 4.0, ARENA_HEIGHT / 4.0)
    angvel = rng.uniform(-10.0, 10.0)
    return AsteroidSpawn(AsteroidSize.BIG, x, y, vx, vy, angvel)


def damage_asteroid(
    asteroid: Asteroid, arena: Arena, rng: random.Random
) -> list[AsteroidSpawn]:
    """Score the destroyed asteroid and return the fragments it breaks into."""
    arena.score += asteroid.size.score()
    split = asteroid.size.split()
    if split is None:
        return []
    size, radius = split
    x_range = ARENA_WIDTH / (radius / 4.0)
    y_range = ARENA_HEIGHT / (radius / 4.0)
    fragments = []
    for x_sign, y_sign in ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0)):
        fragments.append(
            AsteroidSpawn(
                size=size,
                x=asteroid.body.x + x_sign * 1.5 * radius,
                y=asteroid.body.y + y_sign * 1.5 * radius,
                vx=rng.uniform(-x_range, x_range),
                vy=rng.uniform(-y_range, y_range),
                angvel=asteroid.body.angvel,
            )
        )
    return fragments