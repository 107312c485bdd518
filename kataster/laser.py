"""Laser shots fired by the ship."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from kataster.arena import Body, GameLayer, Timer, TimerMode
from kataster.asteroid import Asteroid

LASER_SPEED = 500.0
LASER_LIFETIME = 2.0
LASER_SIZE = (5.0, 20.0)
_LASER_RADIUS = 5.0


@dataclass
class Laser:
    body: Body
    despawn_timer: Timer = field(default_factory=lambda: Timer(LASER_LIFETIME, TimerMode.ONCE))

    def tick(self, delta: float) -> bool:
        """Advance the lifetime; return True when the laser should disappear."""
        self.despawn_timer.tick(delta)
        return self.despawn_timer.finished()


def spawn_laser(x: float, y: float, angle: float, ship_vx: float, ship_vy: float) -> Laser:
    """Fire a laser from a ship at ``(x, y)`` facing ``angle`` radians.

    Only the vertical part of the ship's velocity is carried into the shot.
    """
    del ship_vx
    vx = -math.sin(angle) * LASER_SPEED
    vy = ship_vy + math.cos(angle) * LASER_SPEED
    body = Body(
        x=x,
        y=y,
        vx=vx,
        vy=vy,
        angle=angle,
        radius=_LASER_RADIUS,
        layer=GameLayer.LASER,
        mask=frozenset({GameLayer.ASTEROID}),
    )
    return Laser(body=body)


def laser_hits(
    lasers: Iterable[Laser], asteroids: Iterable[Asteroid]
) -> list[tuple[Laser, Asteroid]]:
    """Every pair of a laser and an asteroid it touches."""
    asteroid_list = list(asteroids)
    return [
        (laser, asteroid)
        for laser in lasers
        for asteroid in asteroid_list
        if laser.body.collides_with(asteroid.body)
    ]