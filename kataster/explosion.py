"""Explosion effects: a sprite growing over a short lifetime."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from kataster.arena import Timer, TimerMode


class ExplosionKind(enum.Enum):
    SHIP_DEAD = "ship_dead"
    SHIP_CONTACT = "ship_contact"
    LASER_ON_ASTEROID = "laser_on_asteroid"


# texture attribute, sound attribute, start size, end scale, duration
_KINDS = {
    ExplosionKind.SHIP_DEAD: ("ship_explosion", "ship_explosion", (42.0, 39.0), 5.0, 2.0),
    ExplosionKind.SHIP_CONTACT: ("ship_contact", "ship_contact", (42.0, 39.0), 2.0, 1.0),
    ExplosionKind.LASER_ON_ASTEROID: (
        "asteroid_explosion",
        "asteroid_explosion",
        (36.0, 32.0),
        1.5,
        1.0,
    ),
}


@dataclass
class Explosion:
    """An explosion scaling from ``start_scale`` to ``end_scale`` over its timer.

    ``texture`` and ``sound`` name attributes of the sprite and audio assets.
    """

    kind: ExplosionKind
    x: float
    y: float
    size: tuple[float, float]
    texture: str
    sound: str
    timer: Timer
    start_scale: float
    end_scale: float

    def tick(self, delta: float) -> bool:
        """Advance the animation; return False once the explosion is over."""
        self.timer.tick(delta)
        return not self.timer.finished()

    def scale(self) -> float:
        if self.timer.duration == 0.0:
            return self.end_scale
        progress = self.timer.elapsed / self.timer.duration
        return self.start_scale + (self.end_scale - self.start_scale) * progress


def spawn_explosion(kind: ExplosionKind, x: float, y: float) -> Explosion:
    texture, sound, size, end_scale, duration = _KINDS[kind]
    return Explosion(
        kind=kind,
        x=x,
        y=y,
        size=size,
        texture=texture,
        sound=sound,
        timer=Timer(duration, TimerMode.ONCE),
        start_scale=1.0,
        end_scale=end_scale,
    )