"""The player's ship: input handling, damping, damage and invincibility."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from kataster.arena import Body, GameLayer, Timer, TimerMode
from kataster.laser import Laser, spawn_laser

START_LIFE = 3
INVINCIBLE_TIME = 2.0
MAX_INVINCIBLE_TIME = 5.0
SHIP_SIZE = (30.0, 20.0)
SHIP_RADIUS = 13.5
CANNON_COOLDOWN = 0.2


class PlayerAction(enum.Enum):
    FORWARD = "forward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    FIRE = "fire"


# Key names as understood by pygame.key.key_code.
KEY_BINDINGS: tuple[tuple[PlayerAction, str], ...] = (
    (PlayerAction.FORWARD, "w"),
    (PlayerAction.FORWARD, "up"),
    (PlayerAction.ROTATE_LEFT, "a"),
    (PlayerAction.ROTATE_LEFT, "left"),
    (PlayerAction.ROTATE_RIGHT, "d"),
    (PlayerAction.ROTATE_RIGHT, "right"),
    (PlayerAction.FIRE, "space"),
)


class DamageOutcome(enum.Enum):
    """What a hit did to the ship."""

    DESTROYED = "destroyed"
    HIT = "hit"
    PROLONGED = "prolonged"
    IGNORED = "ignored"


def _spent_invincibility() -> Timer:
    timer = Timer(INVINCIBLE_TIME, TimerMode.ONCE)
    timer.tick(INVINCIBLE_TIME)
    return timer


@dataclass
class Ship:
    body: Body
    rotation_speed: float = 3.0
    thrust: float = 300000.0
    life: int = START_LIFE
    cannon_timer: Timer = field(
        default_factory=lambda: Timer(CANNON_COOLDOWN, TimerMode.ONCE)
    )
    player_id: int = 1
    invincible_timer: Timer = field(default_factory=_spent_invincibility)
    invincible_time_secs: float = 0.0
    force: tuple[float, float] = (0.0, 0.0)

    def apply_input(self, actions: Iterable[PlayerAction]) -> Optional[Laser]:
        """Steer and thrust from the pressed actions; return a laser if one is fired."""
        pressed = set(actions)
        thrust = 1.0 if PlayerAction.FORWARD in pressed else 0.0
        if PlayerAction.ROTATE_LEFT in pressed:
            rotation = 1
        elif PlayerAction.ROTATE_RIGHT in pressed:
            rotation = -1
        else:
            rotation = 0
        if rotation:
            self.body.angvel = rotation * self.rotation_speed
        magnitude = thrust * self.thrust
        angle = self.body.angle
        self.force = (-math.sin(angle) * magnitude, math.cos(angle) * magnitude)

        if PlayerAction.FIRE in pressed and self.cannon_timer.finished():
            laser = spawn_laser(
                self.body.x, self.body.y, angle, self.body.vx, self.body.vy
            )
            self.cannon_timer.reset()
            return laser
        return None

    def dampen(self, delta: float) -> None:
        """Slow the ship's spin and drift over ``delta`` seconds."""
        self.body.angvel *= 0.1 ** delta
        factor = 0.4 ** delta
        self.body.vx *= factor
        self.body.vy *= factor

    def tick_timers(self, delta: float) -> None:
        self.cannon_timer.tick(delta)
        self.invincible_timer.tick(delta)

    @property
    def invincible(self) -> bool:
        return not self.invincible_timer.finished()

    def damage(self) -> DamageOutcome:
        """Take a hit from an asteroid."""
        if self.life == 0:
            raise ValueError("the ship is already destroyed")
        timer = self.invincible_timer
        if timer.finished():
            self.invincible_time_secs = 0.0
            self.life -= 1
            timer.reset()
            return DamageOutcome.DESTROYED if self.life == 0 else DamageOutcome.HIT
        if self.invincible_time_secs + timer.elapsed < MAX_INVINCIBLE_TIME:
            self.invincible_time_secs += timer.elapsed
            timer.reset()
            return DamageOutcome.PROLONGED
        return DamageOutcome.IGNORED

    def color(self) -> tuple[float, float, float, float]:
        """Sprite tint as RGBA; flashes red while invincible."""
        if self.invincible_timer.finished():
            return (1.0, 1.0, 1.0, 1.0)
        alpha = (self.invincible_timer.elapsed * 2.0) % 1.0
        return (1.0, 0.4, 0.2, alpha)


def new_ship() -> Ship:
    """A fresh player ship at the arena centre, not invincible."""
    body = Body(
        x=0.0,
        y=0.0,
        radius=SHIP_RADIUS,
        layer=GameLayer.PLAYER,
        mask=frozenset({GameLayer.ASTEROID}),
    )
    return Ship(body=body)