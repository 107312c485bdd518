"""Arena geometry, game timers, collision layers and screen wrapping."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ARENA_WIDTH = 1280.0
ARENA_HEIGHT = 800.0


class TimerMode(enum.Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A countdown measured in seconds, either one-shot or repeating."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative: {duration}")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self._finished = False

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration}, mode={self.mode.name}, "
            f"elapsed={self.elapsed})"
        )

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards: {delta}")
        if self.mode is TimerMode.ONCE:
            if self._finished:
                return self
            self.elapsed = min(self.elapsed + delta, self.duration)
            self._finished = self.elapsed >= self.duration
            return self
        self.elapsed += delta
        if self.duration == 0.0:
            self.elapsed = 0.0
            self._finished = True
        elif self.elapsed >= self.duration:
            self.elapsed %= self.duration
            self._finished = True
        else:
            self._finished = False
        return self

    def finished(self) -> bool:
        """True once a one-shot timer ran out, or on a tick where a repeating one wrapped."""
        return self._finished

    def reset(self) -> None:
        self.elapsed = 0.0
        self._finished = False

    def set_duration(self, duration: float) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative: {duration}")
        self.duration = float(duration)


class GameLayer(enum.Enum):
    PLAYER = "player"
    LASER = "laser"
    ASTEROID = "asteroid"


@dataclass
class Body:
    """A circular physics body living in the arena."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    angle: float = 0.0
    angvel: float = 0.0
    radius: float = 0.0
    layer: GameLayer = GameLayer.PLAYER
    mask: frozenset = field(default_factory=frozenset)

    def collides_with(self, other: Body) -> bool:
        """True when both layer filters accept each other and the bodies overlap."""
        if self.layer not in other.mask or other.layer not in self.mask:
            return False
        dx = self.x - other.x
        dy = self.y - other.y
        reach = self.radius + other.radius
        return dx * dx + dy * dy < reach * reach


@dataclass
class Arena:
    asteroid_spawn_timer: Timer
    score: int = 0


def new_arena() -> Arena:
    """Arena state at the start of a game: first asteroid after five seconds."""
    return Arena(asteroid_spawn_timer=Timer(5.0, TimerMode.ONCE), score=0)


def wrap_position(body: Body) -> bool:
    """Move a body leaving the arena to the opposite edge; return whether it moved."""
    half_width = ARENA_WIDTH / 2.0
    half_height = ARENA_HEIGHT / 2.0
    x, y = body.x, body.y
    updated = False
    if x < -half_width and body.vx < 0.0:
        x = half_width
        updated = True
    elif x > half_width and body.vx > 0.0:
        x = -half_width
        updated = True
    if y < -half_height and body.vy < 0.0:
        y = half_height
        updated = True
    elif y > half_height and body.vy > 0.0:
        y = -half_height
        updated = True
    if updated:
        body.x = x
        body.y = y
    return updated