"""Scrolling star field drawn behind the arena."""

from __future__ import annotations

import random
from dataclasses import dataclass

from kataster.arena import ARENA_HEIGHT, ARENA_WIDTH


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    brightness: float


def _wrap(value: float, half: float) -> float:
    return (value + half) % (2.0 * half) - half


class Starfield:
    """Stars drifting with time; the clock stops while the game is paused."""

    def __init__(
        self,
        count: int = 200,
        seed: int = 0,
        drift: tuple[float, float] = (20.0, 10.0),
    ) -> None:
        if count < 0:
            raise ValueError(f"star count must not be negative: {count}")
        rng = random.Random(seed)
        half_w, half_h = ARENA_WIDTH / 2.0, ARENA_HEIGHT / 2.0
        self._base = [
            (rng.uniform(-half_w, half_w), rng.uniform(-half_h, half_h), rng.uniform(0.2, 1.0))
            for _ in range(count)
        ]
        self.drift = drift
        self.time = 0.0

    def update(self, delta: float, paused: bool = False) -> None:
        if delta < 0:
            raise ValueError(f"cannot move time backwards: {delta}")
        if not paused:
            self.time += delta

    def stars(self) -> list[Star]:
        """Current star positions, wrapped inside the arena."""
        half_w, half_h = ARENA_WIDTH / 2.0, ARENA_HEIGHT / 2.0
        dx, dy = self.drift
        return [
            Star(
                _wrap(x + dx * depth * self.time, half_w),
                _wrap(y + dy * depth * self.time, half_h),
                depth,
            )
            for x, y, depth in self._base
        ]