"""Exhaust particles emitted behind the ship while it thrusts."""

from __future__ import annotations

import bisect
import math
import random
from dataclasses import dataclass
from typing import Iterable

Color = tuple[float, float, float, float]

EXHAUST_GRADIENT_KEYS: tuple[tuple[float, Color], ...] = (
    (0.0, (0.5, 0.4, 0.7, 0.8)),
    (0.5, (1.0, 0.8, 0.0, 0.8)),
    (1.0, (0.0, 0.0, 0.0, 0.0)),
)
EXHAUST_CAPACITY = 16024
EXHAUST_COUNT = 10
EXHAUST_LIFETIME = 0.1
EXHAUST_SIZE = 2.0
EXHAUST_OFFSET = (0.0, -4.0)
CONE_HEIGHT = -5.0
CONE_BASE_RADIUS = 2.0
CONE_TOP_RADIUS = 1.0
SPEED_RANGE = (100.0, 400.0)
VELOCITY_CENTER = (0.0, 1.0)


class Gradient:
    """Piecewise linear colour ramp over [0, 1]."""

    def __init__(self, keys: Iterable[tuple[float, Color]] = ()) -> None:
        self._keys: list[tuple[float, Color]] = []
        for t, color in keys:
            self.add_key(t, color)

    def add_key(self, t: float, color: Iterable[float]) -> None:
        key = (float(t), tuple(float(c) for c in color))
        times = [k[0] for k in self._keys]
        self._keys.insert(bisect.bisect_right(times, key[0]), key)

    def sample(self, t: float) -> Color:
        """Colour at ``t``, clamped to the first and last keys."""
        if not self._keys:
            raise ValueError("cannot sample an empty gradient")
        first_t, first_c = self._keys[0]
        last_t, last_c = self._keys[-1]
        if t <= first_t:
            return first_c
        if t >= last_t:
            return last_c
        for (t0, c0), (t1, c1) in zip(self._keys, self._keys[1:]):
            if t0 <= t <= t1:
                if t1 == t0:
                    return c1
                f = (t - t0) / (t1 - t0)
                return tuple(a + (b - a) * f for a, b in zip(c0, c1))
        return last_c


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    lifetime: float
    age: float = 0.0

    @property
    def progress(self) -> float:
        if self.lifetime <= 0.0:
            return 1.0
        return min(self.age / self.lifetime, 1.0)


class ExhaustEmitter:
    """Spawns short-lived particles in a cone behind the ship."""

    def __init__(
        self,
        capacity: int = EXHAUST_CAPACITY,
        count: int = EXHAUST_COUNT,
        lifetime: float = EXHAUST_LIFETIME,
        size: float = EXHAUST_SIZE,
    ) -> None:
        self.capacity = capacity
        self.count = count
        self.lifetime = lifetime
        self.size = size
        self.gradient = Gradient(EXHAUST_GRADIENT_KEYS)
        self.particles: list[Particle] = []

    def burst(self, x: float, y: float, angle: float, rng: random.Random) -> list[Particle]:
        """Emit one burst for a ship at ``(x, y)`` facing ``angle``."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def to_world(lx: float, ly: float) -> tuple[float, float]:
            return lx * cos_a - ly * sin_a, lx * sin_a + ly * cos_a

        room = max(self.capacity - len(self.particles), 0)
        created = []
        for _ in range(min(self.count, room)):
            fraction = rng.random()
            height = fraction * CONE_HEIGHT
            radius = CONE_BASE_RADIUS + (CONE_TOP_RADIUS - CONE_BASE_RADIUS) * fraction
            lx = radius * math.sqrt(rng.random()) * math.cos(rng.uniform(0.0, math.tau))
            dx, dy = lx - VELOCITY_CENTER[0], height - VELOCITY_CENTER[1]
            norm = math.hypot(dx, dy) or 1.0
            speed = rng.uniform(*SPEED_RANGE)
            px, py = to_world(lx + EXHAUST_OFFSET[0], height + EXHAUST_OFFSET[1])
            vx, vy = to_world(dx / norm * speed, dy / norm * speed)
            created.append(Particle(x + px, y + py, vx, vy, self.lifetime))
        self.particles.extend(created)
        return created

    def update(self, delta: float) -> None:
        """Move and age every particle, dropping the expired ones."""
        for particle in self.particles:
            particle.x += particle.vx * delta
            particle.y += particle.vy * delta
            particle.age += delta
        self.particles = [p for p in self.particles if p.age < p.lifetime]

    def color(self, particle: Particle) -> Color:
        return self.gradient.sample(particle.progress)