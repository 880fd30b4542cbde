"""Confetti burst shown while a won level waits to advance."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from mataha.ui.colors import GameColors

PARTICLE_COUNT = 100
PARTICLE_LIFE = 120
GRAVITY = 0.1


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: str
    life: int


class ConfettiBurst:
    """Particles in pixel space, advanced once per frame."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._particles: List[Particle] = []

    @property
    def particles(self) -> List[Particle]:
        return self._particles

    @property
    def active(self) -> bool:
        return bool(self._particles)

    def spawn(
        self,
        x: float,
        y: float,
        count: int = PARTICLE_COUNT,
        colors: Sequence[str] = GameColors.CONFETTI,
    ) -> None:
        """Replace any running burst with ``count`` particles at (x, y)."""
        rng = self._rng
        self._particles = [
            Particle(
                x=x,
                y=y,
                vx=(rng.random() - 0.5) * 8,
                vy=(rng.random() - 0.5) * 8 - 5,
                size=rng.random() * 5 + 2,
                color=rng.choice(colors),
                life=PARTICLE_LIFE,
            )
            for _ in range(count)
        ]

    def update(self) -> None:
        alive = []
        for p in self._particles:
            p.x += p.vx
            p.y += p.vy
            p.vy += GRAVITY
            p.life -= 1
            if p.life > 0:
                alive.append(p)
        self._particles = alive

    def clear(self) -> None:
        self._particles = []
