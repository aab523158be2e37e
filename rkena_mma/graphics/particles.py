"""
Particle System
===============
Blood particles untuk hit impacts. Hanya bookkeeping (spawn, integrate,
expire); drawing ada di renderer.
"""

import random
from typing import List, Optional, Tuple
from dataclasses import dataclass

from rkena_mma.config import (
    BLOOD_RED, MAX_PARTICLES, PARTICLE_GRAVITY, PARTICLE_SPEED,
    PARTICLE_LIFE_MIN, PARTICLE_LIFE_SPREAD,
    PARTICLE_SIZE_MIN, PARTICLE_SIZE_SPREAD,
)


@dataclass
class Particle:
    """Single particle, satuan pixel per fixed tick"""
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Tuple[int, int, int]
    life: float
    max_life: float
    gravity: float = PARTICLE_GRAVITY

    def update(self) -> bool:
        """
        Update satu tick.
        Return True if still alive.
        """
        self.life -= 1
        if self.life <= 0:
            return False

        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        return True

    def get_alpha(self) -> int:
        """Alpha berdasarkan sisa life"""
        return int(255 * max(0.0, min(1.0, self.life / self.max_life)))


class ParticleSystem:
    """
    Manages all particles dalam satu match.
    RNG di-inject supaya spawn bisa di-replay di test.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 max_particles: int = MAX_PARTICLES):
        self.rng = rng or random.Random()
        self.max_particles = max_particles
        self.particles: List[Particle] = []

    def spawn_blood(self, x: float, y: float, count: int,
                    color: Tuple[int, int, int] = BLOOD_RED):
        """Burst ke segala arah dari satu titik"""
        rng = self.rng
        for _ in range(count):
            life = PARTICLE_LIFE_MIN + rng.random() * PARTICLE_LIFE_SPREAD
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(rng.random() - 0.5) * PARTICLE_SPEED,
                vy=(rng.random() - 0.5) * PARTICLE_SPEED,
                size=rng.random() * PARTICLE_SIZE_SPREAD + PARTICLE_SIZE_MIN,
                color=color,
                life=life,
                max_life=life,
            ))

        # Buang yang paling tua kalau kebanyakan
        overflow = len(self.particles) - self.max_particles
        if overflow > 0:
            del self.particles[:overflow]

    def update(self):
        """Update all particles satu tick"""
        self.particles = [p for p in self.particles if p.update()]

    def clear(self):
        """Clear all particles"""
        self.particles.clear()
