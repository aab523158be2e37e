"""
Tests untuk blood particle bookkeeping
"""

import random

import pytest

from rkena_mma.config import BLOOD_RED, PARTICLE_GRAVITY
from rkena_mma.graphics.particles import Particle, ParticleSystem


def make_system(seed=1, max_particles=500):
    return ParticleSystem(random.Random(seed), max_particles=max_particles)


def test_spawn_ranges():
    system = make_system()

    system.spawn_blood(100, 200, 50)

    assert len(system.particles) == 50
    for p in system.particles:
        assert (p.x, p.y) == (100, 200)
        assert -7.5 <= p.vx <= 7.5
        assert -7.5 <= p.vy <= 7.5
        assert 20 <= p.life < 40
        assert 3 <= p.size < 9
        assert p.color == BLOOD_RED


def test_update_integrates_with_gravity():
    p = Particle(x=0, y=0, vx=2, vy=-3, size=4, color=BLOOD_RED, life=10, max_life=10)

    assert p.update()

    assert (p.x, p.y) == (2, -3)
    assert p.vy == pytest.approx(-3 + PARTICLE_GRAVITY)
    assert p.life == 9


def test_particle_expires():
    p = Particle(x=0, y=0, vx=0, vy=0, size=4, color=BLOOD_RED, life=1, max_life=10)

    assert not p.update()


def test_alpha_fades_with_life():
    p = Particle(x=0, y=0, vx=0, vy=0, size=4, color=BLOOD_RED, life=5, max_life=10)
    assert p.get_alpha() == 127


def test_all_particles_expire():
    system = make_system()
    system.spawn_blood(0, 0, 12)

    for _ in range(40):
        system.update()

    assert len(system.particles) == 0


def test_oldest_particles_trimmed_past_cap():
    system = make_system(max_particles=10)
    system.spawn_blood(0, 0, 5)
    first_batch = list(system.particles)

    system.spawn_blood(50, 50, 8)

    assert len(system.particles) == 10
    assert first_batch[0] not in system.particles


def test_same_seed_same_burst():
    a = make_system(seed=9)
    b = make_system(seed=9)
    a.spawn_blood(0, 0, 5)
    b.spawn_blood(0, 0, 5)

    assert a.particles == b.particles


def test_clear():
    system = make_system()
    system.spawn_blood(0, 0, 5)
    system.clear()
    assert len(system.particles) == 0
