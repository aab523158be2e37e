"""
Graphics Module
"""

from rkena_mma.graphics.particles import Particle, ParticleSystem

__all__ = ['Particle', 'ParticleSystem']
