"""
Combat System Module
"""

from rkena_mma.combat.engine import CombatEngine
from rkena_mma.combat.events import ActionStarted, CombatEvent, ParticleBurst

__all__ = ['ActionStarted', 'CombatEngine', 'CombatEvent', 'ParticleBurst']
