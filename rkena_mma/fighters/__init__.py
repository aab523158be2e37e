"""
Fighter entity, hitbox geometry, and the per-tick fighter state machine
"""

from rkena_mma.fighters.fighter import Fighter, InputState, create_fighter
from rkena_mma.fighters.hitbox import Rect, check_collision, AttackHitboxes
from rkena_mma.fighters.state_machine import advance

__all__ = [
    'Fighter', 'InputState', 'create_fighter',
    'Rect', 'check_collision', 'AttackHitboxes',
    'advance',
]
