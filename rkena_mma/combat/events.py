"""
Combat Events
=============
Record hasil resolusi yang dikonsumsi presentation (particles, audio, commentary).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from rkena_mma.config import ActionState, CombatEventType


@dataclass
class ParticleBurst:
    """Request spawn blood particles"""
    x: float
    y: float
    count: int


@dataclass
class CombatEvent:
    """Event untuk satu serangan yang ter-resolve"""
    type: CombatEventType
    attacker_is_player: bool
    action: ActionState
    damage: float = 0
    stamina_damage: float = 0
    position: Tuple[float, float] = (0.0, 0.0)
    bursts: List[ParticleBurst] = field(default_factory=list)
    shout: Optional[str] = None

    @property
    def is_big_hit(self) -> bool:
        return self.type == CombatEventType.TAKEDOWN


@dataclass
class ActionStarted:
    """Fighter memulai action (dipakai untuk whoosh)"""
    is_player: bool
    action: ActionState
