"""
Snapshots
=========
Read-only view dari world yang dipublish ke presentation tiap rendered frame.
Renderer, HUD dan audio hanya boleh membaca data ini.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from rkena_mma.config import ActionState, Winner
from rkena_mma.combat.events import ActionStarted, CombatEvent
from rkena_mma.fighters.fighter import Fighter
from rkena_mma.graphics.particles import Particle


@dataclass(frozen=True)
class FighterSnapshot:
    name: str
    is_player: bool
    x: float
    y: float
    width: float
    height: float
    direction: int
    health: float
    max_health: float
    stamina: float
    max_stamina: float
    state: ActionState
    state_timer: int
    hitbox: Optional[Tuple[float, float, float, float]]
    skin_color: Tuple[int, int, int]
    shorts_color: Tuple[int, int, int]

    @classmethod
    def from_fighter(cls, fighter: Fighter) -> 'FighterSnapshot':
        return cls(
            name=fighter.name,
            is_player=fighter.is_player,
            x=fighter.x,
            y=fighter.y,
            width=fighter.width,
            height=fighter.height,
            direction=fighter.direction,
            health=fighter.health,
            max_health=fighter.max_health,
            stamina=fighter.stamina,
            max_stamina=fighter.max_stamina,
            state=fighter.state,
            state_timer=fighter.state_timer,
            hitbox=fighter.hitbox.as_tuple() if fighter.hitbox else None,
            skin_color=fighter.skin_color,
            shorts_color=fighter.shorts_color,
        )

    @property
    def health_percent(self) -> float:
        return self.health / self.max_health

    @property
    def stamina_percent(self) -> float:
        return self.stamina / self.max_stamina


@dataclass(frozen=True)
class ParticleSnapshot:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]
    alpha: int

    @classmethod
    def from_particle(cls, particle: Particle) -> 'ParticleSnapshot':
        return cls(particle.x, particle.y, particle.size,
                   particle.color, particle.get_alpha())


@dataclass(frozen=True)
class ShoutSnapshot:
    text: str
    seat: int
    frames_left: int


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Output boundary core. fighter1 selalu player, fighter2 selalu AI.
    events/actions_started berisi semua yang terjadi sejak snapshot sebelumnya.
    """
    fighter1: FighterSnapshot
    fighter2: FighterSnapshot
    time_remaining: int
    particles: Tuple[ParticleSnapshot, ...] = ()
    shout: Optional[ShoutSnapshot] = None
    is_game_over: bool = False
    winner: Optional[Winner] = None
    frame: int = 0
    events: Tuple[CombatEvent, ...] = ()
    actions_started: Tuple[ActionStarted, ...] = ()

    def hud_data(self) -> dict:
        """Bentuk minimal untuk HUD"""
        return {
            'fighter1': {
                'health': self.fighter1.health,
                'max_health': self.fighter1.max_health,
                'stamina': self.fighter1.stamina,
                'max_stamina': self.fighter1.max_stamina,
            },
            'fighter2': {
                'health': self.fighter2.health,
                'max_health': self.fighter2.max_health,
                'stamina': self.fighter2.stamina,
                'max_stamina': self.fighter2.max_stamina,
            },
            'time_remaining': self.time_remaining,
        }
