"""
Fighter Class
=============
Mutable record satu combatant: posisi, health, stamina, facing,
action state, state timer, dan hitbox aktif.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from rkena_mma.config import (
    ActionState, ATTACK_STATES, BUSY_STATES,
    FIGHTER_WIDTH, FIGHTER_HEIGHT, GROUND_Y,
    DEFAULT_MAX_HEALTH, DEFAULT_MAX_STAMINA,
    COLOR_SKIN_P1, COLOR_SHORTS_P1, COLOR_SKIN_P2, COLOR_SHORTS_P2,
    PLAYER_NAME, ENEMY_NAME,
)
from rkena_mma.fighters.hitbox import Rect


@dataclass
class InputState:
    """Per-frame intents. Tidak ada queue, hanya intent frame ini."""
    left: bool = False
    right: bool = False
    punch: bool = False
    kick: bool = False
    block: bool = False
    takedown: bool = False


_ANY_HIT = frozenset({ActionState.HIT, ActionState.SLAMMED, ActionState.KO})

# Explicit transition table. Staying in the same state is always allowed
# except for KO, which is terminal.
TRANSITIONS: Dict[ActionState, FrozenSet[ActionState]] = {
    ActionState.IDLE: frozenset({
        ActionState.WALK, ActionState.PUNCH, ActionState.KICK,
        ActionState.BLOCK, ActionState.TAKEDOWN,
    }) | _ANY_HIT,
    ActionState.WALK: frozenset({
        ActionState.IDLE, ActionState.PUNCH, ActionState.KICK,
        ActionState.BLOCK, ActionState.TAKEDOWN,
    }) | _ANY_HIT,
    ActionState.PUNCH: frozenset({ActionState.IDLE}) | _ANY_HIT,
    ActionState.KICK: frozenset({ActionState.IDLE}) | _ANY_HIT,
    ActionState.TAKEDOWN: frozenset({ActionState.IDLE}) | _ANY_HIT,
    ActionState.BLOCK: frozenset({ActionState.IDLE, ActionState.KO}),
    ActionState.SPRAWL: frozenset({ActionState.IDLE, ActionState.KO}),
    ActionState.HIT: frozenset({ActionState.IDLE, ActionState.KO}),
    ActionState.SLAMMED: frozenset({ActionState.IDLE, ActionState.KO}),
    ActionState.KO: frozenset(),
}


@dataclass
class Fighter:
    """
    Satu combatant. Dimiliki eksklusif oleh World, dimutasi tiap tick oleh
    state machine dan combat engine.
    """
    x: float
    y: float
    is_player: bool
    name: str = ""
    width: float = FIGHTER_WIDTH
    height: float = FIGHTER_HEIGHT
    direction: int = 1  # 1 = hadap kanan, -1 = hadap kiri
    vx: float = 0

    health: float = DEFAULT_MAX_HEALTH
    max_health: float = DEFAULT_MAX_HEALTH
    stamina: float = DEFAULT_MAX_STAMINA
    max_stamina: float = DEFAULT_MAX_STAMINA

    state: ActionState = ActionState.IDLE
    state_timer: int = 0
    hitbox: Optional[Rect] = None

    # Presentation only
    skin_color: Tuple[int, int, int] = COLOR_SKIN_P1
    shorts_color: Tuple[int, int, int] = COLOR_SHORTS_P1

    # Match stats
    hits_landed: int = field(default=0, repr=False)
    damage_dealt: float = field(default=0, repr=False)

    def transition(self, new_state: ActionState, timer: Optional[int] = None):
        """
        Pindah ke state baru lewat transition table.
        Hitbox dibuang setiap kali keluar dari attack state.
        """
        if new_state != self.state or self.state == ActionState.KO:
            allowed = TRANSITIONS[self.state]
            if new_state not in allowed:
                raise ValueError(
                    f"Illegal transition {self.state.value} -> {new_state.value}"
                )
        self.state = new_state
        if timer is not None:
            self.state_timer = timer
        if new_state not in ATTACK_STATES:
            self.hitbox = None

    def take_damage(self, amount: float):
        """Kurangi health, clamp di 0"""
        self.health = max(0.0, min(self.max_health, self.health - amount))

    def drain_stamina(self, amount: float):
        """Kurangi stamina, clamp di 0"""
        self.stamina = max(0.0, min(self.max_stamina, self.stamina - amount))

    def regen_stamina(self, amount: float):
        self.stamina = min(self.max_stamina, self.stamina + amount)

    def push(self, distance: float):
        """Knockback ke belakang relatif arah hadap"""
        self.x -= self.direction * distance

    @property
    def hurtbox(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def is_busy(self) -> bool:
        return self.state in BUSY_STATES

    @property
    def is_ko(self) -> bool:
        return self.state == ActionState.KO

    def is_facing(self, other: 'Fighter') -> bool:
        return ((self.direction == 1 and other.x > self.x) or
                (self.direction == -1 and other.x < self.x))

    def distance_to(self, other: 'Fighter') -> float:
        return abs(self.x - other.x)


def create_fighter(x: float, is_player: bool) -> Fighter:
    """Fighter baru di posisi start, menghadap ke tengah arena"""
    return Fighter(
        x=x,
        y=GROUND_Y - FIGHTER_HEIGHT,
        is_player=is_player,
        name=PLAYER_NAME if is_player else ENEMY_NAME,
        direction=1 if is_player else -1,
        skin_color=COLOR_SKIN_P1 if is_player else COLOR_SKIN_P2,
        shorts_color=COLOR_SHORTS_P1 if is_player else COLOR_SHORTS_P2,
    )
