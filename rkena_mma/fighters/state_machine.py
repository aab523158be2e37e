"""
Fighter State Machine
=====================
Satu fixed tick untuk satu fighter: regen, timer, movement, action start,
wall clamp, auto-face. Dipanggil tepat sekali per tick per fighter.
"""

import logging

from rkena_mma.config import (
    ActionState, ACTION_DATA, ACTION_PRIORITY, ATTACK_STATES,
    BalanceConfig, DEFAULT_BALANCE, ARENA_WIDTH,
)
from rkena_mma.fighters.fighter import Fighter, InputState
from rkena_mma.fighters.hitbox import AttackHitboxes
from rkena_mma.fighters.movement import (
    apply_walk, apply_takedown_lunge, clamp_to_arena, auto_face,
)

logger = logging.getLogger(__name__)


def advance(fighter: Fighter, controls: InputState, opponent: Fighter,
            balance: BalanceConfig = DEFAULT_BALANCE,
            arena_width: float = ARENA_WIDTH):
    """Advance fighter satu tick. Pure mutation, tanpa return value."""
    # 1. KO beku total
    if fighter.is_ko:
        return

    # 2. Regen stamina hanya saat idle/walk
    if fighter.state in (ActionState.IDLE, ActionState.WALK):
        fighter.regen_stamina(balance.stamina_regen)

    # 3. Timer tick, balik ke idle saat habis
    _tick_timer(fighter)

    # 4-5. Movement
    if not fighter.is_busy:
        apply_walk(fighter, controls, balance)
    elif fighter.state == ActionState.TAKEDOWN:
        apply_takedown_lunge(fighter, opponent, balance)
    else:
        fighter.vx = 0

    # 6. Action start
    if not fighter.is_busy and fighter.state_timer <= 0:
        start_action(fighter, controls, balance)

    # 7. Wall constraints
    clamp_to_arena(fighter, arena_width)

    # 8. Auto-face
    auto_face(fighter, opponent)


def _tick_timer(fighter: Fighter):
    if fighter.state_timer <= 0:
        return

    fighter.state_timer -= 1
    if fighter.state_timer <= 0:
        fighter.state_timer = 0
        # Transition clears the hitbox of attack states
        fighter.transition(ActionState.IDLE)


def just_started(fighter: Fighter, balance: BalanceConfig = DEFAULT_BALANCE) -> bool:
    """True pada tick dimana action dimulai (timer masih penuh)"""
    if fighter.state not in (ActionState.PUNCH, ActionState.KICK,
                             ActionState.BLOCK, ActionState.TAKEDOWN):
        return False
    return fighter.state_timer == balance.frames_for(fighter.state)


def can_start(fighter: Fighter, action: ActionState, balance: BalanceConfig) -> bool:
    """Stamina gate untuk satu action"""
    if fighter.stamina < balance.min_action_stamina:
        return False
    return fighter.stamina >= balance.stamina_cost_for(action)


def start_action(fighter: Fighter, controls: InputState,
                 balance: BalanceConfig = DEFAULT_BALANCE) -> bool:
    """
    Mulai maksimal satu action dari input, prioritas takedown > punch > kick > block.
    Action yang gagal stamina gate dilewati, bukan di-koreksi belakangan.
    Return True kalau ada action yang dimulai.
    """
    for intent, action in ACTION_PRIORITY:
        if not getattr(controls, intent):
            continue
        if not can_start(fighter, action, balance):
            continue

        fighter.drain_stamina(balance.stamina_cost_for(action))
        fighter.vx = 0
        fighter.transition(action, timer=balance.frames_for(action))

        if action in ATTACK_STATES and ACTION_DATA[action].hitbox is not None:
            fighter.hitbox = AttackHitboxes.create(
                action, fighter.x, fighter.y,
                fighter.width, fighter.height, fighter.direction
            )

        logger.debug("%s starts %s (stamina %.1f)",
                     fighter.name, action.value, fighter.stamina)
        return True

    return False
