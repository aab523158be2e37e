"""
Movement
========
Pergerakan fighter: walking, takedown lunge, wall clamp, auto-face.
Semua jarak dalam pixel per fixed tick.
"""

from rkena_mma.config import ActionState, ARENA_WIDTH, BalanceConfig
from rkena_mma.fighters.fighter import Fighter, InputState
from rkena_mma.fighters.hitbox import follow_fighter


def walk_speed(fighter: Fighter, balance: BalanceConfig) -> float:
    # Bot dibuat lebih lambat supaya terasa lebih berat/taktis
    if fighter.is_player:
        return balance.move_speed
    return balance.move_speed * balance.ai_speed_mult


def apply_walk(fighter: Fighter, controls: InputState, balance: BalanceConfig):
    """Gerak kiri/kanan dari input. Left menang kalau dua-duanya ditekan."""
    speed = walk_speed(fighter, balance)

    if controls.left:
        fighter.vx = -speed
        fighter.transition(ActionState.WALK)
    elif controls.right:
        fighter.vx = speed
        fighter.transition(ActionState.WALK)
    else:
        fighter.vx = 0
        fighter.transition(ActionState.IDLE)

    fighter.x += fighter.vx


def apply_takedown_lunge(fighter: Fighter, target: Fighter, balance: BalanceConfig):
    """
    Dash ke depan selama fase 'shoot' takedown. Arah dikunci dari awal action.
    Lunge berhenti kalau sudah nempel ke lawan supaya tidak tembus.
    """
    fighter.vx = 0
    if balance.in_takedown_window(fighter.state_timer):
        mult = balance.player_lunge_mult if fighter.is_player else balance.ai_lunge_mult
        dash_speed = balance.move_speed * mult
        if fighter.distance_to(target) > fighter.width * balance.lunge_stop_ratio:
            fighter.vx = fighter.direction * dash_speed
            fighter.x += fighter.vx

    if fighter.hitbox is not None:
        follow_fighter(fighter.hitbox, ActionState.TAKEDOWN,
                       fighter.x, fighter.width, fighter.direction)


def clamp_to_arena(fighter: Fighter, arena_width: float = ARENA_WIDTH):
    """Wall constraints"""
    fighter.x = max(0.0, min(fighter.x, arena_width - fighter.width))


def auto_face(fighter: Fighter, target: Fighter):
    """Hadap lawan, hanya saat benar-benar idle (tidak sedang recovery)"""
    if fighter.state in (ActionState.IDLE, ActionState.WALK) and fighter.state_timer <= 0:
        fighter.direction = 1 if fighter.x < target.x else -1
