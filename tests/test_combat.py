"""
Tests untuk combat resolution: clean hits, blocks, takedowns, sprawls, clashes
"""

import pytest

from rkena_mma.config import ActionState, CombatEventType, DEFAULT_BALANCE
from rkena_mma.combat.engine import CombatEngine, HIT_BURST, TAKEDOWN_BURST
from rkena_mma.fighters.fighter import InputState, create_fighter
from rkena_mma.fighters.hitbox import AttackHitboxes
from rkena_mma.fighters.state_machine import advance


def make_fighter(x, is_player=True, state=ActionState.IDLE, timer=0, stamina=100.0):
    fighter = create_fighter(x, is_player=is_player)
    fighter.state = state
    fighter.state_timer = timer
    fighter.stamina = stamina
    return fighter


def make_attacker(action, x=150.0, timer=None, is_player=True, stamina=100.0):
    """Fighter yang sedang di tengah action dengan hitbox live"""
    if timer is None:
        timer = 40 if action == ActionState.TAKEDOWN else 20
    fighter = make_fighter(x, is_player=is_player, state=action, timer=timer, stamina=stamina)
    fighter.hitbox = AttackHitboxes.create(
        action, fighter.x, fighter.y, fighter.width, fighter.height, fighter.direction)
    return fighter


# =============================================================================
# STRIKES
# =============================================================================


def test_clean_punch_through_advance():
    player = make_fighter(150)
    enemy = make_fighter(200, is_player=False)
    engine = CombatEngine()

    advance(player, InputState(punch=True), enemy)
    event = engine.resolve(player, enemy)

    assert event.type == CombatEventType.HIT
    assert enemy.health == 96
    assert enemy.state == ActionState.HIT
    assert enemy.state_timer == DEFAULT_BALANCE.hit_stun_frames
    assert player.hitbox is None
    assert player.stamina == pytest.approx(90)
    assert event.bursts[0].count == HIT_BURST
    assert player.hits_landed == 1


def test_kick_deals_more_than_punch():
    engine = CombatEngine()
    punched = make_fighter(200, is_player=False)
    kicked = make_fighter(200, is_player=False)

    engine.resolve(make_attacker(ActionState.PUNCH), punched)
    engine.resolve(make_attacker(ActionState.KICK, timer=30), kicked)

    assert kicked.health < punched.health
    assert kicked.health == 94


def test_blocked_punch_costs_stamina_only():
    attacker = make_attacker(ActionState.PUNCH)
    defender = make_fighter(200, is_player=False, state=ActionState.BLOCK, timer=10)

    event = CombatEngine().resolve(attacker, defender)

    assert event.type == CombatEventType.BLOCKED
    assert defender.health == 100
    assert defender.stamina == pytest.approx(92)
    assert defender.state == ActionState.BLOCK
    assert event.damage == 0
    assert attacker.hitbox is None


def test_strike_outside_active_window_misses():
    attacker = make_attacker(ActionState.PUNCH, timer=5)
    defender = make_fighter(200, is_player=False)

    assert CombatEngine().resolve(attacker, defender) is None
    assert defender.health == 100


def test_out_of_reach_misses():
    attacker = make_attacker(ActionState.PUNCH)
    defender = make_fighter(300, is_player=False)

    assert CombatEngine().resolve(attacker, defender) is None
    assert attacker.hitbox is not None


def test_reeling_defender_cannot_be_hit_again():
    engine = CombatEngine()
    for state in (ActionState.HIT, ActionState.SLAMMED, ActionState.SPRAWL,
                  ActionState.KO):
        defender = make_fighter(200, is_player=False, state=state, timer=10)
        attacker = make_attacker(ActionState.PUNCH)

        assert engine.resolve(attacker, defender) is None
        assert defender.health == 100


def test_ko_attacker_deals_nothing():
    attacker = make_attacker(ActionState.PUNCH)
    attacker.state = ActionState.KO
    defender = make_fighter(200, is_player=False)

    assert CombatEngine().resolve(attacker, defender) is None


def test_enemy_attacks_player_symmetrically():
    enemy = make_attacker(ActionState.PUNCH, x=200, is_player=False)
    player = make_fighter(150)

    event = CombatEngine().resolve(enemy, player)

    assert event.type == CombatEventType.HIT
    assert event.attacker_is_player is False
    assert player.health == 96


def test_listeners_receive_events():
    engine = CombatEngine()
    seen = []
    engine.on_event(seen.append)

    engine.resolve(make_attacker(ActionState.PUNCH), make_fighter(200, is_player=False))

    assert [e.type for e in seen] == [CombatEventType.HIT]


# =============================================================================
# TAKEDOWNS
# =============================================================================


def test_takedown_slams_defender():
    attacker = make_attacker(ActionState.TAKEDOWN)
    defender = make_fighter(200, is_player=False)

    event = CombatEngine().resolve(attacker, defender)

    assert event.type == CombatEventType.TAKEDOWN
    assert event.is_big_hit
    assert event.shout == "TAKEDOWN!"
    assert event.bursts[0].count == TAKEDOWN_BURST
    assert defender.health == 88
    assert defender.state == ActionState.SLAMMED
    assert defender.state_timer == DEFAULT_BALANCE.slammed_frames
    # Attacker keeps its own animation
    assert attacker.state == ActionState.TAKEDOWN
    assert attacker.state_timer == 40


def test_takedown_before_shoot_window_is_not_live():
    attacker = make_attacker(ActionState.TAKEDOWN, timer=45)
    defender = make_fighter(200, is_player=False)

    assert CombatEngine().resolve(attacker, defender) is None


def test_takedown_into_block_is_sprawled():
    attacker = make_attacker(ActionState.TAKEDOWN)
    defender = make_fighter(200, is_player=False, state=ActionState.BLOCK, timer=10)

    event = CombatEngine().resolve(attacker, defender)

    assert event.type == CombatEventType.SPRAWL
    assert defender.health == 100
    assert attacker.stamina == pytest.approx(85)
    assert attacker.x == pytest.approx(130)
    assert defender.stamina == pytest.approx(95)
    assert defender.state == ActionState.IDLE
    assert defender.state_timer == DEFAULT_BALANCE.recovery_frames


def test_takedown_clash():
    attacker = make_attacker(ActionState.TAKEDOWN)
    defender = make_attacker(ActionState.TAKEDOWN, x=200, is_player=False)

    event = CombatEngine().resolve(attacker, defender)

    assert event.type == CombatEventType.CLASH
    assert attacker.stamina == pytest.approx(90)
    assert defender.stamina == pytest.approx(90)
    assert attacker.state == ActionState.TAKEDOWN
    assert defender.state == ActionState.IDLE
    assert defender.state_timer == DEFAULT_BALANCE.recovery_frames
    assert defender.hitbox is None
    assert defender.x == pytest.approx(220)
    assert attacker.health == defender.health == 100


def test_attack_is_consumed_after_one_resolution():
    engine = CombatEngine()
    attacker = make_attacker(ActionState.TAKEDOWN)
    defender = make_fighter(200, is_player=False, state=ActionState.BLOCK, timer=10)

    assert engine.resolve(attacker, defender) is not None
    assert engine.resolve(attacker, defender) is None
