"""
Tests untuk satu fixed step world: urutan update, events, shout, knockouts
"""

import pytest

from rkena_mma.combat.events import ActionStarted
from rkena_mma.config import (
    ActionState, CombatEventType, Winner, SHOUT_FRAMES, COMMENTATOR_SEATS,
)
from rkena_mma.core.world import (
    Shout, create_world, step, check_knockouts, decide_on_time,
)
from rkena_mma.fighters.fighter import InputState
from rkena_mma.fighters.hitbox import AttackHitboxes


class IdleAI:
    """AI yang tidak pernah menekan apa-apa"""

    def decide(self, ai, player):
        return InputState()


def make_world(seed=1, enemy_x=None, idle_ai=True):
    world = create_world(seed=seed)
    if idle_ai:
        world.ai = IdleAI()
    if enemy_x is not None:
        world.enemy.x = enemy_x
    return world


def test_fresh_world_faces_off():
    world = create_world(seed=1)

    assert world.player.x == 150
    assert world.enemy.x == 550
    assert world.player.direction == 1
    assert world.enemy.direction == -1
    assert world.time_remaining == 180
    assert not world.is_game_over


def test_step_counts_frames_and_snapshots_player_first():
    world = make_world()

    snap = step(world, InputState(right=True))

    assert snap.frame == 1
    assert snap.fighter1.is_player
    assert not snap.fighter2.is_player
    assert snap.fighter1.x == pytest.approx(154.5)


def test_action_start_is_reported():
    world = make_world()

    snap = step(world, InputState(punch=True))

    assert snap.actions_started == (ActionStarted(True, ActionState.PUNCH),)
    assert step(world, InputState(punch=True)).actions_started == ()


def test_player_punch_lands_in_same_step():
    world = make_world(enemy_x=200)

    snap = step(world, InputState(punch=True))

    assert [e.type for e in snap.events] == [CombatEventType.HIT]
    assert snap.fighter2.health == 96
    assert snap.fighter2.state == ActionState.HIT
    assert len(snap.particles) == 12


def test_takedown_spawns_particles_and_shout():
    world = make_world(enemy_x=200)
    player = world.player
    player.state = ActionState.TAKEDOWN
    player.state_timer = 41
    player.hitbox = AttackHitboxes.create(
        ActionState.TAKEDOWN, player.x, player.y, player.width, player.height, 1)

    snap = step(world, InputState())

    assert snap.events[0].type == CombatEventType.TAKEDOWN
    assert snap.fighter2.state == ActionState.SLAMMED
    assert len(snap.particles) == 15
    assert snap.shout.text == "TAKEDOWN!"
    assert 0 <= snap.shout.seat < COMMENTATOR_SEATS
    assert snap.shout.frames_left == SHOUT_FRAMES - 1


def test_shout_expires():
    world = make_world()
    world.shout = Shout("TAKEDOWN!", seat=1, frames_left=2)

    assert step(world, InputState()).shout.frames_left == 1
    assert step(world, InputState()).shout is None


def test_knockout_sets_winner_once():
    world = make_world()
    world.enemy.health = 0

    assert check_knockouts(world) == Winner.PLAYER
    assert world.enemy.state == ActionState.KO
    assert world.is_game_over

    world.player.health = 0
    assert check_knockouts(world) is None
    assert world.player.state == ActionState.KO
    assert world.winner == Winner.PLAYER


def test_double_knockout_goes_to_enemy():
    world = make_world()
    world.player.health = 0
    world.enemy.health = 0

    assert check_knockouts(world) == Winner.ENEMY
    assert world.player.is_ko and world.enemy.is_ko


def test_knockout_interrupts_an_attack():
    world = make_world()
    world.enemy.state = ActionState.KICK
    world.enemy.state_timer = 20
    world.enemy.hitbox = AttackHitboxes.create(
        ActionState.KICK, world.enemy.x, world.enemy.y,
        world.enemy.width, world.enemy.height, -1)
    world.enemy.health = 0

    check_knockouts(world)

    assert world.enemy.state == ActionState.KO
    assert world.enemy.state_timer == 0
    assert world.enemy.hitbox is None


def test_decision_on_time():
    world = make_world()
    world.enemy.health = 40
    assert decide_on_time(world) == Winner.PLAYER

    world = make_world()
    world.player.health = 40
    assert decide_on_time(world) == Winner.ENEMY

    world = make_world()
    assert decide_on_time(world) == Winner.DRAW
    assert world.is_game_over


def test_hud_data_shape():
    snap = step(make_world(), InputState())
    data = snap.hud_data()

    assert data['time_remaining'] == 180
    assert data['fighter1']['health'] == 100
    assert data['fighter2']['max_stamina'] == 100


def test_knockback_stays_inside_arena():
    world = make_world(enemy_x=50)
    player, enemy = world.player, world.enemy
    player.x = 0
    enemy.state = ActionState.BLOCK
    enemy.state_timer = 10
    player.state = ActionState.TAKEDOWN
    player.state_timer = 41
    player.hitbox = AttackHitboxes.create(
        ActionState.TAKEDOWN, player.x, player.y, player.width, player.height, 1)

    snap = step(world, InputState())

    assert snap.events[0].type == CombatEventType.SPRAWL
    assert snap.fighter1.x == 0
