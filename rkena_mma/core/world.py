"""
Simulation World
================
Satu record yang dimiliki eksplisit oleh host per match, plus step()
yang memajukan semuanya tepat satu fixed tick.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from rkena_mma.config import (
    ActionState, Winner, BalanceConfig, AIConfig, DEFAULT_BALANCE, DEFAULT_AI,
    PLAYER_START_X, ENEMY_START_X, ROUND_DURATION, ARENA_WIDTH,
    SHOUT_FRAMES, COMMENTATOR_SEATS,
)
from rkena_mma.ai.controller import AIController
from rkena_mma.combat.engine import CombatEngine
from rkena_mma.combat.events import ActionStarted, CombatEvent
from rkena_mma.core.snapshot import (
    FighterSnapshot, MatchSnapshot, ParticleSnapshot, ShoutSnapshot,
)
from rkena_mma.fighters.fighter import Fighter, InputState, create_fighter
from rkena_mma.fighters.movement import clamp_to_arena
from rkena_mma.fighters.state_machine import advance, just_started
from rkena_mma.graphics.particles import ParticleSystem

logger = logging.getLogger(__name__)


@dataclass
class Shout:
    """Commentator shout yang sedang tampil"""
    text: str
    seat: int
    frames_left: int = SHOUT_FRAMES


@dataclass
class World:
    player: Fighter
    enemy: Fighter
    ai: AIController
    combat: CombatEngine
    particles: ParticleSystem
    effects_rng: random.Random
    balance: BalanceConfig = DEFAULT_BALANCE
    arena_width: float = ARENA_WIDTH

    shout: Optional[Shout] = None
    time_remaining: int = ROUND_DURATION
    is_game_over: bool = False
    winner: Optional[Winner] = None
    frame: int = 0

    # Events sejak step terakhir
    events: List[CombatEvent] = field(default_factory=list)
    actions_started: List[ActionStarted] = field(default_factory=list)


def create_world(seed: Optional[int] = None,
                 balance: BalanceConfig = DEFAULT_BALANCE,
                 ai_config: AIConfig = DEFAULT_AI,
                 round_duration: int = ROUND_DURATION) -> World:
    """Dua fighter fresh di posisi start, saling berhadapan"""
    effects_rng = random.Random(seed)
    return World(
        player=create_fighter(PLAYER_START_X, is_player=True),
        enemy=create_fighter(ENEMY_START_X, is_player=False),
        ai=AIController(ai_config, seed=seed),
        combat=CombatEngine(balance),
        particles=ParticleSystem(effects_rng),
        effects_rng=effects_rng,
        balance=balance,
        time_remaining=round_duration,
    )


def step(world: World, human_input: InputState) -> MatchSnapshot:
    """
    Advance world satu fixed tick.
    Urutan: player, AI decide, enemy, resolve P->E, resolve E->P,
    wall clamp, particles, shout, knockout check.
    """
    world.frame += 1
    world.events = []
    world.actions_started = []
    player, enemy = world.player, world.enemy

    advance(player, human_input, enemy, world.balance, world.arena_width)
    _note_action_start(world, player)

    ai_input = world.ai.decide(enemy, player)
    advance(enemy, ai_input, player, world.balance, world.arena_width)
    _note_action_start(world, enemy)

    for attacker, defender in ((player, enemy), (enemy, player)):
        event = world.combat.resolve(attacker, defender)
        if event is not None:
            _apply_effects(world, event)
            world.events.append(event)

    # Knockback bisa mendorong keluar arena
    clamp_to_arena(player, world.arena_width)
    clamp_to_arena(enemy, world.arena_width)

    world.particles.update()
    _tick_shout(world)
    check_knockouts(world)

    return snapshot(world)


def _note_action_start(world: World, fighter: Fighter):
    if just_started(fighter, world.balance):
        world.actions_started.append(ActionStarted(fighter.is_player, fighter.state))


def _apply_effects(world: World, event: CombatEvent):
    for burst in event.bursts:
        world.particles.spawn_blood(burst.x, burst.y, burst.count)
    if event.shout:
        seat = int(world.effects_rng.random() * COMMENTATOR_SEATS)
        world.shout = Shout(event.shout, seat)


def _tick_shout(world: World):
    if world.shout is None:
        return
    world.shout.frames_left -= 1
    if world.shout.frames_left <= 0:
        world.shout = None


def check_knockouts(world: World) -> Optional[Winner]:
    """
    Fighter dengan health <= 0 masuk KO sekali saja. Winner ditentukan oleh
    knockout pertama; return winner kalau step ini yang mengakhiri match.
    """
    ended = None
    for fighter, winner in ((world.player, Winner.ENEMY), (world.enemy, Winner.PLAYER)):
        if fighter.health <= 0 and not fighter.is_ko:
            fighter.health = 0
            fighter.vx = 0
            fighter.transition(ActionState.KO, timer=0)
            logger.info("K.O.! %s is down", fighter.name)
            if not world.is_game_over:
                world.is_game_over = True
                world.winner = winner
                ended = winner
    return ended


def decide_on_time(world: World) -> Winner:
    """Waktu habis tanpa KO: health lebih tinggi menang, sama = draw"""
    if world.player.health > world.enemy.health:
        winner = Winner.PLAYER
    elif world.enemy.health > world.player.health:
        winner = Winner.ENEMY
    else:
        winner = Winner.DRAW
    world.is_game_over = True
    world.winner = winner
    return winner


def snapshot(world: World) -> MatchSnapshot:
    shout = None
    if world.shout is not None:
        shout = ShoutSnapshot(world.shout.text, world.shout.seat, world.shout.frames_left)

    return MatchSnapshot(
        fighter1=FighterSnapshot.from_fighter(world.player),
        fighter2=FighterSnapshot.from_fighter(world.enemy),
        time_remaining=world.time_remaining,
        particles=tuple(ParticleSnapshot.from_particle(p) for p in world.particles.particles),
        shout=shout,
        is_game_over=world.is_game_over,
        winner=world.winner,
        frame=world.frame,
        events=tuple(world.events),
        actions_started=tuple(world.actions_started),
    )
