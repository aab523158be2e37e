"""
Match Controller
================
Fixed-timestep accumulator loop, round countdown pakai wall clock,
KO -> delayed game over, dan lifecycle (start round / rematch).
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from rkena_mma.config import (
    Winner, BalanceConfig, AIConfig, DEFAULT_BALANCE, DEFAULT_AI,
    FIXED_TIME_STEP_MS, MAX_ACCUMULATOR_MS, ROUND_DURATION, KO_DELAY_MS,
)
from rkena_mma.combat.events import ActionStarted, CombatEvent
from rkena_mma.core.scheduler import Scheduler
from rkena_mma.core.snapshot import MatchSnapshot
from rkena_mma.core.world import World, create_world, step, snapshot, decide_on_time
from rkena_mma.fighters.fighter import InputState

logger = logging.getLogger(__name__)


class MatchController:
    """
    Pemilik tunggal World untuk satu match.
    Host memanggil frame(dt_ms, input) sekali per rendered frame.
    """

    def __init__(self, seed: Optional[int] = None,
                 balance: BalanceConfig = DEFAULT_BALANCE,
                 ai_config: AIConfig = DEFAULT_AI,
                 round_duration: int = ROUND_DURATION,
                 ko_delay_ms: float = KO_DELAY_MS,
                 step_ms: float = FIXED_TIME_STEP_MS,
                 max_accumulator_ms: float = MAX_ACCUMULATOR_MS):
        self.seed = seed
        self.balance = balance
        self.ai_config = ai_config
        self.round_duration = round_duration
        self.ko_delay_ms = ko_delay_ms
        self.step_ms = step_ms
        self.max_accumulator_ms = max_accumulator_ms

        self.scheduler = Scheduler()
        self.world: Optional[World] = None
        self.accumulator = 0.0
        self._second_ms = 0.0
        self._game_over_scheduled = False
        self._game_over_fired = False

        self._snapshot_listeners: List[Callable[[MatchSnapshot], None]] = []
        self._game_over_listeners: List[Callable[[Winner], None]] = []

        self.matches_played = 0

    # =========================================================================
    # OBSERVERS
    # =========================================================================

    def on_snapshot(self, callback: Callable[[MatchSnapshot], None]):
        """Callback dipanggil setiap frame dengan snapshot terbaru"""
        self._snapshot_listeners.append(callback)

    def on_game_over(self, callback: Callable[[Winner], None]):
        """Callback dipanggil sekali per match dengan winner"""
        self._game_over_listeners.append(callback)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start_round(self, seed: Optional[int] = None) -> MatchSnapshot:
        """Fighter fresh, timer/particles/game-over di-reset"""
        # Pending game over dari match sebelumnya tidak boleh ikut
        self.scheduler.clear()

        if seed is None:
            seed = self.seed
        self.world = create_world(seed, self.balance, self.ai_config, self.round_duration)
        self.accumulator = 0.0
        self._second_ms = 0.0
        self._game_over_scheduled = False
        self._game_over_fired = False
        self.matches_played += 1

        logger.info("Round start: %s vs %s (%ds, seed=%s)",
                    self.world.player.name, self.world.enemy.name,
                    self.round_duration, seed)
        return snapshot(self.world)

    def rematch(self) -> MatchSnapshot:
        seed = None if self.seed is None else self.seed + self.matches_played
        return self.start_round(seed)

    @property
    def is_running(self) -> bool:
        return self.world is not None and not self._game_over_fired

    # =========================================================================
    # FRAME LOOP
    # =========================================================================

    def frame(self, dt_ms: float, human_input: InputState) -> MatchSnapshot:
        """
        Satu rendered frame: jalankan fixed steps sebanyak isi accumulator,
        update round clock, jalankan deferred callbacks, publish snapshot.
        """
        if self.world is None:
            raise RuntimeError("start_round() must be called before frame()")

        world = self.world
        dt_ms = max(0.0, dt_ms)

        self.accumulator += dt_ms
        if self.accumulator > self.max_accumulator_ms:
            self.accumulator = self.max_accumulator_ms

        events: List[CombatEvent] = []
        started: List[ActionStarted] = []

        while self.accumulator >= self.step_ms:
            was_over = world.is_game_over
            step(world, human_input)
            events.extend(world.events)
            started.extend(world.actions_started)

            if world.is_game_over and not was_over:
                self._schedule_game_over(world.winner, self.ko_delay_ms)

            self.accumulator -= self.step_ms

        self._tick_clock(dt_ms)
        self.scheduler.advance(dt_ms)

        snap = replace(snapshot(world), events=tuple(events), actions_started=tuple(started))
        for listener in self._snapshot_listeners:
            listener(snap)
        return snap

    def _tick_clock(self, dt_ms: float):
        """Round countdown per detik wall clock, lepas dari fixed steps"""
        world = self.world
        if world.is_game_over:
            return

        self._second_ms += dt_ms
        while self._second_ms >= 1000.0 and world.time_remaining > 0:
            self._second_ms -= 1000.0
            world.time_remaining -= 1

        if world.time_remaining <= 0:
            winner = decide_on_time(world)
            logger.info("Time up! Decision: %s", winner.name)
            self._schedule_game_over(winner, 0)

    def _schedule_game_over(self, winner: Winner, delay_ms: float):
        if self._game_over_scheduled:
            return
        self._game_over_scheduled = True
        logger.info("Match over, %s wins; game over in %.0fms", winner.name, delay_ms)
        self.scheduler.call_later(delay_ms, lambda: self._fire_game_over(winner))

    def _fire_game_over(self, winner: Winner):
        if self._game_over_fired:
            return
        self._game_over_fired = True
        logger.info("Game over: %s", winner.name)
        for listener in self._game_over_listeners:
            listener(winner)
