"""
AI Controller
=============
Lawan scripted: finite-state, weighted random, dengan sticky movement
supaya gerakan tidak kedip-kedip tiap frame.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from rkena_mma.config import ActionState, AIConfig, DEFAULT_AI
from rkena_mma.fighters.fighter import Fighter, InputState

logger = logging.getLogger(__name__)


@dataclass
class AIMovementMemory:
    """Arah yang sedang di-commit (-1, 0, 1) dan sisa frame-nya"""
    direction: int = 0
    timer: int = 0

    def commit(self, direction: int, frames: int):
        self.direction = direction
        self.timer = frames

    def clear(self):
        self.direction = 0
        self.timer = 0


class AIController:
    """
    Controller untuk fighter AI.
    Semua randomness lewat satu self.rng yang bisa di-seed untuk replay.
    """

    def __init__(self, config: AIConfig = DEFAULT_AI, seed: Optional[int] = None):
        self.config = config
        self.rng = random.Random(seed)
        self.memory = AIMovementMemory()
        self.last_reason = ""

    def decide(self, ai: Fighter, player: Fighter) -> InputState:
        """Synthesize input untuk satu tick"""
        controls = InputState()
        cfg = self.config

        # Tidak bisa apa-apa saat KO atau masih dalam action/recovery
        if ai.is_ko or ai.state_timer > 0:
            return controls

        dist = ai.distance_to(player)
        attack_range = ai.width * cfg.attack_range_ratio
        facing = ai.is_facing(player)

        # Sprawl reaction
        if (player.state == ActionState.TAKEDOWN
                and dist < attack_range + cfg.sprawl_extra_range
                and facing):
            if self.rng.random() < cfg.sprawl_chance:
                controls.block = True
                self._log("sprawl counter")
                return controls

        # Sticky movement
        if self.memory.timer > 0:
            self.memory.timer -= 1
            self._press(controls, self.memory.direction)
            return controls

        # Decision gate
        if self.rng.random() > cfg.decision_chance:
            return controls

        toward = 1 if player.x > ai.x else -1

        if dist > attack_range + cfg.approach_buffer:
            self._approach(ai, controls, toward)
        elif dist < attack_range and facing:
            self._attack(ai, controls, dist)
        else:
            # Reposition, mundur untuk cari angle
            frames = cfg.reposition_frames_min + int(self.rng.random() * cfg.reposition_frames_spread)
            self.memory.commit(-toward, frames)
            self._press(controls, -toward)
            self._log(f"reposition {frames}f")

        return controls

    def _approach(self, ai: Fighter, controls: InputState, toward: int):
        cfg = self.config
        frames = cfg.approach_frames_min + int(self.rng.random() * cfg.approach_frames_spread)
        self.memory.commit(toward, frames)
        self._press(controls, toward)

        if (self.rng.random() < cfg.approach_takedown_chance
                and ai.stamina > cfg.approach_takedown_stamina):
            controls.takedown = True
            self._log("shoot from range")
        else:
            self._log(f"approach {frames}f")

    def _attack(self, ai: Fighter, controls: InputState, dist: float):
        """Weighted choice dengan cumulative bands, tiap band di-gate stamina"""
        cfg = self.config
        self.memory.clear()

        roll = self.rng.random()
        if roll < cfg.punch_band and ai.stamina > cfg.punch_stamina:
            controls.punch = True
        elif roll < cfg.kick_band and ai.stamina > cfg.kick_stamina:
            controls.kick = True
        elif (roll < cfg.takedown_band and ai.stamina > cfg.takedown_stamina
              and dist > ai.width * cfg.takedown_min_distance_ratio):
            controls.takedown = True
        else:
            controls.block = True

        self._log(f"attack roll {roll:.2f}")

    @staticmethod
    def _press(controls: InputState, direction: int):
        if direction < 0:
            controls.left = True
        elif direction > 0:
            controls.right = True

    def _log(self, reason: str):
        self.last_reason = reason
        logger.debug("AI: %s", reason)
