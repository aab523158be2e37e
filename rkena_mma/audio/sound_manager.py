"""
Sound Manager
=============
Mengelola audio dalam game: mixer init, volume, mute, dan mapping
snapshot events ke sound cues.
"""

import logging

import pygame
from typing import List, Optional, Set

from rkena_mma.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, MASTER_VOLUME, SFX_VOLUME,
    ActionState, CombatEventType,
)
from rkena_mma.audio.generator import ProceduralSFX
from rkena_mma.core.snapshot import MatchSnapshot

logger = logging.getLogger(__name__)


def cues_for(snapshot: MatchSnapshot, knocked_out: Set[bool]) -> List[str]:
    """
    Sound cue untuk semua yang terjadi di snapshot ini.
    knocked_out berisi is_player dari fighter yang sudah KO (di-update di sini).
    """
    cues: List[str] = []

    for started in snapshot.actions_started:
        if started.action == ActionState.TAKEDOWN:
            cues.append('takedown')
        elif started.action in (ActionState.PUNCH, ActionState.KICK):
            cues.append('whoosh')

    for event in snapshot.events:
        if event.type == CombatEventType.HIT:
            cues.append('hit_heavy' if event.action == ActionState.KICK else 'hit')
        elif event.type in (CombatEventType.BLOCKED, CombatEventType.SPRAWL,
                            CombatEventType.CLASH):
            cues.append('block')
        elif event.type == CombatEventType.TAKEDOWN:
            cues.append('slam')

    for fighter in (snapshot.fighter1, snapshot.fighter2):
        if fighter.state == ActionState.KO and fighter.is_player not in knocked_out:
            knocked_out.add(fighter.is_player)
            cues.append('ko')

    return cues


class SoundManager:
    """
    Manager untuk semua audio dalam game.
    Kalau mixer gagal init, semua play() jadi no-op.
    """

    def __init__(self, enabled: bool = AUDIO_ENABLED):
        self.enabled = enabled
        self.initialized = False
        self.muted = False

        self.master_volume = MASTER_VOLUME
        self.sfx_volume = SFX_VOLUME

        self._sfx: Optional[ProceduralSFX] = None
        self._knocked_out: Set[bool] = set()

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        """Initialize pygame audio"""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(
                    frequency=AUDIO_SAMPLE_RATE,
                    size=-16,
                    channels=AUDIO_CHANNELS,
                    buffer=AUDIO_BUFFER_SIZE
                )
            pygame.mixer.set_num_channels(16)

            self._sfx = ProceduralSFX()
            self.initialized = True
            logger.info("Sound manager initialized")

        except pygame.error as e:
            logger.warning("Audio disabled, mixer failed to initialize: %s", e)
            self.enabled = False
            self.initialized = False

    def play(self, sound_name: str, volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect by name"""
        if not self.initialized or self.muted:
            return None

        sound = self._sfx.get(sound_name)
        if sound is None:
            return None

        sound.set_volume(max(0.0, min(1.0, self.master_volume * self.sfx_volume * volume)))
        return sound.play()

    def handle_snapshot(self, snapshot: MatchSnapshot):
        """Play semua cue dari satu frame"""
        for cue in cues_for(snapshot, self._knocked_out):
            self.play(cue)

    def reset(self):
        """Match baru"""
        self._knocked_out.clear()

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted and self.initialized:
            pygame.mixer.stop()
        logger.info("Audio %s", "muted" if self.muted else "unmuted")
        return self.muted

    def cleanup(self):
        """Cleanup audio resources"""
        if self.initialized:
            pygame.mixer.stop()
            pygame.mixer.quit()
            self.initialized = False
