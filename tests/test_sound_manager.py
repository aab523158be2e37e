"""
Tests untuk sound manager: cue mapping dan status log (tanpa membuka mixer)
"""

import logging

import pytest

pygame = pytest.importorskip("pygame")

from rkena_mma.audio import sound_manager
from rkena_mma.audio.sound_manager import SoundManager, cues_for
from rkena_mma.core.world import create_world, step
from rkena_mma.fighters.fighter import InputState


class IdleAI:
    def decide(self, ai, player):
        return InputState()


def test_punch_that_lands_whooshes_then_hits():
    world = create_world(seed=1)
    world.ai = IdleAI()
    world.enemy.x = 200

    snap = step(world, InputState(punch=True))

    assert cues_for(snap, set()) == ['whoosh', 'hit']


def test_ko_cue_plays_once_per_fighter():
    world = create_world(seed=1)
    world.ai = IdleAI()
    world.enemy.health = 0
    knocked_out = set()

    assert cues_for(step(world, InputState()), knocked_out) == ['ko']
    assert cues_for(step(world, InputState()), knocked_out) == []


def test_toggle_mute_is_logged(caplog):
    manager = SoundManager(enabled=False)

    with caplog.at_level(logging.INFO, logger=sound_manager.__name__):
        assert manager.toggle_mute()
        assert not manager.toggle_mute()

    assert [r.getMessage() for r in caplog.records] == ["Audio muted", "Audio unmuted"]


def test_mixer_failure_is_logged_and_disables_audio(monkeypatch, caplog):
    def broken_init(**kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
    monkeypatch.setattr(pygame.mixer, "init", broken_init)

    with caplog.at_level(logging.WARNING, logger=sound_manager.__name__):
        manager = SoundManager(enabled=True)

    assert not manager.enabled
    assert not manager.initialized
    assert "no audio device" in caplog.text
    assert manager.play('hit') is None
