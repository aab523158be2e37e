"""
Audio System Module
"""

from rkena_mma.audio.sound_manager import SoundManager
from rkena_mma.audio.generator import ProceduralSFX, SoundGenerator

__all__ = ['SoundManager', 'ProceduralSFX', 'SoundGenerator']
