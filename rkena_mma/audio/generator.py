"""
Sound Generator
===============
Procedural sound effects untuk fight: hit, heavy hit, block, whoosh,
takedown, slam, KO. Tidak perlu file audio eksternal.
"""

import pygame
import numpy as np
from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum

from rkena_mma.config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    """Jenis gelombang untuk sound synthesis"""
    SINE = "sine"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass
class SoundParams:
    """Satu layer: oscillator/noise + filter + gain ramp"""
    wave_type: WaveType = WaveType.SINE
    frequency: float = 440.0
    frequency_end: Optional[float] = None  # Pitch ramp
    duration: float = 0.2
    volume: float = 0.5
    volume_end: float = 0.01
    ramp_time: float = 0.1          # Durasi ramp gain/pitch
    exponential: bool = True        # Exponential vs linear ramp
    lowpass: Optional[float] = None  # Cutoff Hz
    bandpass: Optional[float] = None  # Center Hz


class SoundGenerator:
    """
    Generator untuk procedural sound effects.
    render() murni numpy, make_sound() baru menyentuh pygame.mixer.
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE, seed: Optional[int] = None):
        self.sample_rate = sample_rate
        self._rng = np.random.default_rng(seed)

    def render(self, params: SoundParams) -> np.ndarray:
        """Generate float32 samples di range [-1, 1]"""
        num_samples = max(1, int(params.duration * self.sample_rate))
        t = np.arange(num_samples, dtype=np.float32) / self.sample_rate

        if params.wave_type == WaveType.NOISE:
            samples = self._rng.uniform(-1, 1, num_samples).astype(np.float32)
        else:
            freq = self._ramp(params.frequency, params.frequency_end or params.frequency,
                              t, params.ramp_time, params.exponential)
            phase = np.cumsum(freq / self.sample_rate) * 2 * np.pi
            samples = self._generate_wave(phase, params.wave_type)

        if params.lowpass is not None:
            samples = self._filter(samples, 0.0, params.lowpass)
        if params.bandpass is not None:
            samples = self._filter(samples, params.bandpass * 0.5, params.bandpass * 2.0)

        gain = self._ramp(params.volume, params.volume_end, t, params.ramp_time, params.exponential)
        # Gain nol setelah ramp selesai
        gain = np.where(t > params.ramp_time, 0.0, gain)
        return np.clip(samples * gain, -1, 1).astype(np.float32)

    def mix(self, layers: List[SoundParams]) -> np.ndarray:
        rendered = [self.render(p) for p in layers]
        length = max(len(r) for r in rendered)
        out = np.zeros(length, dtype=np.float32)
        for r in rendered:
            out[:len(r)] += r
        return np.clip(out, -1, 1)

    @staticmethod
    def _ramp(start: float, end: float, t: np.ndarray, ramp_time: float,
              exponential: bool) -> np.ndarray:
        progress = np.clip(t / max(ramp_time, 1e-6), 0, 1)
        if exponential and start > 0 and end > 0:
            return start * np.power(end / start, progress)
        return start + (end - start) * progress

    @staticmethod
    def _generate_wave(phase: np.ndarray, wave_type: WaveType) -> np.ndarray:
        if wave_type == WaveType.SINE:
            return np.sin(phase)
        elif wave_type == WaveType.SAWTOOTH:
            return 2 * (phase / (2 * np.pi) % 1) - 1
        elif wave_type == WaveType.TRIANGLE:
            return 2 * np.abs(2 * (phase / (2 * np.pi) % 1) - 1) - 1
        return np.zeros_like(phase)

    def _filter(self, samples: np.ndarray, low_hz: float, high_hz: float) -> np.ndarray:
        """Brickwall band filter lewat FFT"""
        spectrum = np.fft.rfft(samples)
        freqs = np.fft.rfftfreq(len(samples), 1.0 / self.sample_rate)
        spectrum[(freqs < low_hz) | (freqs > high_hz)] = 0
        filtered = np.fft.irfft(spectrum, n=len(samples))
        peak = np.max(np.abs(filtered))
        if peak > 0:
            filtered = filtered / peak
        return filtered.astype(np.float32)

    @staticmethod
    def to_pcm(samples: np.ndarray, channels: int = AUDIO_CHANNELS) -> np.ndarray:
        """Float -> int16, stereo kalau perlu"""
        pcm = (samples * 32767).astype(np.int16)
        if channels == 2:
            return np.ascontiguousarray(np.column_stack((pcm, pcm)))
        return pcm

    def make_sound(self, layers: List[SoundParams]) -> pygame.mixer.Sound:
        # Mixer bisa saja dibuka dengan jumlah channel lain
        mixer_init = pygame.mixer.get_init()
        channels = mixer_init[2] if mixer_init else AUDIO_CHANNELS
        return pygame.sndarray.make_sound(self.to_pcm(self.mix(layers), channels))


# Layer definitions per cue
SFX_LAYERS: Dict[str, List[SoundParams]] = {
    'hit': [
        SoundParams(WaveType.NOISE, duration=0.2, volume=0.5, ramp_time=0.1, lowpass=1000),
        SoundParams(WaveType.TRIANGLE, 200, 50, duration=0.1, volume=0.3, ramp_time=0.1),
    ],
    'hit_heavy': [
        SoundParams(WaveType.NOISE, duration=0.2, volume=0.8, ramp_time=0.2, lowpass=800),
        SoundParams(WaveType.TRIANGLE, 150, 50, duration=0.1, volume=0.3, ramp_time=0.1),
    ],
    'block': [
        SoundParams(WaveType.NOISE, duration=0.1, volume=0.4, ramp_time=0.05, bandpass=400),
    ],
    'whoosh': [
        SoundParams(WaveType.NOISE, duration=0.15, volume=0.1, ramp_time=0.1,
                    exponential=False, lowpass=350),
    ],
    'takedown': [
        SoundParams(WaveType.SAWTOOTH, 100, 10, duration=0.4, volume=0.3, ramp_time=0.3,
                    lowpass=300),
    ],
    'slam': [
        SoundParams(WaveType.NOISE, duration=0.5, volume=0.8, ramp_time=0.4, lowpass=300),
        SoundParams(WaveType.SINE, 80, 20, duration=0.5, volume=0.5, ramp_time=0.4),
    ],
}
SFX_LAYERS['ko'] = [
    SoundParams(WaveType.TRIANGLE, 150, 20, duration=1.5, volume=0.5, ramp_time=1.5,
                exponential=False),
] + SFX_LAYERS['slam']


class ProceduralSFX:
    """
    Pre-generated sound effects, sekali di awal.
    """

    def __init__(self, generator: Optional[SoundGenerator] = None):
        self.generator = generator or SoundGenerator()
        self._sounds: Dict[str, pygame.mixer.Sound] = {
            name: self.generator.make_sound(layers) for name, layers in SFX_LAYERS.items()
        }

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        """Get sound by name"""
        return self._sounds.get(name)
