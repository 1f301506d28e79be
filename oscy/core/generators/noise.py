# oscy/core/generators/noise.py
"""
Contains the signal generator for white, pink and brown noise.
"""
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from oscy.config.constants import (
    BROWN_LEAK, BROWN_OUTPUT_SCALE, BROWN_STEP, PINK_DECAYS, PINK_GAINS,
    PINK_OUTPUT_SCALE, PINK_WHITE_GAIN
)
from oscy.core.audio_math import white_from_uniform
from oscy.core.generators.base import SampleGenerator
from oscy.core.waveforms import NoiseType

RandomSource = Callable[[], float]


@dataclass
class _PinkState:
    """The six filter taps of the Kellet pink noise filter."""
    taps: List[float] = field(default_factory=lambda: [0.0] * len(PINK_DECAYS))


@dataclass
class _BrownState:
    """The leaky integrator's previous output."""
    prev: float = 0.0


class NoiseGenerator(SampleGenerator):
    """
    Generates white, pink or brown noise, one sample per call.

    Noise has no frequency or phase. Every call draws exactly one value from
    the random source, a zero-argument callable returning floats uniformly
    distributed in [0, 1). Filter state persists for the life of the
    instance; there is no reset.
    """
    def __init__(self, noise_type: Union[NoiseType, str] = NoiseType.WHITE,
                 random_source: Optional[RandomSource] = None):
        """
        Initializes the NoiseGenerator with zeroed filter state.

        Args:
            noise_type: A NoiseType, or its config name (e.g. 'pink_noise').
            random_source: The uniform [0, 1) source. Defaults to
                           random.random.
        """
        self._noise_type = NoiseType.from_name(noise_type)
        self._random_source: RandomSource = (
            random_source if random_source is not None else random.random)
        self._pink = _PinkState()
        self._brown = _BrownState()

    @classmethod
    def white(cls, random_source: Optional[RandomSource] = None) -> 'NoiseGenerator':
        """Equal energy at all frequencies; a bright hiss."""
        return cls(NoiseType.WHITE, random_source)

    @classmethod
    def pink(cls, random_source: Optional[RandomSource] = None) -> 'NoiseGenerator':
        """Power falling at 3 dB/octave, using Paul Kellet's economy filter."""
        return cls(NoiseType.PINK, random_source)

    @classmethod
    def brown(cls, random_source: Optional[RandomSource] = None) -> 'NoiseGenerator':
        """Power falling at 6 dB/octave; a deep rumble."""
        return cls(NoiseType.BROWN, random_source)

    @property
    def noise_type(self) -> NoiseType:
        return self._noise_type

    def next_sample(self) -> float:
        white = white_from_uniform(self._random_source())

        if self._noise_type is NoiseType.PINK:
            return self._next_pink(white)
        if self._noise_type is NoiseType.BROWN:
            return self._next_brown(white)
        return white

    def _next_pink(self, white: float) -> float:
        """Runs one white sample through the six single-pole filters."""
        taps = self._pink.taps
        for i, (decay, gain) in enumerate(zip(PINK_DECAYS, PINK_GAINS)):
            taps[i] = decay * taps[i] + white * gain
        return (sum(taps) + white * PINK_WHITE_GAIN) * PINK_OUTPUT_SCALE

    def _next_brown(self, white: float) -> float:
        """Integrates one white sample. The output is not clamped."""
        state = self._brown
        state.prev = (state.prev + BROWN_STEP * white) / BROWN_LEAK
        return state.prev * BROWN_OUTPUT_SCALE

    def __repr__(self) -> str:
        return f"NoiseGenerator({self._noise_type.value!r})"
