# oscy/core/generators/naive.py
"""
Contains the naive oscillator for the four periodic waveforms.
"""
from oscy.core.audio_math import naive_sample
from oscy.core.generators.base import OscillatorBase


class NaiveOscillator(OscillatorBase):
    """
    Generates periodic waveforms by direct computation, with no anti-aliasing.

    Cheap, and exact for sine. Saw and square alias audibly at higher
    frequencies because their steps are sampled as-is.

    Example:
        >>> osc = NaiveOscillator(100.0, 25.0, 'sine')
        >>> round(osc.next_sample(), 6)
        1.0
    """

    def _render(self, phase: float) -> float:
        return naive_sample(self._waveform, phase)
