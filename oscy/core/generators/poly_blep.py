# oscy/core/generators/poly_blep.py
"""
Contains the bandlimited oscillator that applies polyBLEP corrections at
waveform discontinuities.
"""
from oscy.core import audio_math
from oscy.core.generators.base import OscillatorBase


class PolyBlepOscillator(OscillatorBase):
    """
    Generates periodic waveforms with polynomial bandlimited step correction.

    Samples that fall within one phase increment of a step discontinuity
    (the saw reset, both square edges) are smoothed with a two-sample
    polynomial residual. Sine and triangle have no step and come out the
    same as from NaiveOscillator.

    Corrected saw and square samples are not clamped.
    """

    def poly_blep(self, phase: float) -> float:
        """
        Computes the polyBLEP correction at a phase using this oscillator's
        current phase increment.

        Args:
            phase: The phase at which to evaluate the correction.

        Returns:
            The correction value; 0.0 outside the window around phase 0.
        """
        return audio_math.poly_blep(phase, self._phase_increment)

    def _render(self, phase: float) -> float:
        return audio_math.bandlimited_sample(
            self._waveform, phase, self._phase_increment)
