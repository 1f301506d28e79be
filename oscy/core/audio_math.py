# oscy/core/audio_math.py
"""
Contains pure, stateless mathematical helper functions for phase
accumulation, naive waveform mapping, and polyBLEP anti-aliasing.

Every function here works on one sample at a time. The oscillator classes in
`oscy.core.generators` hold the state and call into these.
"""
import math

from oscy.core.waveforms import Waveform

TAU = 2.0 * math.pi


def fractional_part(value: float) -> float:
    """
    Returns the fractional part of a value, truncating toward zero.

    The sign follows the input: fractional_part(1.25) is 0.25 and
    fractional_part(-1.75) is -0.75.
    """
    return math.modf(value)[0]


def advance_phase(phase: float, phase_increment: float) -> float:
    """
    Advances a normalized phase by one sample and wraps it back into [0, 1).

    Only a single subtraction of 1.0 is applied, so the result is in range
    only while phase_increment < 1.0. Larger increments are not wrapped
    further, and negative increments never wrap.

    Args:
        phase: The current phase.
        phase_increment: The per-sample increment (frequency / sample rate).

    Returns:
        The new phase.
    """
    phase += phase_increment
    if phase >= 1.0:
        phase -= 1.0
    return phase


def naive_sample(waveform: Waveform, phase: float) -> float:
    """
    Maps a phase to an amplitude with the direct closed-form formulas.

    Args:
        waveform: The waveform shape.
        phase: The normalized phase, nominally in [0, 1).

    Returns:
        The sample value. In [-1, 1] for any phase in [0, 1).
    """
    if waveform is Waveform.SINE:
        return math.sin(phase * TAU)
    if waveform is Waveform.SAW:
        return 2.0 * phase - 1.0
    if waveform is Waveform.SQUARE:
        return 1.0 if phase < 0.5 else -1.0
    if waveform is Waveform.TRIANGLE:
        if phase < 0.5:
            return 4.0 * phase - 1.0
        return -4.0 * phase + 3.0
    raise ValueError(f"Unknown waveform: {waveform!r}")


def poly_blep(phase: float, phase_increment: float) -> float:
    """
    Computes the polyBLEP residual for a unit step at phase 0.

    The correction is non-zero only within one phase increment of the
    discontinuity and integrates to zero over that window, so the average
    value of the corrected waveform is unchanged. Both comparisons are
    strict: a phase exactly equal to phase_increment or to
    1 - phase_increment yields 0.0.

    Args:
        phase: The phase at which to evaluate the correction.
        phase_increment: The per-sample phase increment.

    Returns:
        The correction, in [-1, 1].
    """
    if phase_increment == 0.0:
        return 0.0

    # just after the discontinuity
    if phase < phase_increment:
        t = phase / phase_increment
        return 2.0 * t - t * t - 1.0

    # just before the discontinuity
    if phase > 1.0 - phase_increment:
        t = (phase - 1.0) / phase_increment
        return t * t + 2.0 * t + 1.0

    return 0.0


def bandlimited_sample(waveform: Waveform, phase: float,
                       phase_increment: float) -> float:
    """
    Maps a phase to an amplitude, smoothing step discontinuities.

    Saw has one step (at phase 0) and square has two (at 0 and 0.5); each
    step gets its own polyBLEP term. Sine has no discontinuity and triangle
    only has slope discontinuities, so both use the naive mapping.

    Args:
        waveform: The waveform shape.
        phase: The normalized phase, nominally in [0, 1).
        phase_increment: The per-sample phase increment.

    Returns:
        The corrected sample value. Not clamped.
    """
    naive = naive_sample(waveform, phase)
    if waveform is Waveform.SAW:
        return naive - poly_blep(phase, phase_increment)
    if waveform is Waveform.SQUARE:
        shifted = fractional_part(phase + 0.5)
        return (naive + poly_blep(phase, phase_increment)
                - poly_blep(shifted, phase_increment))
    return naive


def white_from_uniform(uniform_value: float) -> float:
    """Remaps a uniform draw in [0, 1) to [-1, 1)."""
    return uniform_value * 2.0 - 1.0
