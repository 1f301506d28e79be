# oscy/core/audio_engine.py
"""
Contains the generator factory that turns a wave configuration dictionary
into a concrete, stateful signal generator.
"""
import logging
from typing import Callable, Optional

from oscy.config.constants import (
    AUDIO_SAMPLE_RATE, DEFAULT_WAVE_SETTINGS, NOISE_TYPES, PERIODIC_TYPES
)
from oscy.core.generators.base import SampleGenerator


def create_generator(wave_config: dict,
                     sample_rate: float = AUDIO_SAMPLE_RATE,
                     random_source: Optional[Callable[[], float]] = None
                     ) -> SampleGenerator:
    """
    Factory function to instantiate the correct generator class.

    Periodic types give a PolyBlepOscillator when 'bandlimited' is set and a
    NaiveOscillator otherwise, with the configured starting 'phase' applied.
    Noise types give a NoiseGenerator fed by random_source.

    Args:
        wave_config: The dictionary defining the generator's settings.
        sample_rate: The audio sample rate in Hz.
        random_source: A uniform [0, 1) source for noise generators.

    Returns:
        The new generator.

    Raises:
        ValueError: If the 'type' is not a known periodic or noise type, or
                    'frequency' or 'phase' is not numeric.
    """
    from oscy.core.generators.naive import NaiveOscillator
    from oscy.core.generators.noise import NoiseGenerator
    from oscy.core.generators.poly_blep import PolyBlepOscillator

    wave_type = str(wave_config.get('type', DEFAULT_WAVE_SETTINGS['type'])).lower()

    if wave_type in NOISE_TYPES:
        logging.debug("Creating %s noise generator", wave_type)
        return NoiseGenerator(wave_type, random_source)

    if wave_type not in PERIODIC_TYPES:
        raise ValueError(f"Unknown generator type: {wave_type!r}")

    bandlimited = bool(wave_config.get(
        'bandlimited', DEFAULT_WAVE_SETTINGS['bandlimited']))
    generator_class = PolyBlepOscillator if bandlimited else NaiveOscillator
    frequency = _float_setting(wave_config, 'frequency')

    oscillator = generator_class(sample_rate, frequency, wave_type)
    oscillator.set_phase(_float_setting(wave_config, 'phase'))
    logging.debug("Created %r", oscillator)
    return oscillator


def _float_setting(wave_config: dict, key: str) -> float:
    """Reads a numeric wave setting, raising ValueError if it is not one."""
    value = wave_config.get(key, DEFAULT_WAVE_SETTINGS[key])
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid wave {key}: {value!r}") from None
