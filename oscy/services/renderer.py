# oscy/services/renderer.py
"""
Contains functions for rendering a configured generator offline into a
sample array and writing it to a WAV file.
"""
import logging
import random

import numpy as np
from scipy.io import wavfile

from oscy.config.constants import MAX_BUFFER_SIZE
from oscy.core.audio_engine import create_generator


def render(settings: dict) -> np.ndarray:
    """
    Renders the configured wave for the configured duration.

    Samples are produced in blocks of at most MAX_BUFFER_SIZE, in the same
    way a host audio callback would pull them.

    Args:
        settings: A validated settings dictionary (see ConfigurationManager).

    Returns:
        A float32 NumPy array of round(duration_s * sample_rate) samples,
        scaled by the configured amplitude.
    """
    sample_rate = settings['sample_rate']
    num_samples = int(round(settings['duration_s'] * sample_rate))

    random_source = None
    if settings.get('seed') is not None:
        random_source = random.Random(settings['seed']).random

    generator = create_generator(settings['wave'], sample_rate, random_source)
    output = np.zeros(num_samples, dtype=np.float32)

    for start in range(0, num_samples, MAX_BUFFER_SIZE):
        block = output[start:start + MAX_BUFFER_SIZE]
        generator.fill(block)

    output *= settings['amplitude']
    logging.info("Rendered %d samples of '%s' at %s Hz",
                 num_samples, settings['wave']['type'], sample_rate)
    return output


def write_wav(filepath: str, samples: np.ndarray, sample_rate: float):
    """
    Writes mono samples to a 32-bit float WAV file.

    Args:
        filepath: The destination path.
        samples: The samples to write.
        sample_rate: The sample rate in Hz; rounded to an integer for the
                     WAV header.
    """
    wavfile.write(filepath, int(round(sample_rate)),
                  np.asarray(samples, dtype=np.float32))
    logging.info("Wrote %s", filepath)


def describe_levels(samples: np.ndarray) -> tuple[float, float]:
    """
    Returns the (peak, rms) level of a block of samples, or (0.0, 0.0) for
    an empty block.
    """
    if len(samples) == 0:
        return 0.0, 0.0
    peak = float(np.max(np.abs(samples)))
    rms = float(np.sqrt(np.mean(np.square(samples, dtype=np.float64))))
    return peak, rms
