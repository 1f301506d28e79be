# oscy/core/generators/base.py
"""
Defines the abstract base classes for all signal generators.
"""
import logging
from abc import ABC, abstractmethod
from typing import MutableSequence, Union

import numpy as np

from oscy.core.audio_math import advance_phase, fractional_part
from oscy.core.waveforms import Waveform


class SampleGenerator(ABC):
    """
    An abstract, stateful source of one sample per call.

    Subclasses implement `next_sample`. Buffer filling and the iterator
    protocol are derived from it and add no state of their own.
    """

    @abstractmethod
    def next_sample(self) -> float:
        """Advances the generator's state and returns the next sample."""
        raise NotImplementedError

    def fill(self, buffer: MutableSequence[float]) -> MutableSequence[float]:
        """
        Overwrites every slot of a caller-provided buffer, in order, with
        consecutive samples.

        Args:
            buffer: A list, NumPy array or other mutable sequence.

        Returns:
            The same buffer, for chaining.
        """
        for i in range(len(buffer)):
            buffer[i] = self.next_sample()
        return buffer

    def generate_samples(self, num_samples: int) -> np.ndarray:
        """
        Generates a block of consecutive samples.

        Args:
            num_samples: The number of samples to generate.

        Returns:
            A new float32 NumPy array of length num_samples.
        """
        block = np.zeros(max(int(num_samples), 0), dtype=np.float32)
        self.fill(block)
        return block

    def __iter__(self):
        return self

    def __next__(self) -> float:
        # Infinite stream; bound it with itertools.islice.
        return self.next_sample()


class OscillatorBase(SampleGenerator):
    """
    An abstract base class for a periodic oscillator.

    This class owns the phase-accumulation logic shared by every oscillator:
    frequency and phase updates, reset, and the advance-then-wrap step done
    once per sample. Subclasses only map the new phase to an amplitude via
    `_render`.

    The phase is wrapped by a single subtraction, so the oscillator is only
    well-behaved while frequency < sample_rate. This is not enforced; a
    warning is logged when the increment reaches a full cycle.
    """
    def __init__(self, sample_rate: float, frequency: float,
                 waveform: Union[Waveform, str]):
        """
        Initializes the oscillator with phase 0.

        Args:
            sample_rate: The sample rate in Hz. Fixed for the instance.
            frequency: The initial frequency in Hz.
            waveform: A Waveform, or its config name (e.g. 'saw').
        """
        self._sample_rate = float(sample_rate)
        self._waveform = Waveform.from_name(waveform)
        self._phase: float = 0.0
        self._phase_increment: float = 0.0
        self.set_frequency(frequency)

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def waveform(self) -> Waveform:
        return self._waveform

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def phase_increment(self) -> float:
        return self._phase_increment

    @property
    def frequency(self) -> float:
        """The current frequency in Hz, derived from the phase increment."""
        return self._phase_increment * self._sample_rate

    def set_frequency(self, hz: float):
        """
        Sets the oscillator frequency. Any value is accepted; negative
        frequencies run the phase backward.
        """
        self._phase_increment = hz / self._sample_rate
        if abs(self._phase_increment) >= 1.0:
            logging.warning(
                "Oscillator frequency %.1f Hz is not below the sample rate "
                "%.1f Hz; phase wraparound will be incorrect.",
                hz, self._sample_rate)

    def set_phase(self, phase: float):
        """
        Sets the current phase to the fractional part of the given value.

        The fractional part truncates toward zero, so negative input keeps
        its sign: set_phase(-0.25) leaves the phase at -0.25.
        """
        self._phase = fractional_part(phase)

    def reset(self):
        """Returns the phase to 0. The frequency is left unchanged."""
        self._phase = 0.0

    def next_sample(self) -> float:
        self._phase = advance_phase(self._phase, self._phase_increment)
        return self._render(self._phase)

    @abstractmethod
    def _render(self, phase: float) -> float:
        """
        Maps an already-advanced phase to a sample value.

        Args:
            phase: The oscillator phase for this sample.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(sample_rate={self._sample_rate!r}, "
                f"frequency={self.frequency!r}, waveform={self._waveform.value!r})")
