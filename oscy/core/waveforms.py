# oscy/core/waveforms.py
"""
Defines the closed sets of signal shapes the generators can produce.
"""
from enum import Enum
from typing import Union


class Waveform(Enum):
    """The four periodic waveform shapes. Fixed for the life of an oscillator."""
    SINE = 'sine'
    SAW = 'saw'
    SQUARE = 'square'
    TRIANGLE = 'triangle'

    @classmethod
    def from_name(cls, name: Union[str, 'Waveform']) -> 'Waveform':
        """
        Parses a config name into a Waveform.

        Names are case-insensitive, and 'sawtooth' is accepted for SAW.

        Raises:
            ValueError: If the name is not a known periodic waveform.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key == 'sawtooth':
            key = 'saw'
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown waveform: {name!r}") from None


class NoiseType(Enum):
    """The three noise colours."""
    WHITE = 'white'
    PINK = 'pink'
    BROWN = 'brown'

    @classmethod
    def from_name(cls, name: Union[str, 'NoiseType']) -> 'NoiseType':
        """
        Parses 'white', 'pink', 'brown' or their '_noise' suffixed forms.

        Raises:
            ValueError: If the name is not a known noise type.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key.endswith('_noise'):
            key = key[:-len('_noise')]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown noise type: {name!r}") from None
