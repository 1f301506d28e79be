# oscy/__init__.py
"""
Per-sample audio signal generators: naive and polyBLEP bandlimited
oscillators for sine, saw, square and triangle, plus white, pink and brown
noise.
"""
from oscy.core.audio_engine import create_generator
from oscy.core.generators.base import OscillatorBase, SampleGenerator
from oscy.core.generators.naive import NaiveOscillator
from oscy.core.generators.noise import NoiseGenerator
from oscy.core.generators.poly_blep import PolyBlepOscillator
from oscy.core.waveforms import NoiseType, Waveform

__all__ = [
    'NaiveOscillator', 'NoiseGenerator', 'NoiseType', 'OscillatorBase',
    'PolyBlepOscillator', 'SampleGenerator', 'Waveform', 'create_generator',
]
