# oscy/core/generators/__init__.py
"""
This package contains the individual signal generator classes.

Each generator produces one sample per call. Oscillators share their phase
handling through OscillatorBase; noise generators are independent of phase.
"""
