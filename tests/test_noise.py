# tests/test_noise.py
import itertools
import random

import numpy as np
import pytest
from scipy import signal as scipy_signal

from oscy.core.generators.noise import NoiseGenerator
from oscy.core.waveforms import NoiseType

# uniform draws mapping to white values 1.0, 0.0, -1.0, 0.5, -0.5
UNIFORM_SEQUENCE = [1.0, 0.5, 0.0, 0.75, 0.25]


def test_constructors_select_noise_type():
    assert NoiseGenerator.white().noise_type is NoiseType.WHITE
    assert NoiseGenerator.pink().noise_type is NoiseType.PINK
    assert NoiseGenerator.brown().noise_type is NoiseType.BROWN
    assert NoiseGenerator('pink_noise').noise_type is NoiseType.PINK
    assert NoiseGenerator().noise_type is NoiseType.WHITE


def test_unknown_noise_type_rejected():
    with pytest.raises(ValueError):
        NoiseGenerator('blue')


def test_white_remaps_uniform_source(scripted_source):
    noise = NoiseGenerator.white(scripted_source([0.0, 0.5, 0.75, 0.25]))
    assert [noise.next_sample() for _ in range(4)] == [-1.0, 0.0, 0.5, -0.5]


def test_pink_from_zero_taps_is_deterministic(scripted_source):
    noise = NoiseGenerator.pink(scripted_source(UNIFORM_SEQUENCE))
    samples = [noise.next_sample() for _ in range(5)]
    assert samples == pytest.approx([
        0.181190416000000,
        0.093955464876020,
        -0.108759291471201,
        0.059012506170358,
        -0.063016178590300,
    ], rel=1e-12)


def test_brown_from_zero_state_is_deterministic(scripted_source):
    noise = NoiseGenerator.brown(scripted_source(UNIFORM_SEQUENCE))
    samples = [noise.next_sample() for _ in range(5)]
    assert samples == pytest.approx([
        0.068627450980392,
        0.067281814686659,
        -0.002664887562099,
        0.031701090625393,
        -0.003234224877066,
    ], rel=1e-12)


def test_silent_input_keeps_filters_at_rest(scripted_source):
    for factory in (NoiseGenerator.pink, NoiseGenerator.brown):
        noise = factory(scripted_source([0.5] * 10))
        assert [noise.next_sample() for _ in range(10)] == [0.0] * 10


@pytest.mark.parametrize('factory', [
    NoiseGenerator.white, NoiseGenerator.pink, NoiseGenerator.brown
])
def test_draws_one_value_per_sample(factory):
    calls = []

    def source():
        calls.append(1)
        return 0.3

    noise = factory(source)
    noise.generate_samples(25)
    assert len(calls) == 25


def test_filter_state_persists_across_buffers():
    whole = NoiseGenerator.pink(random.Random(7).random).generate_samples(64)

    split = NoiseGenerator.pink(random.Random(7).random)
    first = split.generate_samples(40)
    second = split.generate_samples(24)

    np.testing.assert_array_equal(whole, np.concatenate([first, second]))


def test_no_reset_operation():
    assert not hasattr(NoiseGenerator.pink(), 'reset')


def test_default_source_white_range():
    samples = NoiseGenerator.white().generate_samples(1000)
    assert samples.min() >= -1.0
    assert samples.max() < 1.0


def test_fill_and_iterator(scripted_source):
    noise = NoiseGenerator.white(scripted_source([0.0, 0.25, 0.5, 0.75]))
    buffer = [9.0, 9.0]
    noise.fill(buffer)
    assert buffer == [-1.0, -0.5]
    assert list(itertools.islice(noise, 2)) == [0.0, 0.5]


def _octave_drop_db(noise_type, seed=1234):
    n = 1 << 18
    samples = NoiseGenerator(noise_type, random.Random(seed).random) \
        .generate_samples(n)
    freqs, psd = scipy_signal.welch(samples, fs=1.0, nperseg=4096)

    def band_power(center):
        band = (freqs > center * 0.9) & (freqs < center * 1.1)
        return psd[band].mean()

    return 10.0 * np.log10(band_power(0.02) / band_power(0.04))


def test_white_spectrum_is_flat():
    assert abs(_octave_drop_db(NoiseType.WHITE)) < 1.0


def test_pink_spectrum_falls_3db_per_octave():
    assert 2.0 < _octave_drop_db(NoiseType.PINK) < 4.0


def test_brown_spectrum_falls_6db_per_octave():
    assert 4.5 < _octave_drop_db(NoiseType.BROWN) < 7.5


def test_repr():
    assert repr(NoiseGenerator.brown()) == "NoiseGenerator('brown')"
