# oscy/config/constants.py
"""
Contains default configuration dictionaries, audio constants, and the fixed
filter coefficients used by the signal generators.
"""
import copy

# --- Configuration Constants ---
CONFIG_FILE_PATH = 'config.yaml'

# --- Application Constants ---

AUDIO_SAMPLE_RATE: int = 44100
MAX_BUFFER_SIZE: int = 4096

PERIODIC_TYPES: set[str] = {'sine', 'saw', 'sawtooth', 'square', 'triangle'}
NOISE_TYPES: set[str] = {
    'white', 'pink', 'brown', 'white_noise', 'pink_noise', 'brown_noise'
}


# --- Noise Filter Coefficients ---

# Paul Kellet's "economy" pink noise filter. Each tap is a single-pole
# filter: tap = decay * tap + white * gain.
PINK_DECAYS: tuple[float, ...] = (
    0.99886, 0.99332, 0.96900, 0.86650, 0.55000, -0.7616
)
PINK_GAINS: tuple[float, ...] = (
    0.0555179, 0.0750759, 0.1538520, 0.3104856, 0.5329522, -0.0168980
)
PINK_WHITE_GAIN: float = 0.5362
PINK_OUTPUT_SCALE: float = 0.11

BROWN_STEP: float = 0.02
BROWN_LEAK: float = 1.02
BROWN_OUTPUT_SCALE: float = 3.5


# --- Default Waveform Configuration ---

DEFAULT_WAVE_SETTINGS: dict = {
    'type': 'sine',
    'frequency': 440.0,
    'phase': 0.0,
    'bandlimited': True,
}


# --- Default Render Configuration ---

DEFAULT_SETTINGS: dict = {
    'sample_rate': AUDIO_SAMPLE_RATE,
    'duration_s': 1.0,
    'amplitude': 0.8,
    'seed': None,
    'output_path': 'render.wav',
    'wave': copy.deepcopy(DEFAULT_WAVE_SETTINGS),
}

# Keys renamed since earlier config files, as (old, new).
LEGACY_KEY_RENAMES: list[tuple[str, str]] = [
    ('duration', 'duration_s'),
    ('samplerate', 'sample_rate'),
]
