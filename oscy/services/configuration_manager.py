# oscy/services/configuration_manager.py
"""
Contains the ConfigurationManager, the service for loading, validating and
saving render configurations stored as YAML.
"""
import copy
import logging
import numbers
from typing import Any, Optional

import yaml

from oscy.config.constants import (
    DEFAULT_SETTINGS, DEFAULT_WAVE_SETTINGS, LEGACY_KEY_RENAMES, NOISE_TYPES,
    PERIODIC_TYPES
)


class ConfigurationManager:
    """
    A service that centralizes loading, migrating, validating and saving
    render settings.

    Bad configuration never raises: unreadable files, syntax errors and
    invalid values are logged and replaced with defaults.
    """

    def load_config(self, filepath: str) -> dict:
        """
        Loads, migrates and validates a configuration from a YAML file.

        A missing file is created with the defaults.

        Args:
            filepath: The path to the YAML file to load.

        Returns:
            A complete, validated settings dictionary.
        """
        loaded_raw = self._read_yaml_file(filepath)
        if loaded_raw == 'created' or loaded_raw is None:
            return copy.deepcopy(DEFAULT_SETTINGS)
        if not isinstance(loaded_raw, dict):
            logging.error("Config %s is not a mapping. Using defaults.", filepath)
            return copy.deepcopy(DEFAULT_SETTINGS)

        settings, changed1 = self._sanitize_settings(loaded_raw)
        settings, changed2 = self._validate_structure(settings)
        if changed1 or changed2:
            logging.info("Config %s was incomplete or outdated; "
                         "missing or invalid values use defaults.", filepath)
        return settings

    def save_config(self, filepath: str, settings: dict):
        """
        Saves only the settings that differ from the defaults to a YAML file.

        Args:
            filepath: The path to the YAML file to save.
            settings: The settings dictionary to save.
        """
        settings_diff = self._get_diff(settings, DEFAULT_SETTINGS)
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                if settings_diff:
                    yaml.safe_dump(settings_diff, f, sort_keys=False)
                else:
                    f.write('')
        except IOError as e:
            logging.error("Error writing config %s: %s", filepath, e)

    def _read_yaml_file(self, filepath: str) -> Optional[Any]:
        """Reads and parses a YAML file, handling errors."""
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f)
        except FileNotFoundError:
            logging.info("Config file not found, creating with defaults: %s",
                         filepath)
            self.save_config(filepath, DEFAULT_SETTINGS)
            return 'created'
        except yaml.YAMLError as e:
            logging.error("Error parsing %s: %s. Using defaults.", filepath, e)
            return None

    def _get_diff(self, dict1: dict, dict2: dict) -> dict:
        """Returns the entries of dict1 whose values differ from dict2."""
        diff = {}
        for key, value in dict1.items():
            if isinstance(value, dict) and isinstance(dict2.get(key), dict):
                nested = self._get_diff(value, dict2[key])
                if nested:
                    diff[key] = nested
            elif key not in dict2 or dict2[key] != value:
                diff[key] = value
        return diff

    def _sanitize_settings(self, loaded_settings: dict) -> tuple[dict, bool]:
        """Ensures the settings dictionary is complete and has no obsolete keys."""
        final_settings, config_changed = {}, False
        temp_settings = dict(loaded_settings)
        for old, new in LEGACY_KEY_RENAMES:
            if old in temp_settings:
                temp_settings[new] = temp_settings.pop(old)
                config_changed = True
        for key, default_value in DEFAULT_SETTINGS.items():
            if key not in temp_settings:
                final_settings[key] = copy.deepcopy(default_value)
                config_changed = True
            else:
                final_settings[key] = temp_settings[key]
        unknown_keys = set(temp_settings) - set(DEFAULT_SETTINGS)
        if unknown_keys:
            logging.warning("Ignoring unknown config keys: %s",
                            ", ".join(sorted(map(str, unknown_keys))))
            config_changed = True
        return final_settings, config_changed

    def _validate_structure(self, settings: dict) -> tuple[dict, bool]:
        """Validates value ranges and the nested wave definition."""
        config_changed = False
        checks = [
            ('sample_rate', lambda v: _is_integer(v) and v >= 1),
            ('duration_s', lambda v: _is_number(v) and v >= 0),
            ('amplitude', _is_number),
            ('seed', lambda v: v is None or _is_integer(v)),
            ('output_path', lambda v: isinstance(v, str) and v != ''),
        ]
        for key, is_valid in checks:
            if not is_valid(settings[key]):
                logging.warning("Invalid value for '%s': %r. Using default %r.",
                                key, settings[key], DEFAULT_SETTINGS[key])
                settings[key] = copy.deepcopy(DEFAULT_SETTINGS[key])
                config_changed = True

        validated_wave = self._validate_wave(settings.get('wave'))
        if validated_wave != settings.get('wave'):
            config_changed = True
        settings['wave'] = validated_wave
        return settings, config_changed

    def _validate_wave(self, wave_config: Any) -> dict:
        """
        Validates a single wave configuration.

        Args:
            wave_config: The wave dictionary from the loaded file.

        Returns:
            A complete wave dictionary holding exactly the default wave keys.
            The default wave is returned when the input is not a mapping or
            names an unknown type; individual invalid values fall back to
            their defaults, and unknown keys are dropped.
        """
        if not isinstance(wave_config, dict):
            logging.warning("Wave definition is not a mapping; using default wave.")
            return copy.deepcopy(DEFAULT_WAVE_SETTINGS)

        wave_type = str(wave_config.get(
            'type', DEFAULT_WAVE_SETTINGS['type'])).lower()
        if wave_type not in PERIODIC_TYPES | NOISE_TYPES:
            logging.warning("Unknown wave type %r; using default wave.",
                            wave_config.get('type'))
            return copy.deepcopy(DEFAULT_WAVE_SETTINGS)

        unknown_keys = set(wave_config) - set(DEFAULT_WAVE_SETTINGS)
        if unknown_keys:
            logging.warning("Ignoring unknown wave keys: %s",
                            ", ".join(sorted(map(str, unknown_keys))))

        validated = {key: wave_config.get(key, default)
                     for key, default in DEFAULT_WAVE_SETTINGS.items()}
        validated['type'] = wave_type

        checks = [
            ('frequency', _is_number),
            ('phase', _is_number),
            ('bandlimited', lambda v: isinstance(v, bool)),
        ]
        for key, is_valid in checks:
            if not is_valid(validated[key]):
                logging.warning("Invalid wave %s %r. Using default %r.",
                                key, validated[key], DEFAULT_WAVE_SETTINGS[key])
                validated[key] = DEFAULT_WAVE_SETTINGS[key]
        return validated


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
