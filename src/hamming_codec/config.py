# file: src/hamming_codec/config.py

"""
Codec configuration.

Configuration is a plain dict, usually loaded from YAML:

    hamming:
      position_rule: reference   # reference | textbook
      language: en               # en | es
    logging:
      level: WARNING
      format: "..."

encode()/decode() accept such a dict directly; missing keys fall back to
the defaults below.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import HammingConfigurationError
from .messages import LANGUAGES
from .parity import POSITION_RULES, REFERENCE_RULE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        'hamming': {
            'position_rule': REFERENCE_RULE,
            'language': 'en',
        },
        'logging': {
            'level': 'WARNING',
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over the defaults.

    Args:
        config_path: Path to a YAML config file. If None, the packaged
                     default_config.yaml is used (or the hardcoded defaults
                     if it is missing).

    Returns:
        Configuration dictionary

    Raises:
        HammingConfigurationError: If an explicitly given file cannot be
            read or does not contain a YAML mapping
    """
    defaults = get_default_config()

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return defaults
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise HammingConfigurationError(
            f"Cannot load config file {config_path}: {e}"
        ) from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise HammingConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(loaded).__name__}"
        )

    for section in defaults:
        if section not in loaded:
            continue
        if loaded[section] is None:
            loaded[section] = {}
        elif not isinstance(loaded[section], dict):
            raise HammingConfigurationError(
                f"Config section '{section}' in {config_path} must be a mapping, "
                f"got {type(loaded[section]).__name__}"
            )

    logger.debug("Loaded configuration from %s", config_path)
    return _merge(defaults, loaded)


def resolve_codec_options(config: Optional[Dict[str, Any]]) -> Tuple[str, str]:
    """
    Extract and validate the codec options.

    Args:
        config: Configuration dictionary or None for defaults

    Returns:
        (position_rule, language)

    Raises:
        HammingConfigurationError: If the 'hamming' section is malformed or
            holds unknown values
    """
    defaults = get_default_config()['hamming']

    if config is None:
        return defaults['position_rule'], defaults['language']

    if not isinstance(config, dict):
        raise HammingConfigurationError(f"Config must be a dict, got {type(config)}")

    section = config.get('hamming') or {}
    if not isinstance(section, dict):
        raise HammingConfigurationError(
            f"Config section 'hamming' must be a mapping, got {type(section).__name__}"
        )

    position_rule = section.get('position_rule', defaults['position_rule'])
    language = section.get('language', defaults['language'])

    if position_rule not in POSITION_RULES:
        raise HammingConfigurationError(
            f"Unknown position rule: {position_rule!r} (expected one of {POSITION_RULES})"
        )
    if language not in LANGUAGES:
        raise HammingConfigurationError(
            f"Unknown step log language: {language!r} (expected one of {LANGUAGES})"
        )

    return position_rule, language
