"""
Configuration loading.

Configuration lives in a JSON file. Values found in the file are merged
over DEFAULT_CONFIG so a partial file only needs the keys it changes.
The file path can be overridden with the WIKTIONARY_DICTIONARY_CONFIG
environment variable.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

# Get base directory (project root)
BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"

CONFIG_ENV_VAR = "WIKTIONARY_DICTIONARY_CONFIG"

HTTP_DEFAULTS = {
    "timeout": 10,
    "headers": {},
}

# Default configuration template
DEFAULT_CONFIG = {
    "providers": ["mymemory"],  # Fallback chain, most reliable first
    "mymemory": {
        "base_url": "https://api.mymemory.translated.net",
    },
    "http": copy.deepcopy(HTTP_DEFAULTS),
    "log_mode": "off",  # off|info|debug
    "log_to_file": False,
}


def get_config_file() -> Path:
    """Return the config file path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_FILE


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the configuration.

    A missing file gives the defaults. A corrupt file is logged and also
    gives the defaults, so importing the library never fails on a bad
    config.

    Args:
        path: Optional explicit config file path

    Returns:
        Configuration dict
    """
    config_file = Path(path) if path else get_config_file()

    if not config_file.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        # get_logger() reads its mode from this function, use the plain logger
        logger = logging.getLogger(__name__)
        logger.error(f"Failed to load config from {config_file}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(data, dict):
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, data)


def save_config(config: Dict[str, Any], path: Optional[Path] = None):
    """Save the configuration as JSON."""
    config_file = Path(path) if path else get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=4, ensure_ascii=False)


def create_default_config(path: Optional[Path] = None):
    """Create the default config.json file."""
    save_config(DEFAULT_CONFIG, path)


def get_provider_config(provider: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Get the configuration section of a single provider."""
    if config is None:
        config = load_config()
    section = config.get(provider, {})
    return section if isinstance(section, dict) else {}
