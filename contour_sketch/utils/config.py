"""
Configuration management for the Contour Sketch converter.
Loads configuration from YAML files and fills in defaults.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "conversion": {
        "offset": 30,
        "threshold": 8000,
    },
    "rendering": {
        "stroke_width": 1,
    },
    "output": {
        "format": "JPEG",
        "quality": 75,
    },
}

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            # An empty YAML section (``conversion:``) keeps its defaults
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Configuration section '{key}' must be a mapping, got {value!r}")
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file on top of the built-in defaults.

    Args:
        config_path: Path to the configuration file. If None, only the
            defaults are returned.

    Returns:
        Dictionary containing configuration settings
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    return _merge(DEFAULT_CONFIG, loaded)

def default_config_path() -> Path:
    """Location of the config file shipped at the project root."""
    return Path(__file__).parent.parent.parent / "config" / "default.yaml"
