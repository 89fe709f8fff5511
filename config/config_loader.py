"""
Configuration loading for cartotopo.

This module handles loading and validation of the projection configuration
JSON file, which defines the composite (inset) projections by name.

Constants:
    PROJECT_ROOT: Root directory of the project
    CONFIG_DIR: Configuration files directory
    DEFAULT_CONFIG_FILE: Bundled projection configuration

Functions:
    load_config: Load and validate projection configuration from JSON
    load_projection_settings: Merge the 'settings' section over defaults
    get_projection_definition: Look up one named composite projection
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = PROJECT_ROOT / 'config'
DEFAULT_CONFIG_FILE = CONFIG_DIR / 'projections_config.json'

FRAME_KEYS = ('projection', 'source_center', 'dest_center', 'width', 'height')


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load projection configuration from JSON file.

    Reads projections_config.json (or the given file) and validates basic
    structure.

    Parameters:
    -----------
    config_path : Optional[Union[str, Path]]
        Alternate configuration file. Defaults to config/projections_config.json

    Returns:
    --------
    Dict
        Configuration dictionary with 'projections' and 'settings' keys

    Raises:
    -------
    FileNotFoundError
        If configuration file doesn't exist
    json.JSONDecodeError
        If configuration file contains invalid JSON
    KeyError
        If required configuration keys are missing
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_FILE

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    # Validate required keys
    if 'projections' not in config:
        raise KeyError("Configuration missing required 'projections' key")
    if 'settings' not in config:
        raise KeyError("Configuration missing required 'settings' key")

    for name, definition in config['projections'].items():
        if 'base' not in definition:
            raise KeyError(f"Projection '{name}' missing required 'base' key")
        for i, frame in enumerate(definition.get('frames', [])):
            missing = [key for key in FRAME_KEYS if key not in frame]
            if missing:
                raise KeyError(
                    f"Frame {frame.get('name', i)} of projection '{name}' "
                    f"missing required keys: {', '.join(missing)}"
                )

    return config


def load_projection_settings(config: Dict = None) -> Dict:
    """
    Load projection settings from configuration.

    Args:
        config: Configuration dictionary (optional, will load if not provided)

    Returns:
        Dictionary with projection settings

    Defaults:
        - default_projection: 'albersusa'
        - include_optional_frames: False
    """
    if config is None:
        config = load_config()

    defaults = {
        'default_projection': 'albersusa',
        'include_optional_frames': False,
    }

    settings = config.get('settings', {})

    # Config values override defaults
    return {**defaults, **settings}


def get_projection_definition(name: str, config: Dict = None) -> Dict:
    """
    Return the definition of one named composite projection.

    Names are matched case-insensitively.

    Raises:
        ValueError: If no projection with that name is configured
    """
    if config is None:
        config = load_config()

    projections = {key.lower(): value for key, value in config['projections'].items()}
    definition = projections.get(name.lower())
    if definition is None:
        available = ', '.join(sorted(projections))
        raise ValueError(f"Unknown projection '{name}' (available: {available})")
    return definition
