"""
Configuration for the graph editor.

Settings are read from a JSON file:
- GRAPHEDIT_CONFIG environment variable, if set
- otherwise ~/.config/GraphEdit/settings.json

Example:

    {
        "style": {"vertex_radius": 30, "edge_color": [0.1, 0.1, 0.5]},
        "serialize_order": "label",
        "default_label": "node"
    }

Missing or broken files fall back to the defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from interaction import DEFAULT_LABEL
from serializer import Order
from style import EditorStyle, StyleError

logger = logging.getLogger(__name__)

APP_NAME = "GraphEdit"
LOG_FORMAT = '%(asctime)s - [%(levelname)s] %(name)s: %(message)s'


def get_config_path() -> Path:
    env_path = os.environ.get("GRAPHEDIT_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / APP_NAME / "settings.json"


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration from the settings file."""
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Could not read settings from %s: %s", config_path, e)
        return {}
    if not isinstance(config, dict):
        logger.warning("Settings in %s are not a JSON object, ignoring", config_path)
        return {}
    return config


def load_style(config: dict) -> EditorStyle:
    """
    Build the editor style from the "style" section. Unknown keys are ignored;
    a section that does not make a valid style falls back to the defaults.
    """
    section = config.get("style", {})
    if not isinstance(section, dict):
        logger.warning("Style settings are not a JSON object, using defaults")
        return EditorStyle()

    overrides = {}
    known = EditorStyle.field_names()
    for key, value in section.items():
        if key not in known:
            logger.warning("Unknown style setting '%s' ignored", key)
            continue
        # colours arrive from JSON as lists
        if isinstance(value, list):
            value = tuple(value)
        overrides[key] = value
    try:
        return EditorStyle(**overrides)
    except StyleError as e:
        logger.warning("Invalid style settings, using defaults: %s", e)
        return EditorStyle()


def get_serialize_order(config: dict) -> Order:
    value = config.get("serialize_order", Order.INSERTION.value)
    try:
        return Order(value)
    except ValueError:
        logger.warning("Unknown serialize_order '%s', using insertion order", value)
        return Order.INSERTION


def get_default_label(config: dict) -> str:
    return config.get("default_label", DEFAULT_LABEL)


def setup_logging(level_name: Optional[str] = None) -> None:
    """Configure the root logger. The level defaults to GRAPHEDIT_LOG_LEVEL or INFO."""
    level_name = (level_name or os.environ.get("GRAPHEDIT_LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging initialized at %s", logging.getLevelName(level))
