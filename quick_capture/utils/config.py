"""
Configuration Module

This module loads the Quick Capture configuration from a YAML file and
environment variables. Environment variables take precedence over YAML values.
The merged configuration is cached after the first load.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

DEFAULT_HOUR = 9

_config_cache: Optional[Dict[str, Any]] = None


def load_yaml_config() -> Dict[str, Any]:
    """
    Load the raw YAML configuration file.

    Returns:
        Dict[str, Any]: The parsed YAML document, or an empty dict if the file
        is missing or cannot be read.
    """
    config_path = Path(CONFIG_FILE_PATH)
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read config file '{config_path}': {e}")
        return {}


def coerce_hour(value: Any) -> int:
    """Return value as an hour of day, falling back to DEFAULT_HOUR."""
    try:
        hour = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid default_hour '{value}', using {DEFAULT_HOUR}")
        return DEFAULT_HOUR
    if not 0 <= hour <= 23:
        logger.warning(f"default_hour {hour} out of range, using {DEFAULT_HOUR}")
        return DEFAULT_HOUR
    return hour


def get_config() -> Dict[str, Any]:
    """
    Get the merged configuration.

    Returns:
        Dict[str, Any]: Flat configuration dictionary.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    yaml_config = load_yaml_config()
    parser_config = yaml_config.get("parser", {}) or {}
    server_config = yaml_config.get("server", {}) or {}

    _config_cache = {
        "default_hour": coerce_hour(
            os.getenv("QUICK_CAPTURE_DEFAULT_HOUR", parser_config.get("default_hour", DEFAULT_HOUR))
        ),
        "log_level": os.getenv("QUICK_CAPTURE_LOG_LEVEL", server_config.get("log_level", "INFO")),
        "log_file": os.getenv("QUICK_CAPTURE_LOG_FILE", server_config.get("log_file")),
        "server_name": os.getenv("MCP_SERVER_NAME", server_config.get("name", "Quick Capture")),
    }
    return _config_cache


def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a single configuration value.

    Args:
        key (str): The configuration key.
        default (Any, optional): Value returned when the key is missing.

    Returns:
        Any: The configured value or the default.
    """
    return get_config().get(key, default)


def reset_config_cache() -> None:
    """Drop the cached configuration so the next call reloads it."""
    global _config_cache
    _config_cache = None
