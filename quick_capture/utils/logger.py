"""
Logger Utility Module

This module provides functions for setting up and configuring the application logger.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from quick_capture.utils.config import get_config_value


def get_log_level() -> str:
    """
    Get the log level from the configuration.

    Returns:
        str: The log level (INFO by default).
    """
    return str(get_config_value("log_level", "INFO") or "INFO")


def get_log_file_path() -> Path:
    """
    Get the log file path from config or default.

    Returns:
        Path: The log file path.
    """
    log_path = get_config_value("log_file")
    if log_path:
        return Path(log_path).expanduser()
    # Default to ~/.quick-capture/quick-capture.log
    return Path.home() / ".quick-capture" / "quick-capture.log"


def setup_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name (Optional[str], optional): The name of the logger. Defaults to None.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or "quick_capture")

    # Avoid adding duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    log_level = getattr(logging, get_log_level().upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # stdout handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler; the console handler alone is enough if the path is not writable
    try:
        log_file = get_log_file_path()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger.
    """
    return logging.getLogger(name)
