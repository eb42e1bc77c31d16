"""
Configuration and logging helpers.

This module centralizes the ambient plumbing shared by the library and
the scripts:

- loading the project configuration (config/lexikit.yaml)
- retrieving individual sections with helpful errors
- ensuring directories exist before writing files
- constructing loggers that respect the "logging" section

Library modules log through ``logging.getLogger(__name__)`` and leave
handler setup to whoever calls ``get_logger``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = "config/lexikit.yaml"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load and return the project configuration dictionary.

    Parameters
    ----------
    config_path : str
        Path to the YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Parsed configuration with sections such as "preprocessing",
        "lexicon", "logging", and "paths".

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file is empty or cannot be parsed into a mapping.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None or not isinstance(cfg, dict):
        raise ValueError(f"Config file is empty or invalid: {config_path}")

    # We keep this permissive: downstream code will access the keys it needs.
    return cfg


def get_config_section(
    section: str,
    config_path: str = DEFAULT_CONFIG_PATH,
) -> Dict[str, Any]:
    """
    Retrieve a single section from the project configuration.

    Raises
    ------
    KeyError
        If the section is missing.
    """
    cfg = load_config(config_path)
    if section not in cfg:
        raise KeyError(f'Missing "{section}" section in config: {config_path}')
    return cfg[section] or {}


# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------


def ensure_dir_exists(path: str) -> None:
    """
    Ensure that a directory exists (create it if necessary).

    Parameters
    ----------
    path : str
        Directory path.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------


def _parse_log_level(level_str: str) -> int:
    """
    Convert a string log level into a logging module constant.

    Parameters
    ----------
    level_str : str
        One of: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL" (case-insensitive).

    Returns
    -------
    int
        Corresponding logging level, INFO for unknown names.
    """
    level_str = (level_str or "INFO").upper()
    return {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }.get(level_str, logging.INFO)


def get_logger(
    name: str,
    config: Dict[str, Any],
    log_file_suffix: Optional[str] = None,
) -> logging.Logger:
    """
    Construct and return a logger that respects the logging section of
    the project config.

    Parameters
    ----------
    name : str
        Logger name.
    config : Dict[str, Any]
        Full project configuration.
    log_file_suffix : Optional[str]
        Optional suffix appended to the log file name (e.g., "similarity").

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # If the logger already has handlers, assume it's already configured.
    if logger.handlers:
        return logger

    logging_cfg = config.get("logging", {}) or {}
    paths_cfg = config.get("paths", {}) or {}

    level = _parse_log_level(logging_cfg.get("level", "INFO"))
    logger.setLevel(level)
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATEFMT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if bool(logging_cfg.get("to_file", False)):
        logs_dir = paths_cfg.get("logs_dir", "logs")
        ensure_dir_exists(logs_dir)

        file_prefix = logging_cfg.get("file_prefix", "lexikit")
        if log_file_suffix:
            filename = f"{file_prefix}_{log_file_suffix}.log"
        else:
            filename = f"{file_prefix}.log"

        file_handler = logging.FileHandler(
            os.path.join(logs_dir, filename), encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
