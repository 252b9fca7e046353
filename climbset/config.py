"""
Configuration loader for the climbset hold editor.

This module provides utilities to load and cache editor configuration
from YAML files. It handles path resolution relative to the project root
and validates the sections the editor depends on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
import logging
import threading

import yaml

from climbset.constants import HOLD_COLORS, HOLD_SIZES
from climbset.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Cache for configuration to avoid repeated file reads
_config_cache: Optional[dict[str, Any]] = None

# Lock for thread-safe access to the configuration cache
_config_lock = threading.Lock()

# Project root directory (parent of climbset/)
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_CONFIG_PATH = Path(__file__).parent / "cfg" / "user_config.yaml"

__all__ = [
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "clear_config_cache",
    "get_config_value",
    "get_draft_directory",
    "get_project_root",
    "load_config",
    "resolve_path",
]


def get_project_root() -> Path:
    """
    Get the project root directory.

    Returns:
        Path: The absolute path to the project root directory.
    """
    return PROJECT_ROOT


def resolve_path(path_str: str | Path, relative_to: Optional[Path] = None) -> Path:
    """
    Resolve a path string to an absolute path.

    If the path is relative, it will be resolved relative to the project root
    (or a specified directory). Absolute paths are returned as-is.

    Args:
        path_str: The path string to resolve.
        relative_to: Optional base directory for relative paths.
                     Defaults to project root.

    Returns:
        Path: The resolved absolute path.

    Examples:
        >>> resolve_path('data/drafts/')
        Path('/path/to/project/data/drafts')
    """
    path = Path(path_str)

    if path.is_absolute():
        return path

    base_dir = relative_to if relative_to is not None else PROJECT_ROOT
    return (base_dir / path).resolve()


def load_config(
    config_path: str | Path = DEFAULT_CONFIG_PATH, force_reload: bool = False
) -> dict[str, Any]:
    """
    Load configuration from a YAML file with caching.

    The configuration is cached after the first load to avoid repeated file reads.
    Use force_reload=True to bypass the cache and reload from disk.

    Args:
        config_path: Path to the configuration YAML file. Relative paths are
                     resolved against the project root.
        force_reload: If True, bypass the cache and reload from disk.

    Returns:
        Dict[str, Any]: The parsed configuration dictionary.

    Raises:
        ConfigurationError: If the configuration file cannot be found, read,
                           parsed or validated.

    Examples:
        >>> config = load_config()
        >>> config['editor']['add_tolerance']
        3.0
    """
    global _config_cache  # pylint: disable=global-statement

    with _config_lock:
        if _config_cache is not None and not force_reload:
            logger.debug("Returning cached configuration")
            return _config_cache

        config_file = resolve_path(config_path)

        if not config_file.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}\n"
                f"Expected location: {config_path}"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Error parsing YAML configuration file {config_file}: {exc}"
            ) from exc
        except OSError as exc:
            raise ConfigurationError(  # pragma: no cover
                f"Error reading configuration file {config_file}: {exc}"
            ) from exc

        if config is None:
            raise ConfigurationError(f"Configuration file is empty: {config_file}")

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration must be a dictionary, got {type(config).__name__}"
            )

        _validate_config(config)

        _config_cache = config
        logger.info("Configuration loaded successfully from %s", config_file)

        return config


def _validate_config(config: dict[str, Any]) -> None:
    """
    Validate the structure of the configuration dictionary.

    Ensures that required sections and keys exist and that the editor
    tolerances describe a removal radius wider than the add radius.

    Args:
        config: The configuration dictionary to validate.

    Raises:
        ConfigurationError: If required sections or keys are missing or invalid.
    """
    required_sections = {
        "editor": ["add_tolerance", "remove_margin"],
        "drafts": ["directory", "key"],
        "logging": ["level", "json_output"],
    }

    for section, keys in required_sections.items():
        if section not in config:
            raise ConfigurationError(
                f"Missing required configuration section: '{section}'"
            )

        if not isinstance(config[section], dict):
            raise ConfigurationError(
                f"Configuration section '{section}' must be a dictionary"
            )

        for key in keys:
            if key not in config[section]:
                raise ConfigurationError(
                    f"Missing required configuration key: '{section}.{key}'"
                )

    editor = config["editor"]
    for key in ("add_tolerance", "remove_margin"):
        value = editor[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError(
                f"Configuration key 'editor.{key}' must be a positive number"
            )

    default_type = editor.get("default_hold_type")
    if default_type is not None and default_type not in HOLD_COLORS:
        raise ConfigurationError(f"Unknown default hold type: '{default_type}'")

    default_size = editor.get("default_hold_size")
    if default_size is not None and default_size not in HOLD_SIZES:
        raise ConfigurationError(f"Unknown default hold size: '{default_size}'")


def get_config_value(key_path: str, default: Any = None) -> Any:
    """
    Get a configuration value using dot notation.

    Args:
        key_path: Dot-separated path to the configuration value.
                  Example: 'editor.add_tolerance'
        default: Default value to return if the key is not found.

    Returns:
        The configuration value or the default if not found.

    Examples:
        >>> get_config_value('drafts.key')
        'climbset-draft'
    """
    config = load_config()
    keys = key_path.split(".")

    value: Any = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def clear_config_cache() -> None:
    """
    Clear the cached configuration.

    This forces the next call to load_config() to reload from disk.
    """
    global _config_cache  # pylint: disable=global-statement
    with _config_lock:
        _config_cache = None
        logger.debug("Configuration cache cleared")


def get_draft_directory() -> Path:
    """
    Get the resolved directory holding draft files.

    Returns:
        Path: The resolved absolute path.

    Raises:
        ConfigurationError: If the configuration cannot be loaded.
    """
    config = load_config()
    return resolve_path(config["drafts"]["directory"])
