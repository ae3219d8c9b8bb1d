"""YAML-based configuration.

The config file lives at ``$XDG_CONFIG_HOME/eradicate/config.yaml``
(``~/.config/eradicate/config.yaml`` by default). Values found there are
deep-merged over DEFAULT_CONFIG; a missing or corrupt default file falls back
to the defaults.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "case_sensitive": True,
    "debug": False,
    "log_file": None,
    "refresh_per_second": 10,
    "theme": {},
}


def get_config_dir() -> Path:
    """Get the eradicate config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "eradicate"


def get_config_path() -> Path:
    """Get the path to the default config file."""
    return get_config_dir() / "config.yaml"


def get_default_log_path() -> Path:
    """Get the log file used when the config does not name one."""
    xdg_state = os.environ.get("XDG_STATE_HOME", os.path.expanduser("~/.local/state"))
    return Path(xdg_state) / "eradicate" / "eradicate.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _validate(cfg: dict[str, Any], path: Path) -> dict[str, Any]:
    for key in ("case_sensitive", "debug"):
        if not isinstance(cfg[key], bool):
            raise ConfigError(str(path), f"'{key}' must be true or false")
    rate = cfg["refresh_per_second"]
    if isinstance(rate, bool) or not isinstance(rate, int) or rate <= 0:
        raise ConfigError(str(path), "'refresh_per_second' must be a positive integer")
    if not isinstance(cfg["theme"], dict):
        raise ConfigError(str(path), "'theme' must be a mapping")
    if cfg["log_file"] is not None and not isinstance(cfg["log_file"], str):
        raise ConfigError(str(path), "'log_file' must be a path")
    return cfg


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config, merged over the defaults.

    Args:
        path: Explicit config file. When None the default location is used
            and any problem with it falls back to the defaults.

    Raises:
        ConfigError: If an explicit path is missing or malformed, or if a
            value has the wrong type.
    """
    explicit = path is not None
    config_path = path if path is not None else get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(str(config_path), "file not found") from None
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        if explicit:
            raise ConfigError(str(config_path), str(e)) from e
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        if explicit:
            raise ConfigError(str(config_path), "top level must be a mapping")
        logger.warning("Ignoring config %s: top level is not a mapping", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _validate(_deep_merge(copy.deepcopy(DEFAULT_CONFIG), data), config_path)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> None:
    """Write a config file, creating its directory."""
    config_path = path if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False)
