"""Settings for the command-line tools.

Values come from a JSON file and can be overridden per invocation through
``ROKU_*`` environment variables::

    {"default_device": "192.168.1.17", "timeout": 5, "discovery_timeout": 3}

Unreadable files and unparsable numbers are ignored in favour of the defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .api.constants import DEFAULT_DISCOVERY_TIMEOUT, DEFAULT_TIMEOUT

_LOGGER = logging.getLogger(__name__)

# Setting name -> environment variable overriding it
ENV_OVERRIDES = {
    "default_device": "ROKU_DEFAULT_DEVICE",
    "timeout": "ROKU_TIMEOUT",
    "discovery_timeout": "ROKU_DISCOVERY_TIMEOUT",
}

_FLOAT_SETTINGS = ("timeout", "discovery_timeout")


def config_path() -> Path:
    """Return the settings file: ``ROKU_CONFIG_FILE`` or ``<config dir>/roku/config.json``."""
    if explicit := os.environ.get("ROKU_CONFIG_FILE"):
        return Path(explicit)
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home()))
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "roku" / "config.json"


def _as_seconds(name: str, value: Any, fallback: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        _LOGGER.debug("Ignoring invalid %s setting: %r", name, value)
        return fallback


def _read_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as err:
        _LOGGER.debug("Ignoring unreadable config file %s: %s", path, err)
        return {}
    return data if isinstance(data, dict) else {}


def load_config() -> dict[str, Any]:
    """Return CLI settings: defaults, then the config file, then env overrides.

    Keys: ``default_device`` (address or None), ``timeout`` and
    ``discovery_timeout`` (seconds).
    """
    cfg: dict[str, Any] = {
        "default_device": None,
        "timeout": DEFAULT_TIMEOUT,
        "discovery_timeout": DEFAULT_DISCOVERY_TIMEOUT,
    }

    for source in (_read_file(config_path()), _env_settings()):
        for name, value in source.items():
            if name not in cfg or value is None:
                continue
            cfg[name] = _as_seconds(name, value, cfg[name]) if name in _FLOAT_SETTINGS else value

    return cfg


def _env_settings() -> dict[str, str]:
    return {name: value for name, var in ENV_OVERRIDES.items() if (value := os.environ.get(var))}
