"""XDG directory management and configuration for the syslog5424 tool."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from syslog5424.models import AppConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the syslog5424 config directory.

    Respects SYSLOG5424_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("SYSLOG5424_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("syslog5424"))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found or unreadable."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        return AppConfig(**data)
    except (OSError, ValueError, TypeError, KeyError) as e:
        logger.warning("ignoring unreadable config %s: %s", path, e)
        return AppConfig()


def save_config(config: AppConfig) -> None:
    """Save application config to disk."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_bytes(tomli_w.dumps(config.model_dump(mode="json", exclude_none=True)).encode())
