"""
Settings for the lighthtml command.

Three knobs: the mode the document is rendered in (view or edit), the
traversal used by --traverse when no strategy is named, and the log level.
Command line flags win over LIGHTHTML_* environment variables, which win
over $XDG_CONFIG_HOME/lighthtml/config.toml, which wins over the defaults
below.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path

from .dom import Mode
from .traversal import STRATEGIES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RenderConfig:
    """How documents are rendered by default."""
    default_mode: str = "view"  # "view" -> outer HTML, "edit" -> inner HTML


@dataclass
class TraversalConfig:
    strategy: str = "depth"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Root config with all settings."""
    render: RenderConfig = field(default_factory=RenderConfig)
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _mode_name(value: str) -> str:
    return Mode.parse(str(value)).value


def _strategy_name(value: str) -> str:
    name = str(value).strip().lower()
    if name not in STRATEGIES:
        raise ValueError(f"Unknown traversal strategy: {value!r}")
    return name


def _level_name(value: str) -> str:
    name = str(value).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value!r}")
    return name


def get_config_path() -> Path:
    """Location of config.toml under the XDG config directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "lighthtml" / "config.toml"


def load_config() -> Config:
    """Build settings from defaults, config.toml and the environment."""
    path = get_config_path()
    config = Config()

    if path.is_file():
        try:
            with open(path, "rb") as f:
                config = _apply_toml(Config(), tomllib.load(f))
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    return _apply_env(config)


def _section(data: dict, name: str) -> dict:
    """Return a [table] from the parsed file, empty if missing."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config. Raises ValueError on bad values."""
    render = _section(data, "render")
    if "default_mode" in render:
        config.render.default_mode = _mode_name(render["default_mode"])

    traversal = _section(data, "traversal")
    if "strategy" in traversal:
        config.traversal.strategy = _strategy_name(traversal["strategy"])

    log = _section(data, "logging")
    if "level" in log:
        config.logging.level = _level_name(log["level"])

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map = {
        "LIGHTHTML_MODE": ("render", "default_mode", _mode_name),
        "LIGHTHTML_TRAVERSAL": ("traversal", "strategy", _strategy_name),
        "LIGHTHTML_LOG_LEVEL": ("logging", "level", _level_name),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError):
                setattr(getattr(config, section), attr, conv(val))

    return config


# Cached settings; reset_config() drops them
_config: Config | None = None


def get_config() -> Config:
    """Settings shared by the CLI, loaded on first call."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
