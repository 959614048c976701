"""Application configuration loaded from a YAML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from flashdeck.errors import ConfigError
from flashdeck.paths import (
    CONFIG_ENV_VAR,
    DECK_FILE_ENV_VAR,
    DEFAULT_CONFIG,
    DEFAULT_DECK_FILE,
    LOG_LEVEL_ENV_VAR,
    resolve_against,
)

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    deck_file: Path = DEFAULT_DECK_FILE
    log_level: str = "INFO"
    goal_target: int = 10


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _validated(config: AppConfig) -> AppConfig:
    level = str(config.log_level).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {config.log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    try:
        goal_target = int(config.goal_target)
    except (TypeError, ValueError):
        raise ConfigError(f"goal_target must be an integer, got {config.goal_target!r}") from None
    if goal_target < 0:
        raise ConfigError("goal_target must not be negative")
    return replace(config, log_level=level, goal_target=goal_target)


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """Load configuration from ``path``, ``$FLASHDECK_CONFIG`` or ``flashdeck.yml``.

    A missing default file gives the defaults; a missing explicit ``path`` is
    an error. ``FLASHDECK_DECK_FILE`` and
    ``FLASHDECK_LOG_LEVEL`` override the file.
    """

    config_path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG)
    config = AppConfig()
    if config_path.exists():
        data = _read_yaml(config_path)
        unknown = sorted(set(data) - {"deck_file", "log_level", "goal_target"})
        if unknown:
            LOGGER.warning("Ignoring unknown config keys in %s: %s", config_path, ", ".join(unknown))
        deck_file = data.get("deck_file", str(config.deck_file))
        if not isinstance(deck_file, str) or not deck_file.strip():
            raise ConfigError(f"deck_file in {config_path} must be a non-empty path, got {deck_file!r}")
        base = config_path.resolve().parent
        config = replace(
            config,
            deck_file=resolve_against(deck_file, base),
            log_level=data.get("log_level", config.log_level),
            goal_target=data.get("goal_target", config.goal_target),
        )
    elif path is not None:
        raise ConfigError(f"Config file {config_path} not found")

    deck_override = os.environ.get(DECK_FILE_ENV_VAR)
    if deck_override:
        config = replace(config, deck_file=Path(deck_override))
    level_override = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level_override:
        config = replace(config, log_level=level_override)
    return _validated(config)
