"""Evaluation options and user settings.

EvaluationConfig is the immutable option set threaded through a tree walk.
Settings is the user-facing configuration file, loaded from YAML.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"


class ConfigError(Exception):
    """Invalid or unreadable configuration."""


@dataclass(frozen=True)
class EvaluationConfig:
    """Options for a single evaluation.

    Attributes:
        compatibility_mode: Use the reduced GNU-units-style builtin table
            (a few functions plus `approximately`) and defer every other
            name to scope
    """

    compatibility_mode: bool = False


@dataclass
class Settings:
    """User settings from config.yaml.

    Attributes:
        compatibility_mode: Default for EvaluationConfig.compatibility_mode
        timeout_ms: Cancel an evaluation after this many milliseconds (None = never)
        log_level: Logging level name for the CLI
    """

    compatibility_mode: bool = False
    timeout_ms: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a YAML mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("Ignoring unknown config key '%s'", key)

        timeout = data.get("timeout_ms")
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0
        ):
            raise ConfigError(f"timeout_ms must be a positive integer, got {timeout!r}")

        return cls(
            compatibility_mode=bool(data.get("compatibility_mode", False)),
            timeout_ms=timeout,
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )

    def evaluation_config(self) -> EvaluationConfig:
        return EvaluationConfig(compatibility_mode=self.compatibility_mode)


def get_config_dir() -> Path:
    """Directory holding config.yaml.

    Resolution order:
    1. RECKON_CONFIG_DIR env var
    2. $XDG_CONFIG_HOME/reckon
    3. ~/.config/reckon
    """
    config_dir = os.environ.get("RECKON_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "reckon"

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError("Unable to find home directory") from e
    return home / ".config" / "reckon"


def get_config_file_location() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    A missing file yields the defaults. RECKON_COMPAT=1 forces
    compatibility mode on.
    """
    path = path if path is not None else get_config_file_location()

    if path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")
        settings = Settings.from_dict(data)
    else:
        logger.debug("No config file at %s, using defaults", path)
        settings = Settings()

    if os.environ.get("RECKON_COMPAT") == "1":
        settings.compatibility_mode = True

    return settings
