from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, TypedDict

import tomllib

from pyines.logger import log as _log
from pyines.resources import config_file


class LoggingConfig(TypedDict):
    debug: bool
    file: bool
    directory: str


class ReportConfig(TypedDict):
    show_raw_flags: bool
    warn_trailing_bytes: bool


class Config(TypedDict):
    logging: LoggingConfig
    report: ReportConfig


DEFAULT_CONFIG: Config = {
    "logging": {"debug": False, "file": False, "directory": "log"},
    "report": {"show_raw_flags": True, "warn_trailing_bytes": True},
}


def _deep_merge(
    target: MutableMapping[str, Any],
    overrides: Mapping[str, Any],
) -> MutableMapping[str, Any]:
    for key, value in overrides.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
    return target


def _validate_config(cfg: Config) -> None:
    for key in ("debug", "file"):
        if not isinstance(cfg["logging"][key], bool):
            raise ValueError(f"logging.{key} must be a boolean")

    if not isinstance(cfg["logging"]["directory"], str) or not cfg["logging"]["directory"]:
        raise ValueError("logging.directory must be a non-empty string")

    for key in ("show_raw_flags", "warn_trailing_bytes"):
        if not isinstance(cfg["report"][key], bool):
            raise ValueError(f"report.{key} must be a boolean")


def load_config(path: Optional[Path] = None) -> Config:
    """Read the TOML config at path (pyines.toml by default) over the defaults."""
    path = config_file if path is None else path
    if not path.exists():
        return deepcopy(DEFAULT_CONFIG)

    config = deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)

        _deep_merge(config, data)
        _validate_config(config)

    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        _log.error(f"Failed to load config {path}: {e}", exc_info=(type(e), e, e.__traceback__))
        return deepcopy(DEFAULT_CONFIG)

    return config
