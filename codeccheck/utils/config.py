"""
Configuration loading.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .. import ReportConfig

ENV_CONFIG_VAR = "CODECCHECK_CONFIG"
ENV_SNAPSHOT_VAR = "CODECCHECK_SNAPSHOT"

LOG = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or has the wrong shape."""


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(payload).__name__}")
    return payload


def load_config(path: Optional[Union[str, Path]] = None) -> ReportConfig:
    """
    Build a :class:`ReportConfig` from defaults, an optional YAML file and the
    environment.

    The file path falls back to ``$CODECCHECK_CONFIG``; ``$CODECCHECK_SNAPSHOT``
    overrides whatever snapshot the file names.
    """

    config = ReportConfig()

    candidate = path if path is not None else os.environ.get(ENV_CONFIG_VAR)
    if candidate:
        config_path = Path(candidate).expanduser()
        payload = _read_yaml(config_path)
        LOG.debug("Loaded config from %s", config_path)

        snapshot = payload.get("snapshot")
        if snapshot:
            snapshot_path = Path(str(snapshot)).expanduser()
            if not snapshot_path.is_absolute():
                snapshot_path = config_path.parent / snapshot_path
            config.snapshot = snapshot_path
        if "log_level" in payload:
            config.log_level = str(payload.get("log_level") or "INFO")

        server = payload.get("server") or {}
        if not isinstance(server, dict):
            raise ConfigError("'server' section must be a mapping")
        if "host" in server:
            config.host = str(server["host"])
        if "port" in server:
            try:
                config.port = int(server["port"])
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid server port {server['port']!r}") from exc

    env_snapshot = os.environ.get(ENV_SNAPSHOT_VAR)
    if env_snapshot:
        config.snapshot = Path(env_snapshot).expanduser()

    return config
