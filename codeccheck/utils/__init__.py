"""Utility helpers for codeccheck."""

from .config import ConfigError, load_config
from .logging import configure_logging

__all__ = ["ConfigError", "configure_logging", "load_config"]
