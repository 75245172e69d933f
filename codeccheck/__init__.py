"""
codeccheck package.

Inspects the codecs a device's media subsystem reports, classifies them
(hardware/software, audio/video, encoder/decoder), resolves the raw integer
constants for colour formats, profiles and levels to their symbolic names and
renders everything as a searchable, filterable text report.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ReportConfig",
]


class ReportConfig:
    """Top level configuration shared by the CLI and the HTTP server."""

    def __init__(
        self,
        snapshot: Path | None = None,
        log_level: str = "INFO",
        host: str = "127.0.0.1",
        port: int = 8080,
    ) -> None:
        self.snapshot = snapshot
        self.log_level = log_level
        self.host = host
        self.port = port
