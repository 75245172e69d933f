"""HTTP control surface for the codec report."""

from __future__ import annotations

from .server import create_app
from .state import ReportSession

__all__ = ["ReportSession", "create_app"]
