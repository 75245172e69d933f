"""
Report assembly: classification, block building, filtering and export.
"""

from __future__ import annotations

__all__ = [
    "CodecBlock",
    "FilterState",
    "HwFilter",
    "InvalidFilter",
    "ReportBuilder",
    "TypeFilter",
    "build_blocks",
    "classify_audio",
    "classify_hw",
    "export_text",
    "highlight",
    "level_prefix",
    "parse_filter",
    "profile_prefix",
    "render",
    "render_state",
]

from .builder import CodecBlock, ReportBuilder, build_blocks
from .classifier import classify_audio, classify_hw
from .export import export_text
from .filters import (
    FilterState,
    HwFilter,
    InvalidFilter,
    TypeFilter,
    highlight,
    parse_filter,
    render,
    render_state,
)
from .namespaces import level_prefix, profile_prefix
