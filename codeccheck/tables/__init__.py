"""
Media platform constant tables and their resolution to symbolic names.
"""

from __future__ import annotations

__all__ = [
    "CODEC_CAPABILITIES",
    "CODEC_PROFILE_LEVEL",
    "ConstantTable",
    "UNKNOWN",
    "resolve",
]

from .declarations import CODEC_CAPABILITIES, CODEC_PROFILE_LEVEL
from .resolver import UNKNOWN, ConstantTable, resolve
