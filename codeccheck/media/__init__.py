"""
Adapters over the platform media subsystem and the raw records they return.
"""

from __future__ import annotations

from .source import MediaCodecSource, SnapshotCodecSource, SnapshotError, StaticCodecSource
from .types import CodecEntry, DeviceInfo, ProfileLevel, RawCodecDescriptor, RawTypeCapabilities

__all__ = [
    "CodecEntry",
    "DeviceInfo",
    "MediaCodecSource",
    "ProfileLevel",
    "RawCodecDescriptor",
    "RawTypeCapabilities",
    "SnapshotCodecSource",
    "SnapshotError",
    "StaticCodecSource",
]
