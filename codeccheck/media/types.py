"""
Raw records reported by the media subsystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ProfileLevel:
    profile: int
    level: int


@dataclass(frozen=True, slots=True)
class RawTypeCapabilities:
    """
    Capability details for one (codec, MIME type) pair.
    """

    color_formats: Tuple[int, ...] = ()
    profile_levels: Tuple[ProfileLevel, ...] = ()


@dataclass(frozen=True, slots=True)
class RawCodecDescriptor:
    name: str
    is_encoder: bool = False
    supported_types: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    manufacturer: str = "unknown"
    model: str = "unknown"

    def to_dict(self) -> dict:
        return {"manufacturer": self.manufacturer, "model": self.model}


@dataclass(frozen=True)
class CodecEntry:
    """
    A descriptor together with the capabilities of each of its types.

    ``capabilities`` is positional: item ``i`` belongs to
    ``descriptor.supported_types[i]``.  Missing trailing items mean no data.
    """

    descriptor: RawCodecDescriptor
    capabilities: Tuple[RawTypeCapabilities, ...] = ()

    def capabilities_at(self, position: int) -> RawTypeCapabilities:
        if 0 <= position < len(self.capabilities):
            return self.capabilities[position]
        return RawTypeCapabilities()

    def capabilities_for(self, mime: str) -> RawTypeCapabilities:
        for position, candidate in enumerate(self.descriptor.supported_types):
            if candidate == mime:
                return self.capabilities_at(position)
        return RawTypeCapabilities()
