"""
Profile/level constant namespaces per codec family.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple


class CodecFamily(NamedTuple):
    token: str
    profile_prefix: str
    level_prefix: str


# First match wins, in this order.
CODEC_FAMILIES: Tuple[CodecFamily, ...] = (
    CodecFamily("avc", "AVCProfile", "AVCLevel"),
    # HEVC levels are named HEVCMainTierLevel*/HEVCHighTierLevel*.
    CodecFamily("hevc", "HEVCProfile", "HEVC"),
    CodecFamily("av01", "AV1Profile", "AV1Level"),
    CodecFamily("vp9", "VP9Profile", "VP9Level"),
    CodecFamily("vp8", "VP8Profile", "VP8Level"),
)


def family_for(mime: str) -> CodecFamily | None:
    lower = mime.lower()
    for family in CODEC_FAMILIES:
        if family.token in lower:
            return family
    return None


def profile_prefix(mime: str) -> str:
    family = family_for(mime)
    return family.profile_prefix if family else ""


def level_prefix(mime: str) -> str:
    family = family_for(mime)
    return family.level_prefix if family else ""
