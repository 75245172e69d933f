"""
Report block construction.

Turns the media subsystem's codec list into one self-contained text block per
(codec, supported MIME type) pair, tagged with the codec's classification so
the filter stage never has to look at the raw records again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..media import MediaCodecSource, RawCodecDescriptor
from ..tables import CODEC_CAPABILITIES, CODEC_PROFILE_LEVEL, ConstantTable, resolve
from .classifier import classify_audio, classify_hw
from .namespaces import level_prefix, profile_prefix

LOG = logging.getLogger(__name__)

COLOR_FORMAT_PREFIX = "COLOR_"


@dataclass(frozen=True, slots=True)
class CodecBlock:
    text: str
    codec_name: str
    is_hw: bool
    is_audio: bool

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "codecName": self.codec_name,
            "isHW": bool(self.is_hw),
            "isAudio": bool(self.is_audio),
        }


def format_color_format(value: int, table: ConstantTable) -> str:
    # Unsigned 32-bit, lower-case hex, matching how the platform prints them.
    return f"0x{int(value) & 0xFFFFFFFF:x} ({table.name_for(value)})"


def classification_line(is_hw: bool, is_audio: bool, is_encoder: bool) -> str:
    return "  {} {} {}".format(
        "Hardware" if is_hw else "Software",
        "audio" if is_audio else "video",
        "encoder" if is_encoder else "decoder",
    )


class ReportBuilder:
    """
    Build the ordered :class:`CodecBlock` sequence from a media source.
    """

    def __init__(self, source: MediaCodecSource) -> None:
        self.source = source
        self._color_formats = resolve(COLOR_FORMAT_PREFIX, CODEC_CAPABILITIES)

    def build(self) -> Tuple[CodecBlock, ...]:
        blocks: List[CodecBlock] = []
        codecs = list(self.source.codecs())
        for codec in codecs:
            blocks.extend(self._blocks_for_codec(codec))
        LOG.info("Built %d codec blocks from %d codecs", len(blocks), len(codecs))
        return tuple(blocks)

    def _blocks_for_codec(self, codec: RawCodecDescriptor) -> List[CodecBlock]:
        is_hw = classify_hw(codec.name)
        first_type = codec.supported_types[0] if codec.supported_types else None
        is_audio = classify_audio(first_type)
        LOG.debug(
            "Codec %s: hw=%s audio=%s encoder=%s types=%s",
            codec.name,
            is_hw,
            is_audio,
            codec.is_encoder,
            list(codec.supported_types),
        )

        blocks: List[CodecBlock] = []
        for position, mime in enumerate(codec.supported_types):
            lines = [
                codec.name,
                classification_line(is_hw, is_audio, codec.is_encoder),
                f"  MIME type: {mime}",
            ]
            if not is_audio:
                lines.extend(self._video_lines(codec, mime, position))
            text = "\n".join(lines) + "\n"
            blocks.append(CodecBlock(text=text, codec_name=codec.name, is_hw=is_hw, is_audio=is_audio))
        return blocks

    def _video_lines(self, codec: RawCodecDescriptor, mime: str, position: int) -> List[str]:
        caps = self.source.capabilities_for_type(codec, mime, position=position)
        lines = ["    Color formats:"]
        for color_format in caps.color_formats:
            lines.append(f"      {format_color_format(color_format, self._color_formats)}")

        profiles_prefix = profile_prefix(mime)
        if not profiles_prefix:
            return lines

        profiles = resolve(profiles_prefix, CODEC_PROFILE_LEVEL)
        levels = resolve(level_prefix(mime), CODEC_PROFILE_LEVEL)
        lines.append("    Profile levels:")
        for pair in caps.profile_levels:
            lines.append(
                f"      Profile: {profiles.name_for(pair.profile)}  Level: {levels.name_for(pair.level)}"
            )
        return lines


def build_blocks(source: MediaCodecSource) -> Tuple[CodecBlock, ...]:
    return ReportBuilder(source).build()
