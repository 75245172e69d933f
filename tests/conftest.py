from __future__ import annotations

import pytest

from codeccheck.media import (
    CodecEntry,
    DeviceInfo,
    ProfileLevel,
    RawCodecDescriptor,
    RawTypeCapabilities,
    StaticCodecSource,
)


def make_entry(name, types, *, encoder=False, caps=None) -> CodecEntry:
    # caps: mapping of MIME type to capabilities, or a list aligned with types.
    if isinstance(caps, dict):
        caps = [caps.get(mime, RawTypeCapabilities()) for mime in types]
    return CodecEntry(
        descriptor=RawCodecDescriptor(name=name, is_encoder=encoder, supported_types=tuple(types)),
        capabilities=tuple(caps or ()),
    )


@pytest.fixture
def sample_source() -> StaticCodecSource:
    return StaticCodecSource(
        [
            make_entry(
                "OMX.qcom.video.decoder.avc",
                ["video/avc"],
                caps={
                    "video/avc": RawTypeCapabilities(
                        color_formats=(0x7F000789,),
                        profile_levels=(ProfileLevel(1, 1),),
                    )
                },
            ),
            make_entry(
                "c2.android.vp9.decoder",
                ["video/x-vnd.on2.vp9"],
                caps={
                    "video/x-vnd.on2.vp9": RawTypeCapabilities(
                        color_formats=(0x7F420888,),
                        profile_levels=(ProfileLevel(0x01, 0x200),),
                    )
                },
            ),
            make_entry("c2.android.aac.encoder", ["audio/mp4a-latm"], encoder=True),
            make_entry(
                "c2.qti.mpeg4.decoder",
                ["video/mp4v-es"],
                caps={"video/mp4v-es": RawTypeCapabilities(color_formats=(21,))},
            ),
            make_entry("OMX.mtk.audio.decoder", ["audio/mpeg", "audio/flac"]),
        ],
        device=DeviceInfo(manufacturer="Acme", model="Phone 1"),
    )
