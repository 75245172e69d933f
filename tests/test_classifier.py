"""Tests covering hardware/audio classification and namespace selection."""

from __future__ import annotations

import pytest

from codeccheck.report import classify_audio, classify_hw, level_prefix, profile_prefix


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("OMX.qcom.video.decoder.avc", True),
        ("OMX.google.h264.decoder", False),
        ("c2.android.vp9.decoder", False),
        ("c2.qti.avc.encoder", True),
        ("OMX.MTK.VIDEO.DECODER.HEVC", True),
        ("c2.exynos.h264.decoder", True),
        ("OMX.Intel.hw_vd.h264", True),
        ("ffmpeg.h264", False),
    ],
)
def test_classify_hw(name: str, expected: bool) -> None:
    assert classify_hw(name) is expected


def test_classify_audio_uses_prefix_case_insensitively() -> None:
    assert classify_audio("audio/mp4a-latm") is True
    assert classify_audio("AUDIO/opus") is True
    assert classify_audio("video/avc") is False
    assert classify_audio(None) is False
    assert classify_audio("") is False


@pytest.mark.parametrize(
    ("mime", "profile", "level"),
    [
        ("video/avc", "AVCProfile", "AVCLevel"),
        ("video/hevc", "HEVCProfile", "HEVC"),
        ("video/av01", "AV1Profile", "AV1Level"),
        ("video/x-vnd.on2.vp9", "VP9Profile", "VP9Level"),
        ("video/x-vnd.on2.vp8", "VP8Profile", "VP8Level"),
        ("VIDEO/AVC", "AVCProfile", "AVCLevel"),
        ("video/mp4v-es", "", ""),
        ("video/dolby-vision", "", ""),
        ("audio/opus", "", ""),
    ],
)
def test_profile_level_prefixes(mime: str, profile: str, level: str) -> None:
    assert profile_prefix(mime) == profile
    assert level_prefix(mime) == level


def test_first_listed_family_wins() -> None:
    assert profile_prefix("video/avc+vp9") == "AVCProfile"
