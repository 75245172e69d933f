"""Tests covering snapshot loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from codeccheck.media import ProfileLevel, SnapshotCodecSource, SnapshotError, StaticCodecSource

SNAPSHOT = """
device:
  manufacturer: Acme
  model: Phone 1
codecs:
  - name: OMX.qcom.video.decoder.avc
    encoder: false
    types:
      - mime: video/avc
        color_formats: [0x7F000789, "0x15"]
        profile_levels:
          - [1, 1]
          - {profile: 2, level: "0x200"}
  - name: c2.android.aac.encoder
    encoder: true
    types:
      - audio/mp4a-latm
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "snapshot.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_snapshot_source_reads_codecs_in_order(tmp_path: Path) -> None:
    source = SnapshotCodecSource(_write(tmp_path, SNAPSHOT))

    codecs = source.codecs()
    assert [codec.name for codec in codecs] == ["OMX.qcom.video.decoder.avc", "c2.android.aac.encoder"]
    assert codecs[0].is_encoder is False
    assert codecs[1].is_encoder is True
    assert codecs[1].supported_types == ("audio/mp4a-latm",)

    caps = source.capabilities_for_type(codecs[0], "video/avc")
    assert caps.color_formats == (0x7F000789, 0x15)
    assert caps.profile_levels == (ProfileLevel(1, 1), ProfileLevel(2, 0x200))

    device = source.device_info()
    assert (device.manufacturer, device.model) == ("Acme", "Phone 1")


def test_bare_mime_entries_have_empty_capabilities(tmp_path: Path) -> None:
    source = SnapshotCodecSource(_write(tmp_path, SNAPSHOT))
    aac = source.codecs()[1]

    caps = source.capabilities_for_type(aac, "audio/mp4a-latm")

    assert caps.color_formats == ()
    assert caps.profile_levels == ()


def test_unknown_type_has_empty_capabilities(tmp_path: Path) -> None:
    source = SnapshotCodecSource(_write(tmp_path, SNAPSHOT))

    caps = source.capabilities_for_type(source.codecs()[0], "video/hevc")

    assert caps.color_formats == ()


def test_missing_snapshot_reports_no_codecs(tmp_path: Path) -> None:
    source = SnapshotCodecSource(tmp_path / "absent.yaml")

    assert list(source.codecs()) == []
    assert source.device_info().manufacturer == "unknown"


def test_empty_snapshot_reports_no_codecs(tmp_path: Path) -> None:
    source = SnapshotCodecSource(_write(tmp_path, ""))

    assert list(source.codecs()) == []


@pytest.mark.parametrize(
    "text",
    [
        "codecs: [unclosed",
        "- just\n- a list\n",
        "codecs: {name: x}\n",
        "codecs:\n  - encoder: true\n",
        "codecs:\n  - name: c\n    types:\n      - {color_formats: [1]}\n",
        "codecs:\n  - name: c\n    types:\n      - mime: video/avc\n        color_formats: [nope]\n",
        "codecs:\n  - name: c\n    types:\n      - mime: video/avc\n        profile_levels: [[1, 2, 3]]\n",
        "codecs:\n  - name: c\n    encoder: \"false\"\n    types: [audio/mpeg]\n",
        "codecs:\n  - name: c\n    encoder: 1\n",
    ],
)
def test_malformed_snapshot_raises(tmp_path: Path, text: str) -> None:
    with pytest.raises(SnapshotError):
        SnapshotCodecSource(_write(tmp_path, text))


def test_static_source_from_mapping() -> None:
    source = StaticCodecSource.from_mapping(
        {"codecs": [{"name": "c2.qti.avc.decoder", "types": ["video/avc"]}]}
    )

    assert [codec.name for codec in source.codecs()] == ["c2.qti.avc.decoder"]
    assert source.device_info().model == "unknown"


def test_directory_snapshot_reports_no_codecs(tmp_path: Path) -> None:
    source = SnapshotCodecSource(tmp_path)

    assert list(source.codecs()) == []


def test_undecodable_snapshot_raises(tmp_path: Path) -> None:
    path = tmp_path / "snapshot.yaml"
    path.write_bytes(b"\xff\xfe\x00codecs: []\n")

    with pytest.raises(SnapshotError):
        SnapshotCodecSource(path)


def test_duplicate_codecs_keep_their_own_capabilities(tmp_path: Path) -> None:
    text = (
        "codecs:\n"
        "  - name: c2.qti.avc.decoder\n"
        "    types:\n"
        "      - {mime: video/avc, color_formats: [21]}\n"
        "  - name: c2.qti.avc.decoder\n"
        "    types:\n"
        "      - {mime: video/avc, color_formats: [19]}\n"
    )
    source = SnapshotCodecSource(_write(tmp_path, text))

    first, second = source.codecs()

    assert first == second
    assert source.capabilities_for_type(first, "video/avc").color_formats == (21,)
    assert source.capabilities_for_type(second, "video/avc").color_formats == (19,)


def test_repeated_mime_is_resolved_by_position(tmp_path: Path) -> None:
    text = (
        "codecs:\n"
        "  - name: c2.qti.avc.decoder\n"
        "    types:\n"
        "      - {mime: video/avc, color_formats: [21]}\n"
        "      - {mime: video/avc, color_formats: [19]}\n"
    )
    source = SnapshotCodecSource(_write(tmp_path, text))
    (codec,) = source.codecs()

    assert source.capabilities_for_type(codec, "video/avc", position=0).color_formats == (21,)
    assert source.capabilities_for_type(codec, "video/avc", position=1).color_formats == (19,)
    assert source.capabilities_for_type(codec, "video/avc").color_formats == (21,)
