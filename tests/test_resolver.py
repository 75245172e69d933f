"""Tests covering constant table resolution."""

from __future__ import annotations

import pytest

from codeccheck.tables import CODEC_CAPABILITIES, CODEC_PROFILE_LEVEL, UNKNOWN, resolve


def test_color_formats_resolve_to_declared_names() -> None:
    table = resolve("COLOR_", CODEC_CAPABILITIES)

    assert table.name_for(0x7F000789) == "COLOR_FormatSurface"
    assert table.name_for(0x7F420888) == "COLOR_FormatYUV420Flexible"
    assert table.name_for(21) == "COLOR_FormatYUV420SemiPlanar"
    assert len(table) == len(CODEC_CAPABILITIES)


def test_unknown_value_resolves_to_sentinel() -> None:
    table = resolve("AVCProfile", CODEC_PROFILE_LEVEL)

    assert table.name_for(0x7FFFFFFF) == UNKNOWN == "Unknown"
    assert 0x7FFFFFFF not in table


def test_prefix_without_matches_yields_empty_table() -> None:
    table = resolve("NoSuchPrefix", CODEC_PROFILE_LEVEL)

    assert len(table) == 0
    assert table.name_for(1) == "Unknown"


def test_empty_prefix_yields_empty_table() -> None:
    assert len(resolve("", CODEC_PROFILE_LEVEL)) == 0


def test_profile_and_level_families_are_separate() -> None:
    profiles = resolve("AVCProfile", CODEC_PROFILE_LEVEL)
    levels = resolve("AVCLevel", CODEC_PROFILE_LEVEL)

    assert profiles.name_for(1) == "AVCProfileBaseline"
    assert levels.name_for(1) == "AVCLevel1"
    assert all(name.startswith("AVCProfile") for name in profiles.names.values())
    assert all(name.startswith("AVCLevel") for name in levels.names.values())


def test_last_declared_name_wins_on_collision() -> None:
    declarations = (("ThingOne", 1), ("ThingTwo", 2), ("ThingUno", 1))

    table = resolve("Thing", declarations)

    assert table.name_for(1) == "ThingUno"
    assert table.name_for(2) == "ThingTwo"


def test_hevc_family_prefix_prefers_levels_over_profiles() -> None:
    table = resolve("HEVC", CODEC_PROFILE_LEVEL)

    # HEVCProfileMain and HEVCMainTierLevel1 share value 1; levels are declared later.
    assert table.name_for(0x1) == "HEVCMainTierLevel1"
    assert table.name_for(0x40000) == "HEVCMainTierLevel52"


def test_tables_are_read_only() -> None:
    table = resolve("VP9Level", CODEC_PROFILE_LEVEL)

    with pytest.raises(TypeError):
        table.names[999] = "Nope"  # type: ignore[index]
