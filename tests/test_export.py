"""Tests covering the copyable export text."""

from __future__ import annotations

from datetime import datetime

from codeccheck.api import ReportSession
from codeccheck.media import DeviceInfo
from codeccheck.report import TypeFilter, export_text


def test_export_text_prefixes_header() -> None:
    text = export_text(DeviceInfo("Acme", "Phone 1"), "report\n", now=datetime(2024, 3, 5, 7, 8, 9))

    assert text == "Device: Acme Phone 1\nDate: 2024-03-05 07:08:09\n\nreport\n"


def test_session_export_uses_current_filters(sample_source) -> None:
    session = ReportSession.from_source(sample_source)
    session.cycle_type()
    session.cycle_type()
    assert session.filters.type_filter is TypeFilter.AUDIO

    text = session.export(now=datetime(2024, 1, 1, 0, 0, 0))

    header = "Device: Acme Phone 1\nDate: 2024-01-01 00:00:00\n\n"
    assert text == header + session.render()
    assert "c2.android.aac.encoder" in text
    assert "OMX.qcom.video.decoder.avc" not in text
