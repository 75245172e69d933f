"""
Copyable report export.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..media import DeviceInfo

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def export_header(device: DeviceInfo, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime(DATE_FORMAT)
    return f"Device: {device.manufacturer} {device.model}\nDate: {stamp}\n\n"


def export_text(device: DeviceInfo, report: str, now: Optional[datetime] = None) -> str:
    """
    Prefix the currently rendered report with the device/date header.
    """

    return export_header(device, now) + report
