"""
Report session state shared by the HTTP control surface.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..media import DeviceInfo, MediaCodecSource
from ..report import CodecBlock, FilterState, build_blocks, export_text, render_state
from ..report.filters import select

LOG = logging.getLogger(__name__)


class ReportSession:
    """
    Hold the immutable block list and the single current :class:`FilterState`.

    Blocks are built once, at construction; every action afterwards only swaps
    the filter snapshot.
    """

    def __init__(
        self,
        blocks: Sequence[CodecBlock],
        device: Optional[DeviceInfo] = None,
        filters: Optional[FilterState] = None,
    ) -> None:
        self.blocks = tuple(blocks)
        self.device = device or DeviceInfo()
        self.filters = filters or FilterState()

    @classmethod
    def from_source(cls, source: MediaCodecSource) -> "ReportSession":
        return cls(build_blocks(source), device=source.device_info())

    def set_filters(self, filters: FilterState) -> FilterState:
        self.filters = filters
        LOG.debug("Filters now %s", filters.to_dict())
        return filters

    def set_query(self, query: str | None) -> FilterState:
        return self.set_filters(self.filters.with_query(query))

    def cycle_hw(self) -> FilterState:
        return self.set_filters(self.filters.cycle_hw())

    def cycle_type(self) -> FilterState:
        return self.set_filters(self.filters.cycle_type())

    def visible_blocks(self) -> List[CodecBlock]:
        f = self.filters
        return select(self.blocks, f.query, f.hw_filter, f.type_filter)

    def render(self) -> str:
        return render_state(self.blocks, self.filters)

    def export(self, now: Optional[datetime] = None) -> str:
        return export_text(self.device, self.render(), now=now)

    def snapshot(self) -> dict:
        return {
            "device": self.device.to_dict(),
            "filters": self.filters.to_dict(),
            "totalBlocks": len(self.blocks),
            "visibleBlocks": len(self.visible_blocks()),
        }
