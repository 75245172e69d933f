"""
Search and categorical filtering over built report blocks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Type, TypeVar, Union

from .builder import CodecBlock

E = TypeVar("E", bound=Enum)


class InvalidFilter(ValueError):
    """Raised when a filter name is not one of the known values."""


class HwFilter(str, Enum):
    """Hardware/software filter, cycled ALL → HW → SW → ALL."""

    ALL = "ALL"
    HW = "HW"
    SW = "SW"

    def next(self) -> "HwFilter":
        order = list(HwFilter)
        return order[(order.index(self) + 1) % len(order)]

    def matches(self, is_hw: bool) -> bool:
        if self is HwFilter.HW:
            return is_hw
        if self is HwFilter.SW:
            return not is_hw
        return True


class TypeFilter(str, Enum):
    """Media type filter, cycled ALL → VIDEO → AUDIO → ALL."""

    ALL = "ALL"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"

    def next(self) -> "TypeFilter":
        order = list(TypeFilter)
        return order[(order.index(self) + 1) % len(order)]

    def matches(self, is_audio: bool) -> bool:
        if self is TypeFilter.AUDIO:
            return is_audio
        if self is TypeFilter.VIDEO:
            return not is_audio
        return True


def parse_filter(enum_cls: Type[E], value: Union[str, E, None]) -> E:
    if value is None:
        return enum_cls("ALL")
    if isinstance(value, enum_cls):
        return value
    candidate = str(value).strip().upper()
    try:
        return enum_cls(candidate)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidFilter(f"Unknown {enum_cls.__name__} '{value}' (expected one of {choices})") from None


@dataclass(frozen=True)
class FilterState:
    """
    Snapshot of the user's current query and filters.

    Every user action produces a new snapshot; nothing else resets fields.
    """

    hw_filter: HwFilter = HwFilter.ALL
    type_filter: TypeFilter = TypeFilter.ALL
    query: str = ""

    def cycle_hw(self) -> "FilterState":
        return replace(self, hw_filter=self.hw_filter.next())

    def cycle_type(self) -> "FilterState":
        return replace(self, type_filter=self.type_filter.next())

    def with_query(self, query: str | None) -> "FilterState":
        return replace(self, query=query or "")

    def to_dict(self) -> dict:
        return {
            "hwFilter": self.hw_filter.value,
            "typeFilter": self.type_filter.value,
            "query": self.query,
        }


def block_matches(block: CodecBlock, query: str, hw_filter: HwFilter, type_filter: TypeFilter) -> bool:
    if query and query.lower() not in block.text.lower():
        return False
    return hw_filter.matches(block.is_hw) and type_filter.matches(block.is_audio)


def select(
    blocks: Iterable[CodecBlock],
    query: str = "",
    hw_filter: HwFilter = HwFilter.ALL,
    type_filter: TypeFilter = TypeFilter.ALL,
) -> List[CodecBlock]:
    return [block for block in blocks if block_matches(block, query, hw_filter, type_filter)]


def render(
    blocks: Iterable[CodecBlock],
    query: str = "",
    hw_filter: HwFilter = HwFilter.ALL,
    type_filter: TypeFilter = TypeFilter.ALL,
) -> str:
    """
    Concatenate the matching blocks in build order, each followed by a blank line.
    """

    return "".join(block.text + "\n" for block in select(blocks, query, hw_filter, type_filter))


def render_state(blocks: Iterable[CodecBlock], state: FilterState) -> str:
    return render(blocks, state.query, state.hw_filter, state.type_filter)


def highlight(text: str, query: str, start: str = "\x1b[1;33m", end: str = "\x1b[0m") -> str:
    """
    Wrap every case-insensitive occurrence of ``query`` in ``start``/``end``.
    """

    if not query:
        return text
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return pattern.sub(lambda match: f"{start}{match.group(0)}{end}", text)
