"""
Integer constant → symbolic name resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from .declarations import CODEC_PROFILE_LEVEL, DeclarationTable

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ConstantTable:
    """
    Read-only mapping from integer value to declared name for one prefix.
    """

    prefix: str
    names: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    def name_for(self, value: int) -> str:
        return self.names.get(int(value), UNKNOWN)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[int]:
        return iter(self.names)

    def __contains__(self, value: object) -> bool:
        return value in self.names


@lru_cache(maxsize=None)
def resolve(prefix: str, declarations: DeclarationTable = CODEC_PROFILE_LEVEL) -> ConstantTable:
    """
    Collect every declared constant whose name starts with ``prefix``.

    Declarations are scanned in order so a later name overwrites an earlier one
    sharing its value.  An empty prefix, or one that matches nothing, yields an
    empty table.
    """

    names: Dict[int, str] = {}
    if prefix:
        for name, value in declarations:
            if name.startswith(prefix):
                names[int(value)] = name
    return ConstantTable(prefix=prefix, names=MappingProxyType(names))
