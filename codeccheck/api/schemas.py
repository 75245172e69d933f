"""
Pydantic schemas for the HTTP control surface.
"""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..report import FilterState, HwFilter, TypeFilter


class FilterStateModel(BaseModel):
    hw_filter: HwFilter = Field(
        default=HwFilter.ALL,
        validation_alias=AliasChoices("hw_filter", "hwFilter", "hw"),
        serialization_alias="hwFilter",
    )
    type_filter: TypeFilter = Field(
        default=TypeFilter.ALL,
        validation_alias=AliasChoices("type_filter", "typeFilter", "type"),
        serialization_alias="typeFilter",
    )
    query: str = ""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("hw_filter", "type_filter", mode="before")
    @classmethod
    def _normalise_filter(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("query", mode="before")
    @classmethod
    def _normalise_query(cls, value: object) -> str:
        return "" if value is None else str(value)

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterStateModel":
        return cls(hw_filter=state.hw_filter, type_filter=state.type_filter, query=state.query)

    def to_state(self) -> FilterState:
        return FilterState(hw_filter=self.hw_filter, type_filter=self.type_filter, query=self.query)


class QueryRequest(BaseModel):
    query: str = ""

    @field_validator("query", mode="before")
    @classmethod
    def _normalise_query(cls, value: object) -> str:
        return "" if value is None else str(value)


class CodecBlockModel(BaseModel):
    text: str
    codec_name: str = Field(serialization_alias="codecName")
    is_hw: bool = Field(serialization_alias="isHW")
    is_audio: bool = Field(serialization_alias="isAudio")


class BlockCollection(BaseModel):
    filters: FilterStateModel
    total: int
    blocks: List[CodecBlockModel] = Field(default_factory=list)
