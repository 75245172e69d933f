"""
FastAPI control surface for the codec report.

The server is a display surface over one :class:`ReportSession`: the report is
served as plain text and filter/query actions replace the session's filter
snapshot.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .. import ReportConfig
from ..report import HwFilter, InvalidFilter, TypeFilter, parse_filter, render
from . import schemas
from .state import ReportSession

LOG = logging.getLogger(__name__)


def _blocks_payload(session: ReportSession, blocks) -> schemas.BlockCollection:
    return schemas.BlockCollection(
        filters=schemas.FilterStateModel.from_state(session.filters),
        total=len(session.blocks),
        blocks=[
            schemas.CodecBlockModel(
                text=block.text,
                codec_name=block.codec_name,
                is_hw=block.is_hw,
                is_audio=block.is_audio,
            )
            for block in blocks
        ],
    )


def create_app(
    *,
    session: ReportSession,
    config: Optional[ReportConfig] = None,
    lifespan: Optional[Callable[..., object]] = None,
) -> FastAPI:
    app = FastAPI(title="Codec Check API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.session = session
    app.state.config = config or ReportConfig()

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok", "blocks": len(session.blocks)}

    @app.get("/state")
    async def get_state() -> dict:
        return session.snapshot()

    @app.get("/report", response_class=PlainTextResponse)
    async def get_report(
        query: Optional[str] = None,
        hw: Optional[str] = None,
        type_filter_name: Optional[str] = Query(default=None, alias="type"),
    ) -> str:
        if query is None and hw is None and type_filter_name is None:
            return session.render()
        # Ad-hoc render; the session's filters stay untouched.
        try:
            hw_filter = parse_filter(HwFilter, hw)
            type_filter = parse_filter(TypeFilter, type_filter_name)
        except InvalidFilter as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return render(session.blocks, query or "", hw_filter, type_filter)

    @app.get("/blocks", response_model=schemas.BlockCollection)
    async def get_blocks(include_hidden: bool = Query(default=False, alias="all")) -> schemas.BlockCollection:
        if include_hidden:
            return _blocks_payload(session, session.blocks)
        return _blocks_payload(session, session.visible_blocks())

    @app.get("/filters", response_model=schemas.FilterStateModel)
    async def get_filters() -> schemas.FilterStateModel:
        return schemas.FilterStateModel.from_state(session.filters)

    @app.put("/filters", response_model=schemas.FilterStateModel)
    async def put_filters(payload: schemas.FilterStateModel) -> schemas.FilterStateModel:
        state = session.set_filters(payload.to_state())
        return schemas.FilterStateModel.from_state(state)

    @app.post("/filters/query", response_model=schemas.FilterStateModel)
    async def set_query(payload: schemas.QueryRequest) -> schemas.FilterStateModel:
        return schemas.FilterStateModel.from_state(session.set_query(payload.query))

    @app.post("/filters/hw/cycle", response_model=schemas.FilterStateModel)
    async def cycle_hw() -> schemas.FilterStateModel:
        return schemas.FilterStateModel.from_state(session.cycle_hw())

    @app.post("/filters/type/cycle", response_model=schemas.FilterStateModel)
    async def cycle_type() -> schemas.FilterStateModel:
        return schemas.FilterStateModel.from_state(session.cycle_type())

    @app.get("/export", response_class=PlainTextResponse)
    async def export() -> str:
        return session.export()

    return app
