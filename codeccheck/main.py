"""
Command line entrypoint.

Resolves configuration, initialises logging, builds the codec report once and
either prints it (optionally filtered or as an export) or serves it over HTTP.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, TextIO

from . import ReportConfig
from .api.server import create_app
from .api.state import ReportSession
from .media import MediaCodecSource, SnapshotCodecSource, SnapshotError, StaticCodecSource
from .report import FilterState, HwFilter, TypeFilter, highlight
from .utils.config import ConfigError, load_config
from .utils.logging import configure_logging

LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(session: ReportSession) -> AsyncIterator[None]:
    LOG.info("Report server starting with %d codec blocks", len(session.blocks))
    try:
        yield
    finally:
        LOG.info("Report server shutting down")


async def serve(session: ReportSession, config: ReportConfig) -> None:
    """
    Run the HTTP control surface inside an asyncio loop.
    """

    import uvicorn

    @asynccontextmanager
    async def app_lifespan(_app) -> AsyncIterator[None]:
        async with lifespan(session):
            yield

    app = create_app(session=session, config=config, lifespan=app_lifespan)
    server_config = uvicorn.Config(
        app=app,
        host=config.host,
        port=config.port,
        log_config=None,
        log_level=config.log_level.lower(),
        reload=False,
    )
    server = uvicorn.Server(config=server_config)
    await server.serve()


def open_source(config: ReportConfig) -> MediaCodecSource:
    if config.snapshot is None:
        LOG.warning("No snapshot configured; the report will be empty.")
        return StaticCodecSource()
    return SnapshotCodecSource(config.snapshot)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Media codec capability report")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--snapshot", help="YAML snapshot of the device codec list")
    parser.add_argument("--query", default="", help="case-insensitive text filter")
    parser.add_argument(
        "--hw",
        type=str.upper,
        choices=[member.value for member in HwFilter],
        default=HwFilter.ALL.value,
        help="hardware/software filter",
    )
    parser.add_argument(
        "--type",
        dest="media_type",
        type=str.upper,
        choices=[member.value for member in TypeFilter],
        default=TypeFilter.ALL.value,
        help="audio/video filter",
    )
    parser.add_argument("--export", action="store_true", help="prefix the report with device and date")
    parser.add_argument("--color", action="store_true", help="highlight query matches")
    parser.add_argument("--serve", action="store_true", help="serve the report over HTTP")
    parser.add_argument("--host", help="bind host for the API server")
    parser.add_argument("--port", type=int, help="bind port for the API server")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> ReportConfig:
    config = load_config(args.config)
    if args.snapshot:
        config.snapshot = Path(args.snapshot).expanduser()
    if args.host:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level:
        config.log_level = args.log_level
    return config


def run(argv: Optional[list[str]] = None, out: TextIO = sys.stdout) -> int:
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    try:
        session = ReportSession.from_source(open_source(config))
    except SnapshotError as exc:
        LOG.error("%s", exc)
        return 1

    session.set_filters(
        FilterState(
            hw_filter=HwFilter(args.hw),
            type_filter=TypeFilter(args.media_type),
            query=args.query,
        )
    )

    if args.serve:
        try:
            asyncio.run(serve(session, config))
        except KeyboardInterrupt:
            LOG.info("Server interrupted by user.")
        return 0

    text = session.export() if args.export else session.render()
    if args.color:
        text = highlight(text, args.query)
    out.write(text)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
