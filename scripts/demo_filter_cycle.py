"""Interactive demo of the report's search and filter cycling.

Loads a device snapshot, builds the report once and then reads commands from
stdin, re-rendering after each one:

* ``/h`` cycles the hardware filter (ALL → HW → SW)
* ``/t`` cycles the type filter (ALL → VIDEO → AUDIO)
* ``/x`` prints the export text
* ``/q`` quits
* anything else replaces the search query (an empty line clears it)

Example::

    python scripts/demo_filter_cycle.py --snapshot configs/sample_device.yaml
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from codeccheck.api.state import ReportSession
from codeccheck.media import SnapshotCodecSource
from codeccheck.report import highlight
from codeccheck.utils.logging import configure_logging


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="codeccheck filter demo")
    parser.add_argument(
        "--snapshot",
        default="configs/sample_device.yaml",
        help="YAML snapshot of the device codec list.",
    )
    return parser.parse_args(argv)


def show(session: ReportSession) -> None:
    filters = session.filters
    print(f"--- HW/SW: {filters.hw_filter.value}  Type: {filters.type_filter.value}  Query: {filters.query!r}")
    print(highlight(session.render(), filters.query), end="")


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    session = ReportSession.from_source(SnapshotCodecSource(args.snapshot))
    show(session)

    for line in sys.stdin:
        command = line.rstrip("\n")
        if command == "/q":
            break
        if command == "/h":
            session.cycle_hw()
        elif command == "/t":
            session.cycle_type()
        elif command == "/x":
            print(session.export(), end="")
            continue
        else:
            session.set_query(command)
        show(session)

    return 0


if __name__ == "__main__":
    sys.exit(main())
