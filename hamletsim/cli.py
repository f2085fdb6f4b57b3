"""Interactive loop that advances a major and a minor settlement day by day."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from hamletsim.buildings import ResourceMap, ResourceType
from hamletsim.settlement import MajorSettlement, MinorSettlement
from hamletsim.ui import ConsoleObserver

PROMPT = "Press ENTER to advance day. Type Q + ENTER to quit.\n"
SEPARATOR = (
    "\n-------------------------------------------------------------------------------\n"
)


def initial_resources() -> ResourceMap:
    """Return the starting resource pool."""
    return {resource: 10 for resource in ResourceType}


def run_game(lines: Iterable[str], out: TextIO) -> int:
    """Advance one day per input line until Q or end of input; return days run."""
    resources = initial_resources()
    observer = ConsoleObserver(out)
    major = MajorSettlement(resources)
    minor = MinorSettlement(resources)
    major.add_observer(observer)
    minor.add_observer(observer)

    source = iter(lines)
    day = 0
    while True:
        out.write(PROMPT)
        line = next(source, None)
        if line is None:
            break
        if line.rstrip("\r\n") in ("Q", "q"):
            break
        major.advance_day(day)
        minor.advance_day(day)
        day += 1
        out.write(SEPARATOR)
    return day


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hamletsim",
        description="Advance a small settlement simulation one day per ENTER.",
    )
    parser.parse_args(argv)
    run_game(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())