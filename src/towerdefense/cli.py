"""Command-line entry point: build the default level, play it, report.

Usage:
    towerdefense [--seed N] [--log-level LEVEL] [--quiet]

Exit codes:
    0 -- the level was played (won or lost)
    1 -- the level could not be set up
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from towerdefense.comms.event_bus import EventBus
from towerdefense.config import settings
from towerdefense.errors import InvalidPositionError
from towerdefense.narrator import Narrator
from towerdefense.simulation.level import Level, Verdict
from towerdefense.simulation.random_source import SeededRandomSource
from towerdefense.simulation.scenario import DEFAULT_SETUP, LevelSetup, build_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="towerdefense", description="Turn-based tower defense simulation"
    )
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for the random source (default: random)")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        help="Log level (DEBUG shows turn boundaries)")
    parser.add_argument("--quiet", action="store_true", default=not settings.narrate,
                        help="Only report the verdict")
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{message}</level>")


def run(level: Level, narrator: Optional[Narrator] = None) -> Verdict:
    """Play *level* turn by turn, flushing narration after each turn."""
    if level.active_count == 0:
        return level.play()
    while not level.is_finished:
        level.play_turn()
        if narrator is not None:
            narrator.flush()
    return level.verdict


def main(argv: Optional[Sequence[str]] = None,
         setup: LevelSetup = DEFAULT_SETUP) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    rng = SeededRandomSource(args.seed)
    event_bus = EventBus(maxsize=settings.event_queue_size)
    try:
        level = build_level(setup, rng=rng, event_bus=event_bus)
    except InvalidPositionError as e:
        logger.error(str(e))
        return 1

    narrator = None if args.quiet else Narrator(event_bus)
    verdict = run(level, narrator)

    logger.debug(f"Stats: {level.stats.to_dict()}")
    # Verdict goes to stdout; narration and errors go to the loguru sink on stderr
    print("Player " + ("won!" if verdict is Verdict.WIN else "lost..."))
    return 0


if __name__ == "__main__":
    sys.exit(main())
