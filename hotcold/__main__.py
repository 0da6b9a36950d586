import argparse
import logging
import sys
from typing import Optional, Sequence

from hotcold import RegionOptions, RegionTracker, parse_observations

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path) as fin:
        return fin.read()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Report the area still consistent with Hotter/Colder/Same clues"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Observation stream to read (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--room-size",
        type=float,
        default=10.0,
        help="Side length of the square room (default: 10)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        options = RegionOptions(room_size=args.room_size)
        observations = parse_observations(_read_input(args.path))
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(1)

    logger.info("Read %d observation(s) from %s", len(observations), args.path)
    tracker = RegionTracker(options)
    for observation in observations:
        step = tracker.observe(observation)
        print(step.formatted)


if __name__ == "__main__":
    main()
