"""Read observation streams: a count followed by ``x y feedback`` records."""

from __future__ import annotations

import logging
from typing import List

from .constraints import Feedback, Observation
from .geometry import Point

logger = logging.getLogger(__name__)


class ObservationFormatError(ValueError):
    pass


def _parse_float(token: str, record: int, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ObservationFormatError(f"[record {record}] {what} is not a number: {token!r}") from None


def parse_observations(text: str) -> List[Observation]:
    tokens = text.split()
    if not tokens:
        raise ObservationFormatError("missing observation count")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ObservationFormatError(f"observation count is not an integer: {tokens[0]!r}") from None
    if count < 0:
        raise ObservationFormatError(f"observation count must be non-negative, got {count}")

    observations: List[Observation] = []
    pos = 1
    for record in range(1, count + 1):
        fields = tokens[pos:pos + 3]
        if not fields:
            logger.warning("Stream ended after %d of %d records", record - 1, count)
            break
        if len(fields) < 3:
            raise ObservationFormatError(f"[record {record}] expected 'x y feedback', got {fields!r}")
        x = _parse_float(fields[0], record, "x")
        y = _parse_float(fields[1], record, "y")
        feedback = Feedback.from_token(fields[2])
        observations.append(Observation(Point(x, y), feedback))
        pos += 3

    if pos < len(tokens):
        logger.warning("Ignoring %d trailing token(s) after %d records", len(tokens) - pos, count)
    return observations


__all__ = ["ObservationFormatError", "parse_observations"]
