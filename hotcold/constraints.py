"""Translate distance clues into half-plane constraints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from .geometry import EPS, Point, midpoint, normal, same_point
from .halfplane import HalfPlane

logger = logging.getLogger(__name__)

DEFAULT_ROOM_SIZE = 10.0


class FeedbackError(ValueError):
    """Raised when a feedback token names no known clue."""


class Feedback(Enum):
    HOTTER = "Hotter"
    COLDER = "Colder"
    SAME = "Same"

    @classmethod
    def from_token(cls, token: str) -> "Feedback":
        """Classify ``token`` by its first character (``H``, ``C`` or ``S``)."""

        if not isinstance(token, str) or not token:
            raise FeedbackError(f"empty feedback token: {token!r}")
        try:
            return _FEEDBACK_BY_INITIAL[token[0]]
        except KeyError:
            raise FeedbackError(
                f"unknown feedback token {token!r}; expected Hotter, Colder or Same"
            ) from None


_FEEDBACK_BY_INITIAL = {
    "H": Feedback.HOTTER,
    "C": Feedback.COLDER,
    "S": Feedback.SAME,
}


@dataclass(frozen=True)
class Observation:
    position: Point
    feedback: Feedback


def build_constraint(
    previous: Point, current: Point, feedback: Feedback, eps: float = EPS
) -> Optional[HalfPlane]:
    """Return the half-plane implied by moving from ``previous`` to ``current``.

    ``None`` is returned for ``SAME`` (handled as a collapse by the region
    tracker) and for a move of zero length, which carries no information.
    The boundary is the perpendicular bisector of the move; ``HOTTER`` keeps
    the side of ``current`` and ``COLDER`` the side of ``previous``.
    """

    if feedback is Feedback.SAME:
        return None
    if same_point(previous, current, eps):
        logger.debug("Skipping zero-length move at %r", current)
        return None

    anchor = midpoint(previous, current)
    if feedback is Feedback.HOTTER:
        direction = normal(previous - current)
    else:
        direction = normal(current - previous)
    return HalfPlane(anchor, direction)


def room_boundary(size: float = DEFAULT_ROOM_SIZE) -> List[HalfPlane]:
    """Counter-clockwise half-planes bounding the square ``[0, size]^2``."""

    corners = [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]
    return [
        HalfPlane(corner, corners[(idx + 1) % 4] - corner)
        for idx, corner in enumerate(corners)
    ]


class ConstraintSet:
    """Append-only list of half-planes seeded with the room boundary."""

    def __init__(self, boundary: Sequence[HalfPlane]):
        self._boundary = list(boundary)
        self._items: List[HalfPlane] = list(self._boundary)

    @classmethod
    def for_room(cls, size: float = DEFAULT_ROOM_SIZE) -> "ConstraintSet":
        return cls(room_boundary(size))

    def append(self, half_plane: HalfPlane) -> None:
        self._items.append(half_plane)

    @property
    def boundary(self) -> List[HalfPlane]:
        return list(self._boundary)

    @property
    def clues(self) -> List[HalfPlane]:
        return self._items[len(self._boundary):]

    def __iter__(self) -> Iterator[HalfPlane]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ConstraintSet(boundary={len(self._boundary)}, clues={len(self.clues)})"


__all__ = [
    "DEFAULT_ROOM_SIZE",
    "ConstraintSet",
    "Feedback",
    "FeedbackError",
    "Observation",
    "build_constraint",
    "room_boundary",
]
