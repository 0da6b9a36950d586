"""Region state machine driven by a stream of distance clues."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from .area import format_area, polygon_area
from .config import RegionOptions, get_region_options
from .constraints import ConstraintSet, Feedback, Observation, build_constraint
from .geometry import Point
from .halfplane import AngularOrder
from .intersection import half_plane_intersection

logger = logging.getLogger(__name__)


class RegionState(Enum):
    ACTIVE = "active"
    COLLAPSED = "collapsed"


@dataclass
class StepResult:
    """Outcome of feeding one observation to a :class:`RegionTracker`."""

    index: int
    observation: Observation
    state: RegionState
    area: float
    polygon: List[Point] = field(default_factory=list)
    constraint_added: bool = False

    @property
    def formatted(self) -> str:
        return format_area(self.area)


class RegionTracker:
    """Track the part of the room consistent with every clue seen so far.

    The tracker owns the constraint set for one run. Each ``observe`` call
    adds at most one half-plane and recomputes the feasible polygon from the
    whole set. Once the region collapses, every later step reports zero area;
    the previous position is still advanced so the run stays aligned with the
    input stream.
    """

    def __init__(self, options: Optional[RegionOptions] = None):
        self.options = options or get_region_options()
        self.order = AngularOrder(self.options.eps)
        self.reset()

    def reset(self) -> None:
        """Forget all clues and start again from the empty room."""

        self.constraints = ConstraintSet.for_room(self.options.room_size)
        self.previous = self.options.start
        self.state = RegionState.ACTIVE
        self.steps = 0
        self._area = self.options.room_area
        self._polygon = half_plane_intersection(self.constraints, self.order)
        logger.info(
            "Region tracker reset: room_size=%s start=%r", self.options.room_size, self.previous
        )

    @property
    def area(self) -> float:
        return self._area

    @property
    def collapsed(self) -> bool:
        return self.state is RegionState.COLLAPSED

    def polygon(self) -> List[Point]:
        return list(self._polygon)

    def _collapse(self, reason: str) -> None:
        self.state = RegionState.COLLAPSED
        self._area = 0.0
        self._polygon = []
        logger.info("Region collapsed at step %d: %s", self.steps, reason)

    def observe(self, observation: Observation) -> StepResult:
        index = self.steps
        self.steps += 1
        current = observation.position
        added = False

        if self.state is RegionState.ACTIVE:
            if observation.feedback is Feedback.SAME:
                self._collapse("same-distance clue")
            else:
                half_plane = build_constraint(
                    self.previous, current, observation.feedback, self.options.eps
                )
                if half_plane is not None:
                    self.constraints.append(half_plane)
                    added = True
                    self._polygon = half_plane_intersection(self.constraints, self.order)
                    area = polygon_area(self._polygon)
                    if area > self.options.eps:
                        self._area = area
                    else:
                        self._collapse("constraints leave no region with interior")

        self.previous = current
        logger.debug(
            "Step %d %s at %r -> state=%s area=%.6f constraints=%d",
            index,
            observation.feedback.value,
            current,
            self.state.value,
            self._area,
            len(self.constraints),
        )
        return StepResult(
            index=index,
            observation=observation,
            state=self.state,
            area=self._area,
            polygon=list(self._polygon),
            constraint_added=added,
        )


def track_region(
    observations: Iterable[Observation], options: Optional[RegionOptions] = None
) -> List[StepResult]:
    """Run a fresh tracker over ``observations`` and collect every step."""

    tracker = RegionTracker(options)
    return [tracker.observe(observation) for observation in observations]


__all__ = ["RegionState", "RegionTracker", "StepResult", "track_region"]
