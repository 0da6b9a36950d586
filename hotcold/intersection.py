"""Angular-sweep intersection of half-planes."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .geometry import Point
from .halfplane import AngularOrder, HalfPlane, line_intersection
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def half_plane_intersection(
    half_planes: Iterable[HalfPlane], order: Optional[AngularOrder] = None
) -> List[Point]:
    """Return the counter-clockwise vertices of the common intersection.

    An empty list means the intersection has no interior (it is void or
    degenerate). The result is only meaningful for a bounded intersection,
    which the room boundary guarantees.
    """

    order = order or AngularOrder()
    lines = order.sort(half_planes)
    if not lines:
        return []

    count = len(lines)
    queue: List[Optional[HalfPlane]] = [None] * count
    points: List[Optional[Point]] = [None] * count
    first = last = 0
    queue[0] = lines[0]

    for current in lines[1:]:
        while first < last and order.outside(current, points[last - 1]):
            last -= 1
        while first < last and order.outside(current, points[first]):
            first += 1
        last += 1
        queue[last] = current

        if order.parallel(queue[last], queue[last - 1]):
            last -= 1
            # Keep whichever of the two parallel half-planes is tighter.
            if queue[last].contains(current.anchor, order.eps):
                queue[last] = current

        if first < last:
            points[last - 1] = line_intersection(queue[last - 1], queue[last])

    while first < last and order.outside(queue[first], points[last - 1]):
        last -= 1
    if last - first <= 1:
        logger.debug("Intersection is empty (%d surviving half-planes)", last - first + 1)
        return []
    if order.parallel(queue[last], queue[first]):
        logger.debug("Intersection is an unbounded strip; treating it as empty")
        return []

    points[last] = line_intersection(queue[last], queue[first])
    polygon = [point for point in points[first:last + 1] if point is not None]
    if len(polygon) < 3:
        return []
    return polygon


def is_feasible(half_planes: Iterable[HalfPlane], order: Optional[AngularOrder] = None) -> bool:
    return bool(half_plane_intersection(half_planes, order))


apply_debug_logging(globals(), logger=logger)


__all__ = ["half_plane_intersection", "is_feasible"]
