"""Oriented half-planes and the angular ordering used to sweep them."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Iterable, List

from .geometry import EPS, Point, cross, is_zero


@dataclass(frozen=True)
class HalfPlane:
    """Closed region to the left of the oriented line ``anchor + t * direction``."""

    anchor: Point
    direction: Point

    @property
    def angle(self) -> float:
        return math.atan2(self.direction.y, self.direction.x)

    def contains(self, point: Point, eps: float = EPS) -> bool:
        """Return ``True`` if ``point`` lies inside or on the boundary line."""

        return cross(self.direction, point - self.anchor) >= -eps

    def point_at(self, t: float) -> Point:
        return self.anchor + self.direction * t

    def __repr__(self) -> str:
        return f"HalfPlane(anchor={self.anchor!r}, direction={self.direction!r})"


def line_intersection(a: HalfPlane, b: HalfPlane) -> Point:
    """Intersect the boundary lines of ``a`` and ``b``.

    The lines must not be parallel; callers filter that case through
    :meth:`AngularOrder.parallel` first.
    """

    t = cross(b.direction, a.anchor - b.anchor) / cross(a.direction, b.direction)
    return a.point_at(t)


@dataclass(frozen=True)
class AngularOrder:
    """Ordering policy for the angular sweep.

    Half-planes are ordered by the polar angle of their direction vector.
    Angles closer than ``eps`` compare equal, so the sort keeps their input
    order (``sorted`` is stable) and the sweep treats them as parallel.
    Which of two coincident constraints survives depends on this policy.
    """

    eps: float = EPS

    def compare(self, a: HalfPlane, b: HalfPlane) -> int:
        delta = a.angle - b.angle
        if abs(delta) < self.eps:
            return 0
        return -1 if delta < 0 else 1

    def sort(self, half_planes: Iterable[HalfPlane]) -> List[HalfPlane]:
        return sorted(half_planes, key=functools.cmp_to_key(self.compare))

    def parallel(self, a: HalfPlane, b: HalfPlane) -> bool:
        return is_zero(cross(a.direction, b.direction), self.eps)

    def outside(self, half_plane: HalfPlane, point: Point) -> bool:
        return not half_plane.contains(point, self.eps)


__all__ = ["AngularOrder", "HalfPlane", "line_intersection"]
