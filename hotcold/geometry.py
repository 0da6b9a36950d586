"""Plane vector primitives shared by the region engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """Immutable 2D point, also used as a free vector."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def __repr__(self) -> str:
        return f"Point({self.x:.6g}, {self.y:.6g})"


def cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def normal(a: Point) -> Point:
    """Rotate ``a`` by 90 degrees counter-clockwise."""

    return Point(-a.y, a.x)


def midpoint(a: Point, b: Point) -> Point:
    return (a + b) / 2.0


def norm(a: Point) -> float:
    return math.hypot(a.x, a.y)


def is_zero(value: float, eps: float = EPS) -> bool:
    return abs(value) < eps


def approx_equal(a: float, b: float, eps: float = EPS) -> bool:
    return abs(a - b) < eps


def same_point(a: Point, b: Point, eps: float = EPS) -> bool:
    """Return ``True`` when both coordinates agree within ``eps``."""

    return approx_equal(a.x, b.x, eps) and approx_equal(a.y, b.y, eps)


__all__ = [
    "EPS",
    "Point",
    "approx_equal",
    "cross",
    "dot",
    "is_zero",
    "midpoint",
    "norm",
    "normal",
    "same_point",
]
