"""Polygon area via the shoelace formula."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry import Point


def vertices_array(vertices: Sequence[Point]) -> np.ndarray:
    """Return ``vertices`` as an ``(N, 2)`` float array."""

    if not vertices:
        return np.zeros((0, 2), dtype=float)
    return np.array([point.as_tuple() for point in vertices], dtype=float)


def polygon_area(vertices: Sequence[Point]) -> float:
    """Return the unsigned area of the polygon traced by ``vertices``."""

    if len(vertices) < 3:
        return 0.0
    coords = vertices_array(vertices)
    xs, ys = coords[:, 0], coords[:, 1]
    xs_next, ys_next = np.roll(xs, -1), np.roll(ys, -1)
    signed = float(np.sum(xs * ys_next - ys * xs_next)) * 0.5
    return abs(signed)


def round_area(value: float) -> float:
    rounded = round(value, 2)
    # no negative zero
    return 0.0 if rounded == 0 else rounded


def format_area(value: float) -> str:
    """Render ``value`` with exactly two decimals, e.g. ``"50.00"``."""

    return f"{round_area(value):.2f}"


__all__ = ["format_area", "polygon_area", "round_area", "vertices_array"]
