"""Configuration for region tracking runs."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .constraints import DEFAULT_ROOM_SIZE
from .geometry import EPS, Point


@dataclass
class RegionOptions:
    """Room geometry and tolerance used by :class:`~hotcold.region.RegionTracker`."""

    room_size: float = DEFAULT_ROOM_SIZE
    start: Point = field(default_factory=lambda: Point(0.0, 0.0))
    eps: float = EPS

    def __post_init__(self) -> None:
        self.room_size = float(self.room_size)
        if not self.room_size > 0:
            raise ValueError(f"room_size must be positive, got {self.room_size!r}")
        if self.eps < 0:
            raise ValueError(f"eps must be non-negative, got {self.eps!r}")
        if not isinstance(self.start, Point):
            x, y = self.start
            self.start = Point(x, y)

    @property
    def room_area(self) -> float:
        return self.room_size * self.room_size


_REGION_OPTIONS = RegionOptions()


def get_region_options() -> RegionOptions:
    return copy.deepcopy(_REGION_OPTIONS)


def set_region_options(options: RegionOptions) -> None:
    global _REGION_OPTIONS
    _REGION_OPTIONS = copy.deepcopy(options)


__all__ = ["RegionOptions", "get_region_options", "set_region_options"]
