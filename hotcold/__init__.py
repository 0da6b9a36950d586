from .geometry import EPS, Point, approx_equal, cross, dot, midpoint, normal, same_point
from .halfplane import AngularOrder, HalfPlane, line_intersection
from .constraints import (
    DEFAULT_ROOM_SIZE,
    ConstraintSet,
    Feedback,
    FeedbackError,
    Observation,
    build_constraint,
    room_boundary,
)
from .intersection import half_plane_intersection, is_feasible
from .area import format_area, polygon_area, round_area, vertices_array
from .config import RegionOptions, get_region_options, set_region_options
from .region import RegionState, RegionTracker, StepResult, track_region
from .reader import ObservationFormatError, parse_observations

__all__ = [
    'EPS',
    'Point',
    'approx_equal',
    'cross',
    'dot',
    'midpoint',
    'normal',
    'same_point',
    'AngularOrder',
    'HalfPlane',
    'line_intersection',
    'DEFAULT_ROOM_SIZE',
    'ConstraintSet',
    'Feedback',
    'FeedbackError',
    'Observation',
    'build_constraint',
    'room_boundary',
    'half_plane_intersection',
    'is_feasible',
    'format_area',
    'polygon_area',
    'round_area',
    'vertices_array',
    'RegionOptions',
    'get_region_options',
    'set_region_options',
    'RegionState',
    'RegionTracker',
    'StepResult',
    'track_region',
    'ObservationFormatError',
    'parse_observations',
]
