import pytest

from hotcold.constraints import (
    ConstraintSet,
    Feedback,
    FeedbackError,
    build_constraint,
    room_boundary,
)
from hotcold.geometry import Point


@pytest.mark.parametrize(
    'token, expected',
    [
        ('Hotter', Feedback.HOTTER),
        ('Colder', Feedback.COLDER),
        ('Same', Feedback.SAME),
        ('H', Feedback.HOTTER),
        ('Cold', Feedback.COLDER),
    ],
)
def test_feedback_from_token(token, expected):
    assert Feedback.from_token(token) is expected


@pytest.mark.parametrize('token', ['hotter', 'Warmer', 'x', ''])
def test_feedback_rejects_unknown_tokens(token):
    with pytest.raises(FeedbackError):
        Feedback.from_token(token)


def test_hotter_keeps_current_side():
    half_plane = build_constraint(Point(0, 0), Point(4, 0), Feedback.HOTTER)

    assert half_plane.anchor == Point(2, 0)
    assert half_plane.contains(Point(3, 5))
    assert not half_plane.contains(Point(1, 5))


def test_colder_keeps_previous_side():
    half_plane = build_constraint(Point(0, 0), Point(4, 0), Feedback.COLDER)

    assert half_plane.anchor == Point(2, 0)
    assert half_plane.contains(Point(1, 5))
    assert not half_plane.contains(Point(3, 5))


def test_bisector_points_are_kept():
    half_plane = build_constraint(Point(1, 1), Point(3, 5), Feedback.HOTTER)

    assert half_plane.contains(Point(2, 3))


def test_same_produces_no_constraint():
    assert build_constraint(Point(0, 0), Point(4, 0), Feedback.SAME) is None


@pytest.mark.parametrize('feedback', [Feedback.HOTTER, Feedback.COLDER])
def test_zero_length_move_is_skipped(feedback):
    assert build_constraint(Point(3, 3), Point(3, 3), feedback) is None


def test_room_boundary_encloses_square():
    boundary = room_boundary(10)

    assert len(boundary) == 4
    assert all(half_plane.contains(Point(5, 5)) for half_plane in boundary)
    assert all(half_plane.contains(Point(0, 10)) for half_plane in boundary)
    assert not all(half_plane.contains(Point(11, 5)) for half_plane in boundary)
    assert not all(half_plane.contains(Point(5, -1)) for half_plane in boundary)


def test_constraint_set_is_seeded_with_boundary():
    constraints = ConstraintSet.for_room(10)
    clue = build_constraint(Point(0, 0), Point(4, 0), Feedback.HOTTER)

    assert len(constraints) == 4
    assert constraints.clues == []

    constraints.append(clue)

    assert len(constraints) == 5
    assert constraints.clues == [clue]
    assert list(constraints)[-1] is clue
    assert len(constraints.boundary) == 4
