import numpy as np
import pytest

from hotcold.area import format_area, polygon_area, round_area, vertices_array
from hotcold.geometry import Point


def _square(size):
    return [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]


def test_square_area():
    assert polygon_area(_square(10)) == pytest.approx(100.0)


def test_clockwise_polygon_area_is_positive():
    assert polygon_area(list(reversed(_square(3)))) == pytest.approx(9.0)


def test_triangle_area():
    assert polygon_area([Point(0, 0), Point(4, 0), Point(0, 3)]) == pytest.approx(6.0)


@pytest.mark.parametrize('vertices', [[], [Point(1, 1)], [Point(0, 0), Point(5, 5)]])
def test_fewer_than_three_vertices_have_no_area(vertices):
    assert polygon_area(vertices) == 0.0


def test_repeated_vertices_do_not_change_area():
    vertices = [Point(0, 10), Point(10, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    assert polygon_area(vertices) == pytest.approx(50.0)


def test_vertices_array_shape():
    coords = vertices_array(_square(2))

    assert coords.shape == (4, 2)
    assert np.allclose(coords[2], [2.0, 2.0])
    assert vertices_array([]).shape == (0, 2)


@pytest.mark.parametrize(
    'value, expected',
    [(50.0, '50.00'), (0.0, '0.00'), (87.5, '87.50'), (33.33333, '33.33'), (-1e-12, '0.00')],
)
def test_format_area(value, expected):
    assert format_area(value) == expected


def test_round_area():
    assert round_area(12.3456) == pytest.approx(12.35)
    assert str(round_area(-0.0001)) == '0.0'
