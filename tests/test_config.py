import pytest

from hotcold.config import RegionOptions, get_region_options, set_region_options
from hotcold.geometry import Point
from hotcold.region import RegionTracker


def test_defaults():
    options = RegionOptions()

    assert options.room_size == 10.0
    assert options.start == Point(0, 0)
    assert options.room_area == 100.0


@pytest.mark.parametrize('size', [0, -3])
def test_room_size_must_be_positive(size):
    with pytest.raises(ValueError):
        RegionOptions(room_size=size)


def test_eps_must_not_be_negative():
    with pytest.raises(ValueError):
        RegionOptions(eps=-1.0)


def test_start_accepts_pairs():
    assert RegionOptions(start=(1, 2)).start == Point(1, 2)


def test_get_returns_a_copy():
    options = get_region_options()
    options.room_size = 99.0

    assert get_region_options().room_size == 10.0


def test_set_changes_tracker_default():
    original = get_region_options()
    try:
        set_region_options(RegionOptions(room_size=20.0))
        tracker = RegionTracker()
        assert tracker.area == pytest.approx(400.0)
    finally:
        set_region_options(original)
