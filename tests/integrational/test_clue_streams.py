import pytest

from hotcold import RegionState, parse_observations, track_region

STREAMS = [
    ('1\n10 10 Hotter\n', ['50.00']),
    ('1\n7 3 Same\n', ['0.00']),
    ('0\n', []),
    (
        '4\n10 0 Hotter\n10 10 Colder\n10 10 Hotter\n0 0 Hotter\n',
        ['50.00', '25.00', '25.00', '12.50'],
    ),
    (
        '5\n4 0 Colder\n10 0 Hotter\n3 3 Hotter\n3 3 Same\n9 9 Colder\n',
        ['20.00', '0.00', '0.00', '0.00', '0.00'],
    ),
    (
        '3\n0 10 Colder\n0 2 Hotter\n0 10 Hotter\n',
        ['50.00', '50.00', '0.00'],
    ),
]


@pytest.mark.parametrize('text, expected', STREAMS)
def test_stream_areas(text, expected):
    results = track_region(parse_observations(text))

    assert [step.formatted for step in results] == expected


@pytest.mark.parametrize('text, expected', STREAMS)
def test_zero_area_is_absorbing(text, expected):
    results = track_region(parse_observations(text))

    seen_zero = False
    for step in results:
        if seen_zero:
            assert step.formatted == '0.00'
            assert step.state is RegionState.COLLAPSED
        seen_zero = seen_zero or step.formatted == '0.00'
