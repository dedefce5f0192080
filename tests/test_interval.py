import math

import pytest

from numerical_integration.interval import DEGENERACY_TOLERANCE, Interval, as_interval, check_count


@pytest.mark.parametrize('start, end, expected', [
    (1.0, 1.0, True),
    (1.0, 1.0 + 5e-11, True),
    (-3.0, -3.0 - 9e-11, True),
    (0.0, 1e-9, False),
    (0.0, 10.0, False),
    (5.0, -5.0, False),
])
def test_is_degenerate(start, end, expected):
    assert Interval(start, end).is_degenerate() is expected


def test_is_degenerate_tolerance():
    interval = Interval(0.0, 1e-6)
    assert not interval.is_degenerate()
    assert interval.is_degenerate(tolerance=1e-5)
    assert DEGENERACY_TOLERANCE == 1e-10


def test_interval_properties():
    interval = Interval(2, -1)
    assert interval.start == 2.0
    assert interval.end == -1.0
    assert interval.length == -3.0
    assert tuple(interval) == (2.0, -1.0)
    assert min(interval) == -1.0
    assert interval == Interval(2.0, -1.0)
    assert repr(interval) == 'Interval(start=2.0, end=-1.0)'


def test_as_interval():
    interval = Interval(0.0, 1.0)
    assert as_interval(interval) is interval
    assert as_interval((0, math.pi)) == Interval(0.0, math.pi)
    with pytest.raises(TypeError):
        as_interval(3.0)
    with pytest.raises(TypeError):
        as_interval((1.0, 2.0, 3.0))


def test_invalid_bounds():
    with pytest.raises(TypeError):
        Interval('a', 1.0)
    with pytest.raises(ValueError):
        Interval(0.0, math.inf)
    with pytest.raises(ValueError):
        Interval(math.nan, 1.0)


def test_check_count():
    assert check_count(10, 'n_subdivisions') == 10
    with pytest.raises(ValueError):
        check_count(0, 'n_subdivisions')
    with pytest.raises(ValueError):
        check_count(-5, 'n_samples')
    with pytest.raises(TypeError):
        check_count(1.5, 'n_samples')
    with pytest.raises(TypeError):
        check_count(True, 'n_samples')
