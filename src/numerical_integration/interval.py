# Copyright Biomedical Imaging Group, EPFL 2024

"""
The integration interval and the degeneracy guard shared by all integrators.

"""
import math
import numbers
import typing as tp

NUM_SUBDIVISIONS = 1_000_000
DEGENERACY_TOLERANCE = 1e-10


class Interval:
    r"""
    Closed integration interval :math:`[a, b]`.

    The bounds are stored as given, so that :math:`a > b` describes the oriented
    interval and the integrals computed over it change sign.

    Parameters
    ----------
    start : float
        Lower bound :math:`a` of the integral.
    end : float
        Upper bound :math:`b` of the integral.

    """
    __slots__ = ('_start', '_end')

    def __init__(self, start: float, end: float):
        start = _to_bound(start, 'start')
        end = _to_bound(end, 'end')
        self._start = start
        self._end = end

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def length(self) -> float:
        """Signed length :math:`b - a`."""
        return self._end - self._start

    def is_degenerate(self, tolerance: float = DEGENERACY_TOLERANCE) -> bool:
        """
        Check whether the interval has (numerically) zero length.

        Parameters
        ----------
        tolerance : float, optional
            Lengths strictly below this value are considered zero. Default is 1e-10.

        Returns
        -------
        output: bool

        """
        return abs(self._end - self._start) < tolerance

    def __iter__(self):
        return iter((self._start, self._end))

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((self._start, self._end))

    def __repr__(self):
        return f'{self.__class__.__name__}(start={self._start!r}, end={self._end!r})'


def as_interval(interval: tp.Union[Interval, tp.Sequence[float]]) -> Interval:
    """Accept an `Interval` or a `(start, end)` pair."""
    if isinstance(interval, Interval):
        return interval
    try:
        start, end = interval
    except (TypeError, ValueError):
        raise TypeError(f'Expected an Interval or a (start, end) pair, got {interval!r}') from None
    return Interval(start, end)


def check_count(count: int, name: str) -> int:
    """Validate a number of subdivisions, samples or scan points."""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise TypeError(f'{name} must be an integer, not {type(count).__name__}')
    if count <= 0:
        raise ValueError(f'{name} must be strictly positive, got {count}')
    return int(count)


def _to_bound(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TypeError(f'Interval {name} must be a real number, got {value!r}') from None
    if not math.isfinite(value):
        raise ValueError(f'Interval {name} must be finite, got {value}')
    return value
