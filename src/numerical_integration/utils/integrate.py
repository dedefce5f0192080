# Copyright Biomedical Imaging Group, EPFL 2024

r"""
Numerical integration of a real function over a 1D interval.

The definition of the integral :math:`I` of a function :math:`f(x)` over an interval :math:`[a, b]` is

.. math:: I = \int_{a}^{b} f(x) dx

Three independent approximations are provided:

- the midpoint (rectangle) rule and the trapezoid rule, evaluating :math:`f` on a uniform grid of
  :math:`N` cells of width :math:`h = (b - a) / N`,
- a Monte Carlo estimator that splits the area into the region above the x-axis and the region below it
  and estimates each of them by rejection sampling, so that functions changing sign are handled correctly.

The integrand is evaluated once on the whole tensor of sample points, in double precision. Integrands that only
accept real numbers are evaluated point by point instead.
All the integrators return exactly 0.0 when the interval is degenerate, i.e. :math:`|b - a| < 10^{-10}`.
"""

__all__ = ['midpoint_rule', 'trapezoid_rule', 'integrate_rectangle', 'integrate_trapezoidal',
           'RegionStatistics', 'scan_function_range', 'make_generator', 'integrate_monte_carlo']

import typing as tp

import torch

from .misc import DTYPE, evaluate_function
from ..interval import NUM_SUBDIVISIONS, Interval, as_interval, check_count

IntervalLike = tp.Union[Interval, tp.Sequence[float]]


def midpoint_rule(fs: torch.Tensor, dx: float) -> torch.Tensor:
    """
    Midpoint quadrature rule of precision :math:`O(h^2)`.

    Parameters
    ----------
    fs : torch.Tensor
        The integrand evaluated at the cell midpoints, of shape (N,).
    dx : float
        Cell width :math:`h`.

    Returns
    -------
    output: torch.Tensor
        Integral evaluated by the midpoint rule, 0-dim tensor.

    """
    return torch.sum(fs) * dx


def trapezoid_rule(fs: torch.Tensor, xs: torch.Tensor) -> torch.Tensor:
    """
    Trapezoid rule of precision :math:`O(h^2)` on a grid whose last cell may be shorter.

    Parameters
    ----------
    fs : torch.Tensor
        The integrand evaluations of shape (N + 1,).
    xs : torch.Tensor
        The sample points of shape (N + 1,).

    Returns
    -------
    output: torch.Tensor
        Integral evaluated by the trapezoid rule, 0-dim tensor.

    """
    return torch.sum(0.5 * (fs[:-1] + fs[1:]) * (xs[1:] - xs[:-1]))


def integrate_rectangle(
        func: tp.Callable,
        interval: IntervalLike,
        n_subdivisions: int = NUM_SUBDIVISIONS,
        device: str = 'cpu',
        strict: bool = False,
) -> float:
    r"""
    Integrate `func` with the midpoint rule.

    The interval is split into `n_subdivisions` cells of width :math:`h` and the integrand is sampled at
    :math:`x_i = a + h / 2 + i h`, for :math:`i = 0, \dots, N - 1`.
    When :math:`a > b` the oriented integral :math:`-\int_b^a f(x) dx` is returned, whereas a loop stepping
    while :math:`x < b` would return 0.

    Parameters
    ----------
    func : Callable
        Integrand, vectorized over tensors or mapping a real number to a real number.
    interval : Interval or (float, float)
        Integration bounds.
    n_subdivisions : int, optional
        Number of cells :math:`N`. Default is 1 000 000.
    device : str, optional
        Computational backend. Default is 'cpu'.
    strict : bool, optional
        Raise a `NumericalError` if the integrand is not finite. Default is False, which only warns.

    Returns
    -------
    output: float
        Approximation of the integral.

    """
    interval = as_interval(interval)
    n_subdivisions = check_count(n_subdivisions, 'n_subdivisions')
    if interval.is_degenerate():
        return 0.0

    dx = interval.length / n_subdivisions
    xs = interval.start + (torch.arange(n_subdivisions, dtype=DTYPE, device=device) + 0.5) * dx
    fs = evaluate_function(func, xs, strict=strict)
    return midpoint_rule(fs, dx).item()


def integrate_trapezoidal(
        func: tp.Callable,
        interval: IntervalLike,
        n_subdivisions: int = NUM_SUBDIVISIONS,
        device: str = 'cpu',
        strict: bool = False,
) -> float:
    r"""
    Integrate `func` with the trapezoid rule.

    The sample points :math:`x_i = a + i h`, for :math:`i = 0, \dots, N`, are clamped to the interval and the
    last one is set to :math:`b`, so the last trapezoid closes the interval exactly even when the
    floating-point steps overshoot. The rule is exact for linear functions.
    When :math:`a > b` the oriented integral :math:`-\int_b^a f(x) dx` is returned, whereas a loop stepping
    while :math:`x < b` would return 0.

    Parameters
    ----------
    func : Callable
        Integrand, vectorized over tensors or mapping a real number to a real number.
    interval : Interval or (float, float)
        Integration bounds.
    n_subdivisions : int, optional
        Number of cells :math:`N`. Default is 1 000 000.
    device : str, optional
        Computational backend. Default is 'cpu'.
    strict : bool, optional
        Raise a `NumericalError` if the integrand is not finite. Default is False, which only warns.

    Returns
    -------
    output: float
        Approximation of the integral.

    """
    interval = as_interval(interval)
    n_subdivisions = check_count(n_subdivisions, 'n_subdivisions')
    if interval.is_degenerate():
        return 0.0

    dx = interval.length / n_subdivisions
    xs = interval.start + torch.arange(n_subdivisions + 1, dtype=DTYPE, device=device) * dx
    xs = torch.clamp(xs, min=min(interval), max=max(interval))
    xs[-1] = interval.end
    fs = evaluate_function(func, xs, strict=strict)
    return trapezoid_rule(fs, xs).item()


class RegionStatistics(tp.NamedTuple):
    """
    Range of the integrand found by a scan of the interval.

    The positive region is bounded by the rectangle of height `max_positive` above the x-axis,
    the negative region by the rectangle of depth `|min_negative|` below it.

    """
    min_value: float
    max_value: float

    @property
    def max_positive(self) -> float:
        return max(self.max_value, 0.0)

    @property
    def min_negative(self) -> float:
        return min(self.min_value, 0.0)

    @property
    def has_positive_region(self) -> bool:
        return self.max_positive > 0.0

    @property
    def has_negative_region(self) -> bool:
        return self.min_negative < 0.0


def scan_function_range(
        func: tp.Callable,
        interval: IntervalLike,
        n_scan_points: int = NUM_SUBDIVISIONS,
        device: str = 'cpu',
        strict: bool = False,
) -> RegionStatistics:
    """
    Find the minimum and maximum of `func` on evenly spaced points, both bounds included.

    Notes
    -----
    Both bounds are always scanned, so at least two points are used even when `n_scan_points` is 1.
    Extrema located between two scan points are missed, which makes the Monte Carlo estimate
    underestimate the area around them.

    """
    interval = as_interval(interval)
    n_scan_points = check_count(n_scan_points, 'n_scan_points')
    xs = torch.linspace(interval.start, interval.end, max(n_scan_points, 2), dtype=DTYPE, device=device)
    fs = evaluate_function(func, xs, strict=strict)
    return RegionStatistics(min_value=torch.min(fs).item(), max_value=torch.max(fs).item())


def make_generator(seed: tp.Optional[int] = None, device: str = 'cpu') -> torch.Generator:
    """
    Create a random generator for one Monte Carlo run.

    Without `seed`, the generator is seeded from a non-deterministic source, so two runs started
    within the same clock tick still draw different samples.

    """
    generator = torch.Generator(device=device)
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator


def integrate_monte_carlo(
        func: tp.Callable,
        interval: IntervalLike,
        n_samples: int = NUM_SUBDIVISIONS,
        n_scan_points: tp.Optional[int] = None,
        seed: tp.Optional[int] = None,
        generator: tp.Optional[torch.Generator] = None,
        device: str = 'cpu',
        strict: bool = False,
) -> float:
    r"""
    Integrate `func` with a Monte Carlo estimator split by the sign of the integrand.

    1. The range :math:`[m, M]` of the integrand is found by `scan_function_range`.
    2. :math:`N` abscissae :math:`x_i \sim U[a, b]` are drawn. If :math:`M > 0`, a point
       :math:`y_i^+ \sim U[0, M]` is a hit when :math:`0 < f(x_i)` and :math:`y_i^+ \leq f(x_i)`.
       If :math:`m < 0`, a point :math:`y_i^- \sim U[m, 0]` is a hit when :math:`f(x_i) < 0` and
       :math:`y_i^- \geq f(x_i)`. Both tests share :math:`x_i` and :math:`f(x_i)` but use independent ordinates.
    3. Each region contributes its hit ratio times the area of its bounding rectangle:

    .. math:: I \approx \frac{H^+}{N} (b - a) M - \frac{H^-}{N} (b - a) |m|.

    Parameters
    ----------
    func : Callable
        Integrand, vectorized over tensors or mapping a real number to a real number.
    interval : Interval or (float, float)
        Integration bounds.
    n_samples : int, optional
        Number of random abscissae :math:`N`. Default is 1 000 000.
    n_scan_points : int, optional
        Number of points of the range scan. Default is None, which uses `n_samples`.
    seed : int, optional
        Seed of the random generator, for reproducible estimates. Ignored if `generator` is given.
    generator : torch.Generator, optional
        Random generator to draw from. Default is None, a new generator is created for every call.
    device : str, optional
        Computational backend. Default is 'cpu'.
    strict : bool, optional
        Raise a `NumericalError` if the integrand is not finite. Default is False, which only warns.

    Returns
    -------
    output: float
        Estimate of the integral. Its standard deviation decreases as :math:`O(1 / \sqrt{N})`.

    """
    interval = as_interval(interval)
    n_samples = check_count(n_samples, 'n_samples')
    if n_scan_points is None:
        n_scan_points = n_samples
    n_scan_points = check_count(n_scan_points, 'n_scan_points')
    if interval.is_degenerate():
        return 0.0

    stats = scan_function_range(func, interval, n_scan_points, device=device, strict=strict)
    if generator is None:
        generator = make_generator(seed, device=device)

    length = interval.length
    xs = interval.start + torch.rand(n_samples, generator=generator, dtype=DTYPE, device=device) * length
    fs = evaluate_function(func, xs, strict=strict)

    positive_integral = 0.0
    if stats.has_positive_region:
        ys = torch.rand(n_samples, generator=generator, dtype=DTYPE, device=device) * stats.max_positive
        positive_hits = torch.count_nonzero((ys <= fs) & (fs > 0.0)).item()
        positive_trials = n_samples
        positive_integral = positive_hits / positive_trials * (length * stats.max_positive)

    negative_integral = 0.0
    if stats.has_negative_region:
        depth = -stats.min_negative
        ys = stats.min_negative + torch.rand(n_samples, generator=generator, dtype=DTYPE, device=device) * depth
        negative_hits = torch.count_nonzero((ys >= fs) & (fs < 0.0)).item()
        negative_trials = n_samples
        negative_integral = negative_hits / negative_trials * (length * depth)

    return positive_integral - negative_integral
