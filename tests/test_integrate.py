import math

import pytest
import torch

from numerical_integration import NumericalError
from numerical_integration.functions import antiderivative_1, function_1, function_3
from numerical_integration.utils.integrate import (
    integrate_monte_carlo,
    integrate_rectangle,
    integrate_trapezoidal,
    midpoint_rule,
    trapezoid_rule,
)

quadrature_rules = [integrate_rectangle, integrate_trapezoidal]


@pytest.mark.parametrize('integrate', [integrate_rectangle, integrate_trapezoidal, integrate_monte_carlo])
@pytest.mark.parametrize('interval', [(1.0, 1.0), (1.0, 1.0 + 5e-11), (-2.0, -2.0 - 1e-12)])
def test_degenerate_interval_returns_zero(integrate, interval):
    result = integrate(torch.exp, interval)
    assert result == 0.0
    assert isinstance(result, float)


@pytest.mark.parametrize('integrate', quadrature_rules)
@pytest.mark.parametrize('interval', [(0.0, 1.0), (-3.0, 7.0), (2.5, -1.5), (1e3, 1e3 + 0.5)])
def test_constant_function(integrate, interval):
    c = 3.7
    start, end = interval
    assert integrate(lambda x: c, interval) == pytest.approx(c * (end - start), abs=1e-6)
    assert integrate(lambda x: torch.full_like(x, c), interval, 1000) == pytest.approx(c * (end - start), abs=1e-6)


@pytest.mark.parametrize('interval', [(0.0, 10.0), (-3.0, 5.0), (0.1, 0.7), (4.0, -2.0)])
@pytest.mark.parametrize('n_subdivisions', [1, 3, 1000, 1_000_000])
def test_trapezoidal_exact_for_linear_function(interval, n_subdivisions):
    start, end = interval
    exact = (end ** 2 - start ** 2) / 2
    assert abs(integrate_trapezoidal(lambda x: x, interval, n_subdivisions) - exact) < 1e-9


@pytest.mark.parametrize('func, interval', [
    (function_3, (0.0, 5.0)),
    (torch.exp, (0.0, 2.0)),
    (torch.cos, (-1.0, 1.0)),
    (lambda x: 1.0 / (1.0 + x ** 2), (-4.0, 4.0)),
])
def test_rectangle_and_trapezoidal_agree(func, interval):
    rectangle = integrate_rectangle(func, interval, 100_000)
    trapezoidal = integrate_trapezoidal(func, interval, 100_000)
    assert rectangle == pytest.approx(trapezoidal, rel=1e-2)


@pytest.mark.parametrize('integrate', quadrature_rules)
def test_polynomial_against_antiderivative(integrate):
    exact = antiderivative_1(2.0) - antiderivative_1(-1.0)
    assert integrate(function_1, (-1.0, 2.0), 100_000) == pytest.approx(exact, abs=1e-6)


@pytest.mark.parametrize('integrate', quadrature_rules)
def test_reversed_interval_changes_sign(integrate):
    forward = integrate(lambda x: x ** 2, (0.0, 1.0), 10_000)
    backward = integrate(lambda x: x ** 2, (1.0, 0.0), 10_000)
    assert forward == pytest.approx(1.0 / 3.0, abs=1e-6)
    assert backward == pytest.approx(-forward, abs=1e-12)


def test_linear_function_end_to_end():
    assert integrate_rectangle(lambda x: x, (0.0, 10.0)) == pytest.approx(50.0, abs=1e-6)
    assert integrate_trapezoidal(lambda x: x, (0.0, 10.0)) == pytest.approx(50.0, abs=1e-9)
    assert integrate_monte_carlo(lambda x: x, (0.0, 10.0), seed=0) == pytest.approx(50.0, abs=0.5)


def test_midpoint_rule_single_cell():
    # one cell on [0, 2], midpoint at 1
    assert integrate_rectangle(lambda x: x ** 2, (0.0, 2.0), 1) == pytest.approx(2.0)
    assert midpoint_rule(torch.tensor([1.0, 2.0, 3.0]), 0.5).item() == pytest.approx(3.0)


def test_trapezoid_rule_partial_last_cell():
    xs = torch.tensor([0.0, 1.0, 2.0, 2.5], dtype=torch.float64)
    fs = torch.tensor([1.0, 1.0, 3.0, 3.0], dtype=torch.float64)
    assert trapezoid_rule(fs, xs).item() == pytest.approx(1.0 + 2.0 + 1.5)


@pytest.mark.parametrize('integrate', quadrature_rules)
def test_non_finite_integrand_propagates(integrate):
    with pytest.warns(UserWarning, match='not finite'):
        result = integrate(torch.log, (-1.0, 1.0), 1000)
    assert math.isnan(result)


def test_non_finite_integrand_warns_monte_carlo():
    with pytest.warns(UserWarning, match='not finite'):
        integrate_monte_carlo(torch.log, (-1.0, 1.0), 1000, seed=0)


@pytest.mark.parametrize('integrate', [integrate_rectangle, integrate_trapezoidal, integrate_monte_carlo])
def test_non_finite_integrand_strict(integrate):
    with pytest.raises(NumericalError):
        integrate(torch.log, (-1.0, 1.0), 1000, strict=True)


@pytest.mark.parametrize('integrate', [integrate_rectangle, integrate_trapezoidal, integrate_monte_carlo])
def test_invalid_number_of_subdivisions(integrate):
    with pytest.raises(ValueError):
        integrate(torch.sin, (0.0, 1.0), 0)
    with pytest.raises(TypeError):
        integrate(torch.sin, (0.0, 1.0), 10.5)


def _absolute_value(x):
    return x if x > 0 else -x


@pytest.mark.parametrize('integrate', [integrate_rectangle, integrate_trapezoidal, integrate_monte_carlo])
@pytest.mark.parametrize('func, interval, exact', [
    (math.sin, (0.0, 1.0), 1.0 - math.cos(1.0)),
    (_absolute_value, (-1.0, 2.0), 2.5),
    (lambda x: math.exp(-x) if x < 1.0 else 0.0, (0.0, 2.0), 1.0 - math.exp(-1.0)),
])
def test_scalar_only_integrands(integrate, func, interval, exact):
    if integrate is integrate_monte_carlo:
        n_points, tolerance, kwargs = 100_000, 0.05, {'seed': 0}
    else:
        n_points, tolerance, kwargs = 10_000, 1e-3, {}
    assert integrate(func, interval, n_points, **kwargs) == pytest.approx(exact, abs=tolerance)


def test_scalar_only_integrand_matches_vectorized():
    assert integrate_trapezoidal(math.cos, (0.0, 2.0), 1000) == pytest.approx(
        integrate_trapezoidal(torch.cos, (0.0, 2.0), 1000), abs=1e-12)
