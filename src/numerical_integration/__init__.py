# Copyright Biomedical Imaging Group, EPFL 2024

"""
Numerical integration of 1D real functions with the rectangle, trapezoidal and Monte Carlo methods.

"""
from .errors import NumericalError
from .integrators import (
    Integrator,
    MonteCarloIntegrator,
    RectangleIntegrator,
    TrapezoidalIntegrator,
    create_integrator,
)
from .interval import DEGENERACY_TOLERANCE, NUM_SUBDIVISIONS, Interval
from .utils.integrate import (
    RegionStatistics,
    integrate_monte_carlo,
    integrate_rectangle,
    integrate_trapezoidal,
    scan_function_range,
)

__all__ = [
    'NUM_SUBDIVISIONS',
    'DEGENERACY_TOLERANCE',
    'Interval',
    'NumericalError',
    'RegionStatistics',
    'integrate_rectangle',
    'integrate_trapezoidal',
    'integrate_monte_carlo',
    'scan_function_range',
    'Integrator',
    'RectangleIntegrator',
    'TrapezoidalIntegrator',
    'MonteCarloIntegrator',
    'create_integrator',
]
