import typing as tp

from .integrator import Integrator
from .monte_carlo_integrator import MonteCarloIntegrator
from .rectangle_integrator import RectangleIntegrator
from .trapezoidal_integrator import TrapezoidalIntegrator

__all__ = [
    'Integrator',
    'RectangleIntegrator',
    'TrapezoidalIntegrator',
    'MonteCarloIntegrator',
    'INTEGRATOR_TYPES',
    'create_integrator',
]

INTEGRATOR_TYPES: tp.Dict[str, tp.Type[Integrator]] = {
    integrator_type.get_name(): integrator_type
    for integrator_type in (RectangleIntegrator, TrapezoidalIntegrator, MonteCarloIntegrator)
}


def create_integrator(name: str, **kwargs) -> Integrator:
    """Create an integrator from its name, e.g. 'trapezoidal'."""
    try:
        integrator_type = INTEGRATOR_TYPES[name]
    except KeyError:
        raise ValueError(f'Unknown integrator {name}, choose from {list(INTEGRATOR_TYPES)}') from None
    return integrator_type(**kwargs)
