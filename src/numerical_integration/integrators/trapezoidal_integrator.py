# Copyright Biomedical Imaging Group, EPFL 2024

"""
The integrator based on the trapezoid rule.

"""
import typing as tp

from .integrator import Integrator
from ..utils.integrate import integrate_trapezoidal


class TrapezoidalIntegrator(Integrator):
    r"""
    Trapezoid rule on `n_subdivisions` cells, the last one closing exactly at the upper bound.

    .. math:: I \approx \sum_{i=0}^{N-1} \frac{f(x_i) + f(x_{i+1})}{2} (x_{i+1} - x_i).

    """

    @classmethod
    def get_name(cls) -> str:
        return 'trapezoidal'

    def integrate(self, func: tp.Callable) -> float:
        return integrate_trapezoidal(func, self.interval, self.n_subdivisions,
                                     device=self.device, strict=self.strict)
