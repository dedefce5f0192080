# Copyright Biomedical Imaging Group, EPFL 2024

"""
The integrator based on the midpoint rectangle rule.

"""
import typing as tp

from .integrator import Integrator
from ..utils.integrate import integrate_rectangle


class RectangleIntegrator(Integrator):
    r"""
    Midpoint rule on `n_subdivisions` cells of equal width.

    .. math:: I \approx h \sum_{i=0}^{N-1} f\left(a + \left(i + \tfrac{1}{2}\right) h\right), \quad h = \frac{b - a}{N}.

    """

    @classmethod
    def get_name(cls) -> str:
        return 'rectangle'

    def integrate(self, func: tp.Callable) -> float:
        return integrate_rectangle(func, self.interval, self.n_subdivisions,
                                   device=self.device, strict=self.strict)
