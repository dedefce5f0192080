# Copyright Biomedical Imaging Group, EPFL 2024

"""
The Monte Carlo integrator for functions that may change sign.

"""
import typing as tp

from .integrator import Integrator
from ..interval import NUM_SUBDIVISIONS, check_count
from ..utils.integrate import integrate_monte_carlo, make_generator


class MonteCarloIntegrator(Integrator):
    r"""
    Rejection sampling estimator, run separately on the positive and negative parts of the integrand.

    Parameters
    ----------
    n_scan_points : int, optional
        Number of points used to find the range of the integrand. Default is None, which uses
        `n_subdivisions`.
    seed : int, optional
        Seed of the random generator. The generator is created once, so successive calls to `integrate`
        continue the same random stream and a new integrator with the same seed reproduces it.
        Default is None, which draws fresh randomness for every call.

    Notes
    -----
    `n_subdivisions` is the number of random abscissae.

    """
    def __init__(self,
                 start: float = 0.0,
                 end: float = 1.0,
                 n_subdivisions: int = NUM_SUBDIVISIONS,
                 device: str = 'cpu',
                 strict: bool = False,
                 n_scan_points: tp.Optional[int] = None,
                 seed: tp.Optional[int] = None):
        super().__init__(start=start, end=end, n_subdivisions=n_subdivisions, device=device, strict=strict)
        if n_scan_points is not None:
            n_scan_points = check_count(n_scan_points, 'n_scan_points')
        self.n_scan_points = n_scan_points
        self.seed = seed
        self._generator = make_generator(seed, device=device) if seed is not None else None

    @classmethod
    def get_name(cls) -> str:
        return 'monte_carlo'

    def integrate(self, func: tp.Callable) -> float:
        return integrate_monte_carlo(func, self.interval,
                                     n_samples=self.n_subdivisions,
                                     n_scan_points=self.n_scan_points,
                                     generator=self._generator,
                                     device=self.device,
                                     strict=self.strict)

    def _get_args(self) -> dict:
        args = super()._get_args()
        args.update({
            'n_scan_points': self.n_scan_points,
            'seed': self.seed,
        })
        return args
