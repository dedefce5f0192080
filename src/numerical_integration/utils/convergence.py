# Copyright Biomedical Imaging Group, EPFL 2024

"""
Error of the integrators against the number of subdivisions or samples.

"""
import typing as tp

import numpy as np
from tqdm import tqdm

from ..interval import check_count


def compute_convergence(
        integrate: tp.Callable,
        func: tp.Callable,
        interval,
        exact: float,
        sizes: tp.Sequence[int],
        n_repetitions: int = 1,
        progress: bool = False,
        **kwargs
) -> tp.List[tp.Tuple[int, float]]:
    """
    Measure the mean absolute error of an integration function for several grid or sample sizes.

    Parameters
    ----------
    integrate : Callable
        One of `integrate_rectangle`, `integrate_trapezoidal` or `integrate_monte_carlo`.
    func : Callable
        Integrand.
    interval : Interval or (float, float)
        Integration bounds.
    exact : float
        Reference value of the integral.
    sizes : list of int
        Number of subdivisions (or samples) to evaluate.
    n_repetitions : int, optional
        Number of runs averaged for each size. Only useful for stochastic integrators. Default is 1.
    progress : bool, optional
        Show a progress bar. Default is False.
    kwargs
        Extra keyword arguments passed to `integrate`. For a stochastic integrator, `seed` is offset by the
        repetition index so that the repetitions are independent.

    Returns
    -------
    output: list of (int, float)
        Pairs (size, mean absolute error).

    """
    n_repetitions = check_count(n_repetitions, 'n_repetitions')
    base_seed = kwargs.pop('seed', None)
    stats = []
    for size in tqdm(sizes, disable=not progress):
        size = int(size)
        errors = []
        for repetition in range(n_repetitions):
            if base_seed is not None:
                kwargs['seed'] = base_seed + repetition
            errors.append(abs(integrate(func, interval, size, **kwargs) - exact))
        stats.append((size, float(np.mean(errors))))
    return stats
