"""
Benchmark the error of the three integrators against the number of subdivisions.

The integrand is :math:`f(x) = x^2` on [0, 1], whose integral is 1/3.
The Monte Carlo error is averaged over several seeds.

"""
import os

import numpy as np

from numerical_integration import integrate_monte_carlo, integrate_rectangle, integrate_trapezoidal
from numerical_integration.utils.convergence import compute_convergence
from numerical_integration.utils.handle_data import save_stats_as_csv
from numerical_integration.utils.plots import plot_convergence


def benchmark_convergence(
        n_repetitions: int = 10,
        show: bool = True,
):
    """Benchmark the error of the integrators on x^2 over [0, 1]."""
    interval = (0.0, 1.0)
    exact = 1.0 / 3.0
    sizes = [int(size) for size in np.logspace(1, 6, num=11)]
    path = os.path.join('results', 'data', 'benchmark_convergence')

    integrators = {
        'rectangle': (integrate_rectangle, {}, 1),
        'trapezoidal': (integrate_trapezoidal, {}, 1),
        'monte_carlo': (integrate_monte_carlo, {'seed': 0}, n_repetitions),
    }
    stats = {}
    for name, (integrate, kwargs, repetitions) in integrators.items():
        print(name)
        stats[name] = compute_convergence(integrate, lambda x: x ** 2, interval, exact, sizes,
                                          n_repetitions=repetitions, progress=True, **kwargs)
        save_stats_as_csv(stats[name], os.path.join(path, name + '.csv'))

    plot_convergence(stats,
                     method_orders={'rectangle': 2, 'monte_carlo': 0.5},
                     title='Error convergence on $x^2$',
                     filepath=os.path.join('results', 'plots', 'benchmark_convergence.png'),
                     show=show)


if __name__ == "__main__":
    benchmark_convergence()
