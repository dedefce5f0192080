"""
Integrate the reference functions with the three methods and compare against scipy.

"""
import numpy as np
import torch
from scipy.integrate import quad

from numerical_integration import Interval, integrate_monte_carlo, integrate_rectangle, integrate_trapezoidal
from numerical_integration.functions import REFERENCE_FUNCTIONS

start = -1.0
end = 2.0
n_subdivisions = 1_000_000
seed = 0

interval = Interval(start, end)
for label, func in REFERENCE_FUNCTIONS:
    reference, _ = quad(lambda x: func(torch.tensor(x, dtype=torch.float64)).item(), start, end, limit=200)
    results = {
        'rectangle': integrate_rectangle(func, interval, n_subdivisions),
        'trapezoidal': integrate_trapezoidal(func, interval, n_subdivisions),
        'monte_carlo': integrate_monte_carlo(func, interval, n_subdivisions, seed=seed),
    }
    print(label)
    print(f'  scipy quad:   {reference:.6f}')
    for name, value in results.items():
        print(f'  {name:<13} {value:.6f}  (abs. error {np.abs(value - reference):.2e})')
