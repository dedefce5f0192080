"""
Benchmark runtime of the three integrators on CPU and GPU for a range of number of subdivisions.

"""
import math
import os
from time import time

import torch

from numerical_integration.functions import function_4
from numerical_integration.integrators import INTEGRATOR_TYPES
from numerical_integration.utils.handle_data import save_stats_as_csv


def benchmark_runtime_on_size(number_of_repetitions: int = 10):
    """Benchmark the runtime against the number of subdivisions."""
    list_of_sizes = [int(math.pow(10, exponent)) for exponent in range(2, 8)]
    devices = ["cpu", "cuda:0"]
    path = os.path.join('results', 'data', 'benchmark_runtime')

    for device in devices:
        if 'cuda' in device:
            if torch.cuda.is_available():
                torch.cuda.synchronize()
            else:
                continue
        for name, integrator_type in INTEGRATOR_TYPES.items():
            average_runtime_list = []
            for size in list_of_sizes:
                print(device, integrator_type.__name__, size)
                integrator = integrator_type(start=-2.0, end=3.0, n_subdivisions=size, device=device)
                runtime_list = []
                for _ in range(number_of_repetitions):
                    start_time = time()
                    integrator.integrate(function_4)
                    runtime_list.append(time() - start_time)
                average_runtime_list.append((size, sum(runtime_list) / number_of_repetitions))

            device_name = 'gpu' if 'cuda' in device else 'cpu'
            filepath = os.path.join(path, f'{name}_{device_name}.csv')
            save_stats_as_csv(average_runtime_list, filepath)


if __name__ == "__main__":
    benchmark_runtime_on_size()
