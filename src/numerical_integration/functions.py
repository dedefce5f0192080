# Copyright Biomedical Imaging Group, EPFL 2024

"""
Reference integrands used by the command line front end and the demos.

All functions take a tensor of sample points and return a tensor of the same shape.
"""

__all__ = ['function_1', 'function_2', 'function_3', 'function_4',
           'antiderivative_1', 'antiderivative_3', 'REFERENCE_FUNCTIONS']

import torch


def function_1(x: torch.Tensor) -> torch.Tensor:
    r"""Cubic polynomial :math:`f(x) = -3.13 x^3 + 14.5 x^2 - 6 x + 7`."""
    return -3.13 * x ** 3 + 14.5 * x ** 2 - 6.0 * x + 7.0


def function_2(x: torch.Tensor) -> torch.Tensor:
    r"""Oscillating function :math:`f(x) = \frac{\cos(2 x^2)}{2} \sin(8 x^2) - 3 \cos(5 + x) + 1`."""
    return torch.cos(2.0 * x ** 2) / 2.0 * torch.sin(8.0 * x ** 2) - 3.0 * torch.cos(5.0 + x) + 1.0


def function_3(x: torch.Tensor) -> torch.Tensor:
    r"""Cubic polynomial :math:`f(x) = 0.1 x^3 + 2 x^2 + 0.5 x + 5`."""
    return 0.1 * x ** 3 + 2.0 * x ** 2 + 0.5 * x + 5.0


def function_4(x: torch.Tensor) -> torch.Tensor:
    r"""Mixed function :math:`f(x) = x^3 \sin(2 x) + \cos(x)`."""
    return x ** 3 * torch.sin(2.0 * x) + torch.cos(x)


def antiderivative_1(x: float) -> float:
    """Antiderivative of `function_1`, vanishing at 0."""
    return -3.13 / 4 * x ** 4 + 14.5 / 3 * x ** 3 - 3.0 * x ** 2 + 7.0 * x


def antiderivative_3(x: float) -> float:
    """Antiderivative of `function_3`, vanishing at 0."""
    return 0.1 / 4 * x ** 4 + 2.0 / 3 * x ** 3 + 0.25 * x ** 2 + 5.0 * x


# (label, integrand) pairs, in display order
REFERENCE_FUNCTIONS = [
    ('f(x) = -3.13x³ + 14.5x² - 6x + 7', function_1),
    ('f(x) = cos(2x²)/2 * sin(8x²) - 3cos(5+x) + 1', function_2),
    ('f(x) = 0.1x³ + 2x² + 0.5x + 5', function_3),
    ('f(x) = x³sin(2x) + cos(x)', function_4),
]
