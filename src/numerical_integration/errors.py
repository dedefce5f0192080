# Copyright Biomedical Imaging Group, EPFL 2024

"""
Exceptions raised by the integrators.

"""


class NumericalError(ArithmeticError):
    """The integrand produced non-finite values over the integration domain."""
