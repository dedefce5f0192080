# Copyright Biomedical Imaging Group, EPFL 2024

"""
Miscellaneous helpers shared by the integration rules.

"""
import typing as tp
import warnings

import torch

from ..errors import NumericalError

DTYPE = torch.float64


def evaluate_function(
        func: tp.Callable,
        xs: torch.Tensor,
        strict: bool = False,
) -> torch.Tensor:
    r"""
    Evaluate an integrand on a 1D tensor of sample points.

    The integrand is first called once on the whole tensor. Scalar outputs, e.g. from a constant
    function ``lambda x: 2.0``, are broadcast to the shape of `xs`. Integrands that only accept real
    numbers, such as ``math.sin`` or functions branching on the value of `x`, fail on a tensor or return
    a result of the wrong shape; they are then evaluated point by point.

    Parameters
    ----------
    func : Callable
        Integrand :math:`f`, either vectorized over tensors or mapping a real number to a real number.
    xs : torch.Tensor
        Sample points of shape (N,).
    strict : bool, optional
        Raise a `NumericalError` instead of warning when :math:`f` is not finite. Default is False.

    Returns
    -------
    output: torch.Tensor
        Evaluations :math:`f(x_i)` of shape (N,), in double precision.

    """
    try:
        fs = torch.as_tensor(func(xs), dtype=DTYPE, device=xs.device)
        fs = torch.broadcast_to(fs, xs.shape)
    except (TypeError, ValueError, RuntimeError):
        fs = torch.tensor([float(func(x)) for x in xs.tolist()], dtype=DTYPE, device=xs.device)
    if not torch.isfinite(fs).all():
        n_bad = int((~torch.isfinite(fs)).sum())
        message = f'The integrand is not finite at {n_bad} of {xs.numel()} sample points! ' \
                  f'The computed integral is not reliable.'
        if strict:
            raise NumericalError(message)
        warnings.warn(message)
    return fs
