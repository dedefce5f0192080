# Copyright Biomedical Imaging Group, EPFL 2024

"""
The abstract integrator class.

"""
import json
import os
import typing as tp
from abc import ABC, abstractmethod

from ..interval import NUM_SUBDIVISIONS, Interval, check_count


class Integrator(ABC):
    r"""
    Base class integrator.

    Parameters
    ----------
    start : float
        Lower bound of the integration interval.
    end : float
        Upper bound of the integration interval.
    n_subdivisions : int
        Number of cells of the quadrature grid, or number of random samples for Monte Carlo.
    device : str
        Computational backend. Choose from 'cpu' and 'cuda'.
    strict : bool
        Raise a `NumericalError` instead of warning when the integrand is not finite.

    Notes
    -----
    The interval is set once, at construction or with `set_interval`, and is read by every call to
    `integrate`. It is never modified during an integration.

    """
    def __init__(self,
                 start: float = 0.0,
                 end: float = 1.0,
                 n_subdivisions: int = NUM_SUBDIVISIONS,
                 device: str = 'cpu',
                 strict: bool = False):
        self._interval = Interval(start, end)
        self.n_subdivisions = check_count(n_subdivisions, 'n_subdivisions')
        self.device = device
        self.strict = strict

    @classmethod
    @abstractmethod
    def get_name(cls) -> str:
        """Get name of the integrator in a certain format, e.g. 'monte_carlo'."""
        raise NotImplementedError

    @abstractmethod
    def integrate(self, func: tp.Callable) -> float:
        """Integrate `func` over the current interval."""
        raise NotImplementedError

    @property
    def interval(self) -> Interval:
        return self._interval

    @property
    def start(self) -> float:
        return self._interval.start

    @property
    def end(self) -> float:
        return self._interval.end

    def set_interval(self, start: float, end: float):
        """Set the interval used by the subsequent calls to `integrate`."""
        self._interval = Interval(start, end)

    def __call__(self, func: tp.Callable) -> float:
        return self.integrate(func)

    def _get_args(self) -> dict:
        """Get the parameters of the integrator."""
        args = {
            'name': self.get_name(),
            'start': self.start,
            'end': self.end,
            'n_subdivisions': self.n_subdivisions,
            'device': self.device,
            'strict': self.strict,
        }
        return args

    def save_parameters(self, json_filepath: str):
        """
        Save the parameters of the integrator in a JSON file.

        Parameters
        ----------
        json_filepath : str
            Path to save the attributes in a JSON file.

        """
        args = self._get_args()
        directory = os.path.dirname(json_filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(json_filepath, 'w') as file:
            json.dump(args, file, indent=2)
