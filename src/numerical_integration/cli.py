# Copyright Biomedical Imaging Group, EPFL 2024

"""
Command line front end: integrate the reference functions over an interval read from the user.

"""
import argparse
import sys
import typing as tp

from .functions import REFERENCE_FUNCTIONS
from .integrators import INTEGRATOR_TYPES, create_integrator
from .interval import NUM_SUBDIVISIONS, Interval

_METHOD_LABELS = {
    'rectangle': 'Rectangle rule:',
    'trapezoidal': 'Trapezoidal rule:',
    'monte_carlo': 'Monte Carlo:',
}


def _parse_args(argv: tp.Optional[tp.List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description='Integrate the reference functions with the rectangle, trapezoidal and Monte Carlo methods.')
    ap.add_argument('--start', type=float, default=None, help='Integration start point (prompted if omitted).')
    ap.add_argument('--end', type=float, default=None, help='Integration end point (prompted if omitted).')
    ap.add_argument('--subdivisions', type=int, default=NUM_SUBDIVISIONS,
                    help=f'Number of subdivisions / Monte Carlo samples (default: {NUM_SUBDIVISIONS}).')
    ap.add_argument('--scan_points', type=int, default=None,
                    help='Number of points of the Monte Carlo range scan (default: same as --subdivisions).')
    ap.add_argument('--seed', type=int, default=None, help='Monte Carlo seed (default: fresh randomness).')
    ap.add_argument('--methods', nargs='+', choices=list(INTEGRATOR_TYPES), default=list(INTEGRATOR_TYPES),
                    help='Integration methods to run (default: all).')
    ap.add_argument('--device', default='cpu', help="Computational backend, e.g. 'cpu' or 'cuda'.")
    return ap.parse_args(argv)


def _read_bound(name: str) -> float:
    """Prompt for one bound; raise ValueError on invalid input."""
    try:
        return float(input(f'Enter integration {name} point: '))
    except EOFError:
        raise ValueError(name) from None


def main(argv: tp.Optional[tp.List[str]] = None) -> int:
    args = _parse_args(argv)
    bounds = {'start': args.start, 'end': args.end}
    for name, value in bounds.items():
        if value is None:
            try:
                bounds[name] = _read_bound(name)
            except ValueError:
                print(f'Error: Invalid input for {name} point', file=sys.stderr)
                return 1
    try:
        interval = Interval(bounds['start'], bounds['end'])
    except ValueError as error:
        print(f'Error: {error}', file=sys.stderr)
        return 1

    integrators = []
    for method in args.methods:
        kwargs = {
            'start': interval.start,
            'end': interval.end,
            'n_subdivisions': args.subdivisions,
            'device': args.device,
        }
        if method == 'monte_carlo':
            kwargs.update({'n_scan_points': args.scan_points, 'seed': args.seed})
        try:
            integrators.append(create_integrator(method, **kwargs))
        except ValueError as error:
            print(f'Error: {error}', file=sys.stderr)
            return 1

    print('\n=== Numerical Integration Results ===')
    for index, (label, func) in enumerate(REFERENCE_FUNCTIONS, start=1):
        print(f'\nFunction {index}: {label}')
        for integrator in integrators:
            print(f'{_METHOD_LABELS[integrator.get_name()]:<19}{integrator.integrate(func):.6f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
