# Copyright Biomedical Imaging Group, EPFL 2024

"""
Plotting of convergence statistics.

"""
import os
import typing as tp

import matplotlib.pyplot as plt
import numpy as np

_FIG_SIZE = 6
_TITLE_SIZE = 16
_LABEL_SIZE = 14
lw = 2


def plot_convergence(
        stats: tp.Dict[str, tp.Sequence[tp.Tuple[int, float]]],
        method_orders: tp.Optional[tp.Dict[str, float]] = None,
        title: str = 'Error convergence',
        filepath: str = None,
        show: bool = True,
):
    """
    Plot the error of one or more integrators against the grid size on log-log axes.

    Parameters
    ----------
    stats : dict
        Maps a label to the (size, error) pairs returned by `compute_convergence`.
    method_orders : dict, optional
        Maps a label to the expected order :math:`p`; a dashed :math:`O(N^{-p})` line is drawn for it.
    title : str, optional
        Title of the figure.
    filepath: str, optional
        Path to save the plot. Default is None, no file is saved.
    show : bool, optional
        Whether to display the figure. Default is True.

    Returns
    -------
    figure : matplotlib.figure.Figure

    """
    if method_orders is None:
        method_orders = {}
    figure, ax = plt.subplots(figsize=(_FIG_SIZE, _FIG_SIZE))
    for label, data in stats.items():
        sizes = np.array([size for size, _ in data], dtype=float)
        errors = np.array([error for _, error in data], dtype=float)
        ax.loglog(sizes, errors, label=label, linewidth=lw, zorder=3)
        if label in method_orders:
            order = method_orders[label]
            ax.loglog(sizes, errors[0] * (sizes / sizes[0]) ** (-order), 'k--', linewidth=0.75,
                      label=rf'$O(N^{{-{order:g}}})$')
    ax.legend()
    ax.set_xlabel('Number of subdivisions', fontsize=_LABEL_SIZE)
    ax.set_ylabel('Mean abs. error', fontsize=_LABEL_SIZE)
    ax.set_title(title, fontsize=_TITLE_SIZE)
    ax.grid(True)
    figure.tight_layout()
    if filepath:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        figure.savefig(filepath)
    if show:
        plt.show()
    return figure
