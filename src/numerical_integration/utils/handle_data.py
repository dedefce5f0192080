# Copyright Biomedical Imaging Group, EPFL 2024

"""
Persistence of convergence and runtime statistics as two-column csv files.

"""
import csv
import os
import typing as tp


def save_stats_as_csv(data: tp.Iterable[tp.Tuple[int, float]], filepath: str):
    """
    Write the (size, error) pairs of a convergence study, one pair per row.

    The same layout holds (size, runtime) pairs in the runtime benchmark.

    Parameters
    ----------
    data : list of (int, float)
        Number of subdivisions or samples, and the measured error or runtime.
    filepath : str
        Destination csv file. Missing parent directories are created.

    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w', newline='') as csv_file:
        csv.writer(csv_file).writerows((int(size), float(value)) for size, value in data)


def load_stats_from_csv(filepath: str) -> tp.List[tp.Tuple[int, float]]:
    """
    Read back the (size, error) pairs written by `save_stats_as_csv`.

    Parameters
    ----------
    filepath: str
        Path to the csv file.

    Returns
    -------
    output: list of (int, float)
        Sizes parsed as integers and errors as floats, in file order.

    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f'File {filepath} does not exist')

    with open(filepath, 'r', newline='') as csv_file:
        return [(int(size), float(value)) for size, value in csv.reader(csv_file)]
