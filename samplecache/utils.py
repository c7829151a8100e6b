import pandas as pd
import numpy as np
import numpy.typing as npt

from math import floor, log
from pathlib import Path
from scipy import stats


def samples_frame(samples: npt.ArrayLike, start_idx: int = 0) -> pd.DataFrame:
    """Puts a run of samples into a dataframe

    Args:
        samples (npt.ArrayLike): The samples in draw order
        start_idx (int, optional): Draw number of the first sample. Defaults to 0.

    Returns:
        pd.DataFrame: A dataframe with columns "draw" and "value"
    """
    samples = np.asarray(samples, dtype=np.float64)
    return pd.DataFrame({"draw": np.arange(start_idx, start_idx + len(samples)), "value": samples})


def read_samples(filename: str) -> pd.DataFrame:
    """Reads a sample dump written by dump_samples.py

    Args:
        filename (str): The csv filename

    Returns:
        pd.DataFrame: A dataframe with the draw number and value columns
    """
    samples = pd.read_csv(Path(filename))
    # rename cols to make them easier to reference
    samples.columns = ["draw", "value"]
    return samples


def uniformity_pvalue(samples: npt.ArrayLike) -> float:
    """Kolmogorov-Smirnov test of the samples against U(0, 1)

    Args:
        samples (npt.ArrayLike): The samples

    Returns:
        float: The p-value, small values mean the samples don't look uniform
    """
    return float(stats.kstest(np.asarray(samples, dtype=np.float64), "uniform").pvalue)


def human_format(number: int) -> str:
    """Shortens a count for plot titles, 25000 -> 25K"""
    units = ['', 'K', 'M', 'G', 'T', 'P']
    k = 1000.0
    magnitude = int(floor(log(number, k)))
    return '{}{}'.format(int(number / k**magnitude), units[magnitude])
