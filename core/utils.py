from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd
from scipy.special import expit


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def logistic(z):
    """
    Logistic link exp(z) / (1 + exp(z)).

    Evaluated as scipy's expit so large |z| saturates to 0 or 1 instead of
    overflowing to nan.
    """
    return expit(z)


def linear_score(coefficients: np.ndarray, drives: np.ndarray):
    """z = sum(coefficient_i * drive_i) + intercept; the intercept is the last coefficient."""
    coefficients = np.asarray(coefficients, dtype=float)
    return drives @ coefficients[:-1] + coefficients[-1]


def draw_uniform(rng, size=None):
    """
    One uniform draw in [0, 1) from a numpy Generator or anything with random().

    ``random.Random`` instances and simple test doubles are accepted.
    """
    if size is None:
        return float(rng.random())
    if isinstance(rng, np.random.Generator):
        return rng.random(size)
    return np.array([rng.random() for _ in range(int(size))], dtype=float)
