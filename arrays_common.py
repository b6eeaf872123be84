"""Array helpers shared by the trace generator and the command-line front end."""

import math
import numbers

import numpy as np


def generate_random_array(size, low, high, seed=None) -> list:
    """
    Return `size` integers drawn uniformly from [low, high] (both inclusive).
    The same seed always produces the same array.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=size, endpoint=True).tolist()


def shuffled_range(size, seed=None) -> list:
    """Permutation of 1..size."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    rng = np.random.default_rng(seed)
    return rng.permutation(np.arange(1, size + 1)).tolist()


def validate_values(values) -> list:
    """
    Check that every element is a finite real number and return a plain list copy.

    numpy arrays and numpy scalars are accepted and converted to Python numbers.
    Raises TypeError for non-numeric elements and ValueError for NaN / inf.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D array, got shape {values.shape}")
        values = values.tolist()

    out = []
    for i, v in enumerate(values):
        if isinstance(v, np.generic):
            v = v.item()
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise TypeError(f"element {i} is not a real number: {v!r}")
        if not math.isfinite(v):
            raise ValueError(f"element {i} is not finite: {v!r}")
        out.append(v)
    return out
