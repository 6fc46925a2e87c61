"""
Utility functions for the sun controller.

Scalar/array helpers so the solar formulas can be evaluated either for a single
instant or for a whole batch of day-counts at once.
"""

import functools

import numpy as np


def ensure_batch(values):
    """
    Ensure values are in batch format.

    Args:
        values: Scalar or array-like of numbers

    Returns:
        Tuple of (float64 array with ndim >= 1, was_single flag)
    """
    arr = np.asarray(values, dtype=np.float64)
    was_single = arr.ndim == 0
    if was_single:
        arr = arr[None]
    return arr, was_single


def unbatch_if_needed(arrays, was_single):
    """
    Convert batched arrays back to Python floats if the input was a scalar.

    Args:
        arrays: Single array or tuple of arrays
        was_single: Whether the original input was a scalar

    Returns:
        Arrays in original format (float or array)
    """
    if not was_single:
        return arrays

    if isinstance(arrays, tuple):
        return tuple(float(arr[0]) for arr in arrays)
    return float(arrays[0])


def batch_compatible(func):
    """
    Decorator to make a function of a day-count batch-compatible.

    The wrapped function always receives a 1D array as its first argument and
    returns an array or a tuple of arrays; scalars in give floats out.
    """
    @functools.wraps(func)
    def wrapper(days, *args, **kwargs):
        batch, was_single = ensure_batch(days)
        result = func(batch, *args, **kwargs)
        return unbatch_if_needed(result, was_single)

    return wrapper


def wrap_degrees(angle):
    """Wrap an angle in degrees into [-180, 180)."""
    return (angle + 180.0) % 360.0 - 180.0


def lerp(start, end, t):
    """Linear interpolation, unclamped."""
    return start + (end - start) * t
