"""
normalize.py

Distance to intensity mapping. Distances in [0, max_cell_distance] map
linearly onto [0, 1] and are inverted, so samples close to a feature point
are bright.
"""

import math
import logging
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]


def map_value(value: ArrayLike, old_min: float, old_max: float, new_min: float, new_max: float) -> ArrayLike:
    """
    Linearly remap `value` from [old_min, old_max] to [new_min, new_max].

    Parameters:
    -----------
    value            : float or np.ndarray
        Value(s) to remap. Values outside the old range are extrapolated.
    old_min, old_max : float
        Source range.
    new_min, new_max : float
        Target range.

    Returns:
    --------
    float or np.ndarray
        Remapped value(s).
    """
    if old_max == old_min:
        raise ZeroDivisionError(f"Source range is empty: old_min == old_max == {old_min}")
    return new_min + (value - old_min) * (new_max - new_min) / (old_max - old_min)


def max_cell_distance(cell_edge: float) -> float:
    """Diagonal of one lattice cell."""
    return math.sqrt(3.0) * float(cell_edge)


def intensity(distance: ArrayLike, max_distance: float, clamp: bool = True) -> ArrayLike:
    """
    Inverted, normalized intensity for nearest-feature distance(s).

    With clamp=False, distances beyond `max_distance` give negative values.
    """
    value = 1.0 - map_value(distance, 0.0, max_distance, 0.0, 1.0)
    if not clamp:
        return value

    if np.ndim(value) == 0:
        return float(min(max(value, 0.0), 1.0))

    clipped = int(np.count_nonzero((value < 0.0) | (value > 1.0)))
    if clipped:
        logger.debug(f"Clamped {clipped} intensities outside [0, 1] (max distance {max_distance:.3f})")
    return np.clip(value, 0.0, 1.0)
