"""
noise.py

Inverted 3D Worley noise: samples close to a feature point are bright,
samples far from every feature point are dark. Each lattice cell holds
exactly one randomly placed feature point.
"""

import logging
from functools import partial
from numbers import Integral
from typing import Dict, Optional

import numpy as np

from worley.features import cell_edge_length, generate_feature_points
from worley.distance import evaluate_distance_field
from worley.normalize import intensity, max_cell_distance

logger = logging.getLogger(__name__)


def _check_integer(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def validate_arguments(size: int, grid_size: int) -> None:
    """
    Check the volume and lattice dimensions before any work is done.

    Raises:
    -------
    TypeError
        If size or grid_size is not an integer.
    ValueError
        If size is negative, grid_size is smaller than 1, or grid_size
        exceeds a non-zero size.
    """
    _check_integer("size", size)
    _check_integer("grid_size", grid_size)

    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")
    if size and grid_size > size:
        raise ValueError(f"grid_size must not exceed size, got grid_size={grid_size} size={size}")

    if size and size % grid_size:
        logger.warning(
            f"grid_size={grid_size} does not divide size={size}; "
            f"using truncated cell edge {size // grid_size}"
        )


def worley_noise_3d(
    size: int,
    grid_size: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    clamp: bool = True,
    workers: int = 1,
    progress: bool = False,
) -> np.ndarray:
    """
    Generate an inverted Worley noise volume.

    Parameters:
    -----------
    size      : int
        Number of samples along each axis.
    grid_size : int
        Number of lattice cells along each axis.
    seed      : int or None
        Seed for feature point placement. None draws a fresh seed.
    rng       : np.random.Generator or None
        Explicit random source, used instead of `seed`.
    clamp     : bool
        Clip intensities to [0, 1]. The cell diagonal used for
        normalisation is not a strict bound on nearest distances.
    workers   : int
        Threads used for the distance field.
    progress  : bool
        Show a progress bar while evaluating.

    Returns:
    --------
    np.ndarray
        Flat float32 array of length size**3 indexed x + y*size + z*size*size.
    """
    validate_arguments(size, grid_size)
    if size == 0:
        return np.zeros(0, dtype=np.float32)

    edge = cell_edge_length(size, grid_size)
    max_distance = max_cell_distance(edge)
    points = generate_feature_points(size, grid_size, rng=rng, seed=seed)

    logger.debug(f"Worley noise: size={size} grid_size={grid_size} cell_edge={edge} max_distance={max_distance:.3f}")

    return evaluate_distance_field(
        size,
        points,
        transform=partial(intensity, max_distance=max_distance, clamp=clamp),
        workers=workers,
        progress=progress,
    )


def to_volume(field: np.ndarray, size: int) -> np.ndarray:
    """Reshape a flat field into a (size, size, size) view indexed [z, y, x]."""
    field = np.asarray(field)
    if field.size != size ** 3:
        raise ValueError(f"field has {field.size} values, expected {size ** 3} for size={size}")
    return field.reshape(size, size, size)


def field_summary(field: np.ndarray) -> Dict[str, float]:
    """
    Basic statistics of a noise field.
    """
    field = np.asarray(field)
    if field.size == 0:
        return {"count": 0, "min": 0.0, "max": 0.0, "mean": 0.0, "std": 0.0, "out_of_range": 0}

    return {
        "count": int(field.size),
        "min": float(np.min(field)),
        "max": float(np.max(field)),
        "mean": float(np.mean(field)),
        "std": float(np.std(field)),
        "out_of_range": int(np.count_nonzero((field < 0.0) | (field > 1.0))),
    }
