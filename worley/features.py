"""
features.py

Feature point placement for cellular noise: the cubic sample volume is
split into grid_size^3 equal cells and each cell receives exactly one
point at a uniformly random integer position inside it.
"""

import logging
from typing import Iterator, Optional

import numpy as np

from worley.geometry import Vector3

logger = logging.getLogger(__name__)


def cell_edge_length(size: int, grid_size: int) -> int:
    """
    Integer (truncated) edge length of one lattice cell, in samples.

    Raises:
    -------
    ValueError
        If grid_size is smaller than 1 or larger than size.
    """
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")
    if grid_size > size:
        raise ValueError(f"grid_size must not exceed size, got grid_size={grid_size} size={size}")
    return size // grid_size


def generate_feature_points(
    size: int,
    grid_size: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Place one random feature point in every cell of the lattice.

    Parameters:
    -----------
    size      : int
        Edge length of the sample volume.
    grid_size : int
        Number of cells along each axis.
    rng       : np.random.Generator or None
        Random source. If None, one is created from `seed`.
    seed      : int or None
        Seed for a new generator. If both rng and seed are None the
        generator is seeded from OS entropy and results differ per call.

    Returns:
    --------
    np.ndarray
        Integer array of shape (grid_size**3, 3). Rows follow lattice order
        (first axis outermost, third axis innermost).
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both.")

    edge = cell_edge_length(size, grid_size)
    if rng is None:
        rng = np.random.default_rng(seed)

    cells = np.indices((grid_size, grid_size, grid_size)).reshape(3, -1).T
    # one row of three offsets per cell, drawn in lattice order
    offsets = rng.integers(0, edge, size=cells.shape)
    points = (cells * edge + offsets).astype(np.int64)

    logger.debug(f"Generated {len(points)} feature points (cell edge {edge}, grid {grid_size}^3)")
    return points


def iter_feature_points(points: np.ndarray) -> Iterator[Vector3]:
    """Yield each row of a feature point array as an integer Vector3."""
    for x, y, z in points:
        yield Vector3(int(x), int(y), int(z))
