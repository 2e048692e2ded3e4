"""
distance.py

Brute-force nearest feature point search. Every sample of the size^3
volume is compared against every feature point; no spatial structure
is used.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from numbers import Integral
from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from worley.geometry import Vector3, distance, points_to_array

logger = logging.getLogger(__name__)

# Upper limit on feature points compared per vectorised step.
POINT_CHUNK = 256
# Elements allowed in one (size, size, chunk) float64 buffer (32 MB).
MAX_CHUNK_ELEMENTS = 2 ** 22


def nearest_distance(sample: Vector3, points) -> float:
    """
    Distance from a single sample to its nearest feature point.

    Parameters:
    -----------
    sample : Vector3
        Sample coordinate.
    points : np.ndarray or iterable of Vector3
        Feature points.

    Returns:
    --------
    float
        Minimum Euclidean distance over all points.
    """
    pts = points_to_array(points)
    if len(pts) == 0:
        raise ValueError("At least one feature point is required.")

    origin = sample.to_float()
    return min(distance(origin, Vector3(*row).to_float()) for row in pts)


def point_chunk(size: int) -> int:
    """Points per step so that one slab buffer stays within MAX_CHUNK_ELEMENTS."""
    return max(1, min(POINT_CHUNK, MAX_CHUNK_ELEMENTS // max(1, size * size)))


def slab_distances(z: int, size: int, points: np.ndarray, chunk: Optional[int] = None) -> np.ndarray:
    """
    Nearest feature point distances for the z-th slab of the volume.

    Returns a (size, size) array indexed [y, x]. `chunk` defaults to
    point_chunk(size).
    """
    if chunk is None:
        chunk = point_chunk(size)
    coords = np.arange(size, dtype=np.float64)
    best = np.full((size, size), np.inf)

    for start in range(0, len(points), chunk):
        block = points[start:start + chunk]
        dz2 = (z - block[:, 2]) ** 2
        dy2 = (coords[:, None] - block[None, :, 1]) ** 2
        dx2 = (coords[:, None] - block[None, :, 0]) ** 2
        d2 = dx2[None, :, :] + dy2[:, None, :]
        d2 += dz2[None, None, :]
        np.minimum(best, d2.min(axis=-1), out=best)

    return np.sqrt(best)


def evaluate_distance_field(
    size: int,
    points,
    transform: Optional[Callable[[np.ndarray], np.ndarray]] = None,
    workers: int = 1,
    progress: bool = False,
) -> np.ndarray:
    """
    Minimum distance from every sample of the volume to the feature points.

    Parameters:
    -----------
    size      : int
        Edge length of the sample volume.
    points    : np.ndarray or iterable of Vector3
        Feature points, shape (N, 3).
    transform : callable or None
        Applied to each slab of distances before it is stored, e.g. the
        intensity mapping.
    workers   : int
        Number of threads. Slabs are independent and write disjoint parts
        of the output, so results do not depend on this value.
    progress  : bool
        Show a progress bar over slabs.

    Returns:
    --------
    np.ndarray
        Flat float32 array of length size**3, index x + y*size + z*size*size.
    """
    pts = points_to_array(points)
    if len(pts) == 0:
        raise ValueError("At least one feature point is required.")
    if isinstance(workers, bool) or not isinstance(workers, Integral) or workers < 1:
        raise ValueError(f"workers must be a positive integer, got {workers}")

    field = np.empty((size, size, size), dtype=np.float32)

    def evaluate_slab(z: int) -> int:
        slab = slab_distances(z, size, pts)
        if transform is not None:
            slab = transform(slab)
        field[z] = slab
        return z

    logger.debug(f"Evaluating {size}^3 samples against {len(pts)} feature points with {workers} worker(s)")

    if workers > 1:
        with ThreadPoolExecutor(max_workers=int(workers)) as executor:
            for _ in tqdm(executor.map(evaluate_slab, range(size)), total=size, desc="Distance field", disable=not progress):
                pass
    else:
        for z in tqdm(range(size), desc="Distance field", disable=not progress):
            evaluate_slab(z)

    return field.ravel()
