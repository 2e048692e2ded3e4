"""
geometry.py

Small vector helpers shared by the feature point generator and the
distance field evaluator.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

Number = Union[int, float]


@dataclass(frozen=True)
class Vector3:
    """
    Immutable (x, y, z) triple. Integer components are used for feature
    points on the lattice, float components for distance computation.
    """
    x: Number
    y: Number
    z: Number

    def to_float(self) -> "Vector3":
        return Vector3(float(self.x), float(self.y), float(self.z))

    def as_tuple(self) -> Tuple[Number, Number, Number]:
        return (self.x, self.y, self.z)


def distance(v1: Vector3, v2: Vector3) -> float:
    """
    Euclidean distance between two vectors.
    """
    dx = v2.x - v1.x
    dy = v2.y - v1.y
    dz = v2.z - v1.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def points_to_array(points: Iterable[Union[Vector3, Tuple[Number, Number, Number]]], dtype=np.float64) -> np.ndarray:
    """
    Convert a sequence of vectors (or plain triples) into an (N, 3) array.

    Parameters:
    -----------
    points : iterable of Vector3 or tuple
        Points to convert. An (N, 3) array is passed through.
    dtype  : numpy dtype
        Element type of the result.

    Returns:
    --------
    np.ndarray
        Array of shape (N, 3).
    """
    if isinstance(points, np.ndarray):
        array = points.astype(dtype, copy=False)
    else:
        rows = [p.as_tuple() if isinstance(p, Vector3) else tuple(p) for p in points]
        array = np.asarray(rows, dtype=dtype)

    if array.size == 0:
        return array.reshape(0, 3)
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError(f"points must have shape (N, 3), got {array.shape}")
    return array
