import math

import numpy as np
import pytest

from worley.geometry import Vector3, distance, points_to_array


def test_distance_is_euclidean():
    assert distance(Vector3(0, 0, 0), Vector3(1, 2, 2)) == 3.0
    assert distance(Vector3(1.5, 0.0, 0.0), Vector3(0.0, 0.0, 0.0)) == 1.5
    assert math.isclose(distance(Vector3(0, 0, 0), Vector3(1, 1, 1)), math.sqrt(3))


def test_to_float_converts_components():
    v = Vector3(1, 2, 3).to_float()
    assert all(isinstance(c, float) for c in v.as_tuple())
    assert v == Vector3(1.0, 2.0, 3.0)


def test_vector_is_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5


def test_points_to_array_from_vectors_and_tuples():
    array = points_to_array([Vector3(1, 2, 3), (4, 5, 6)])
    assert array.shape == (2, 3)
    assert array.dtype == np.float64
    np.testing.assert_array_equal(array, [[1, 2, 3], [4, 5, 6]])


def test_points_to_array_empty():
    assert points_to_array([]).shape == (0, 3)


def test_points_to_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        points_to_array(np.zeros((4, 2)))
