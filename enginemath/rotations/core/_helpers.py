import numpy as np

from enginemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from enginemath import scalar_math as sm


def _check_array_and_shape(input: ARRAY_LIKE, size: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if size is not None and in_shape != (size,):
        raise ValueError(f'The input must be a 1d array of length {size}')

    # ensure the value is an array and break mutability
    return np.array(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, size=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, size=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the 3x3 rotation block of a 3x3 matrix, a 4x4 homogeneous matrix, or 16 values in column-major order.
    """

    in_shape = np.shape(matrix)

    if in_shape == (16,):
        return np.array(matrix, dtype=np.float64).reshape(4, 4, order='F')[:3, :3]

    if in_shape in ((3, 3), (4, 4)):
        return np.array(matrix, dtype=np.float64)[:3, :3]

    raise ValueError('The matrix must be 3x3, 4x4, or a sequence of 16 column-major values')


def _vector_magnitude(vector: DOUBLE_ARRAY) -> float:
    return sm.sqrt(float(vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2]))


def _normalize_vector(vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # vectors collapse to zero when degenerate, unlike quaternions which are left untouched
    magnitude = _vector_magnitude(vector)

    if magnitude > sm.EPSILON:
        return vector / magnitude

    return np.zeros(3)
