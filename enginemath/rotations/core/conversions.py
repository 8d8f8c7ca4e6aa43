# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between quaternions, rotation matrices, axis-angle pairs, and
rotation vectors.  All routines are implemented on numpy arrays (or array like objects) and use
:mod:`enginemath.scalar_math` for every transcendental function.

Matrices are indexed ``[row, column]`` and rotate column vectors (``matrix @ v``).  The engine stores its 4x4 matrices
in column-major order; :func:`matrix_to_column_major` and :func:`column_major_to_matrix` convert to and from that
layout, and every routine accepting a matrix also accepts the flat column-major form directly.
"""

import logging

import numpy as np

from enginemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, AXIS_ANGLE
from enginemath import scalar_math as sm

from enginemath.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                                _check_vector_array_and_shape,
                                                _normalize_vector, _vector_magnitude)
from enginemath.rotations.core.quaternion_math import quaternion_identity, quaternion_normalize


__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'quaternion_to_rotmat', 'quaternion_to_matrix4', 'rotmat_to_quaternion',
           'quaternion_to_rotvec', 'rotvec_to_quaternion',
           'matrix_to_column_major', 'column_major_to_matrix', 'DEGENERATE_AXIS']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting the numerical fallbacks taken by the conversion routines.
"""

DEGENERATE_AXIS: DOUBLE_ARRAY = np.array([1.0, 0.0, 0.0])
"""
The axis reported by :func:`quaternion_to_axis_angle` when the rotation axis is undefined (a rotation angle of 0, or a
scalar component of -1).

This choice is arbitrary.  Any unit vector describes these rotations equally well.
"""
DEGENERATE_AXIS.flags.writeable = False


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: float) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    The quaternion is formed by

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    and is then normalized, so an axis that is not of unit length still produces a unit quaternion.  The axis is not
    normalized before it is scaled though, so a non-unit axis changes the angle of the resulting rotation.

    :param axis: the 3 element unit rotation axis
    :param angle: the angle to rotate about the axis in radians
    :return: the rotation quaternion
    """

    axis = _check_vector_array_and_shape(axis)

    half_angle = float(angle) * 0.5
    sin_half_angle = sm.sin(half_angle)

    return quaternion_normalize(np.hstack([axis * sin_half_angle, sm.cos(half_angle)]))


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> AXIS_ANGLE:
    r"""
    This function converts a rotation quaternion into a rotation axis and angle.

    The quaternion is normalized first and then

    .. math::
        \theta = 2\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\text{sin}(\theta/2)}

    where the axis is normalized again before it is returned.

    The axis is not defined when :math:`q_s` is within :data:`.EPSILON` of 1 (no rotation) or -1.  In these cases
    :data:`DEGENERATE_AXIS` is returned with an angle of 0 or :math:`\pi` respectively.

    :param quaternion: the rotation quaternion
    :return: the unit rotation axis and the rotation angle in radians
    """

    quaternion = quaternion_normalize(quaternion)

    q_scalar = float(quaternion[-1])

    if q_scalar > 1.0 - sm.EPSILON:
        _LOGGER.debug('Zero rotation has no unique axis; reporting the fallback axis')
        return DEGENERATE_AXIS.copy(), 0.0

    if q_scalar < -1.0 + sm.EPSILON:
        _LOGGER.debug('Rotation with scalar -1 has no unique axis; reporting the fallback axis')
        return DEGENERATE_AXIS.copy(), sm.PI

    angle = 2.0 * sm.acos(q_scalar)

    # sin(angle/2) computed from the scalar directly
    inverse_sin_half_angle = 1.0 / sm.sqrt(1.0 - q_scalar * q_scalar)

    return _normalize_vector(quaternion[:3] * inverse_sin_half_angle), angle


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent 3x3 rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}1-2(q_y^2+q_z^2) & 2(q_xq_y-q_sq_z) & 2(q_xq_z+q_sq_y) \\
        2(q_xq_y+q_sq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_sq_x) \\
        2(q_xq_z-q_sq_y) & 2(q_yq_z+q_sq_x) & 1-2(q_x^2+q_y^2)\end{array}\right]

    so that ``T @ v`` equals :func:`.quaternion_rotate` of ``v``.  The quaternion is assumed to be of unit length.

    For example::

        >>> from enginemath.rotations import quaternion_to_rotmat
        >>> quaternion_to_rotmat([0, 0, 0, 1])
        array([[1., 0., 0.],
               [0., 1., 0.],
               [0., 0., 1.]])

    :param quaternion: The rotation quaternion to be converted to the rotation matrix
    :return: a numpy array containing the rotation matrix corresponding to the input quaternion
    """

    qx, qy, qz, qs = (float(value) for value in _check_quaternion_array_and_shape(quaternion))

    x2 = qx * qx
    y2 = qy * qy
    z2 = qz * qz
    xy = qx * qy
    xz = qx * qz
    yz = qy * qz
    wx = qs * qx
    wy = qs * qy
    wz = qs * qz

    return np.array([[1.0 - 2.0 * (y2 + z2), 2.0 * (xy - wz), 2.0 * (xz + wy)],
                     [2.0 * (xy + wz), 1.0 - 2.0 * (x2 + z2), 2.0 * (yz - wx)],
                     [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (x2 + y2)]])


def quaternion_to_matrix4(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts a rotation quaternion into a 4x4 homogeneous transformation matrix.

    The upper left 3x3 block is :func:`quaternion_to_rotmat`, the translation is zero, and the bottom right element
    is 1.  Use :func:`matrix_to_column_major` to get the engine storage layout.

    :param quaternion: The rotation quaternion to be converted
    :return: the 4x4 homogeneous rotation matrix
    """

    matrix = np.eye(4)
    matrix[:3, :3] = quaternion_to_rotmat(quaternion)

    return matrix


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The rotation matrix can be given as a 3x3 matrix, as a 4x4 homogeneous matrix (only the upper left 3x3 block is
    used) or as 16 values in column-major order.

    The extraction branches on the trace of the matrix so that it never divides by a small number.  Using
    :math:`t_{ij}` for the row :math:`i`, column :math:`j` element of the matrix:

    * if :math:`\text{Tr}(\mathbf{T}) > \epsilon` the scalar is dominant and with
      :math:`s=\frac{1}{2\sqrt{\text{Tr}(\mathbf{T})+1}}`

      .. math::
          q_s = \frac{1}{4s},\quad q_x = (t_{21}-t_{12})s,\quad q_y = (t_{02}-t_{20})s,\quad q_z = (t_{10}-t_{01})s

    * otherwise, if :math:`t_{00}` is the largest diagonal element, with :math:`s=2\sqrt{1+t_{00}-t_{11}-t_{22}}`

      .. math::
          q_x = \frac{s}{4},\quad q_y = \frac{t_{01}+t_{10}}{s},\quad q_z = \frac{t_{02}+t_{20}}{s},\quad
          q_s = \frac{t_{21}-t_{12}}{s}

    * otherwise, if :math:`t_{11}` is larger than :math:`t_{22}`, with :math:`s=2\sqrt{1+t_{11}-t_{00}-t_{22}}`

      .. math::
          q_x = \frac{t_{01}+t_{10}}{s},\quad q_y = \frac{s}{4},\quad q_z = \frac{t_{12}+t_{21}}{s},\quad
          q_s = \frac{t_{02}-t_{20}}{s}

    * otherwise, with :math:`s=2\sqrt{1+t_{22}-t_{00}-t_{11}}`

      .. math::
          q_x = \frac{t_{02}+t_{20}}{s},\quad q_y = \frac{t_{12}+t_{21}}{s},\quad q_z = \frac{s}{4},\quad
          q_s = \frac{t_{10}-t_{01}}{s}

    The result is normalized before it is returned.  Since :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the
    same rotation, converting a quaternion to a matrix and back may return either sign.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion corresponding to the input rotation matrix
    """

    matrix = _check_matrix_array_and_shape(rotation_matrix)

    m00, m01, m02 = (float(value) for value in matrix[0])
    m10, m11, m12 = (float(value) for value in matrix[1])
    m20, m21, m22 = (float(value) for value in matrix[2])

    trace = m00 + m11 + m22

    if trace > sm.EPSILON:
        s = 0.5 / sm.sqrt(trace + 1.0)
        quaternion = [(m21 - m12) * s, (m02 - m20) * s, (m10 - m01) * s, 0.25 / s]

    else:
        if m00 > m11 and m00 > m22:
            dominant = 0
            s = 2.0 * sm.sqrt(1.0 + m00 - m11 - m22)
        elif m11 > m22:
            dominant = 1
            s = 2.0 * sm.sqrt(1.0 + m11 - m00 - m22)
        else:
            dominant = 2
            s = 2.0 * sm.sqrt(1.0 + m22 - m00 - m11)

        # with a non-positive trace the radicand of the dominant term is at least 1 - EPSILON/3 so s never vanishes
        if dominant == 0:
            quaternion = [0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s]
        elif dominant == 1:
            quaternion = [(m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s]
        else:
            quaternion = [(m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s]

    return quaternion_normalize(quaternion)


def quaternion_to_rotvec(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into a rotation vector :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`.

    The axis and angle are found using :func:`quaternion_to_axis_angle`, therefore the identity quaternion gives the
    zero vector.

    :param quaternion: the rotation quaternion to be converted to the rotation vector
    :return: The rotation vector corresponding to the input rotation quaternion
    """

    axis, angle = quaternion_to_axis_angle(quaternion)

    return axis * angle


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation vector :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` into a rotation quaternion.

    The rotation angle is the length of the vector and the axis is its direction.  Vectors whose length (from
    :func:`.scalar_math.sqrt`) is within :data:`.EPSILON` of 0 give the identity quaternion.  Since the kernel square
    root reports 0 for arguments within :data:`.EPSILON` of 0, this covers every vector with a squared length below
    :data:`.EPSILON`.

    :param rot_vec: The rotation vector to convert to a rotation quaternion
    :return: the rotation quaternion corresponding to the input rotation vector
    """

    rot_vec = _check_vector_array_and_shape(rot_vec)

    theta = _vector_magnitude(rot_vec)

    if sm.approx_equal(theta, 0.0):
        return quaternion_identity()

    return axis_angle_to_quaternion(rot_vec / theta, theta)


def matrix_to_column_major(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Flattens a square matrix into the engine's column-major storage order.

    For a 4x4 matrix ``m`` the result is ``[m[0, 0], m[1, 0], m[2, 0], m[3, 0], m[0, 1], ...]``.

    :param matrix: the 3x3 or 4x4 matrix
    :return: the flat array of values in column-major order
    """

    matrix = np.asanyarray(matrix, dtype=np.float64)

    if matrix.shape not in ((3, 3), (4, 4)):
        raise ValueError('The matrix must be 3x3 or 4x4')

    return matrix.ravel(order='F')


def column_major_to_matrix(values: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Builds a 3x3 or 4x4 matrix from 9 or 16 values stored in column-major order.

    :param values: the flat matrix values in column-major order
    :return: the matrix indexed ``[row, column]``
    """

    values = np.asanyarray(values, dtype=np.float64).ravel()

    if values.size == 16:
        return values.reshape(4, 4, order='F')

    if values.size == 9:
        return values.reshape(3, 3, order='F')

    raise ValueError('A column-major matrix must have 9 or 16 values')
