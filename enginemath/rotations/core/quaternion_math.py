import logging

import numpy as np

from enginemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike
from enginemath import scalar_math as sm

from enginemath.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape

__all__ = ["quaternion_identity", "quaternion_square_magnitude", "quaternion_magnitude", "quaternion_dot",
           "quaternion_normalize", "quaternion_conjugate", "quaternion_inverse", "quaternion_multiplication",
           "quaternion_rotate", "nlerp", "slerp"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting the numerical fallbacks taken by the quaternion routines.
"""


def quaternion_identity() -> DOUBLE_ARRAY:
    """
    Returns the identity quaternion ``[0, 0, 0, 1]`` (no rotation).
    """

    return np.array([0, 0, 0, 1.0])


def quaternion_square_magnitude(quaternion: ARRAY_LIKE) -> float:
    """
    Returns the squared length of a quaternion.

    :param quaternion: the quaternion
    :return: the sum of the squares of the four components
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return float((quaternion * quaternion).sum())


def quaternion_magnitude(quaternion: ARRAY_LIKE) -> float:
    """
    Returns the length of a quaternion computed with :func:`.scalar_math.sqrt`.

    :param quaternion: the quaternion
    :return: the length of the quaternion
    """

    return sm.sqrt(quaternion_square_magnitude(quaternion))


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    Returns the 4 dimensional inner product of two quaternions.
    """

    return float((_check_quaternion_array_and_shape(quaternion_1) *
                  _check_quaternion_array_and_shape(quaternion_2)).sum())


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion to unit length.

    If the length of the quaternion is not greater than :data:`.EPSILON` the quaternion is returned unmodified (it is
    not zeroed).  The length comes from :func:`.scalar_math.sqrt`, which reports 0 for any squared length within
    :data:`.EPSILON` of 0, so in practice every quaternion with a squared length below :data:`.EPSILON` is left as is.
    No sign convention is enforced on the result, so ``q`` and ``-q`` stay distinct.

    :param quaternion: the quaternion to normalize
    :returns: a new array containing the normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    magnitude = quaternion_magnitude(work_quaternion)

    if magnitude > sm.EPSILON:
        work_quaternion /= magnitude

    else:
        _LOGGER.debug('Quaternion magnitude %g is too small to normalize; returning it unchanged', magnitude)

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the conjugate of the quaternion, formed by negating the vector portion.

    For a unit quaternion the conjugate is also the inverse.

    :param quaternion: the quaternion to conjugate
    :return: the conjugate quaternion
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates quaternion multiplication.  It is computed as the conjugate divided by the squared
    magnitude:

    .. math::
        \mathbf{q}^{-1}=\frac{1}{\|\mathbf{q}\|^2}\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    so it is also valid for quaternions that are not of unit length.  If the squared magnitude is within
    :data:`.EPSILON` of 0 the all zero quaternion is returned.

    :param quaternion: The quaternion to be inverted
    :return: a numpy array representing the inverse quaternion
    """

    square_magnitude = quaternion_square_magnitude(quaternion)

    if sm.abs(square_magnitude) < sm.EPSILON:
        _LOGGER.debug('Cannot invert a quaternion with squared magnitude %g; returning the zero quaternion',
                      square_magnitude)
        return np.zeros(4)

    return quaternion_conjugate(quaternion) * (1.0 / square_magnitude)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion multiplication operation.

    The Hamilton product composes rotations such that the right hand rotation is applied first, that is
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.  The product is not commutative.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    :param quaternion_1_in: The first (left) quaternion to multiply
    :param quaternion_2_in: The second (right) quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2),
                           [qs1 * qs2 - (qv1 * qv2).sum()]])


def quaternion_rotate(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates a 3 element vector by a quaternion.

    The vector is treated as the pure quaternion :math:`\mathbf{p}=[\mathbf{v}^T, 0]^T` and the rotated vector is the
    vector portion of :math:`\mathbf{q}\otimes\mathbf{p}\otimes\mathbf{q}^*`.

    The conjugate is used in place of the inverse, therefore ``quaternion`` must have unit length.  A quaternion that
    is not of unit length will scale the vector by its squared magnitude in addition to rotating it.

    :param quaternion: the unit quaternion to rotate by
    :param vector: the vector to rotate
    :return: the rotated vector
    """

    vector = _check_vector_array_and_shape(vector)

    pure = np.concatenate([vector, [0.0]])

    rotated = quaternion_multiplication(quaternion_multiplication(quaternion, pure), quaternion_conjugate(quaternion))

    return rotated[:3]


def _interpolation_fraction(time: float | DatetimeLike,
                            time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must all be floats or all be DatetimeLike objects so that their '
                        'differences can be divided')
    except ZeroDivisionError:
        raise ValueError('time0 and time1 must not be equal')


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    Interpolates between two quaternions component wise and rescales the result to unit length.

    .. math::
        \mathbf{q}=\frac{(1-p)\mathbf{q}_0+p\mathbf{q}_1}{\left\|(1-p)\mathbf{q}_0+p\mathbf{q}_1\right\|}

    with :math:`p=(t-t_0)/(t_1-t_0)`.  With the default `time0` of 0 and `time1` of 1, `time` is the fraction
    :math:`p` itself.  The times may instead all be datetimes (or pandas timestamps), in which case :math:`p` is the
    fraction of the elapsed interval.  :math:`p` is not clamped, so values outside of [0, 1] extrapolate.

    Unlike :func:`slerp` the angular rate is not constant and the shorter arc is not enforced.  :func:`slerp` falls
    back to this function for nearly parallel quaternions.

    :param quaternion0: the quaternion at `time0`
    :param quaternion1: the quaternion at `time1`
    :param time: the fraction to interpolate at, or a time measured on the same scale as `time0` and `time1`
    :param time0: the time of `quaternion0`
    :param time1: the time of `quaternion1`
    :return: the interpolated quaternion
    :raises TypeError: if the times cannot be subtracted and divided
    :raises ValueError: if `time0` and `time1` are equal
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    return quaternion_normalize(q0 * (1 - dt) + q1 * dt)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    Interpolates between two rotation quaternions along the great circle arc joining them.

    With :math:`\omega` the angle between the quaternions and :math:`p` the interpolation fraction

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\frac{\text{sin}((1-p)\omega)\mathbf{q}_0+\text{sin}(p\omega)\mathbf{q}_1}{\text{sin}(\omega)}

    which turns at a constant angular rate.  Both inputs are normalized before the angle between them is computed and
    the result is normalized before it is returned.

    Special cases:

    * a negative inner product negates :math:`\mathbf{q}_1` (the same rotation) so the shorter arc is followed
    * an inner product above :math:`1-\epsilon` means the quaternions are nearly parallel and :func:`nlerp` is used,
      since :math:`\text{sin}(\omega)` would be close to 0
    * :math:`p` is not clamped, so values outside of [0, 1] extrapolate along the arc

    The fraction is computed from `time`, `time0`, and `time1` exactly as in :func:`nlerp`.

    :param quaternion0: the quaternion at `time0`
    :param quaternion1: the quaternion at `time1`
    :param time: the fraction to interpolate at, or a time measured on the same scale as `time0` and `time1`
    :param time0: the time of `quaternion0`
    :param time1: the time of `quaternion1`
    :return: the interpolated unit quaternion
    :raises TypeError: if the times cannot be subtracted and divided
    :raises ValueError: if `time0` and `time1` are equal
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = quaternion_normalize(_check_quaternion_array_and_shape(quaternion0))
    q1 = quaternion_normalize(_check_quaternion_array_and_shape(quaternion1))

    # get the cosine of the angle between the quaternions
    cos_angle = float((q0 * q1).sum())

    if cos_angle < 0:
        # if the dot product is negative negate the second quaternion to ensure the shorter path is taken
        q1 *= -1
        cos_angle *= -1

    if cos_angle > 1 - sm.EPSILON:
        # if the quaternions are really close revert to nlerp
        _LOGGER.debug('Quaternions are nearly parallel (cos angle %g); using nlerp', cos_angle)
        return nlerp(q0, q1, dt)

    angle = sm.acos(cos_angle)
    sin_angle = sm.sin(angle)

    ratio0 = sm.sin((1 - dt) * angle) / sin_angle
    ratio1 = sm.sin(dt * angle) / sin_angle

    return quaternion_normalize(q0 * ratio0 + q1 * ratio1)
