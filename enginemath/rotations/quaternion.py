from numbers import Real
from typing import Iterator

import numpy as np

from enginemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, AXIS_ANGLE, DatetimeLike
from enginemath import scalar_math as sm

from enginemath.rotations.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                   quaternion_to_rotmat, quaternion_to_matrix4, rotmat_to_quaternion,
                                                   quaternion_to_rotvec, rotvec_to_quaternion)
from enginemath.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_dot, quaternion_inverse,
                                                       quaternion_magnitude, quaternion_multiplication,
                                                       quaternion_normalize, quaternion_rotate,
                                                       quaternion_square_magnitude, slerp)
from enginemath.rotations.core._helpers import _check_quaternion_array_and_shape


class Quaternion:
    """
    An immutable quaternion ``(x, y, z, w)`` used to represent and compose 3D rotations.

    The :class:`Quaternion` class is the value type of the rotation algebra.  Instances are never modified in place;
    every operation returns a new instance.  Construction is cheap and does not normalize, so a quaternion can
    transiently have any length, but the rotation producing constructors (:meth:`from_axis_angle`,
    :meth:`from_matrix`, :meth:`from_rotation_vector`) and :meth:`slerp` always return unit quaternions.

    Operators are overloaded so that rotations are easy to work with::

        >>> from enginemath import Quaternion
        >>> from enginemath.scalar_math import radians
        >>> about_y = Quaternion.from_axis_angle([0, 1, 0], radians(90))
        >>> (about_y * [1, 0, 0]).round(6)
        array([ 0.,  0., -1.])

    * ``q1 * q2`` is the Hamilton product.  It applies ``q2`` first and ``q1`` second, so
      ``(q1 * q2) * v == q1 * (q2 * v)``
    * ``q * v`` rotates the 3 element vector ``v`` (``q`` must be of unit length)
    * ``q * s`` and ``s * q`` scale every component by the scalar ``s``
    * ``-q`` negates every component (the same rotation as ``q``)
    * ``q1 == q2`` compares each component with :func:`.scalar_math.approx_equal`.  Use :meth:`equivalent` to also
      treat ``q`` and ``-q`` as equal.

    Because equality is tolerance based, instances are not hashable.
    """

    __slots__ = ('_quaternion',)

    __array_ufunc__ = None
    """
    Make numpy defer to the reflected operators of this class.
    """

    __hash__ = None  # type: ignore

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0):
        """
        :param x: the x component of the vector portion
        :param y: the y component of the vector portion
        :param z: the z component of the vector portion
        :param w: the scalar portion
        """

        quaternion = np.array([x, y, z, w], dtype=np.float64)
        quaternion.flags.writeable = False

        self._quaternion: DOUBLE_ARRAY = quaternion

    @classmethod
    def identity(cls) -> 'Quaternion':
        """
        Returns the identity quaternion ``(0, 0, 0, 1)``, which represents no rotation.
        """

        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> 'Quaternion':
        """
        Creates a quaternion from a length 4 sequence ordered ``[x, y, z, w]``.

        :param data: the quaternion components
        :return: the new quaternion (not normalized)
        :raises ValueError: if data is not a length 4 sequence
        """

        return cls(*_check_quaternion_array_and_shape(data))

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: float) -> 'Quaternion':
        """
        Creates the unit quaternion rotating by ``angle`` radians about ``axis``.

        See :func:`.axis_angle_to_quaternion` for details.

        :param axis: the unit rotation axis
        :param angle: the rotation angle in radians
        :return: the rotation quaternion
        """

        return cls.from_array(axis_angle_to_quaternion(axis, angle))

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the unit quaternion for a 3x3 rotation matrix, 4x4 homogeneous matrix, or 16 column-major values.

        See :func:`.rotmat_to_quaternion` for details.  The sign of the result is not fixed.

        :param matrix: the rotation matrix
        :return: the rotation quaternion
        """

        return cls.from_array(rotmat_to_quaternion(matrix))

    @classmethod
    def from_rotation_vector(cls, vector: ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the unit quaternion for a rotation vector (the rotation axis scaled by the rotation angle).

        See :func:`.rotvec_to_quaternion` for details.
        """

        return cls.from_array(rotvec_to_quaternion(vector))

    @property
    def x(self) -> float:
        """
        The x component of the vector portion
        """

        return float(self._quaternion[0])

    @property
    def y(self) -> float:
        """
        The y component of the vector portion
        """

        return float(self._quaternion[1])

    @property
    def z(self) -> float:
        """
        The z component of the vector portion
        """

        return float(self._quaternion[2])

    @property
    def w(self) -> float:
        """
        The scalar portion
        """

        return float(self._quaternion[3])

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        The components as a read only numpy array ordered ``[x, y, z, w]``.
        """

        return self._quaternion

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)
        """

        return self._quaternion[:3]

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)
        """

        return float(self._quaternion[-1])

    def magnitude(self) -> float:
        """
        Returns the length of the quaternion.
        """

        return quaternion_magnitude(self._quaternion)

    def square_magnitude(self) -> float:
        """
        Returns the squared length of the quaternion.
        """

        return quaternion_square_magnitude(self._quaternion)

    def dot(self, other: 'Quaternion') -> float:
        """
        Returns the 4 dimensional inner product with another quaternion.
        """

        return quaternion_dot(self._quaternion, Quaternion._coerce(other).quaternion)

    def normalized(self) -> 'Quaternion':
        """
        Returns a unit length copy of this quaternion.

        If the length is not greater than :data:`.EPSILON` an unmodified copy is returned.  See
        :func:`.quaternion_normalize` for how short quaternions are detected.
        """

        return Quaternion.from_array(quaternion_normalize(self._quaternion))

    def conjugate(self) -> 'Quaternion':
        """
        Returns the conjugate ``(-x, -y, -z, w)``.
        """

        return Quaternion.from_array(quaternion_conjugate(self._quaternion))

    def inverse(self) -> 'Quaternion':
        """
        Returns the multiplicative inverse, such that ``q * q.inverse()`` is the identity.

        The all zero quaternion is returned if the squared length is within :data:`.EPSILON` of 0.  See
        :func:`.quaternion_inverse`.
        """

        return Quaternion.from_array(quaternion_inverse(self._quaternion))

    def rotate(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Rotates a 3 element vector by this quaternion, which must be of unit length.

        See :func:`.quaternion_rotate`.

        :param vector: the vector to rotate
        :return: the rotated vector
        """

        return quaternion_rotate(self._quaternion, vector)

    def to_matrix(self) -> DOUBLE_ARRAY:
        """
        Returns the 3x3 rotation matrix for this quaternion.  See :func:`.quaternion_to_rotmat`.
        """

        return quaternion_to_rotmat(self._quaternion)

    def to_matrix4(self) -> DOUBLE_ARRAY:
        """
        Returns the 4x4 homogeneous rotation matrix for this quaternion.  See :func:`.quaternion_to_matrix4`.
        """

        return quaternion_to_matrix4(self._quaternion)

    def to_axis_angle(self) -> AXIS_ANGLE:
        """
        Returns the unit rotation axis and the rotation angle in radians.

        See :func:`.quaternion_to_axis_angle` for the handling of rotations without a unique axis.
        """

        return quaternion_to_axis_angle(self._quaternion)

    def to_rotation_vector(self) -> DOUBLE_ARRAY:
        """
        Returns the rotation axis scaled by the rotation angle.
        """

        return quaternion_to_rotvec(self._quaternion)

    def equivalent(self, other: ARRAY_LIKE | 'Quaternion') -> bool:
        """
        Checks whether two quaternions represent the same rotation.

        A quaternion and its negation represent the same rotation, so this is ``self == other or self == -other``.
        """

        return self == other or -self == other

    @staticmethod
    def slerp(quaternion0: 'Quaternion', quaternion1: 'Quaternion', time: float | DatetimeLike,
              time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> 'Quaternion':
        """
        Spherically interpolates between two quaternions along the shortest arc.

        ``time`` is not clamped, so fractions outside of [0, 1] extrapolate.  See :func:`.slerp` for details.

        :param quaternion0: the starting quaternion
        :param quaternion1: the ending quaternion
        :param time: the fraction to interpolate at, or the time between `time0` and `time1`
        :param time0: the time corresponding to the first quaternion
        :param time1: the time corresponding to the second quaternion
        :return: the interpolated unit quaternion
        """

        return Quaternion.from_array(slerp(Quaternion._coerce(quaternion0).quaternion,
                                           Quaternion._coerce(quaternion1).quaternion,
                                           time, time0=time0, time1=time1))

    @staticmethod
    def _coerce(other: ARRAY_LIKE | 'Quaternion') -> 'Quaternion':

        if isinstance(other, Quaternion):
            return other

        return Quaternion.from_array(other)

    def __mul__(self, other):

        if isinstance(other, Quaternion):
            return Quaternion.from_array(quaternion_multiplication(self._quaternion, other.quaternion))

        if isinstance(other, Real):
            return Quaternion.from_array(self._quaternion * float(other))

        if np.shape(other) == (3,):
            return self.rotate(other)

        return NotImplemented

    def __rmul__(self, other):

        if isinstance(other, Real):
            return Quaternion.from_array(self._quaternion * float(other))

        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return Quaternion.from_array(-self._quaternion)

    def __eq__(self, other) -> bool:

        # check that other is a quaternion, if not make it into one
        if not isinstance(other, Quaternion):
            try:
                other = Quaternion.from_array(other)
            except (ValueError, TypeError):
                # if we're here then other isn't something that can be interpreted as a quaternion
                return False

        return all(sm.approx_equal(float(mine), float(theirs))
                   for mine, theirs in zip(self._quaternion, other.quaternion))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        return 'Quaternion(x={0!r}, y={1!r}, z={2!r}, w={3!r})'.format(*self)

    def __str__(self) -> str:
        return 'Quaternion(x:{0}, y:{1}, z:{2}, w:{3})'.format(*self)
