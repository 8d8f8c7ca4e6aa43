"""
This package contains the array based rotation routines that the :class:`.Quaternion` class is built on.

All routines here are pure functions of numpy arrays (or array like objects) and depend only on
:mod:`enginemath.scalar_math`, so they can be used as building blocks without the value class.
"""

import enginemath.rotations.core.conversions
import enginemath.rotations.core.elementals
import enginemath.rotations.core.quaternion_math

from enginemath.rotations.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                   quaternion_to_rotmat, quaternion_to_matrix4, rotmat_to_quaternion,
                                                   quaternion_to_rotvec, rotvec_to_quaternion,
                                                   matrix_to_column_major, column_major_to_matrix, DEGENERATE_AXIS)

from enginemath.rotations.core.elementals import rot_x, rot_y, rot_z

from enginemath.rotations.core.quaternion_math import (quaternion_identity, quaternion_square_magnitude,
                                                       quaternion_magnitude, quaternion_dot, quaternion_normalize,
                                                       quaternion_conjugate, quaternion_inverse,
                                                       quaternion_multiplication, quaternion_rotate, nlerp, slerp)

__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'quaternion_to_rotmat', 'quaternion_to_matrix4', 'rotmat_to_quaternion',
           'quaternion_to_rotvec', 'rotvec_to_quaternion',
           'matrix_to_column_major', 'column_major_to_matrix', 'DEGENERATE_AXIS',
           'rot_x', 'rot_y', 'rot_z',
           'quaternion_identity', 'quaternion_square_magnitude', 'quaternion_magnitude', 'quaternion_dot',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_rotate', 'nlerp', 'slerp']
