import enginemath.rotations.core
import enginemath.rotations.quaternion

from enginemath.rotations.core import *
from enginemath.rotations.quaternion import Quaternion

__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'quaternion_to_rotmat', 'quaternion_to_matrix4', 'rotmat_to_quaternion',
           'quaternion_to_rotvec', 'rotvec_to_quaternion',
           'matrix_to_column_major', 'column_major_to_matrix', 'DEGENERATE_AXIS',
           'rot_x', 'rot_y', 'rot_z',
           'quaternion_identity', 'quaternion_square_magnitude', 'quaternion_magnitude', 'quaternion_dot',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_rotate', 'nlerp', 'slerp', 'Quaternion']


r"""
This package defines the rotation algebra of enginemath: routines for composing, interpolating, and converting between
rotation representations, and the :class:`.Quaternion` value class which is the primary way to express a rotation.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
axis-angle         A pair of a 3 element unit vector :math:`\hat{\mathbf{x}}` (the rotation axis) and an angle
                   :math:`\theta` in radians.  A rotation of 0 has no unique axis.
rotation vector    A 3 element rotation vector of the form :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` where
                   :math:`\theta` is the total angle to rotate by in radians and :math:`\hat{\mathbf{x}}` is the
                   rotation axis.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{y}`
                   rotates the column vector :math:`\mathbf{y}`.  It may also be supplied as the upper left block of a
                   :math:`4\times 4` homogeneous matrix, or as the 16 values of that matrix in column-major order.
=================  =====================================================================================================

Every transcendental function used here comes from :mod:`enginemath.scalar_math`, so the results are reproducible
independent of the platform math library.  Degenerate inputs never raise; they resolve to the documented fallback of
each routine.
"""
