r"""
This package defines the :class:`.Quaternion` class, the primary way to express and manipulate rotations in rotquat,
along with the array level routines it is built on for converting between rotation representations.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} x \\ y \\ z \\ w\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
axis-angle         A unit axis :math:`\hat{\mathbf{x}}` and an angle :math:`\theta` in radians to rotate about it using
                   the right hand rule.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{v}` is
                   the vector :math:`\mathbf{v}` rotated.  The columns are the rotated x, y, and z axes (the right,
                   up, and back vectors).  Rotation matrices uniquely represent a single rotation.
euler angles       The angles :math:`(r_x, r_y, r_z)` about the x, y, and z axes together with one of the six axis
                   orders.  Order ``'ABC'`` is the rotation
                   :math:`\mathbf{T}=\mathbf{R}_A(r_A)\mathbf{R}_B(r_B)\mathbf{R}_C(r_C)` which applies the rotation
                   about axis C first.
=================  =====================================================================================================

The :class:`.Quaternion` object is the primary tool that will be used by users.  It is immutable, offers operator
overloading so that rotations compose with ``*`` and rotate vectors with ``*``, and provides the exponential and
logarithmic maps, geodesic distances, and spherical linear interpolation.
"""

import rotquat.rotations.core
import rotquat.rotations.frames
import rotquat.rotations.quaternion
import rotquat.rotations.random

from rotquat.rotations.core import *
from rotquat.rotations.frames import orthonormalize, look_at_basis
from rotquat.rotations.quaternion import Quaternion
from rotquat.rotations.random import RandomQuaternionGenerator, RandomQuaternionOptions

__all__ = ['EPSILON',
           'quaternion_to_rotmat', 'rotmat_to_quaternion', 'axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_rotmat', 'euler_to_quaternion', 'quaternion_to_euler',
           'X_AXIS', 'Y_AXIS', 'Z_AXIS', 'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_dot', 'quaternion_hypot', 'quaternion_exp', 'quaternion_log', 'quaternion_power',
           'quaternion_rotate_vector', 'nlerp', 'slerp', 'identity_slerp', 'slerp_function',
           'orthonormalize', 'look_at_basis', 'Quaternion', 'RandomQuaternionGenerator', 'RandomQuaternionOptions']
