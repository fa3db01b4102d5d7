"""
This module contains fundamental mathematical operations and utilities for rotation calculations on plain numpy
arrays.  It has no dependencies on other rotation modules to avoid circular imports.  All functions here are pure
mathematical operations that are used as building blocks for :class:`.Quaternion`.
"""

import rotquat.rotations.core.conversions
import rotquat.rotations.core.elementals
import rotquat.rotations.core.quaternion_math

from rotquat.rotations.core._helpers import EPSILON

from rotquat.rotations.core.conversions import (quaternion_to_rotmat, rotmat_to_quaternion,
                                                axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                euler_to_rotmat, euler_to_quaternion, quaternion_to_euler)

from rotquat.rotations.core.elementals import X_AXIS, Y_AXIS, Z_AXIS, rot_x, rot_y, rot_z, skew

from rotquat.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                                    quaternion_multiplication, quaternion_dot, quaternion_hypot,
                                                    quaternion_exp, quaternion_log, quaternion_power,
                                                    quaternion_rotate_vector, nlerp, slerp, identity_slerp,
                                                    slerp_function)

__all__ = ['EPSILON',
           'quaternion_to_rotmat', 'rotmat_to_quaternion', 'axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_rotmat', 'euler_to_quaternion', 'quaternion_to_euler',
           'X_AXIS', 'Y_AXIS', 'Z_AXIS', 'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_dot', 'quaternion_hypot', 'quaternion_exp', 'quaternion_log', 'quaternion_power',
           'quaternion_rotate_vector', 'nlerp', 'slerp', 'identity_slerp', 'slerp_function']
