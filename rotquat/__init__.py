# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rotquat: immutable unit quaternions for 3D rotations

The main entry point is :class:`.Quaternion`::

    >>> from rotquat import Quaternion
    >>> q = Quaternion.from_euler_angles(0.1, 0.2, 0.3, order='YXZ')
    >>> q.approx_eq(Quaternion.from_orientation(0.1, 0.2, 0.3))
    True
"""

from rotquat.exceptions import InvalidOperandError, ImmutableWriteError
from rotquat.rotations import Quaternion, RandomQuaternionGenerator, RandomQuaternionOptions
from rotquat.transform import RigidTransform

__all__ = ['Quaternion', 'RandomQuaternionGenerator', 'RandomQuaternionOptions', 'RigidTransform',
           'InvalidOperandError', 'ImmutableWriteError']

__version__ = '0.1.0'
