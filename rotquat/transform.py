"""
This module provides the :class:`RigidTransform` class, a position combined with a rotation.

A rigid transform maps points from a local frame into its parent frame by first rotating them and then translating them
by the position.  The columns of the rotation matrix are the local right (x), up (y), and back (z) axes expressed in the
parent frame, and the frame looks down its local -z axis.

The class works purely on numpy arrays.  Conversions to and from quaternions live on :class:`.Quaternion`
(:meth:`.Quaternion.to_transform` and :meth:`.Quaternion.from_transform`).
"""

from typing import overload, Self

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotquat.rotations.core._helpers import _check_matrix_array_and_shape, _check_vector_array_and_shape
from rotquat.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting


__all__ = ["RigidTransform"]


def _read_only(array: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    array.flags.writeable = False
    return array


class RigidTransform(AttributeEqualityComparison, AttributePrinting):
    """
    A rotation followed by a translation.

    The position and rotation are stored as read only float64 arrays, and every operation returns a new transform.

    Transforms compose with ``*`` so that ``(t0 * t1) * point == t0 * (t1 * point)``:

        >>> from rotquat.transform import RigidTransform
        >>> from rotquat.rotations import rot_z
        >>> t0 = RigidTransform([1, 0, 0], rot_z(np.pi / 2))
        >>> t0 * np.array([1, 0, 0])
        array([1., 1., 0.])

    Equality is checked on the position and rotation using :func:`numpy.allclose`.
    """

    def __init__(self, position: ARRAY_LIKE | None = None, rotation: ARRAY_LIKE | None = None) -> None:
        """
        :param position: The translation of the transform.  Defaults to the origin
        :param rotation: The 3x3 rotation matrix of the transform.  Defaults to the identity
        """

        if position is None:
            position = np.zeros(3)

        if rotation is None:
            rotation = np.eye(3)

        self._position: DOUBLE_ARRAY = _read_only(_check_vector_array_and_shape(position, return_copy=True))
        self._rotation: DOUBLE_ARRAY = _read_only(_check_matrix_array_and_shape(rotation, return_copy=True))

    @property
    def position(self) -> DOUBLE_ARRAY:
        """
        The translation of the transform as a read only length 3 array.
        """
        return self._position

    @property
    def rotation(self) -> DOUBLE_ARRAY:
        """
        The rotation of the transform as a read only 3x3 matrix.
        """
        return self._rotation

    @property
    def right_vector(self) -> DOUBLE_ARRAY:
        """
        The local x axis in the parent frame (the first column of the rotation).
        """
        return self._rotation[:, 0].copy()

    @property
    def up_vector(self) -> DOUBLE_ARRAY:
        """
        The local y axis in the parent frame (the second column of the rotation).
        """
        return self._rotation[:, 1].copy()

    @property
    def back_vector(self) -> DOUBLE_ARRAY:
        """
        The local z axis in the parent frame (the third column of the rotation).
        """
        return self._rotation[:, 2].copy()

    @property
    def look_vector(self) -> DOUBLE_ARRAY:
        """
        The direction the frame looks in, which is the negated :attr:`back_vector`.
        """
        return -self._rotation[:, 2]

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The 4x4 homogeneous transformation matrix.
        """

        out = np.eye(4)
        out[:3, :3] = self._rotation
        out[:3, 3] = self._position

        return out

    def inverse(self) -> Self:
        """
        Returns the transform that undoes this transform.

        The rotation of the inverse is the transpose of the rotation and the position is the negated position rotated
        by the transpose.

        :return: The inverse transform
        """

        rotation_inverse = self._rotation.T

        return self.__class__(-rotation_inverse @ self._position, rotation_inverse)

    @overload
    def __mul__(self, other: Self) -> Self:
        ...

    @overload
    def __mul__(self, other: ARRAY_LIKE) -> DOUBLE_ARRAY:
        ...

    def __mul__(self, other):
        """
        Composes this transform with another transform, or transforms a point.

        For a transform the result applies `other` first and then this transform.  For a point the point is rotated
        and then translated.

        :param other: the transform or point to apply this transform to
        :return: The composed transform or the transformed point
        """

        if isinstance(other, RigidTransform):
            return self.__class__(self._rotation @ other.position + self._position, self._rotation @ other.rotation)

        if isinstance(other, (np.ndarray, list, tuple)) and np.shape(other) == (3,):
            return self._rotation @ np.asarray(other, dtype=np.float64) + self._position

        return NotImplemented
