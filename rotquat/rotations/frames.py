"""
This module provides routines for building right handed orthonormal bases (rotation matrix columns) from loosely
specified direction vectors.

The columns of a rotation matrix in rotquat are the right (x), up (y), and back (z) vectors.  The look direction is the
negated back vector, so that a frame looks down its own -z axis.

Degenerate inputs (zero length or parallel vectors) never raise.  Instead a documented fallback direction is used and
a :class:`UserWarning` is issued.
"""

import warnings

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotquat.rotations.core._helpers import EPSILON, _safe_unit, _check_vector_array_and_shape
from rotquat.rotations.core.elementals import X_AXIS, Y_AXIS, Z_AXIS


__all__ = ["orthonormalize", "look_at_basis"]


def orthonormalize(right: ARRAY_LIKE, up: ARRAY_LIKE,
                   back: ARRAY_LIKE | None = None) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    Forms a right handed orthonormal basis from a right, up, and (optionally) back vector.

    The right vector keeps its direction.  The back vector is formed as ``right × up``, and is flipped if it disagrees
    with the supplied `back` vector.  Finally the up vector is recomputed as ``back × right``, so a flipped back vector
    also flips the up vector and the basis always stays right handed.

    The following fallbacks are used (each with a warning):

    * a zero length `right` is replaced by the x axis
    * a zero length `up` is replaced by the y axis
    * when `right` and `up` are parallel the back vector is formed from ``right × y``, and if that is also degenerate
      ``right × z`` is used

    :param right: The vector to use as the first column
    :param up: The vector constraining the second column
    :param back: The vector whose sign the third column should agree with.  Defaults to ``right × up``
    :return: The right, up, and back unit vectors
    """

    right = _safe_unit(right, X_AXIS, name='right vector')
    up = _safe_unit(up, Y_AXIS, name='up vector')

    new_back = np.cross(right, up)

    if np.linalg.norm(new_back) <= EPSILON:
        warnings.warn('The right and up vectors are parallel.  Building the basis from the y axis instead')

        new_back = np.cross(right, Y_AXIS)

        if np.linalg.norm(new_back) <= EPSILON:
            new_back = np.cross(right, Z_AXIS)

    new_back /= np.linalg.norm(new_back)

    if back is not None and new_back @ _check_vector_array_and_shape(back) < 0:
        new_back *= -1

    new_up = np.cross(new_back, right)
    new_up /= np.linalg.norm(new_up)

    return right, new_up, new_back


def look_at_basis(eye: ARRAY_LIKE, target: ARRAY_LIKE,
                  up: ARRAY_LIKE | None = None) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    Forms the basis of a frame placed at `eye` looking towards `target`.

    The frame's back vector is the negated look direction ``target - eye`` and the up vector is as close to `up` as
    possible while staying perpendicular to the look direction.  The following tiers are tried in order:

    #. ``right = look × up`` when it is not degenerate
    #. ``right = look × x`` (with a warning) when `up` is parallel to the look direction
    #. an up vector formed from ``z × look`` projected onto the y axis (with a warning)

    When `eye` and `target` coincide the look direction falls back to the z axis (with a warning).

    :param eye: The location of the frame
    :param target: The point the frame looks at
    :param up: The desired up direction.  Defaults to the y axis
    :return: The right, up, and back unit vectors
    """

    look = _safe_unit(np.subtract(target, eye), Z_AXIS, name='look direction')

    if up is None:
        up = Y_AXIS

    up = _safe_unit(up, Y_AXIS, name='up vector')

    right = np.cross(look, up)

    if np.linalg.norm(right) > EPSILON:
        right /= np.linalg.norm(right)

    else:
        select = np.cross(look, X_AXIS)

        if np.linalg.norm(select) > EPSILON:
            warnings.warn('The up vector is parallel to the look direction.  Using the x axis to build the basis')
            right = select / np.linalg.norm(select)

        else:
            warnings.warn('The look direction is parallel to both the up vector and the x axis.  '
                          'Using the z axis to build the basis')
            up = np.cross(Z_AXIS, look)
            up *= up @ Y_AXIS
            right = np.cross(look, up)

            return right, up, -look

    up = np.cross(right, look)
    up /= np.linalg.norm(up)

    return right, up, -look
