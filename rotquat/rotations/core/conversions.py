# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between quaternions and the other rotation representations (rotation
matrices, axis-angle pairs and euler angles).  All routines are implemented purely on numpy arrays (or array like
objects) with quaternions stored in ``[x, y, z, w]`` order.

Rotation matrices are active rotations: ``matrix @ v`` rotates the vector ``v``.  Their columns are the rotated x, y,
and z axes, which are referred to as the right, up, and back vectors.

Euler angles are always given and returned as ``(rx, ry, rz)``, the angles about the x, y, and z axes, regardless of
the order.  The order names the axes from left to right in the product, so that order ``'XYZ'`` is the rotation
:math:`\\mathbf{R}_x(r_x)\\mathbf{R}_y(r_y)\\mathbf{R}_z(r_z)`, which applies the z rotation first and the x rotation
last.  Each of the six orders has its own explicit conversion in each direction since the singular (gimbal lock)
branches differ between them.
"""

from typing import Callable, Sequence

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS, SCALAR

from rotquat.rotations.core._helpers import (EPSILON, _check_matrix_array_and_shape, _safe_unit,
                                             _check_vector_array_and_shape)
from rotquat.rotations.core.elementals import X_AXIS, rot_x, rot_y, rot_z, skew
from rotquat.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion',
           'axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_rotmat', 'euler_to_quaternion', 'quaternion_to_euler',
           'euler_to_quaternion_xyz', 'euler_to_quaternion_xzy', 'euler_to_quaternion_yxz',
           'euler_to_quaternion_yzx', 'euler_to_quaternion_zxy', 'euler_to_quaternion_zyx',
           'quaternion_to_euler_xyz', 'quaternion_to_euler_xzy', 'quaternion_to_euler_yxz',
           'quaternion_to_euler_yzx', 'quaternion_to_euler_zxy', 'quaternion_to_euler_zyx']


EULER_SINGULARITY_THRESHOLD: float = 0.5 - EPSILON
"""
The absolute value of the euler singularity test above which the gimbal lock branch is used.
"""

EULER_ANGLES = tuple[float, float, float]


def _check_order(order: str) -> str:
    fixed_order = order.upper()

    if fixed_order not in ('XYZ', 'XZY', 'YXZ', 'YZX', 'ZXY', 'ZYX'):
        raise ValueError(f'Invalid order {order!r}.  Must be one of XYZ, XZY, YXZ, YZX, ZXY, ZYX')

    return fixed_order


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a quaternion into its equivalent rotation matrix.

    The quaternion is normalized first and then converted using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\mathbf{q}_v` is the vector portion of the quaternion, :math:`q_s` is the scalar portion of the
    quaternion, :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.

    Since the formula is quadratic in the quaternion, :math:`\mathbf{q}` and :math:`-\mathbf{q}` give the same matrix.

    :param quaternion: The quaternion to be converted to the rotation matrix
    :return: a numpy array containing the rotation matrix corresponding to the input quaternion
    """

    quaternion = quaternion_normalize(quaternion)

    qs = quaternion[-1]
    qv = quaternion[:3]

    return (qs ** 2 - qv @ qv) * np.eye(3) + 2 * np.outer(qv, qv) + 2 * qs * skew(qv)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts an orthonormal rotation matrix into a quaternion.

    Which formula is used depends on the trace and the diagonal of the matrix :math:`\mathbf{T}`.  When the trace is
    positive:

    .. math::
        S = 2\sqrt{\text{Tr}(\mathbf{T})+1} \\
        \mathbf{q} = \left[\begin{array}{c}(t_{21}-t_{12})/S \\ (t_{02}-t_{20})/S \\ (t_{10}-t_{01})/S \\
        S/4\end{array}\right]

    otherwise the largest diagonal element :math:`t_{ii}` is used to form :math:`S=2\sqrt{1+2t_{ii}-\text{Tr}}` and the
    corresponding vector component is :math:`S/4`.  Always dividing by the largest available :math:`S` keeps the
    conversion accurate near 180 degree rotations where the trace approaches -1.

    The input is not orthonormalized here.  Use :func:`.orthonormalize` first if the matrix may be skewed.

    :param rotation_matrix: The rotation matrix to convert to a quaternion
    :return: the quaternion corresponding to the rotation matrix
    """

    matrix = _check_matrix_array_and_shape(rotation_matrix)

    m00, m01, m02 = matrix[0]
    m10, m11, m12 = matrix[1]
    m20, m21, m22 = matrix[2]

    trace = m00 + m11 + m22

    if trace > 0:
        s = np.sqrt(trace + 1) * 2
        quaternion = [(m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s]

    elif m00 > m11 and m00 > m22:
        s = np.sqrt(1 + m00 - m11 - m22) * 2
        quaternion = [0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s]

    elif m11 > m22:
        s = np.sqrt(1 + m11 - m00 - m22) * 2
        quaternion = [(m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s]

    else:
        s = np.sqrt(1 + m22 - m00 - m11) * 2
        quaternion = [(m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s]

    return np.array(quaternion, dtype=np.float64)


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR, assume_unit: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    Unless `assume_unit` is ``True`` the axis is normalized first, and an axis with no length falls back to the x axis
    (with a warning), so the result is always a unit quaternion.  With `assume_unit` the axis is used as given.

    :param axis: The axis to rotate about
    :param angle: The angle to rotate by in radians
    :param assume_unit: Skip the normalization of the axis
    :return: the quaternion
    """

    if assume_unit:
        axis = _check_vector_array_and_shape(axis)
    else:
        axis = _safe_unit(axis, X_AXIS, name='rotation axis')

    half_angle = angle / 2

    return np.concatenate([np.sin(half_angle) * axis, [np.cos(half_angle)]])


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, float]:
    r"""
    This function converts a quaternion into a rotation axis and angle.

    The quaternion is normalized first, then

    .. math::
        \theta = 2\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\text{sin}(\theta/2)}

    The angle is in :math:`[0, 2\pi]`.  When :math:`\text{sin}(\theta/2)` is smaller than ``EPSILON`` the rotation is
    (nearly) the identity, the axis is poorly defined and the raw vector portion of the quaternion is returned as the
    axis instead.

    :param quaternion: The quaternion to convert
    :return: The rotation axis and the rotation angle in radians
    """

    quaternion = quaternion_normalize(quaternion)

    qs = np.clip(quaternion[-1], -1, 1)

    angle = float(2 * np.arccos(qs))
    sin_half_angle = np.sqrt(max(1 - qs * qs, 0))

    if sin_half_angle < EPSILON:
        return quaternion[:3].copy(), angle

    return quaternion[:3] / sin_half_angle, angle


def euler_to_rotmat(angles: Sequence[SCALAR] | DOUBLE_ARRAY, order: EULER_ORDERS = 'XYZ') -> DOUBLE_ARRAY:
    """
    This function converts euler angles into a rotation matrix.

    The matrix is formed using :func:`rot_x`, :func:`rot_y`, and :func:`rot_z` multiplied in the order given.  For
    instance order ``'YXZ'`` gives ``rot_y(ry) @ rot_x(rx) @ rot_z(rz)``.

    :param angles: The euler angles as ``(rx, ry, rz)`` in radians
    :param order: The order of the axes in the product
    :return: The rotation matrix formed by the euler angles
    :raises ValueError: When the ``order`` is not one of the six supported orders
    """

    fixed_order = _check_order(order)

    elementals = {'X': rot_x, 'Y': rot_y, 'Z': rot_z}
    angle_by_axis = dict(zip('XYZ', angles))

    rotation = np.eye(3)

    for axis in fixed_order:
        rotation = rotation @ elementals[axis](angle_by_axis[axis])

    return rotation


def _half_angle_terms(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> tuple[float, float, float, float, float, float]:
    """
    Returns the x/y products shared by the euler constructors along with the cosine and sine of the half z angle.
    """

    x_cos, x_sin = np.cos(rx / 2), np.sin(rx / 2)
    y_cos, y_sin = np.cos(ry / 2), np.sin(ry / 2)
    z_cos, z_sin = np.cos(rz / 2), np.sin(rz / 2)

    return x_sin * y_cos, x_cos * y_sin, x_cos * y_cos, x_sin * y_sin, z_cos, z_sin


def euler_to_quaternion_xyz(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qx * qy * qz`` from euler angles in radians (z is applied first, then y, then x).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos + xc_ys * z_sin,
                     xc_ys * z_cos - xs_yc * z_sin,
                     xc_yc * z_sin + xs_ys * z_cos,
                     xc_yc * z_cos - xs_ys * z_sin], dtype=np.float64)


def euler_to_quaternion_xzy(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qx * qz * qy`` from euler angles in radians (y is applied first, then z, then x).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos - xc_ys * z_sin,
                     xc_ys * z_cos - xs_yc * z_sin,
                     xc_yc * z_sin + xs_ys * z_cos,
                     xc_yc * z_cos + xs_ys * z_sin], dtype=np.float64)


def euler_to_quaternion_yxz(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qy * qx * qz`` from euler angles in radians (z is applied first, then x, then y).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos + xc_ys * z_sin,
                     xc_ys * z_cos - xs_yc * z_sin,
                     xc_yc * z_sin - xs_ys * z_cos,
                     xc_yc * z_cos + xs_ys * z_sin], dtype=np.float64)


def euler_to_quaternion_yzx(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qy * qz * qx`` from euler angles in radians (x is applied first, then z, then y).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos + xc_ys * z_sin,
                     xc_ys * z_cos + xs_yc * z_sin,
                     xc_yc * z_sin - xs_ys * z_cos,
                     xc_yc * z_cos - xs_ys * z_sin], dtype=np.float64)


def euler_to_quaternion_zxy(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qz * qx * qy`` from euler angles in radians (y is applied first, then x, then z).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos - xc_ys * z_sin,
                     xc_ys * z_cos + xs_yc * z_sin,
                     xc_yc * z_sin + xs_ys * z_cos,
                     xc_yc * z_cos - xs_ys * z_sin], dtype=np.float64)


def euler_to_quaternion_zyx(rx: SCALAR, ry: SCALAR, rz: SCALAR) -> DOUBLE_ARRAY:
    """
    Forms the quaternion ``qz * qy * qx`` from euler angles in radians (x is applied first, then y, then z).

    :return: the unit quaternion
    """

    xs_yc, xc_ys, xc_yc, xs_ys, z_cos, z_sin = _half_angle_terms(rx, ry, rz)

    return np.array([xs_yc * z_cos - xc_ys * z_sin,
                     xc_ys * z_cos + xs_yc * z_sin,
                     xc_yc * z_sin - xs_ys * z_cos,
                     xc_yc * z_cos + xs_ys * z_sin], dtype=np.float64)


EULER_TO_QUATERNION: dict[str, Callable[[SCALAR, SCALAR, SCALAR], DOUBLE_ARRAY]] = {
    'XYZ': euler_to_quaternion_xyz,
    'XZY': euler_to_quaternion_xzy,
    'YXZ': euler_to_quaternion_yxz,
    'YZX': euler_to_quaternion_yzx,
    'ZXY': euler_to_quaternion_zxy,
    'ZYX': euler_to_quaternion_zyx
}


def euler_to_quaternion(angles: Sequence[SCALAR] | DOUBLE_ARRAY, order: EULER_ORDERS = 'XYZ') -> DOUBLE_ARRAY:
    """
    This function converts euler angles into a quaternion using the explicit constructor for `order`.

    :param angles: The euler angles as ``(rx, ry, rz)`` in radians
    :param order: the order of the axes in the product (case insensitive)
    :returns: The unit quaternion
    :raises ValueError: When the ``order`` is not one of the six supported orders
    """

    rx, ry, rz = angles

    return EULER_TO_QUATERNION[_check_order(order)](rx, ry, rz)


def _gimbal_sign(test: float) -> int:
    return 1 if test >= 0 else -1


def quaternion_to_euler_xyz(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order XYZ from a quaternion (normalized first).

    Near ``ry = ±pi/2`` the rotations about x and z share an axis; there rz is set to 0 and the combined angle is
    assigned to rx.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qy * qw + qx * qz

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = 1 if test > 0 else -1
        return float(sign * 2 * np.arctan2(qz, qw)), float(sign * np.pi / 2), 0.0

    sqy = qy * qy
    rx = np.arctan2(2 * (qx * qw - qy * qz), 1 - 2 * (qx * qx + sqy))
    ry = np.arcsin(2 * test)
    rz = np.arctan2(2 * (qz * qw - qx * qy), 1 - 2 * (qz * qz + sqy))

    return float(rx), float(ry), float(rz)


def quaternion_to_euler_xzy(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order XZY from a quaternion (normalized first).

    Near ``rz = ±pi/2`` ry is set to 0 and the combined angle is assigned to rx.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qz * qw - qx * qy

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = _gimbal_sign(test)
        return float(sign * 2 * -np.arctan2(qy, qw)), 0.0, float(sign * np.pi / 2)

    sqz = qz * qz
    rx = np.arctan2(2 * (qx * qw + qy * qz), 1 - 2 * (qx * qx + sqz))
    ry = np.arctan2(2 * (qx * qz + qy * qw), 1 - 2 * (qy * qy + sqz))
    rz = np.arcsin(2 * test)

    return float(rx), float(ry), float(rz)


def quaternion_to_euler_yxz(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order YXZ from a quaternion (normalized first).

    Near ``rx = ±pi/2`` rz is set to 0 and the combined angle is assigned to ry.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qx * qw - qy * qz

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = _gimbal_sign(test)
        return float(sign * np.pi / 2), float(sign * 2 * -np.arctan2(qz, qw)), 0.0

    sqx = qx * qx
    rx = np.arcsin(2 * test)
    ry = np.arctan2(2 * (qx * qz + qy * qw), 1 - 2 * (qy * qy + sqx))
    rz = np.arctan2(2 * (qx * qy + qz * qw), 1 - 2 * (qz * qz + sqx))

    return float(rx), float(ry), float(rz)


def quaternion_to_euler_yzx(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order YZX from a quaternion (normalized first).

    Near ``rz = ±pi/2`` rx is set to 0 and the combined angle is assigned to ry.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qz * qw + qx * qy

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = _gimbal_sign(test)
        return 0.0, float(sign * 2 * np.arctan2(qx, qw)), float(sign * np.pi / 2)

    sqz = qz * qz
    rx = np.arctan2(2 * (qx * qw - qy * qz), 1 - 2 * (qx * qx + sqz))
    ry = np.arctan2(2 * (qy * qw - qx * qz), 1 - 2 * (qy * qy + sqz))
    rz = np.arcsin(2 * test)

    return float(rx), float(ry), float(rz)


def quaternion_to_euler_zxy(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order ZXY from a quaternion (normalized first).

    Near ``rx = ±pi/2`` ry is set to 0 and the combined angle is assigned to rz.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qx * qw + qy * qz

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = _gimbal_sign(test)
        return float(sign * np.pi / 2), 0.0, float(sign * 2 * np.arctan2(qy, qw))

    sqx = qx * qx
    rx = np.arcsin(2 * test)
    ry = np.arctan2(2 * (qy * qw - qx * qz), 1 - 2 * (qy * qy + sqx))
    rz = np.arctan2(2 * (qz * qw - qx * qy), 1 - 2 * (qz * qz + sqx))

    return float(rx), float(ry), float(rz)


def quaternion_to_euler_zyx(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    Extracts ``(rx, ry, rz)`` for order ZYX from a quaternion (normalized first).

    Near ``ry = ±pi/2`` rx is set to 0 and the combined angle is assigned to rz.

    :param quaternion: the quaternion to convert
    :return: the euler angles in radians
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    test = qy * qw - qx * qz

    if abs(test) > EULER_SINGULARITY_THRESHOLD:
        sign = _gimbal_sign(test)
        return 0.0, float(sign * np.pi / 2), float(sign * 2 * -np.arctan2(qx, qw))

    sqy = qy * qy
    rx = np.arctan2(2 * (qx * qw + qy * qz), 1 - 2 * (qx * qx + sqy))
    ry = np.arcsin(2 * test)
    rz = np.arctan2(2 * (qx * qy + qz * qw), 1 - 2 * (qz * qz + sqy))

    return float(rx), float(ry), float(rz)


QUATERNION_TO_EULER: dict[str, Callable[[ARRAY_LIKE], EULER_ANGLES]] = {
    'XYZ': quaternion_to_euler_xyz,
    'XZY': quaternion_to_euler_xzy,
    'YXZ': quaternion_to_euler_yxz,
    'YZX': quaternion_to_euler_yzx,
    'ZXY': quaternion_to_euler_zxy,
    'ZYX': quaternion_to_euler_zyx
}


def quaternion_to_euler(quaternion: ARRAY_LIKE, order: EULER_ORDERS = 'XYZ') -> EULER_ANGLES:
    """
    This function converts a quaternion to euler angles using the explicit extraction for `order`.

    :param quaternion: The quaternion to be converted to euler angles
    :param order: The order of the axes in the product (case insensitive)
    :return: The euler angles ``(rx, ry, rz)`` in radians
    :raises ValueError: When the ``order`` is not one of the six supported orders
    """

    return QUATERNION_TO_EULER[_check_order(order)](quaternion)
