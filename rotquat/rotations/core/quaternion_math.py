# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core quaternion algebra

This module contains the array level quaternion algebra used by :class:`.Quaternion`.  Every routine works on length 4
arrays (or array likes) in ``[x, y, z, w]`` order, where ``w`` is the real (scalar) part, and returns a new float64
array; inputs are never modified.

Unlike the rotation focused conversions, nothing in this module assumes unit quaternions unless it says so.  The
degenerate cases (zero length, zero imaginary part, coincident endpoints) each return a documented fallback value
instead of raising.
"""

from typing import Callable

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR

from rotquat.rotations.core._helpers import (EPSILON, _check_quaternion_array_and_shape,
                                             _check_vector_array_and_shape)

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_inverse", "quaternion_multiplication",
           "quaternion_dot", "quaternion_hypot", "quaternion_exp", "quaternion_log", "quaternion_power",
           "quaternion_rotate_vector", "nlerp", "slerp", "identity_slerp", "slerp_function"]


IDENTITY_ARRAY: DOUBLE_ARRAY = np.array([0, 0, 0, 1], dtype=np.float64)
IDENTITY_ARRAY.flags.writeable = False


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion to unit length.

    The sign of the quaternion is left alone.  The zero quaternion has no direction, so the identity quaternion is
    returned for it.

    :param quaternion: the quaternion to normalize
    :returns: The normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.linalg.norm(work_quaternion)

    if length > 0:
        return work_quaternion / length

    return IDENTITY_ARRAY.copy()


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Negates the imaginary (vector) portion of the quaternion.

    :param quaternion: The quaternion to conjugate
    :return: the conjugate quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates quaternion multiplication.  Mathematically:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\mathbf{q}^T\mathbf{q}}

    where :math:`\mathbf{q}^*` is the conjugate.  For unit quaternions this is just the conjugate.

    The zero quaternion has no inverse.  No error is raised for it; the result contains ``nan`` components and it is
    up to the caller to avoid inverting it.

    :param quaternion: The quaternion to be inverted
    :return: a numpy array representing the inverse quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    with np.errstate(divide='ignore', invalid='ignore'):
        return quaternion_conjugate(quaternion) / (quaternion @ quaternion)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    The product is not commutative.  When both inputs are rotations the result applies `quaternion_2_in` first and
    then `quaternion_1_in`.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2),
                           [qs1 * qs2 - qv1 @ qv2]])


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    The 4 dimensional dot product of two quaternions.

    For unit quaternions a negative dot product means the two are more than half a turn apart along the hypersphere
    and negating one of them gives the shorter path.

    :param quaternion_1: the first quaternion
    :param quaternion_2: the second quaternion
    :return: the dot product
    """

    return float(_check_quaternion_array_and_shape(quaternion_1) @ _check_quaternion_array_and_shape(quaternion_2))


def quaternion_hypot(quaternion: ARRAY_LIKE) -> float:
    """
    Computes the length of the quaternion without overflowing for very large components.

    The quaternion is divided by its largest absolute component before the length is computed, and the length is
    scaled back afterwards.

    :param quaternion: the quaternion to measure
    :return: the length of the quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    max_component = np.abs(quaternion).max()

    if max_component > 0:
        return float(np.linalg.norm(quaternion / max_component) * max_component)

    return 0.0


def quaternion_exp(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The quaternion exponential.

    .. math::
        e^{\mathbf{q}} = e^{q_s}\left[\begin{array}{c}\frac{\text{sin}(\|\mathbf{q}_v\|)}{\|\mathbf{q}_v\|}
        \mathbf{q}_v\\ \text{cos}(\|\mathbf{q}_v\|)\end{array}\right]

    When the vector part is exactly zero the result is the real quaternion :math:`e^{q_s}`.

    :param quaternion: the quaternion to exponentiate
    :return: the exponential of the quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qv = quaternion[:3]

    magnitude = np.exp(quaternion[-1])

    vector_length = np.linalg.norm(qv)

    if vector_length > 0:
        scale = magnitude * np.sin(vector_length) / vector_length
        return np.concatenate([qv * scale, [magnitude * np.cos(vector_length)]])

    return np.array([0, 0, 0, magnitude], dtype=np.float64)


def quaternion_log(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The quaternion (natural) logarithm, the inverse of :func:`quaternion_exp`.

    .. math::
        \text{ln}(\mathbf{q}) = \left[\begin{array}{c}\frac{\text{cos}^{-1}(q_s/\|\mathbf{q}\|)}{\|\mathbf{q}_v\|}
        \mathbf{q}_v\\ \text{ln}(\|\mathbf{q}\|)\end{array}\right]

    The degenerate cases are handled as follows:

    * the zero quaternion returns ``[0, 0, 0, -inf]``
    * a quaternion with a zero vector part returns ``[0, 0, 0, ln(|q|)]``

    :param quaternion: the quaternion to take the logarithm of
    :return: the logarithm of the quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qv = quaternion[:3]
    qs = quaternion[-1]

    vector_length_squared = qv @ qv
    length_squared = qs * qs + vector_length_squared

    if length_squared > 0:

        if vector_length_squared > 0:
            length = np.sqrt(length_squared)

            # keep the cosine in the domain of arccos (only leaves it due to rounding)
            scale = np.arccos(np.clip(qs / length, -1, 1)) / np.sqrt(vector_length_squared)

            return np.concatenate([qv * scale, [np.log(length)]])

        return np.array([0, 0, 0, np.log(length_squared) / 2], dtype=np.float64)

    return np.array([0, 0, 0, -np.inf], dtype=np.float64)


def quaternion_power(quaternion: ARRAY_LIKE, exponent: SCALAR) -> DOUBLE_ARRAY:
    r"""
    Raises a quaternion to a real power using its polar form.

    The length of the quaternion is raised to `exponent` and the angle :math:`\text{atan2}(\|\mathbf{q}_v\|, q_s)` is
    scaled by `exponent`, keeping the direction of the vector part.  For a rotation this scales the rotation angle about
    the same axis, so that a 60 degree rotation raised to 0.5 is a 30 degree rotation.

    When the vector part is negligible (:math:`\|\mathbf{q}_v\|\le\epsilon\|\mathbf{q}\|`) the direction is undefined
    and the real quaternion :math:`\|\mathbf{q}\|^n` is returned.

    :param quaternion: the quaternion to raise
    :param exponent: the real power to raise the quaternion to
    :return: the quaternion raised to `exponent`
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qv = quaternion[:3]
    qs = quaternion[-1]

    vector_length = np.linalg.norm(qv)
    length = np.sqrt(qs * qs + vector_length * vector_length)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        new_length = np.power(length, exponent)

    if vector_length <= EPSILON * length:
        return np.array([0, 0, 0, new_length], dtype=np.float64)

    axis = qv / vector_length

    new_angle = exponent * np.arctan2(vector_length, qs)

    return np.concatenate([new_length * np.sin(new_angle) * axis, [new_length * np.cos(new_angle)]])


def quaternion_rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates a 3 element vector by a quaternion.

    The quaternion is normalized first and the vector is rotated by the sandwich product

    .. math::
        \left[\begin{array}{c}\mathbf{v}'\\0\end{array}\right] = \mathbf{q}\otimes
        \left[\begin{array}{c}\mathbf{v}\\0\end{array}\right]\otimes\mathbf{q}^*

    :param quaternion: the quaternion to rotate by
    :param vector: the vector to rotate
    :return: the rotated vector
    """

    unit = quaternion_normalize(quaternion)
    vector = _check_vector_array_and_shape(vector)

    pure = np.concatenate([vector, [0.0]])

    return quaternion_multiplication(quaternion_multiplication(unit, pure), quaternion_conjugate(unit))[:3]


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, alpha: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0+(\mathbf{q}_1-\mathbf{q}_0)p}
        {\left\|\mathbf{q}_0+(\mathbf{q}_1-\mathbf{q}_0)p\right\|}

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1`.

    .. warning::
        NLERP does not move at a constant angular rate, and it does not resolve the sign ambiguity of the inputs.  It is
        used by :func:`slerp` only when the endpoints coincide.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param alpha: The fractional percent to interpolate at
    :return: The interpolated quaternion
    """

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    return quaternion_normalize(q0 + (q1 - q0) * alpha)


def _shortest_arc_endpoints(quaternion0: ARRAY_LIKE,
                            quaternion1: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, float]:
    """
    Normalizes both endpoints and negates the first one if that gives the shorter arc.

    :return: the two endpoints and the cosine of the angle between them
    """

    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    cos_angle = quaternion_dot(q0, q1)

    if cos_angle < 0:
        q0 = -q0
        cos_angle = -cos_angle

    return q0, q1, cos_angle


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, alpha: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of quaternions.

    SLERP of quaternions involves performing a linear interpolation along the great circle arc connecting the two
    quaternions. That is:

    .. math::
        \theta_0 = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\left(\text{cos}(p\theta_0)-\mathbf{q}_0^T\mathbf{q}_1\frac{\text{sin}(p\theta_0)}
        {\text{sin}(\theta_0)}\right)\mathbf{q}_0 + \frac{\text{sin}(p\theta_0)}{\text{sin}(\theta_0)}\mathbf{q}_1

    and the result is normalized.

    Both inputs are normalized first.  If their dot product is negative the first quaternion is negated so that the
    shortest arc is followed (the two represent the same rotation).  If the endpoints coincide (a dot product of 1) the
    interpolation falls back to :func:`nlerp` to avoid dividing by :math:`\text{sin}(\theta_0)=0`.

    `alpha` is not restricted to :math:`[0, 1]`; values outside of it extrapolate along the great circle.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param alpha: The fractional percent to interpolate at
    :return: The interpolated quaternion
    """

    return slerp_function(quaternion0, quaternion1)(alpha)


def slerp_function(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE) -> Callable[[SCALAR], DOUBLE_ARRAY]:
    """
    Prepares a spherical linear interpolation between two quaternions for repeated evaluation.

    The endpoint normalization, the shortest arc check and the angle between the endpoints are computed once.  The
    returned function gives the same result as :func:`slerp` for any `alpha`.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :return: a function mapping the fractional percent to the interpolated quaternion
    """

    q0, q1, cos_angle = _shortest_arc_endpoints(quaternion0, quaternion1)

    if cos_angle >= 1:

        def interpolate_coincident(alpha: SCALAR) -> DOUBLE_ARRAY:
            return nlerp(q0, q1, alpha)

        return interpolate_coincident

    angle0 = np.arccos(cos_angle)
    sin_angle0 = np.sin(angle0)

    def interpolate(alpha: SCALAR) -> DOUBLE_ARRAY:

        angle = angle0 * alpha
        sin_angle = np.sin(angle)

        s0 = np.cos(angle) - cos_angle * sin_angle / sin_angle0
        s1 = sin_angle / sin_angle0

        return quaternion_normalize(s0 * q0 + s1 * q1)

    return interpolate


def identity_slerp(quaternion1: ARRAY_LIKE, alpha: SCALAR) -> DOUBLE_ARRAY:
    """
    Spherical linear interpolation from the identity quaternion to `quaternion1`.

    This is :func:`slerp` with the identity as the starting point, written out so that the identity never has to be
    formed or normalized.  The same shortest arc and coincident endpoint rules apply.

    :param quaternion1: The ending quaternion
    :param alpha: The fractional percent to interpolate at
    :return: The interpolated quaternion
    """

    q1 = quaternion_normalize(quaternion1)

    # the real part of the (possibly negated) identity
    q0_scalar = 1.0
    cos_angle = q1[-1]

    if cos_angle < 0:
        q0_scalar = -1.0
        cos_angle = -cos_angle

    if cos_angle >= 1:
        return quaternion_normalize(np.concatenate([q1[:3] * alpha, [(q1[-1] - q0_scalar) * alpha + q0_scalar]]))

    angle0 = np.arccos(cos_angle)
    sin_angle0 = np.sin(angle0)

    angle = angle0 * alpha
    sin_angle = np.sin(angle)

    s0 = np.cos(angle) - cos_angle * sin_angle / sin_angle0
    s1 = sin_angle / sin_angle0

    return quaternion_normalize(np.concatenate([q1[:3] * s1, [q0_scalar * s0 + q1[-1] * s1]]))
