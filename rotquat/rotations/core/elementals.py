import numpy as np

from rotquat._typing import SCALAR, ARRAY_LIKE, DOUBLE_ARRAY
from rotquat.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["X_AXIS", "Y_AXIS", "Z_AXIS", "rot_x", "rot_y", "rot_z", "skew"]


def _axis(index: int) -> DOUBLE_ARRAY:
    axis = np.zeros(3)
    axis[index] = 1
    axis.flags.writeable = False
    return axis


X_AXIS: DOUBLE_ARRAY = _axis(0)
"""
The unit x axis (read only)
"""

Y_AXIS: DOUBLE_ARRAY = _axis(1)
"""
The unit y axis (read only)
"""

Z_AXIS: DOUBLE_ARRAY = _axis(2)
"""
The unit z axis (read only)
"""


def rot_x(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix of a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    For example::

        >>> from rotquat.rotations import rot_x
        >>> rot_x(0.5)
        array([[ 1.        ,  0.        ,  0.        ],
               [ 0.        ,  0.87758256, -0.47942554],
               [ 0.        ,  0.47942554,  0.87758256]])

    :param theta: The angle to rotate by in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[1, 0, 0],
                     [0, ctheta, -stheta],
                     [0, stheta, ctheta]], dtype=np.float64)


def rot_y(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix of a right handed rotation about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle to rotate by in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, 0, stheta],
                     [0, 1, 0],
                     [-stheta, 0, ctheta]], dtype=np.float64)


def rot_z(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix of a right handed rotation about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle to rotate by in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, -stheta, 0],
                     [stheta, ctheta, 0],
                     [0, 0, 1]], dtype=np.float64)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    where :math:`\times` indicates the cross product and :math:`\left[\bullet\times\right]` is the skew symmetric cross
    product matrix

    :param vector: The vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix corresponding to the vector
    """

    vector = _check_vector_array_and_shape(vector)

    return np.array([[0, -vector[2], vector[1]],
                     [vector[2], 0, -vector[0]],
                     [-vector[1], vector[0], 0]], dtype=np.float64)
