# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Quaternion` class, the immutable quaternion value type at the center of rotquat.

The class wraps the array routines from :mod:`rotquat.rotations.core` in an immutable object with operator
overloading, so that rotations can be composed, inverted, interpolated, and converted with plain Python syntax::

    >>> from rotquat.rotations import Quaternion
    >>> import numpy as np
    >>> quarter_turn_y = Quaternion.from_axis_angle([0, 1, 0], np.pi / 2)
    >>> quarter_turn_y * np.array([1, 0, 0])
    array([ 0.,  0., -1.])

Quaternions are stored in ``[x, y, z, w]`` order, with ``w`` the real part.  Nothing is normalized at construction;
the methods that need a unit quaternion normalize internally and say so in their documentation.
"""

import numbers
from typing import Any, Callable, Self

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS, SCALAR
from rotquat.exceptions import ImmutableWriteError, InvalidOperandError

from rotquat.rotations.core._helpers import EPSILON, _check_matrix_array_and_shape, _check_vector_array_and_shape
from rotquat.rotations.core.conversions import (quaternion_to_rotmat, rotmat_to_quaternion, axis_angle_to_quaternion,
                                                quaternion_to_axis_angle, euler_to_quaternion, quaternion_to_euler,
                                                euler_to_quaternion_xyz, euler_to_quaternion_xzy,
                                                euler_to_quaternion_yxz, euler_to_quaternion_yzx,
                                                euler_to_quaternion_zxy, euler_to_quaternion_zyx,
                                                quaternion_to_euler_xyz, quaternion_to_euler_xzy,
                                                quaternion_to_euler_yxz, quaternion_to_euler_yzx,
                                                quaternion_to_euler_zxy, quaternion_to_euler_zyx)
from rotquat.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                                    quaternion_multiplication, quaternion_dot, quaternion_hypot,
                                                    quaternion_exp, quaternion_log, quaternion_power,
                                                    quaternion_rotate_vector, slerp, slerp_function, identity_slerp)
from rotquat.rotations.frames import orthonormalize, look_at_basis
from rotquat.rotations.random import RandomQuaternionGenerator, RandomQuaternionOptions
from rotquat.transform import RigidTransform


__all__ = ["Quaternion"]


def _operand_kind(value: Any) -> str:
    """
    Classifies an operand of the arithmetic operators.

    :return: one of ``'Quaternion'``, ``'number'``, ``'Vector'``, ``'RigidTransform'``, or the type name of `value`
    """

    if isinstance(value, Quaternion):
        return 'Quaternion'

    if isinstance(value, RigidTransform):
        return 'RigidTransform'

    if isinstance(value, numbers.Real):
        return 'number'

    if isinstance(value, np.ndarray):
        if value.shape == (3,) and np.issubdtype(value.dtype, np.number):
            return 'Vector'

    elif isinstance(value, (list, tuple)):
        if len(value) == 3 and all(isinstance(component, numbers.Real) for component in value):
            return 'Vector'

    return type(value).__name__


class _QuaternionType(type):
    """
    Metaclass protecting the named constants of :class:`Quaternion` from being rebound or deleted.
    """

    _CONSTANTS = ('identity', 'zero')

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in cls._CONSTANTS and hasattr(cls, name):
            raise ImmutableWriteError(f'Quaternion.{name} is a constant and cannot be rebound')

        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in cls._CONSTANTS:
            raise ImmutableWriteError(f'Quaternion.{name} is a constant and cannot be deleted')

        super().__delattr__(name)


class Quaternion(metaclass=_QuaternionType):
    r"""
    An immutable quaternion :math:`\mathbf{q}=x\mathbf{i}+y\mathbf{j}+z\mathbf{k}+w`.

    Unit quaternions represent rotations, and that is what most of the methods of this class are about, but any
    quaternion can be stored.  The components are kept in a read only float64 array (:attr:`q`) in ``[x, y, z, w]``
    order, and any attempt to set or delete an attribute raises an :exc:`.ImmutableWriteError`.  Every operation
    returns a new instance.

    The operators are overloaded as follows:

    ============================  =========================================================================
    Expression                    Result
    ============================  =========================================================================
    ``q0 * q1``                   Hamilton product (``q1`` applied first, then ``q0``)
    ``q * number``/``number * q`` every component scaled
    ``q * vector``                ``vector`` rotated by ``q`` (``q`` normalized first)
    ``q * transform``             ``q.to_transform() * transform``
    ``vector * q``                a :class:`.RigidTransform` at ``vector`` with the rotation of ``q``
    ``q0 / q1``                   ``q0 * q1.inverse()``
    ``q / number``                every component divided by ``number``
    ``number / q``                ``number`` divided by every component
    ``q ** n``                    :meth:`power`
    ``q0 + q1``/``q0 - q1``       component wise sum/difference
    ``-q``                        every component negated (the same rotation as ``q``)
    ``abs(q)``                    :meth:`length`
    ============================  =========================================================================

    Any other combination of operands raises an :exc:`.InvalidOperandError` naming both operand kinds.

    Equality is exact component wise equality; use :meth:`approx_eq` to compare rotations.  Note that ``q`` and
    ``-q`` represent the same rotation but do not compare equal.

    The ordering operators compare only the :meth:`length` of the quaternions.  This ordering has no rotational meaning
    and is provided only so quaternions can be sorted deterministically.

    The :attr:`identity` and :attr:`zero` constants are shared instances that cannot be rebound.
    """

    __slots__ = ('_quaternion', '_cache')

    # numpy defers to the reflected operators instead of broadcasting over a Quaternion
    __array_ufunc__ = None

    identity: 'Quaternion'
    """
    The identity quaternion ``(0, 0, 0, 1)``, the rotation that does nothing.
    """

    zero: 'Quaternion'
    """
    The zero quaternion ``(0, 0, 0, 0)``.  It does not represent a rotation.
    """

    def __init__(self, x: SCALAR | None = None, y: SCALAR | None = None,
                 z: SCALAR | None = None, w: SCALAR | None = None) -> None:
        """
        Any component that is not given (or is ``None``) takes its value from the identity quaternion, so that
        ``Quaternion()`` is the identity.

        :param x: the first imaginary component
        :param y: the second imaginary component
        :param z: the third imaginary component
        :param w: the real component
        """

        quaternion = np.array([0.0 if x is None else x,
                               0.0 if y is None else y,
                               0.0 if z is None else z,
                               1.0 if w is None else w], dtype=np.float64)
        quaternion.flags.writeable = False

        object.__setattr__(self, '_quaternion', quaternion)
        object.__setattr__(self, '_cache', {})

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableWriteError(f'Quaternion is immutable.  Cannot set {name!r}')

    def __delattr__(self, name: str) -> None:
        raise ImmutableWriteError(f'Quaternion is immutable.  Cannot delete {name!r}')

    def __reduce__(self) -> tuple[type, tuple[float, float, float, float]]:
        return self.__class__, self.components

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict) -> Self:
        return self

    # ------------------------------------------------------------------------------------------------------------------
    # components
    # ------------------------------------------------------------------------------------------------------------------

    @property
    def x(self) -> float:
        """
        The first imaginary component.
        """
        return float(self._quaternion[0])

    @property
    def y(self) -> float:
        """
        The second imaginary component.
        """
        return float(self._quaternion[1])

    @property
    def z(self) -> float:
        """
        The third imaginary component.
        """
        return float(self._quaternion[2])

    @property
    def w(self) -> float:
        """
        The real component.
        """
        return float(self._quaternion[3])

    @property
    def q(self) -> DOUBLE_ARRAY:
        """
        The components as a read only length 4 array in ``[x, y, z, w]`` order.
        """
        return self._quaternion

    @property
    def components(self) -> tuple[float, float, float, float]:
        """
        The components as a tuple ``(x, y, z, w)``.
        """
        return self.x, self.y, self.z, self.w

    @property
    def unit(self) -> Self:
        """
        The normalized quaternion (see :meth:`normalize`).

        This is computed on first access and then remembered.
        """

        if 'unit' not in self._cache:
            self._cache['unit'] = self.normalize()

        return self._cache['unit']

    @property
    def magnitude(self) -> float:
        """
        The length of the quaternion (see :meth:`length`).

        This is computed on first access and then remembered.
        """

        if 'magnitude' not in self._cache:
            self._cache['magnitude'] = self.length()

        return self._cache['magnitude']

    def vector(self) -> DOUBLE_ARRAY:
        """
        Returns the imaginary components as a length 3 array.
        """
        return self._quaternion[:3].copy()

    def real(self) -> Self:
        """
        Returns the quaternion with the imaginary components set to zero.
        """
        return self.__class__(0, 0, 0, self.w)

    def imaginary(self) -> Self:
        """
        Returns the quaternion with the real component set to zero.
        """
        return self.__class__(self.x, self.y, self.z, 0)

    # ------------------------------------------------------------------------------------------------------------------
    # comparison and printing
    # ------------------------------------------------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:

        if isinstance(other, Quaternion):
            return bool(np.array_equal(self._quaternion, other.q))

        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.components)

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Quaternion):
            return self.length() < other.length()
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Quaternion):
            return self.length() <= other.length()
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Quaternion):
            return self.length() > other.length()
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Quaternion):
            return self.length() >= other.length()
        return NotImplemented

    def __repr__(self) -> str:
        return 'Quaternion(x={!r}, y={!r}, z={!r}, w={!r})'.format(*self.components)

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, decimal_places: int | None = None) -> str:
        """
        Renders the four components separated by ``", "``.

        When `decimal_places` is given every component is rounded to that many places (negative values are treated
        as 0).  Otherwise the default float formatting is used.

        :param decimal_places: the number of decimal places to keep
        :return: the string representation of the quaternion
        """

        if decimal_places is None:
            return ', '.join(str(component) for component in self.components)

        places = max(0, int(decimal_places))

        return ', '.join(f'{component:.{places}f}' for component in self.components)

    # ------------------------------------------------------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------------------------------------------------------

    def __add__(self, other: Any) -> Self:
        if isinstance(other, Quaternion):
            return self.__class__(*(self._quaternion + other.q))
        return NotImplemented

    def __sub__(self, other: Any) -> Self:
        if isinstance(other, Quaternion):
            return self.__class__(*(self._quaternion - other.q))
        return NotImplemented

    def __neg__(self) -> Self:
        return self.negate()

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> float:
        return self.length()

    def __mul__(self, other: Any) -> 'Quaternion | DOUBLE_ARRAY | RigidTransform':

        kind = _operand_kind(other)

        if kind == 'Quaternion':
            return self.__class__(*quaternion_multiplication(self._quaternion, other.q))

        elif kind == 'number':
            return self.__class__(*(self._quaternion * other))

        elif kind == 'Vector':
            return quaternion_rotate_vector(self._quaternion, other)

        elif kind == 'RigidTransform':
            return self.to_transform() * other

        raise InvalidOperandError(f'Cannot multiply Quaternion with {kind}.')

    def __rmul__(self, other: Any) -> 'Quaternion | RigidTransform':

        kind = _operand_kind(other)

        if kind == 'number':
            return self.__class__(*(other * self._quaternion))

        elif kind == 'Vector':
            return RigidTransform(position=other, rotation=self.to_matrix())

        raise InvalidOperandError(f'Cannot multiply {kind} with Quaternion.')

    def __truediv__(self, other: Any) -> Self:

        kind = _operand_kind(other)

        if kind == 'Quaternion':
            return self * other.inverse()

        elif kind == 'number':
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.__class__(*(self._quaternion / other))

        raise InvalidOperandError(f'Cannot divide Quaternion by {kind}.')

    def __rtruediv__(self, other: Any) -> Self:

        kind = _operand_kind(other)

        if kind == 'number':
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.__class__(*(other / self._quaternion))

        raise InvalidOperandError(f'Cannot divide {kind} by Quaternion.')

    def __pow__(self, exponent: Any) -> Self:

        kind = _operand_kind(exponent)

        if kind == 'number':
            return self.power(exponent)

        raise InvalidOperandError(f'Cannot raise Quaternion to the power of {kind}.')

    def __rpow__(self, other: Any) -> Self:
        raise InvalidOperandError(f'Cannot raise {_operand_kind(other)} to the power of Quaternion.')

    def negate(self) -> Self:
        """
        Negates all four components.

        The result represents the same rotation.  Compare with :meth:`conjugate`, which only negates the imaginary
        components and gives the inverse rotation.
        """
        return self.__class__(*(-self._quaternion))

    def power(self, exponent: SCALAR) -> Self:
        """
        Raises the quaternion to a real power.

        For a unit quaternion this scales the rotation angle by `exponent` about the same axis.  See
        :func:`.quaternion_power` for details.

        :param exponent: the real exponent
        :return: the quaternion raised to `exponent`
        """
        return self.__class__(*quaternion_power(self._quaternion, exponent))

    # ------------------------------------------------------------------------------------------------------------------
    # algebra
    # ------------------------------------------------------------------------------------------------------------------

    def conjugate(self) -> Self:
        """
        Returns the conjugate ``(-x, -y, -z, w)``.
        """
        return self.__class__(*quaternion_conjugate(self._quaternion))

    def inverse(self) -> Self:
        """
        Returns the multiplicative inverse, the conjugate divided by :meth:`length_squared`.

        For unit quaternions this is the same as :meth:`conjugate`.  The zero quaternion has no inverse and gives
        ``nan`` components without raising.
        """
        return self.__class__(*quaternion_inverse(self._quaternion))

    def length(self) -> float:
        """
        Returns the Euclidean length of the four components.
        """
        return float(np.linalg.norm(self._quaternion))

    def length_squared(self) -> float:
        """
        Returns the squared length of the four components.
        """
        return float(self._quaternion @ self._quaternion)

    def hypot(self) -> float:
        """
        Returns the length computed without overflow for very large components (see :func:`.quaternion_hypot`).
        """
        return quaternion_hypot(self._quaternion)

    def normalize(self) -> Self:
        """
        Returns the quaternion scaled to unit length.

        The zero quaternion returns the identity.
        """
        return self.__class__(*quaternion_normalize(self._quaternion))

    def is_unit(self, epsilon: float = EPSILON) -> bool:
        """
        Checks whether the length is within `epsilon` of 1.

        :param epsilon: the allowed difference from unit length
        :return: ``True`` if the quaternion is unit length
        """
        return abs(self.length() - 1) < epsilon

    def is_nan(self) -> bool:
        """
        Checks whether any of the components is ``nan``.
        """
        return bool(np.isnan(self._quaternion).any())

    def dot(self, other: 'Quaternion') -> float:
        """
        The 4 dimensional dot product with `other`.
        """
        return quaternion_dot(self._quaternion, other.q)

    # ------------------------------------------------------------------------------------------------------------------
    # exponential and logarithmic maps
    # ------------------------------------------------------------------------------------------------------------------

    def exp(self) -> Self:
        """
        The quaternion exponential (see :func:`.quaternion_exp`).
        """
        return self.__class__(*quaternion_exp(self._quaternion))

    def log(self) -> Self:
        """
        The quaternion natural logarithm (see :func:`.quaternion_log`).
        """
        return self.__class__(*quaternion_log(self._quaternion))

    def exp_map(self, tangent: 'Quaternion') -> Self:
        """
        Maps the tangent quaternion at this quaternion back onto the rotations, ``self * tangent.exp()``.

        This is the inverse of :meth:`log_map`.
        """
        return self * tangent.exp()

    def log_map(self, other: 'Quaternion') -> Self:
        """
        Maps `other` into the tangent space at this quaternion, ``(self.inverse() * other).log()``.
        """
        return (self.inverse() * other).log()

    def exp_map_sym(self, tangent: 'Quaternion') -> Self:
        """
        The symmetrized exponential map, ``s * tangent.exp() * s`` with ``s = self ** 0.5``.

        This is the inverse of :meth:`log_map_sym`.
        """

        half = self ** 0.5

        return half * tangent.exp() * half

    def log_map_sym(self, other: 'Quaternion') -> Self:
        """
        The symmetrized logarithmic map, ``(s * other * s).log()`` with ``s = self ** -0.5``.
        """

        inverse_half = self ** -0.5

        return (inverse_half * other * inverse_half).log()

    def log_inv(self, other: 'Quaternion') -> Self:
        """
        Returns ``(self * other.inverse()).log()``.
        """
        return (self * other.inverse()).log()

    def difference(self, other: 'Quaternion') -> Self:
        """
        Returns the rotation taking this quaternion to `other` along the shortest path, ``self.inverse() * other``.

        This quaternion is negated first when its dot product with `other` is negative.
        """

        start = -self if self.dot(other) < 0 else self

        return start.inverse() * other

    def distance(self, other: 'Quaternion') -> float:
        """
        The geodesic distance ``2 * |self.log_map(other)|``.

        For unit quaternions this is in :math:`[0, 2\\pi]`.  The sign ambiguity is not resolved, so rotations more than
        half a turn apart on the 4 dimensional sphere report the long way around.  Use :meth:`distance_sym` for the
        angle between the rotations.
        """
        return 2 * self.log_map(other).length()

    def distance_sym(self, other: 'Quaternion') -> float:
        """
        The symmetrized geodesic distance ``2 * |self.difference(other).log()|``.

        For unit quaternions this is the rotation angle between the two rotations, in :math:`[0, \\pi]`.
        """
        return 2 * self.difference(other).log().length()

    def distance_chord(self, other: 'Quaternion') -> float:
        """
        The chordal distance ``2 * sin(distance_sym / 2)``.
        """
        return float(2 * np.sin(self.distance_sym(other) / 2))

    def distance_abs(self, other: 'Quaternion') -> float:
        """
        The smaller of ``|self - other|`` and ``|self + other|``.
        """
        return min((self - other).length(), (self + other).length())

    def approx_eq(self, other: 'Quaternion', epsilon: float = EPSILON) -> bool:
        """
        Checks whether this quaternion and `other` represent (nearly) the same rotation.

        :param other: the quaternion to compare to
        :param epsilon: the largest :meth:`distance_sym` considered equal
        :return: ``True`` if the symmetrized distance is less than `epsilon`
        """
        return self.distance_sym(other) < epsilon

    # ------------------------------------------------------------------------------------------------------------------
    # interpolation
    # ------------------------------------------------------------------------------------------------------------------

    def slerp(self, other: 'Quaternion', alpha: SCALAR) -> Self:
        """
        Spherical linear interpolation from this quaternion to `other`.

        Both quaternions are normalized first and the shortest arc is followed.  `alpha` of 0 gives this rotation and
        1 gives `other`; values outside of :math:`[0, 1]` extrapolate.  See :func:`.slerp`.

        :param other: the end of the interpolation
        :param alpha: the fraction of the way from this quaternion to `other`
        :return: the interpolated unit quaternion
        """
        return self.__class__(*slerp(self._quaternion, other.q, alpha))

    def identity_slerp(self, alpha: SCALAR) -> Self:
        """
        Spherical linear interpolation from the identity to this quaternion (see :func:`.identity_slerp`).

        :param alpha: the fraction of the way from the identity to this quaternion
        :return: the interpolated unit quaternion
        """
        return self.__class__(*identity_slerp(self._quaternion, alpha))

    def slerp_function(self, other: 'Quaternion') -> Callable[[SCALAR], 'Quaternion']:
        """
        Returns a function of `alpha` giving the same results as :meth:`slerp` with the setup done once.

        :param other: the end of the interpolation
        :return: the interpolation function
        """

        interpolate_array = slerp_function(self._quaternion, other.q)
        cls = self.__class__

        def interpolate(alpha: SCALAR) -> 'Quaternion':
            return cls(*interpolate_array(alpha))

        return interpolate

    def intermediates(self, other: 'Quaternion', n: int, include_endpoints: bool = False) -> list['Quaternion']:
        """
        Returns `n` quaternions evenly spaced along the slerp from this quaternion to `other`.

        The quaternions are at ``alpha = k / (n + 1)`` for ``k = 1, ..., n``.  With `include_endpoints` this quaternion
        and `other` are added at the start and end of the list.

        :param other: the end of the interpolation
        :param n: the number of interior quaternions
        :param include_endpoints: whether to include this quaternion and `other` in the list
        :return: the list of quaternions
        :raises ValueError: if `n` is negative
        """

        if n < 0:
            raise ValueError(f'The number of intermediates must be non-negative, not {n}')

        interpolate = self.slerp_function(other)

        steps = [interpolate(k / (n + 1)) for k in range(1, n + 1)]

        if include_endpoints:
            return [self, *steps, other]

        return steps

    def derivative(self, rate: ARRAY_LIKE) -> Self:
        """
        The time derivative of this orientation when rotating at angular velocity `rate`, ``0.5 * self * (rate, 0)``.

        :param rate: the angular velocity vector in radians per unit time
        :return: the derivative quaternion
        """
        return 0.5 * self * self.from_vector(rate)

    def integrate(self, rate: ARRAY_LIKE, timestep: SCALAR) -> Self:
        """
        Integrates a constant angular velocity over a time step.

        This quaternion is normalized first.  The rotation vector ``rate * timestep`` is turned into an axis-angle
        rotation and applied as ``self * rotation``.  A zero rotation vector returns the normalized quaternion.

        :param rate: the angular velocity vector in radians per unit time
        :param timestep: the length of the time step
        :return: the integrated unit quaternion
        """

        start = self.normalize()

        rotation_vector = _check_vector_array_and_shape(rate) * timestep
        angle = np.linalg.norm(rotation_vector)

        if angle == 0:
            return start

        return (start * self.from_axis_angle_fast(rotation_vector / angle, angle)).normalize()

    # ------------------------------------------------------------------------------------------------------------------
    # conversions
    # ------------------------------------------------------------------------------------------------------------------

    def to_axis_angle(self) -> tuple[DOUBLE_ARRAY, float]:
        """
        Converts to a rotation axis and angle (see :func:`.quaternion_to_axis_angle`).

        :return: the unit axis and the angle in radians
        """
        return quaternion_to_axis_angle(self._quaternion)

    def to_matrix(self) -> DOUBLE_ARRAY:
        """
        Converts to a 3x3 rotation matrix (normalizing first).
        """
        return quaternion_to_rotmat(self._quaternion)

    def to_matrix_vectors(self) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]:
        """
        Returns the columns of :meth:`to_matrix`, the rotated right (x), up (y), and back (z) axes.
        """

        matrix = self.to_matrix()

        return matrix[:, 0].copy(), matrix[:, 1].copy(), matrix[:, 2].copy()

    def to_transform(self, position: ARRAY_LIKE | None = None) -> RigidTransform:
        """
        Converts to a :class:`.RigidTransform` with this rotation (normalized) at `position`.

        :param position: the position of the transform.  Defaults to the origin
        :return: the rigid transform
        """
        return RigidTransform(position=position, rotation=self.to_matrix())

    def to_euler_angles(self, order: EULER_ORDERS = 'XYZ') -> tuple[float, float, float]:
        """
        Converts to euler angles ``(rx, ry, rz)`` for the requested order (normalizing first).

        The order names the axes from left to right in the product, matching :meth:`from_euler_angles`.  See
        :mod:`.conversions` for the handling of the gimbal lock singularity.

        :param order: one of the six axis orders (case insensitive)
        :return: the angles about the x, y, and z axes in radians
        :raises ValueError: if `order` is not a valid order
        """
        return quaternion_to_euler(self._quaternion, order)

    def to_euler_angles_xyz(self) -> tuple[float, float, float]:
        return quaternion_to_euler_xyz(self._quaternion)

    def to_euler_angles_xzy(self) -> tuple[float, float, float]:
        return quaternion_to_euler_xzy(self._quaternion)

    def to_euler_angles_yxz(self) -> tuple[float, float, float]:
        return quaternion_to_euler_yxz(self._quaternion)

    def to_euler_angles_yzx(self) -> tuple[float, float, float]:
        return quaternion_to_euler_yzx(self._quaternion)

    def to_euler_angles_zxy(self) -> tuple[float, float, float]:
        return quaternion_to_euler_zxy(self._quaternion)

    def to_euler_angles_zyx(self) -> tuple[float, float, float]:
        return quaternion_to_euler_zyx(self._quaternion)

    to_orientation = to_euler_angles_yxz

    # ------------------------------------------------------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------------------------------------------------------

    @classmethod
    def from_vector(cls, vector: ARRAY_LIKE) -> Self:
        """
        Creates the pure imaginary quaternion ``(vector, 0)``.

        :param vector: the length 3 vector to use as the imaginary components
        :return: the quaternion
        """
        return cls(*_check_vector_array_and_shape(vector), 0.0)

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: SCALAR) -> Self:
        """
        Creates the unit quaternion rotating by `angle` about `axis`.

        The axis is normalized first.  An axis with no length falls back to the x axis with a warning.

        :param axis: the rotation axis
        :param angle: the rotation angle in radians
        :return: the unit quaternion
        """
        return cls(*axis_angle_to_quaternion(axis, angle))

    @classmethod
    def from_axis_angle_fast(cls, axis: ARRAY_LIKE, angle: SCALAR) -> Self:
        """
        Like :meth:`from_axis_angle` but the axis is assumed to already be unit length and is not checked.
        """
        return cls(*axis_angle_to_quaternion(axis, angle, assume_unit=True))

    @classmethod
    def from_matrix(cls, right: ARRAY_LIKE, up: ARRAY_LIKE, back: ARRAY_LIKE | None = None) -> Self:
        """
        Creates a quaternion from the columns of a rotation matrix.

        The columns are orthonormalized first using :func:`.orthonormalize`, so loosely specified directions are
        accepted.

        :param right: the first column (the rotated x axis)
        :param up: the second column (the rotated y axis)
        :param back: the third column (the rotated z axis).  Defaults to ``right × up``
        :return: the unit quaternion
        """

        basis = orthonormalize(right, up, back)

        return cls(*rotmat_to_quaternion(np.column_stack(basis)))

    @classmethod
    def from_rotation_matrix(cls, matrix: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a 3x3 rotation matrix by passing its columns to :meth:`from_matrix`.
        """

        matrix = _check_matrix_array_and_shape(matrix)

        return cls.from_matrix(matrix[:, 0], matrix[:, 1], matrix[:, 2])

    @classmethod
    def from_transform(cls, transform: RigidTransform) -> Self:
        """
        Creates a quaternion from the rotation of a :class:`.RigidTransform` (the position is ignored).
        """
        return cls.from_matrix(transform.right_vector, transform.up_vector, -transform.look_vector)

    @classmethod
    def look_at(cls, eye: ARRAY_LIKE, target: ARRAY_LIKE, up: ARRAY_LIKE | None = None) -> Self:
        """
        Creates the rotation of a frame at `eye` looking at `target` (down its -z axis) with its y axis as close to
        `up` as possible.

        See :func:`.look_at_basis` for the fallbacks used when the directions are degenerate.

        :param eye: the location of the frame
        :param target: the point to look at
        :param up: the desired up direction.  Defaults to the y axis
        :return: the unit quaternion
        """
        return cls(*rotmat_to_quaternion(np.column_stack(look_at_basis(eye, target, up))))

    @classmethod
    def from_euler_angles(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR, order: EULER_ORDERS = 'XYZ') -> Self:
        """
        Creates a quaternion from euler angles.

        The order names the axes from left to right in the product, so order ``'ABC'`` gives ``qA * qB * qC``, which
        applies the rotation about C first.

        :param rx: the angle about the x axis in radians
        :param ry: the angle about the y axis in radians
        :param rz: the angle about the z axis in radians
        :param order: one of the six axis orders (case insensitive)
        :return: the unit quaternion
        :raises ValueError: if `order` is not a valid order
        """
        return cls(*euler_to_quaternion((rx, ry, rz), order))

    @classmethod
    def from_euler_angles_xyz(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_xyz(rx, ry, rz))

    @classmethod
    def from_euler_angles_xzy(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_xzy(rx, ry, rz))

    @classmethod
    def from_euler_angles_yxz(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_yxz(rx, ry, rz))

    @classmethod
    def from_euler_angles_yzx(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_yzx(rx, ry, rz))

    @classmethod
    def from_euler_angles_zxy(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_zxy(rx, ry, rz))

    @classmethod
    def from_euler_angles_zyx(cls, rx: SCALAR, ry: SCALAR, rz: SCALAR) -> Self:
        return cls(*euler_to_quaternion_zyx(rx, ry, rz))

    angles = from_euler_angles_xyz

    from_orientation = from_euler_angles_yxz

    @staticmethod
    def random_generator(seed: int | None = 1) -> RandomQuaternionGenerator:
        """
        Creates a :class:`.RandomQuaternionGenerator` of uniformly distributed unit quaternions.

        :param seed: the seed of the random stream
        :return: the generator
        """
        return RandomQuaternionGenerator(options=RandomQuaternionOptions(seed=seed))


Quaternion.identity = Quaternion(0, 0, 0, 1)
Quaternion.zero = Quaternion(0, 0, 0, 0)
