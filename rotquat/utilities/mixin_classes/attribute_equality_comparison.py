"""
This module provides a mixin class implementing equality comparison from the instance attributes.
"""

from typing import Any, Self

import numpy as np


class AttributeEqualityComparison:
    """
    A mixin class that implements equality comparison based on attributes.

    Two objects compare equal when they are instances of the same class, carry the same attribute names, and every
    attribute compares equal.  Numeric array-like attributes are compared using :func:`numpy.allclose`, so that values
    computed through different (but equivalent) floating point paths still compare equal.

    For example::

        >>> from rotquat.transform import RigidTransform
        >>> RigidTransform([1, 2, 3]) == RigidTransform([1, 2, 3 + 1e-12])
        True

    Since equality is approximate for arrays, classes using this mixin are not hashable.
    """

    __hash__ = None

    def __eq__(self, other: Any) -> bool:
        """
        Compare this object with another for equality by checking equality of all attributes.

        :param other: The object to compare with
        :return: True if the objects are equal, False otherwise
        """

        if not isinstance(other, self.__class__):
            return NotImplemented

        if set(self.__dict__.keys()) != set(other.__dict__.keys()):
            return False

        return all(self.comparison_dictionary(other).values())

    @staticmethod
    def _value_comparison(val1: Any, val2: Any) -> bool:
        """
        Compare two values, handling array-like objects.

        This can be overridden if need be.

        :param val1: First value to compare
        :param val2: Second value to compare
        :return: True if values are equal, False otherwise
        """

        if isinstance(val1, (np.ndarray, list, tuple)) and isinstance(val2, (np.ndarray, list, tuple)):
            if np.shape(val1) != np.shape(val2):
                return False
            return bool(np.allclose(val1, val2))

        return bool(val1 == val2)

    def comparison_dictionary(self, other: Self) -> dict[str, bool]:
        """
        Compares each attribute of self to other and stores the result in a dict mapping the attribute to the
        comparison result.

        This assumes that other and self are the same type and have the same attributes.

        :param other: The other instance to compare with
        :return: A dictionary mapping attribute names to comparison results
        """

        return {key: self._value_comparison(value, getattr(other, key)) for key, value in self.__dict__.items()}
