import warnings

import numpy as np

from rotquat._typing import ARRAY_LIKE, DOUBLE_ARRAY


EPSILON: float = 1e-6
"""
The tolerance shared by the near-singular branches in rotquat (power, axis-angle extraction, basis fallbacks and the
euler angle singularity tests) and the default tolerance of the approximate comparisons.
"""


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None,
                           second_last_axis_length: int | None = None,
                           last_axis_length: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if second_last_axis_length is not None:
        if len(in_shape) < 2 or in_shape[-2] != second_last_axis_length:
            raise ValueError(f'The length of the second to last axis must be {second_last_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    if return_copy:
        return np.array(input, dtype=np.float64)

    return np.asarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, return_copy, second_last_axis_length=3, last_axis_length=3)


def _safe_unit(vector: ARRAY_LIKE, fallback: ARRAY_LIKE, name: str = 'vector') -> DOUBLE_ARRAY:
    """
    Returns the unit vector in the direction of ``vector``, or a copy of ``fallback`` when ``vector`` has no length.

    A warning is issued when the fallback is used.

    :param vector: the vector to normalize
    :param fallback: the unit vector to use when `vector` is zero length or not finite
    :param name: how to refer to `vector` in the warning
    :return: a unit length vector
    """

    vector = _check_vector_array_and_shape(vector)

    magnitude = np.linalg.norm(vector)

    if magnitude > 0 and np.isfinite(magnitude):
        return vector / magnitude

    warnings.warn(f'The {name} has no length.  Falling back to {np.asarray(fallback).tolist()}')

    return np.array(fallback, dtype=np.float64)
