"""
This module provides a seeded generator of uniformly distributed random rotations.

Each generator owns its own :class:`numpy.random.Generator`, so separate generators never share state and nothing in
rotquat touches the global numpy random state.  Generators with the same seed produce the same stream of quaternions.

Example::

    >>> from rotquat.rotations import RandomQuaternionGenerator, RandomQuaternionOptions
    >>> generator = RandomQuaternionGenerator(options=RandomQuaternionOptions(seed=10))
    >>> first = generator()
    >>> batch = [generator.next() for _ in range(5)]
    >>> generator.reset_settings()  # replays the stream from the start
    >>> generator() == first
    True
"""

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

import numpy as np

from rotquat._typing import DOUBLE_ARRAY

from rotquat.utilities.options import UserOptions
from rotquat.utilities.mixin_classes import UserOptionConfigured

if TYPE_CHECKING:
    from rotquat.rotations.quaternion import Quaternion


__all__ = ["RandomQuaternionOptions", "RandomQuaternionGenerator", "shoemake_quaternion"]


def shoemake_quaternion(u: float, v: float, w: float) -> DOUBLE_ARRAY:
    r"""
    Maps three uniform samples in :math:`[0, 1)` to a unit quaternion using Shoemake's method.

    .. math::
        \mathbf{q} = \left[\begin{array}{c}\sqrt{1-u}\text{sin}(2\pi v) \\ \sqrt{1-u}\text{cos}(2\pi v) \\
        \sqrt{u}\text{sin}(2\pi w) \\ \sqrt{u}\text{cos}(2\pi w)\end{array}\right]

    When `u`, `v` and `w` are independent and uniform the result is uniformly distributed over the rotations.

    :param u: the sample splitting the length between the two component pairs
    :param v: the sample giving the angle of the first pair
    :param w: the sample giving the angle of the second pair
    :return: the unit quaternion
    """

    first_length = np.sqrt(1 - u)
    second_length = np.sqrt(u)

    return np.array([first_length * np.sin(2 * np.pi * v),
                     first_length * np.cos(2 * np.pi * v),
                     second_length * np.sin(2 * np.pi * w),
                     second_length * np.cos(2 * np.pi * w)], dtype=np.float64)


@dataclass
class RandomQuaternionOptions(UserOptions):
    """
    The options for :class:`RandomQuaternionGenerator`.
    """

    seed: int | None = 1
    """
    The seed of the generator's random stream.

    ``None`` draws fresh entropy from the operating system, in which case the stream cannot be replayed.
    """


class RandomQuaternionGenerator(UserOptionConfigured[RandomQuaternionOptions], RandomQuaternionOptions):
    """
    Generates uniformly distributed random unit quaternions from a seeded stream.

    The generator may be called, iterated over (endlessly), or asked for the :meth:`next` quaternion; all three draw
    from the same stream.  :meth:`reset_settings` restores the original seed and restarts the stream.
    """

    def __init__(self, options: RandomQuaternionOptions | None = None) -> None:
        """
        :param options: the options configuring the generator.  Defaults to a seed of 1
        """

        super().__init__(RandomQuaternionOptions, options=options)

        self._rng: np.random.Generator = np.random.default_rng(self.seed)

    def reset_settings(self) -> None:
        """
        Resets the options to their original values and restarts the random stream from the original seed.
        """

        super().reset_settings()

        self._rng = np.random.default_rng(self.seed)

    def next(self) -> 'Quaternion':
        """
        Draws the next random unit quaternion from the stream.

        :return: the random rotation
        """

        from rotquat.rotations.quaternion import Quaternion

        u, v, w = self._rng.random(3)

        return Quaternion(*shoemake_quaternion(u, v, w))

    __call__ = next

    def __iter__(self) -> Iterator['Quaternion']:
        return self

    def __next__(self) -> 'Quaternion':
        return self.next()
