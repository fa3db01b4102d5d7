"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be configured using
:class:`.UserOptions`-derived classes while maintaining the ability to reset to the original configuration state.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from dataclasses import dataclass

        from rotquat.utilities.options import UserOptions
        from rotquat.utilities.mixin_classes.user_option_configured import UserOptionConfigured

        @dataclass
        class MyOptions(UserOptions):
            a: int = 5
            b: float = -32.1

        class MyUsefulClass(UserOptionConfigured[MyOptions], MyOptions):
            def __init__(self, options: MyOptions | None = None):
                super().__init__(MyOptions, options=options)

        # Usage
        my_useful_inst = MyUsefulClass()
        my_useful_inst.a = 6  # Make a change
        print(my_useful_inst.a)  # Output: 6
        my_useful_inst.reset_settings()  # Reset to original
        print(my_useful_inst.a)  # Output: 5

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order due to Method Resolution Order
    (MRO) requirements.
"""

from copy import deepcopy
from typing import Generic, TypeVar

from rotquat.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    The options are applied as attributes of the instance on initialization and a copy of them is kept so that
    :meth:`reset_settings` can restore the initial state later.

    To use this mixin, subclass it with the :class:`UserOptions` subclass as the type parameter::

        class MyUsefulClass(UserOptionConfigured[MyOptions], MyOptions):
            def __init__(self, options: MyOptions | None = None):
                super().__init__(MyOptions, options=options)

    .. Warning::
        If options are not provided during initialization, default initialization of the options_type class will be
        used.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = deepcopy(options)
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the class to the state it was originally initialized with.
        """

        self.original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The original configuration options.

        .. Warning::
            Modifying the returned object will affect reset behavior.
        """
        return self._original_options
