from dataclasses import dataclass, fields

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for parameters set inside the associated class for the options.

    Example:
        :class:`.RandomQuaternionOptions` contains the default options for the :class:`.RandomQuaternionGenerator`
        class.

    Custom objects built from this abstract class should follow the naming scheme <callable_name>Options and be loaded
    into the options keyword argument for callable_name.__init__().

    To apply options to your class, the :meth:`apply_options` method should be invoked.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> class Example:
        >>>     def __init__(self, options = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self)  # apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1234
    """

    def override_options(self) -> None:
        """
        This method is used for special cases when certain options should be overwritten before they are applied.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the object class

        :param target: the instance that we are to update
        """

        for key, value in self.options_dict.items():
            setattr(target, key, value)

    @property
    def options_dict(self) -> dict:
        """
        Determine the options input to the dataclass.

        Only the dataclass fields are included, so internal attributes and methods are ignored.
        """

        self.override_options()

        return {field.name: getattr(self, field.name) for field in fields(self)}
