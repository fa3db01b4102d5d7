"""
This module defines the exceptions raised by rotquat.

Both exceptions signal a bad call by the programmer rather than a recoverable runtime condition, so they are raised at
the call site and never caught internally.  They derive from the builtin exception a caller would expect for the same
mistake (:class:`TypeError` for an unsupported operand and :class:`AttributeError` for a write to a read-only
attribute) so that generic handlers keep working.
"""


class InvalidOperandError(TypeError):
    """
    Raised when an arithmetic operator of :class:`.Quaternion` is given a combination of operand kinds that it does not
    define, for instance multiplying a quaternion by a string.

    The message names both operand kinds.
    """


class ImmutableWriteError(AttributeError):
    """
    Raised on any attempt to assign or delete an attribute of a :class:`.Quaternion` after construction, or to rebind
    the :attr:`.Quaternion.identity` and :attr:`.Quaternion.zero` constants.
    """
