"""
This package provides the configuration machinery and mixin classes used throughout rotquat.
"""

from rotquat.utilities.options import UserOptions
from rotquat.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting, UserOptionConfigured

__all__ = ["UserOptions", "AttributeEqualityComparison", "AttributePrinting", "UserOptionConfigured"]
