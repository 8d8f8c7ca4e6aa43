"""
This package provides utilities that support the rest of enginemath, such as the dataclass based user options used to
configure classes.
"""

from enginemath.utilities.options import UserOptions

__all__ = ['UserOptions']
