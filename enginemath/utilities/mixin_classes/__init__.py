"""
This package contains helpful mixin classes to provide basic functionality throughout enginemath.
"""

from enginemath.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
