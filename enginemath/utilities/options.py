from dataclasses import dataclass

from typing import Dict, Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    Base class for the dataclasses that hold the user configurable settings of a class.

    Each configurable class ``Name`` gets a companion dataclass ``NameOptions`` deriving from this class whose fields
    are the settings and their defaults.  An instance of the options is passed to ``Name`` through its ``options``
    keyword argument and copied onto the instance with :meth:`apply_options`.  For instance
    :class:`.ShowcaseOptions` configures :class:`.KernelShowcase`.

    For example::

        >>> @dataclass
        ... class ReportOptions(UserOptions):
        ...     precision: int = 4
        >>> class Report:
        ...     def __init__(self, options=None):
        ...         (options or ReportOptions()).apply_options(self)
        >>> Report(ReportOptions(precision=2)).precision
        2

    Most classes get this behavior through the :class:`.UserOptionConfigured` mixin instead of calling
    :meth:`apply_options` directly.
    """

    def override_options(self):
        """
        Hook for subclasses that need to adjust dependent settings before the options are applied.

        It is called every time :attr:`options_dict` is built.  The default does nothing.
        """

    def apply_options(self, target: object) -> None:
        """
        Sets every option as an attribute of the target.

        :param target: the instance to configure
        """

        for key, value in self.options_dict.items():
            setattr(target, key, value)

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        The dataclass fields of these options mapped to their current values.

        Only declared fields are included, so helper attributes and methods never leak onto the configured instance.
        """

        self.override_options()
        return {key: getattr(self, key) for key in self.__dataclass_fields__}
