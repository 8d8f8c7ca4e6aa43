"""
This module provides the :class:`UserOptionConfigured` mixin, which configures a class from a :class:`.UserOptions`
dataclass and remembers that configuration so it can be restored later.

Example::

    from dataclasses import dataclass

    from enginemath.utilities.options import UserOptions
    from enginemath.utilities.mixin_classes import UserOptionConfigured

    @dataclass
    class ReportOptions(UserOptions):
        precision: int = 4

    class Report(UserOptionConfigured[ReportOptions], ReportOptions):
        def __init__(self, options: ReportOptions | None = None):
            super().__init__(ReportOptions, options=options)

    report = Report()
    report.precision = 8
    report.reset_settings()
    print(report.precision)  # 4

.. Note::
    :class:`UserOptionConfigured` must come before the options dataclass in the bases so that its ``__init__`` runs
    first and the dataclass ``__init__`` is reached through ``super()``.
"""

import logging

from copy import deepcopy

from typing import Generic, TypeVar

from enginemath.utilities.options import UserOptions


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting configuration changes.
"""

OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for the options dataclass a class is configured with
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class that applies a :class:`.UserOptions` dataclass to an instance and can restore it afterwards.

    The options given at initialization (or a default instance of ``options_type``) are applied as attributes of the
    instance and a deep copy is kept in :attr:`original_options`, so later changes to either the instance or the
    options object that was passed in do not affect :meth:`reset_settings`.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.  If ``None`` the defaults are used.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._options_type: type[OptionsT] = options_type

        self._original_options: OptionsT = deepcopy(options)
        """
        Snapshot of the configuration this instance was initialized with
        """

    @property
    def original_options(self) -> OptionsT:
        """
        A copy of the options this instance was initialized with.
        """

        return deepcopy(self._original_options)

    def current_options(self) -> OptionsT:
        """
        Builds an options instance from the current attribute values of this instance.

        :return: a new instance of the options type holding the current settings
        """

        return self._options_type(**{key: deepcopy(getattr(self, key))
                                     for key in self._options_type.__dataclass_fields__})

    def reset_settings(self) -> None:
        """
        Resets the instance to the options it was initialized with.
        """

        _LOGGER.debug('Resetting %s to its original options', type(self).__name__)

        # apply a copy so mutable option values are never shared with the snapshot
        deepcopy(self._original_options).apply_options(self)
