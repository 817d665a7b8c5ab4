"""Exceptions raised by the i18n system.

Data problems (missing keys, bad locale files, unknown tags) are absorbed
at the lookup or loading boundary and never raised. The only error is a
startup-ordering bug.
"""


class LocalizationError(Exception):
    """Base class for i18n errors."""


class LocalizationAlreadyInitializedError(LocalizationError, RuntimeError):
    """Raised when the process-wide localization service is initialized twice."""
