"""Exceptions raised by the functional core.

Only programming/validation errors are exceptions. Routine outcomes such as
insufficient funds or an unknown account are returned as plain values.
"""


class PfmError(ValueError):
    """Base class for pfm validation errors."""


class InvalidAmountError(PfmError):
    """Raised when a monetary amount must be positive but is not."""


class InvalidArgumentError(PfmError):
    """Raised when a non-amount argument is out of range."""


class ConfigError(PfmError):
    """Raised when the config file holds an unusable value."""
