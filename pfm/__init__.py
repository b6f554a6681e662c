"""pfm - Personal Finance Manager."""

__version__ = "0.1.0"
