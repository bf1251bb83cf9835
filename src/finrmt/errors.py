"""Exception types raised by :mod:`finrmt`."""

from __future__ import annotations

__all__ = ["FinRMTError", "InvalidInputError", "NumericInstabilityError"]


class FinRMTError(Exception):
    """Base class for every error raised by the filtering pipeline."""


class InvalidInputError(FinRMTError, ValueError):
    """Raised when the correlation matrix or observation count is malformed.

    Detected before any spectral computation takes place.
    """


class NumericInstabilityError(FinRMTError, ArithmeticError):
    """Raised when the eigensolver fails or produces non-finite values."""
