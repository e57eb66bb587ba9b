"""Exception types for Q16.16 fixed-point arithmetic."""

from __future__ import annotations


class FixptError(ValueError):
    """Base class for fixed-point domain violations."""


class FixptOverflowError(FixptError):
    """Raised when an operand or result leaves the signed 64-bit range."""


class FixptDomainError(FixptError):
    """Raised for inputs with no defined result (e.g. division by zero)."""
