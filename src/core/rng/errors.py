"""Exception types for the generator engine."""

from __future__ import annotations


class RngError(ValueError):
    """Base class for generator input violations."""


class SeedDomainError(RngError):
    """Raised when a seed is not an unsigned 64-bit integer."""


class RangeDomainError(RngError):
    """Raised when a ranged draw is requested over an empty or oversized range."""


class UnknownStreamError(RngError):
    """Raised when a stream index names no generator stream."""
