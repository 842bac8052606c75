"""
Exception hierarchy for the fatigue damage core.

Every error raised by the core derives from FatigueError, which is itself a
ValueError, so callers can catch either the specific class or the builtin.
"""


class FatigueError(ValueError):
    """Base class for all fatigue analysis errors."""


class InvalidInputError(FatigueError):
    """Raised when a stress-time history is too short to analyse."""


class UnsupportedStressTypeError(FatigueError):
    """Raised when the S-N curve stress type is neither direct nor shear."""


class DomainError(FatigueError):
    """Raised for values outside the domain of the curve or configuration
    (negative stress range, non-positive detail category, negative factors)."""
