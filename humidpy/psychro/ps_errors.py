"""
Exceptions raised by psychrometric calculations.
"""

from typing import Optional, Sequence


class PsychroError(Exception):
    """Base class for psychrometric calculation errors."""


class DomainError(PsychroError, ValueError):
    """Raised when an input lies outside the valid range of a correlation."""

    def __init__(self, message: str, values: Optional[Sequence[float]] = None,
                 lower: Optional[float] = None, upper: Optional[float] = None):
        super().__init__(message)
        self.values = list(values) if values is not None else []
        self.lower = lower
        self.upper = upper


class ConvergenceError(PsychroError, RuntimeError):
    """Raised when the root finder cannot locate a root in its bracket."""

    def __init__(self, message: str, lower: Optional[float] = None,
                 upper: Optional[float] = None, iterations: int = 0):
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.iterations = iterations
