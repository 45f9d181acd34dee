"""Domain errors raised by coordinate construction and distance computation."""

from __future__ import annotations


class CoordinateOutOfRangeError(ValueError):
    """Raised when a coordinate field falls outside its allowed bounds."""

    def __init__(self, field: str, value: float, lower: float, upper: float | None = None):
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        if upper is None:
            message = f"{field} must be at least {lower:g} (got {value!r})"
        else:
            message = f"{field} must be in range of {lower:g} to {upper:g} (got {value!r})"
        super().__init__(message)


class UnknownPositionError(ValueError):
    """Raised when a distance is requested for a coordinate without a 2D position."""


class VincentyConvergenceError(ArithmeticError):
    """Raised when Vincenty's iteration does not settle within the iteration cap."""

    def __init__(self, iterations: int, last_delta: float):
        self.iterations = iterations
        self.last_delta = last_delta
        super().__init__(
            f"Vincenty formula did not converge after {iterations} iterations "
            f"(last lambda change {last_delta:.3e})"
        )
