from __future__ import annotations


class BusinessTimeError(Exception):
    """Base class for every error raised by businesstime."""


class IterationLimitExceeded(BusinessTimeError):
    """A bounded search used up the configured iteration limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Iteration limit of {limit} reached.")
        self.limit = limit


class InvalidConfiguration(BusinessTimeError, ValueError):
    """Rejected configuration value (precision, limits, constraints)."""


class DegenerateRange(BusinessTimeError, ValueError):
    """A range whose end lies before its start."""
