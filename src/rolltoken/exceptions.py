"""
RollToken Exceptions

Only two things can go wrong with the rolling token primitive:
- The manager was configured with values it cannot work with
- The system clock could not be read

An invalid, expired or malformed token is never an exception. Validation
returns False so callers cannot tell the rejection reasons apart.
"""


class RollTokenError(Exception):
    """Base class for all RollToken errors."""


class ConfigurationError(RollTokenError, ValueError):
    """
    Raised at construction time when the secret, interval or tolerance
    is unusable. Never raised by generate or validate operations.
    """


class ClockUnavailable(RollTokenError, RuntimeError):
    """
    Raised when the current time cannot be determined.

    This is an environment failure, not a validation outcome, and must
    not be turned into a rejected token.
    """
