"""Error taxonomy shared by every layer.

Core operations raise these; only the CLI entry point turns them into
process exit codes.
"""
from __future__ import annotations

from typing import Iterable, Optional


class StatClockError(Exception):
    """Base class for every failure raised by statclock."""


class ConfigurationError(StatClockError):
    """Missing or malformed configuration (credential, nickname, timeout)."""


class ParameterValidationError(StatClockError):
    """A required resource parameter was empty; no request was sent."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        names = self.missing
        if len(names) == 1:
            text = f"{names[0]} is required"
        elif len(names) == 2:
            text = f"{names[0]} and {names[1]} are required"
        else:
            text = f"{', '.join(names[:-1])}, and {names[-1]} are required"
        super().__init__(text)


class TransportError(StatClockError):
    """Network failure or timeout while talking to the remote service."""


class APIError(StatClockError):
    """Non-2xx response from the remote service."""

    def __init__(self, message: str, status_code: int, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class DecodeError(StatClockError):
    """Response body does not match the expected shape."""


class DomainInvariantError(StatClockError):
    """Decoded data violates an invariant (empty player_id, future timestamp, ...)."""


class PersistenceError(StatClockError):
    """Local player store failure."""
