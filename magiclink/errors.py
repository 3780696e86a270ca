"""Error kinds raised by the token engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Externally observable failure category."""

    CONFIGURATION = "CONFIGURATION"
    INVALID_TOKEN = "INVALID_TOKEN"
    RANDOMNESS = "RANDOMNESS"


class TokenError(Exception):
    """Base class for every error surfaced to callers of the engine."""

    kind: ErrorKind
    default_message = "token error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(TokenError):
    """Key material or settings are unusable; the engine cannot be built."""

    kind = ErrorKind.CONFIGURATION
    default_message = "invalid token engine configuration"


class InvalidToken(TokenError):
    """Token expired, malformed, forged or otherwise not acceptable."""

    kind = ErrorKind.INVALID_TOKEN
    default_message = "token expired, not found or invalid"

    def __init__(self, *args: object) -> None:
        # One message for every cause; args only arrive from copy and pickle.
        super().__init__()


class RandomnessFailure(TokenError):
    """The secure random source could not supply bytes."""

    kind = ErrorKind.RANDOMNESS
    default_message = "failed to read from the secure random source"


class MalformedPayload(ValueError):
    """Decoded bytes are not a valid serialized payload."""


class InvalidInput(ValueError):
    """Cipher input too short or otherwise undecryptable."""


__all__ = [
    "ErrorKind",
    "TokenError",
    "ConfigurationError",
    "InvalidToken",
    "RandomnessFailure",
    "MalformedPayload",
    "InvalidInput",
]
