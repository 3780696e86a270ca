"""magiclink package.

Signed, optionally encrypted, time-limited tokens for passwordless
("magic link") authentication.
"""

from .config import EngineSettings
from .errors import ConfigurationError, ErrorKind, InvalidToken, RandomnessFailure, TokenError
from .links import IssuedLink, MagicLinks
from .token import Payload, TokenEngine, TokenGenerator, generate_random_key

__all__ = [
    "TokenEngine",
    "TokenGenerator",
    "Payload",
    "EngineSettings",
    "MagicLinks",
    "IssuedLink",
    "generate_random_key",
    "ErrorKind",
    "TokenError",
    "ConfigurationError",
    "InvalidToken",
    "RandomnessFailure",
]
