"""Environment driven settings for the token engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Mapping, Optional

from .errors import ConfigurationError
from .token.keys import check_cipher_key, check_mac_key, decode_key

DEFAULT_VALIDITY = timedelta(minutes=20)

ENV_MAC_KEY = "MAGICLINK_MAC_KEY"
ENV_CIPHER_KEY = "MAGICLINK_CIPHER_KEY"
ENV_DEFAULT_VALIDITY = "MAGICLINK_DEFAULT_VALIDITY_SECONDS"


@dataclass(frozen=True)
class EngineSettings:
    """Keys and default token lifetime."""

    mac_key: bytes = field(repr=False)
    cipher_key: Optional[bytes] = field(default=None, repr=False)
    default_validity: timedelta = DEFAULT_VALIDITY

    def __post_init__(self) -> None:
        check_mac_key(self.mac_key)
        if self.cipher_key is not None:
            check_cipher_key(self.cipher_key)
        if self.default_validity <= timedelta(0):
            raise ConfigurationError("default validity must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        """Read base64 keys and the default validity from the environment."""
        env = os.environ if environ is None else environ

        mac_key_b64 = env.get(ENV_MAC_KEY)
        if not mac_key_b64:
            raise ConfigurationError(f"{ENV_MAC_KEY} is not set")
        cipher_key_b64 = env.get(ENV_CIPHER_KEY)

        validity = DEFAULT_VALIDITY
        raw_validity = env.get(ENV_DEFAULT_VALIDITY)
        if raw_validity:
            try:
                validity = timedelta(seconds=int(raw_validity))
            except (ValueError, OverflowError) as exc:
                raise ConfigurationError(f"{ENV_DEFAULT_VALIDITY} must be an integer") from exc

        return cls(
            mac_key=decode_key(mac_key_b64),
            cipher_key=decode_key(cipher_key_b64) if cipher_key_b64 else None,
            default_validity=validity,
        )
