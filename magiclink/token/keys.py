"""Key material helpers.

Keys should be crypto strong random bytes. To create a 32 byte key encoded
as base64 from a shell::

    head -c 32 /dev/urandom | base64
"""

from __future__ import annotations

import base64
import binascii
import secrets

from ..errors import ConfigurationError, RandomnessFailure

MAC_KEY_SIZES = (32, 64)
CIPHER_KEY_SIZES = (16, 32)


def random_bytes(length: int) -> bytes:
    """Read ``length`` bytes from the OS CSPRNG or raise ``RandomnessFailure``."""
    try:
        return secrets.token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessFailure() from exc


def generate_random_key(length: int = 32) -> bytes:
    """Generate fresh key material of ``length`` bytes."""
    if length <= 0:
        raise ValueError("key length must be positive")
    return random_bytes(length)


def decode_key(b64_key: str) -> bytes:
    """Decode a standard base64 key string.

    Whitespace is dropped first, so wrapped `base64` output is accepted.
    """
    if not isinstance(b64_key, str):
        raise ConfigurationError("key must be a base64 string")
    try:
        return base64.b64decode("".join(b64_key.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError("key is not valid base64") from exc


def check_mac_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise ConfigurationError("mac key must be bytes")
    if len(key) not in MAC_KEY_SIZES:
        raise ConfigurationError("mac key size must be 32 or 64 bytes")
    return bytes(key)


def check_cipher_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise ConfigurationError("cipher key must be bytes")
    if len(key) not in CIPHER_KEY_SIZES:
        raise ConfigurationError("cipher key size must be 16 bytes for AES-128 or 32 bytes for AES-256")
    return bytes(key)
