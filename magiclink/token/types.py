"""Token datatypes and capability interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..utils.time import Instant


@dataclass(frozen=True)
class Payload:
    """Authenticated content of a token."""

    email: str
    expiration: int


class Signer(ABC):
    """Integrity layer: turns bytes into a signed token string and back."""

    @abstractmethod
    def sign(self, data: bytes) -> str:
        """Return a token string carrying ``data`` and its MAC."""

    @abstractmethod
    def unsign(self, token: str) -> bytes:
        """Verify ``token`` and return the bytes it carries.

        Raises ``InvalidToken`` when the token is malformed or the MAC does
        not match.
        """


class Cipher(ABC):
    """Optional confidentiality layer."""

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` under a fresh IV."""

    @abstractmethod
    def decrypt(self, wrapped: bytes) -> bytes:
        """Recover plaintext from ``encrypt`` output.

        Raises ``InvalidInput`` when ``wrapped`` cannot hold an IV and a body.
        """


class TokenGenerator(ABC):
    """Anything able to issue and validate magic link tokens."""

    @abstractmethod
    def generate(self, email: str, expiration: Instant) -> str:
        """Issue a token for ``email`` that expires at ``expiration``."""

    @abstractmethod
    def validate(self, token: str) -> str:
        """Return the email bound to ``token`` or raise ``InvalidToken``."""
