"""Magic link token engine: encode, encrypt, sign and the reverse."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from ..errors import InvalidInput, InvalidToken, MalformedPayload
from ..utils.time import Instant, timestamp, to_unix, utc_now
from .cipher import AESCTRCipher
from .codec import PayloadCodec
from .keys import decode_key
from .signer import HMACSigner
from .types import Cipher, Payload, Signer, TokenGenerator

if TYPE_CHECKING:
    from ..config import EngineSettings

logger = logging.getLogger(__name__)


class TokenEngine(TokenGenerator):
    """Issue and validate signed, optionally encrypted, expiring tokens.

    Generation serializes the payload, encrypts it when a cipher is set and
    signs the result. Validation checks the signature first and only then
    decrypts, decodes and checks the expiration. Every rejection raises the
    same ``InvalidToken``.

    The engine holds no mutable state and may be shared between threads.
    """

    def __init__(
        self,
        signer: Signer,
        cipher: Optional[Cipher] = None,
        *,
        codec: Optional[PayloadCodec] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._signer = signer
        self._cipher = cipher
        self._codec = codec or PayloadCodec()
        self._clock = clock

    @classmethod
    def from_keys(
        cls,
        mac_key: bytes,
        cipher_key: Optional[bytes] = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> "TokenEngine":
        """HMAC-SHA256 signing with a 32 or 64 byte ``mac_key``.

        With a 16 or 32 byte ``cipher_key`` payloads are also encrypted with
        AES-128 or AES-256 in CTR mode.
        """
        signer = HMACSigner(mac_key)
        cipher = AESCTRCipher(cipher_key) if cipher_key is not None else None
        return cls(signer, cipher, clock=clock)

    @classmethod
    def from_b64(cls, mac_key_b64: str, cipher_key_b64: Optional[str] = None) -> "TokenEngine":
        """Same as ``from_keys`` with base64 encoded keys."""
        cipher_key = decode_key(cipher_key_b64) if cipher_key_b64 is not None else None
        return cls.from_keys(decode_key(mac_key_b64), cipher_key)

    @classmethod
    def from_settings(cls, settings: "EngineSettings") -> "TokenEngine":
        return cls.from_keys(settings.mac_key, settings.cipher_key)

    @property
    def encrypted(self) -> bool:
        """True when tokens are encrypted as well as signed."""
        return self._cipher is not None

    def generate(self, email: str, expiration: Instant) -> str:
        if not isinstance(email, str):
            raise TypeError("email must be a string")
        content = self._codec.encode(Payload(email=email, expiration=to_unix(expiration)))
        if self._cipher is not None:
            content = self._cipher.encrypt(content)
        return self._signer.sign(content)

    def validate(self, token: str) -> str:
        try:
            content = self._signer.unsign(token)
        except InvalidToken:
            logger.debug("token rejected at stage=signature")
            raise

        if self._cipher is not None:
            try:
                content = self._cipher.decrypt(content)
            except InvalidInput:
                logger.debug("token rejected at stage=decrypt")
                raise InvalidToken() from None

        try:
            payload = self._codec.decode(content)
        except MalformedPayload:
            logger.debug("token rejected at stage=decode")
            raise InvalidToken() from None

        if payload.expiration <= timestamp(self._clock()):
            logger.debug("token rejected at stage=expired")
            raise InvalidToken()
        return payload.email
