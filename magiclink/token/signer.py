"""HMAC-SHA256 integrity layer."""

from __future__ import annotations

import hmac
from hashlib import sha256

from ..errors import InvalidToken
from ..utils.encoding import b64decode, b64encode
from .keys import check_mac_key
from .types import Signer

SEPARATOR = "#"


class HMACSigner(Signer):
    """Sign bytes as ``b64(b64(data) + "#" + b64(hmac))``.

    The MAC covers the UTF-8 bytes of the inner base64 text, so the signature
    is checked before anything inside the token is interpreted.
    """

    def __init__(self, key: bytes) -> None:
        self._key = check_mac_key(key)

    def sign(self, data: bytes) -> str:
        inner = b64encode(data)
        mac = self._mac(inner.encode("utf-8"))
        return b64encode(f"{inner}{SEPARATOR}{b64encode(mac)}".encode("ascii"))

    def unsign(self, token: str) -> bytes:
        if not isinstance(token, str):
            raise InvalidToken()
        try:
            decoded = b64decode(token)
        except ValueError:
            raise InvalidToken() from None

        components = decoded.split(SEPARATOR.encode("ascii"))
        if len(components) != 2:
            raise InvalidToken()
        inner, mac_b64 = components

        try:
            mac = b64decode(mac_b64)
        except ValueError:
            raise InvalidToken() from None
        if not hmac.compare_digest(mac, self._mac(inner)):
            raise InvalidToken()

        try:
            return b64decode(inner)
        except ValueError:
            raise InvalidToken() from None

    def _mac(self, message: bytes) -> bytes:
        return hmac.new(self._key, message, sha256).digest()
