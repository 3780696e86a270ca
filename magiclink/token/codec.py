"""Versioned payload serialization."""

from __future__ import annotations

import json

from ..errors import MalformedPayload
from .types import Payload

FORMAT_VERSION = 1
_VERSION_PREFIX = bytes([FORMAT_VERSION])
_FIELDS = {"e", "t"}


class PayloadCodec:
    """Serialize ``Payload`` as a version byte followed by canonical JSON."""

    def encode(self, payload: Payload) -> bytes:
        body = json.dumps(
            {"e": payload.email, "t": payload.expiration},
            sort_keys=True,
            separators=(",", ":"),
        )
        return _VERSION_PREFIX + body.encode("utf-8")

    def decode(self, data: bytes) -> Payload:
        if not data or data[:1] != _VERSION_PREFIX:
            raise MalformedPayload("unknown payload format")
        try:
            decoded = json.loads(data[1:].decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise MalformedPayload("payload is not valid JSON") from exc

        if not isinstance(decoded, dict) or set(decoded) != _FIELDS:
            raise MalformedPayload("unexpected payload fields")
        email, expiration = decoded["e"], decoded["t"]
        # bool is an int subclass
        if not isinstance(email, str) or isinstance(expiration, bool) or not isinstance(expiration, int):
            raise MalformedPayload("unexpected payload field types")
        return Payload(email=email, expiration=expiration)
