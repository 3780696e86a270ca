"""Strict URL-safe base64 helpers."""

from __future__ import annotations

import base64
import binascii


def b64encode(data: bytes) -> str:
    """Encode bytes as padded URL-safe base64 text."""
    return base64.urlsafe_b64encode(data).decode("ascii")


def b64decode(text: str | bytes) -> bytes:
    """Decode padded URL-safe base64, accepting only the canonical encoding.

    Raises ``ValueError`` for anything ``b64encode`` could not have produced:
    foreign characters, missing padding or non-zero trailing bits.
    """
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ValueError("non-ascii base64 input") from exc
    else:
        raw = bytes(text)
    try:
        decoded = base64.urlsafe_b64decode(raw)
    except binascii.Error as exc:
        raise ValueError("invalid base64 input") from exc
    if base64.urlsafe_b64encode(decoded) != raw:
        raise ValueError("non-canonical base64 input")
    return decoded
