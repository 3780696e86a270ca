"""Signed, optionally encrypted, expiring magic link tokens."""

from .cipher import AESCTRCipher
from .codec import PayloadCodec
from .engine import TokenEngine
from .keys import decode_key, generate_random_key
from .signer import HMACSigner
from .types import Cipher, Payload, Signer, TokenGenerator

__all__ = [
    "TokenEngine",
    "TokenGenerator",
    "Payload",
    "PayloadCodec",
    "Signer",
    "HMACSigner",
    "Cipher",
    "AESCTRCipher",
    "generate_random_key",
    "decode_key",
]
