"""AES counter-mode confidentiality layer."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher as _AESContext
from cryptography.hazmat.primitives.ciphers import algorithms, modes

from ..errors import ConfigurationError, InvalidInput
from .keys import check_cipher_key, random_bytes
from .types import Cipher

IV_SIZE = 16


class AESCTRCipher(Cipher):
    """AES-128 or AES-256 in CTR mode with a random IV prepended to the output."""

    def __init__(self, key: bytes) -> None:
        key = check_cipher_key(key)
        try:
            self._algorithm = algorithms.AES(key)
        except ValueError as exc:
            raise ConfigurationError("cipher key cannot be loaded") from exc

    @property
    def key_size(self) -> int:
        """Key size in bits."""
        return self._algorithm.key_size

    def encrypt(self, plaintext: bytes) -> bytes:
        iv = random_bytes(IV_SIZE)
        return iv + self._apply(iv, plaintext)

    def decrypt(self, wrapped: bytes) -> bytes:
        if len(wrapped) <= IV_SIZE:
            raise InvalidInput("ciphertext shorter than IV plus one byte")
        iv, body = wrapped[:IV_SIZE], wrapped[IV_SIZE:]
        return self._apply(iv, body)

    def _apply(self, iv: bytes, data: bytes) -> bytes:
        # CTR is symmetric: the same keystream encrypts and decrypts.
        context = _AESContext(self._algorithm, modes.CTR(iv)).encryptor()
        return context.update(data) + context.finalize()
