"""Rolling substitution cipher used to obscure file contents.

Each byte is shifted by one byte of a five byte key, cycling through the key
by position. This is an obfuscation layer only; it offers no confidentiality
against anyone who looks closely.
"""

from __future__ import annotations

from .errors import InvalidKeyError

KEY_LENGTH = 5


def _key_bytes(key: str | bytes) -> bytes:
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(raw) < KEY_LENGTH:
        raise InvalidKeyError(f"Invalid key: at least {KEY_LENGTH} bytes are required")
    return raw[:KEY_LENGTH]


class RollingCipher:
    """Byte-wise rolling cipher keyed by the first five bytes of a key."""

    def __init__(self, key: str | bytes):
        self._key = _key_bytes(key)

    def encode(self, data: bytes) -> bytes:
        key = self._key
        return bytes((byte + key[i % KEY_LENGTH]) % 256 for i, byte in enumerate(data))

    def decode(self, data: bytes) -> bytes:
        key = self._key
        return bytes((byte - key[i % KEY_LENGTH]) % 256 for i, byte in enumerate(data))

    def encode_text(self, text: str) -> bytes:
        """Encode UTF-8 text into cipher bytes."""
        return self.encode(text.encode("utf-8"))

    def try_decode_text(self, data: bytes) -> str | None:
        """Decode data and return it as text, or None when it is not valid UTF-8.

        Any byte string decodes to *something*; only a valid UTF-8 result is
        taken as evidence that the data was produced by this cipher.
        """
        try:
            return self.decode(data).decode("utf-8")
        except UnicodeDecodeError:
            return None
