"""
Keyless, reversible obfuscation of stored account secrets.

This is NOT encryption: anyone holding an obfuscated value can recover the plain
secret. It only keeps secrets from sitting in the data files as readable text.
"""

import base64
import binascii


class DecodeError(Exception):
    """Raised when a value is not something obfuscate() could have produced."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def obfuscate(secret: str) -> str:
    """Reverse the secret, then Base64-encode its UTF-8 bytes."""
    return base64.b64encode(secret[::-1].encode("utf-8")).decode("ascii")


def deobfuscate(cipher: str) -> str:
    """
    Inverse of obfuscate(). Deterministic: the same input always yields the same secret.
    Raises DecodeError on invalid Base64 or bytes that are not UTF-8.
    """
    try:
        raw = base64.b64decode(cipher.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise DecodeError("Obfuscated secret is not valid Base64", cause=e) from e
    try:
        reversed_secret = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Obfuscated secret does not decode to UTF-8 text", cause=e) from e
    return reversed_secret[::-1]
