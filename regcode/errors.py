from __future__ import annotations


class RegCodeError(Exception):
    pass


class MalformedCredential(RegCodeError):
    """Structural decoding failure: base64, hex, UTF-8, separator or timestamp."""


class DecryptionFailed(RegCodeError):
    """The cipher rejected the ciphertext, or it was sealed for another key."""


class InvalidKeyMaterial(RegCodeError):
    """Key bytes the cipher (or the key file decoder) cannot use."""
