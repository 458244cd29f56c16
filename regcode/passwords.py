"""
regcode.passwords
-----------------
Salted password digests for callers that store credentials next to their
registration codes. Independent of the codec and of any key material.

The caller owns the salt: generate one with ``new_salt`` (or ``random_string``),
store it beside the digest and pass both back to ``verify_password``.
"""

from __future__ import annotations
import hashlib, secrets, string
from cryptography.hazmat.primitives import constant_time
from .utils import b64e

ALPHABET = string.ascii_letters + string.digits
DEFAULT_SALT_LENGTH = 16


def hash_password(password: str, salt: str) -> str:
    digest = hashlib.sha256((password + salt).encode("utf-8")).digest()
    return b64e(digest)

def verify_password(password: str, salt: str, stored_digest: str) -> bool:
    candidate = hash_password(password, salt).encode("utf-8")
    return constant_time.bytes_eq(candidate, stored_digest.encode("utf-8"))

def random_string(length: int) -> str:
    """Uniform draw over [A-Za-z0-9] from the OS CSPRNG."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))

def new_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    return random_string(length)
