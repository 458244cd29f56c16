"""
regcode.codec
-------------
Registration codes: an email and an expiry instant sealed with the issuer's
public key.

Wire layering (must not be simplified, existing codes depend on it):

    plaintext  = "<email>|<RFC 3339 expiry with offset>"
    ciphertext = crypto.encrypt(plaintext, public_key)
    code       = base64( hex(ciphertext) )

Decoding is the exact inverse. The codec does not enforce expiry; callers
compare ``expires_at`` against the current time (see ``is_expired``).

The ``|`` separator is not escaped. An email containing ``|`` is accepted at
issue time. Decoding splits on the first ``|`` only, so the remainder still
holds the real separator and never parses as a timestamp: such codes are
always rejected with MalformedCredential.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import NamedTuple, Optional
import binascii
from . import crypto
from .errors import MalformedCredential
from .logger import get_logger
from .utils import b64e, b64d, hexe, hexd, now_utc, to_rfc3339, parse_rfc3339

SEPARATOR = "|"

log = get_logger("regcode.codec")


class DecodedCode(NamedTuple):
    email: str
    expires_at: datetime


def generate_code(email: str, days: int, public_key: bytes, now: Optional[datetime] = None) -> str:
    """
    Issue a registration code for ``email`` valid for ``days`` days.

    ``days`` may be zero or negative; a negative value yields a code that is
    already expired. ``now`` overrides the clock read (aware datetime).
    """
    issued_at = now or now_utc()
    try:
        expire_time = issued_at + timedelta(days=days)
    except OverflowError as e:
        raise ValueError(f"days out of range: {days}") from e

    data = f"{email}{SEPARATOR}{to_rfc3339(expire_time)}"
    encrypted = crypto.encrypt(data.encode("utf-8"), public_key)

    code = b64e(hexe(encrypted).encode("ascii"))
    log.debug(f"issued code for {email} expiring {to_rfc3339(expire_time)} "
              f"(key {crypto.key_fingerprint(public_key)})")
    return code


def decode_code(code: str, private_key: bytes) -> DecodedCode:
    """
    Open a registration code. Raises MalformedCredential for any structural
    problem and DecryptionFailed when the cipher rejects the payload.
    """
    try:
        encrypted_hex = b64d(code)
    except (binascii.Error, ValueError) as e:
        raise MalformedCredential(f"invalid base64: {e}") from e
    if b64e(encrypted_hex) != code:
        raise MalformedCredential("non-canonical base64 encoding")

    try:
        hex_text = encrypted_hex.decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedCredential("decoded base64 is not ASCII text") from e

    try:
        encrypted = hexd(hex_text)
    except (binascii.Error, ValueError) as e:
        raise MalformedCredential(f"invalid hex: {e}") from e

    decrypted = crypto.decrypt(encrypted, private_key)

    try:
        data = decrypted.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedCredential("decrypted payload is not valid UTF-8") from e

    email, sep, expire_str = data.partition(SEPARATOR)
    if not sep:
        raise MalformedCredential("missing separator in payload")

    try:
        expire_time = parse_rfc3339(expire_str)
    except ValueError as e:
        raise MalformedCredential(f"invalid expire time format: {expire_str!r}") from e

    log.debug(f"decoded code for {email} expiring {to_rfc3339(expire_time)}")
    return DecodedCode(email, expire_time)


def is_expired(expires_at: datetime, now: Optional[datetime] = None) -> bool:
    return expires_at <= (now or now_utc())
