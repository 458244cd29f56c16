"""
regcode.utils
-------------
Small helpers shared by the codec and the shell: base64 and hex transforms,
UTC timestamps in RFC 3339 form, and digests for log fingerprints.
"""

from __future__ import annotations
import base64, binascii, hashlib, re
from datetime import datetime, timezone

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def b64d(s: str) -> bytes:
    # validate=True rejects characters outside the base64 alphabet
    return base64.b64decode(s.encode("ascii"), validate=True)

def hexe(b: bytes) -> str:
    return binascii.hexlify(b).decode("ascii")

def hexd(s: str) -> bytes:
    # unlike bytes.fromhex this does not skip whitespace
    return binascii.unhexlify(s)

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def to_rfc3339(dt: datetime) -> str:
    """Render an aware datetime in UTC with an explicit ``+00:00`` offset."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    return dt.astimezone(timezone.utc).isoformat()

def parse_rfc3339(s: str) -> datetime:
    """Parse an RFC 3339 timestamp that carries an offset and normalize to UTC."""
    m = _RFC3339.fullmatch(s)
    if m is None:
        raise ValueError(f"not an RFC 3339 timestamp with offset: {s!r}")
    date, time, frac, offset = m.groups()
    # fromisoformat takes at most microseconds; extra digits are truncated
    frac = "." + (frac + "000000")[:6] if frac else ""
    if offset in ("Z", "z"):
        offset = "+00:00"
    dt = datetime.fromisoformat(f"{date}T{time}{frac}{offset}")
    return dt.astimezone(timezone.utc)

def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
