"""
regcode.crypto
--------------
Asymmetric cipher used to seal registration codes.

X25519 + HKDF-SHA256 + AES-GCM, ECIES style: every message gets a fresh
ephemeral key pair, and the ciphertext is laid out as

    ephemeral_pub (32) || nonce (12) || AES-GCM ciphertext + tag (16)

Only the holder of the recipient's private key can open it. Failures are
raised as typed errors from regcode.errors rather than returned as garbage.
"""

from __future__ import annotations
from typing import Tuple
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.asymmetric import x25519
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import binascii, os
from .errors import DecryptionFailed, InvalidKeyMaterial, MalformedCredential
from .utils import hexe, hexd, sha256

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
HKDF_INFO = b"regcode-v1"

# --------- X25519 keys ----------
def x25519_generate() -> Tuple[bytes, bytes]:
    sk = x25519.X25519PrivateKey.generate()
    pk = sk.public_key()
    return sk.private_bytes_raw(), pk.public_bytes_raw()

def public_from_private(priv_raw: bytes) -> bytes:
    return _load_private(priv_raw).public_key().public_bytes_raw()

def key_fingerprint(pub_raw: bytes) -> str:
    # short, log-safe identifier for a public key
    return sha256(pub_raw)[:16]

def _load_private(priv_raw: bytes) -> x25519.X25519PrivateKey:
    try:
        return x25519.X25519PrivateKey.from_private_bytes(priv_raw)
    except (ValueError, TypeError) as e:
        raise InvalidKeyMaterial(f"invalid X25519 private key: {e}") from e

def _load_public(pub_raw: bytes) -> x25519.X25519PublicKey:
    try:
        return x25519.X25519PublicKey.from_public_bytes(pub_raw)
    except (ValueError, TypeError) as e:
        raise InvalidKeyMaterial(f"invalid X25519 public key: {e}") from e

def _derive_key(shared: bytes, eph_pub: bytes) -> bytes:
    hkdf = HKDF(algorithm=hashes.SHA256(), length=KEY_SIZE, salt=eph_pub, info=HKDF_INFO)
    return hkdf.derive(shared)  # 256-bit AEAD key

# --------- encrypt / decrypt ----------
def encrypt(plaintext: bytes, pub_raw: bytes) -> bytes:
    recipient = _load_public(pub_raw)
    eph = x25519.X25519PrivateKey.generate()
    eph_pub = eph.public_key().public_bytes_raw()
    try:
        shared = eph.exchange(recipient)
    except ValueError as e:
        # low-order point: the exchange yields an all-zero secret
        raise InvalidKeyMaterial(f"unusable X25519 public key: {e}") from e

    nonce = os.urandom(NONCE_SIZE)
    ct = AESGCM(_derive_key(shared, eph_pub)).encrypt(nonce, plaintext, None)
    return eph_pub + nonce + ct

def decrypt(ciphertext: bytes, priv_raw: bytes) -> bytes:
    sk = _load_private(priv_raw)
    if len(ciphertext) < KEY_SIZE + NONCE_SIZE + TAG_SIZE:
        raise DecryptionFailed(f"ciphertext too short ({len(ciphertext)} bytes)")

    eph_pub = ciphertext[:KEY_SIZE]
    nonce = ciphertext[KEY_SIZE:KEY_SIZE + NONCE_SIZE]
    body = ciphertext[KEY_SIZE + NONCE_SIZE:]
    try:
        shared = sk.exchange(x25519.X25519PublicKey.from_public_bytes(eph_pub))
    except ValueError as e:
        raise DecryptionFailed(f"invalid ephemeral key: {e}") from e
    try:
        return AESGCM(_derive_key(shared, eph_pub)).decrypt(nonce, body, None)
    except InvalidTag as e:
        raise DecryptionFailed("authentication failed (tampered data or wrong key)") from e

# --------- hex helpers (raw encrypt/decrypt commands) ----------
def encrypt_to_hex(text: str, pub_raw: bytes) -> str:
    return hexe(encrypt(text.encode("utf-8"), pub_raw))

def decrypt_from_hex(data_hex: str, priv_raw: bytes) -> str:
    try:
        ciphertext = hexd(data_hex.strip())
    except (binascii.Error, ValueError) as e:
        raise MalformedCredential(f"invalid hex: {e}") from e
    plaintext = decrypt(ciphertext, priv_raw)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedCredential("decrypted data is not valid UTF-8") from e
