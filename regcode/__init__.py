"""
regcode
=======
Time-limited registration codes bound to an email address.

Provides:
- Code issue/decode sealed with X25519 + HKDF + AES-GCM (regcode.codec)
- Salted password digests and random strings (regcode.passwords)
- Hex key files and a click command line shell (regcode.keys, regcode.cli)
"""

__version__ = "0.1.0"
