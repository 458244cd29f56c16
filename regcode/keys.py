"""
regcode.keys
------------
Key pair files. Each key is stored as a single line of hex text; the codec
only ever sees the decoded bytes.
"""

from __future__ import annotations
from pathlib import Path
from typing import Tuple, Union
import binascii, os
from .crypto import x25519_generate, key_fingerprint
from .errors import InvalidKeyMaterial
from .logger import get_logger
from .utils import hexe, hexd

PathLike = Union[str, Path]

log = get_logger("regcode.keys")


def generate_keypair() -> Tuple[bytes, bytes]:
    return x25519_generate()

def write_keypair(out_dir: PathLike = ".", private_name: str = "private.key",
                  public_name: str = "public.key") -> Tuple[Path, Path]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    sk, pk = generate_keypair()

    private_path = out / private_name
    public_path = out / public_name
    # owner-only from creation, also when an existing file is truncated
    fd = os.open(private_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w") as f:
        f.write(hexe(sk))
    public_path.write_text(hexe(pk))
    log.info(f"wrote key pair {key_fingerprint(pk)} to {out}")
    return private_path, public_path

def load_key(path: PathLike) -> bytes:
    text = Path(path).read_text().strip()
    try:
        return hexd(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidKeyMaterial(f"key file {path} is not valid hex: {e}") from e
