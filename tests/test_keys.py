import os
import stat

import pytest

from regcode.crypto import public_from_private
from regcode.errors import InvalidKeyMaterial
from regcode.keys import generate_keypair, write_keypair, load_key


def test_generate_keypair():
    priv, pub = generate_keypair()
    assert len(priv) == 32 and len(pub) == 32
    assert public_from_private(priv) == pub


def test_write_and_load_keypair(tmp_path):
    private_path, public_path = write_keypair(tmp_path / "keys")
    assert private_path.name == "private.key"
    assert public_path.name == "public.key"

    priv = load_key(private_path)
    pub = load_key(public_path)
    assert public_from_private(priv) == pub
    # stored as hex text
    assert bytes.fromhex(public_path.read_text()) == pub


def test_private_key_file_mode(tmp_path):
    private_path, _ = write_keypair(tmp_path)
    if os.name == "posix":
        assert stat.S_IMODE(private_path.stat().st_mode) == 0o600


def test_load_key_strips_whitespace(tmp_path):
    p = tmp_path / "k.key"
    p.write_text("00ff10\n")
    assert load_key(p) == b"\x00\xff\x10"


def test_load_key_bad_hex(tmp_path):
    p = tmp_path / "k.key"
    p.write_text("not hex")
    with pytest.raises(InvalidKeyMaterial):
        load_key(p)


def test_load_key_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_key(tmp_path / "missing.key")


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_overwritten_private_key_is_owner_only(tmp_path):
    existing = tmp_path / "private.key"
    existing.write_text("old")
    existing.chmod(0o644)

    private_path, _ = write_keypair(tmp_path)
    assert stat.S_IMODE(private_path.stat().st_mode) == 0o600
    assert len(load_key(private_path)) == 32
