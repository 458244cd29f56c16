import base64
import string

import pytest

from regcode.passwords import hash_password, verify_password, random_string, new_salt


def test_hash_verify():
    digest = hash_password("hunter2", "NaCl")
    assert verify_password("hunter2", "NaCl", digest)


def test_known_digest():
    # sha256("password" + "salt")
    assert hash_password("password", "salt") == "eje4XIkY6sGakInA+loqtNzj+QUo3N7sEIsj3fNge5k="


def test_digest_is_base64_sha256():
    raw = base64.b64decode(hash_password("pw", "s"))
    assert len(raw) == 32


@pytest.mark.parametrize("password,other", [("a", "b"), ("hunter2", "hunter3"), ("", " ")])
def test_wrong_password(password, other):
    digest = hash_password(password, "salt")
    assert not verify_password(other, "salt", digest)


def test_salt_changes_digest():
    assert hash_password("pw", "salt-a") != hash_password("pw", "salt-b")
    assert not verify_password("pw", "salt-b", hash_password("pw", "salt-a"))


def test_empty_and_unicode_inputs():
    for pw, salt in [("", ""), ("pässwörd", "sälz"), ("密码", "")]:
        assert verify_password(pw, salt, hash_password(pw, salt))


def test_malformed_stored_digest_does_not_match():
    assert not verify_password("pw", "salt", "")
    assert not verify_password("pw", "salt", "not-a-digest")


def test_random_string():
    s = random_string(64)
    assert len(s) == 64
    assert set(s) <= set(string.ascii_letters + string.digits)
    assert random_string(0) == ""
    assert random_string(32) != random_string(32)


def test_random_string_negative_length():
    with pytest.raises(ValueError):
        random_string(-1)


def test_new_salt_default_length():
    assert len(new_salt()) == 16
    assert len(new_salt(8)) == 8
