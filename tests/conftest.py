import pytest
from regcode.crypto import x25519_generate


@pytest.fixture
def keypair():
    priv, pub = x25519_generate()
    return priv, pub
