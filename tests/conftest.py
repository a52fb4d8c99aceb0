import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from wopiproof.crypto.keyloader import KeyPair, KeyStore


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def key_pair(rsa_key):
    return KeyPair.from_private_key(rsa_key)


def write_key(path, key, fmt=serialization.PrivateFormat.TraditionalOpenSSL):
    path.write_bytes(key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=fmt,
        encryption_algorithm=serialization.NoEncryption(),
    ))
    return str(path)


@pytest.fixture
def key_file(tmp_path, rsa_key):
    return write_key(tmp_path / "proof_key", rsa_key)


@pytest.fixture
def key_store(key_file):
    return KeyStore(key_file)


@pytest.fixture
def missing_key_store(tmp_path):
    return KeyStore(str(tmp_path / "nope" / "proof_key"))
