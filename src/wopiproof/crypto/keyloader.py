"""Proof key loading.

The key file is read once per process. A missing or unusable key is not fatal:
the loader returns an empty ``KeyLoadResult`` carrying the reason and proof
generation becomes a no-op.
"""
from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import KeyUnavailable
from ..utils.byteorder import int_to_be_bytes
from ..utils.logging import get_logger

log = get_logger()


@dataclass(frozen=True)
class KeyPair:
    private_key: rsa.RSAPrivateKey
    modulus: bytes
    exponent: bytes

    @property
    def key_size(self) -> int:
        return self.private_key.key_size

    @classmethod
    def from_private_key(cls, private_key: rsa.RSAPrivateKey) -> "KeyPair":
        numbers = private_key.public_key().public_numbers()
        return cls(
            private_key=private_key,
            modulus=int_to_be_bytes(numbers.n),
            exponent=int_to_be_bytes(numbers.e),
        )


@dataclass(frozen=True)
class KeyLoadResult:
    key: Optional[KeyPair] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.key is not None


def remediation_message(path: str) -> str:
    return (
        f"Could not find {path}"
        "\nNo proof-key will be present in discovery."
        "\nGenerate an RSA key using this command line:"
        f'\n    ssh-keygen -t rsa -N "" -f "{path}"'
    )


def _parse_private_key(data: bytes) -> rsa.RSAPrivateKey:
    # ssh-keygen writes the OpenSSH container on current releases, PEM on older ones
    if b"BEGIN OPENSSH PRIVATE KEY" in data:
        key = serialization.load_ssh_private_key(data, password=None)
    else:
        key = serialization.load_pem_private_key(data, password=None)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyUnavailable(f"expected RSA private key, got {type(key).__name__}")
    return key


def load_proof_key(path: str) -> KeyLoadResult:
    if not os.path.exists(path):
        msg = remediation_message(path)
        print(msg, file=sys.stderr)
        log.warning(msg)
        return KeyLoadResult(reason=f"key file not found: {path}")
    try:
        with open(path, "rb") as f:
            private_key = _parse_private_key(f.read())
    except (OSError, ValueError, TypeError, UnsupportedAlgorithm, KeyUnavailable) as e:
        # malformed: ValueError, encrypted: TypeError, unknown key type: UnsupportedAlgorithm
        log.error("Could not open proof RSA key: %s", e)
        return KeyLoadResult(reason=f"could not open proof RSA key: {e}")
    key = KeyPair.from_private_key(private_key)
    log.info("Loaded proof key %s (%d-bit RSA)", path, key.key_size)
    return KeyLoadResult(key=key)


class KeyStore:
    """Loads the proof key on first use and caches the result for the process."""

    def __init__(self, path: str):
        self.path = path
        self._result: KeyLoadResult | None = None
        self._lock = threading.Lock()

    def get(self) -> KeyLoadResult:
        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is None:
                self._result = load_proof_key(self.path)
            return self._result

    @property
    def available(self) -> bool:
        return self.get().ok


__all__ = ["KeyPair", "KeyLoadResult", "KeyStore", "load_proof_key", "remediation_message"]
