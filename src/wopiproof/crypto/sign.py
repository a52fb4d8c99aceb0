"""Proof signing: RSASSA-PKCS1-v1_5 over SHA-256, single-line Base64."""
from __future__ import annotations

import base64

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..errors import SigningFailure
from .keyloader import KeyPair


def b64_single_line(data: bytes) -> str:
    return base64.b64encode(data).decode().replace("\r", "").replace("\n", "")


def sign_proof(message: bytes, key: KeyPair) -> str:
    try:
        sig = key.private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
    except Exception as e:
        raise SigningFailure(f"RSA-SHA256 signing failed: {e}") from e
    return b64_single_line(sig)


__all__ = ["sign_proof", "b64_single_line"]
