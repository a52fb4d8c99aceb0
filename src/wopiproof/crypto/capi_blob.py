"""RSA public key -> CAPI PUBLICKEYBLOB.

Layout (MS-MQQB 2.2.18, RSA1 public key blob):
  BLOBHEADER  bType=0x06 bVersion=0x02 reserved=0x0000 aiKeyAlg=0x0000A400
  RSAPUBKEY   magic="RSA1" bitlen=<uint32 LE> pubexp=<LE> modulus=<LE>

The exponent is copied with its natural length, not padded to 4 bytes; WOPI
hosts parse it that way and any change breaks verification silently.
"""
from __future__ import annotations

from ..utils.byteorder import be_to_le, uint32_le

CAPI_RSA1_HEADER = bytes([
    0x06, 0x02, 0x00, 0x00,
    0x00, 0xA4, 0x00, 0x00,
    0x52, 0x53, 0x41, 0x31,
])


def rsa_to_capi_blob(modulus: bytes, exponent: bytes) -> bytes:
    """Encode big-endian ``modulus``/``exponent`` as a CAPI RSA1 blob."""
    return b"".join([
        CAPI_RSA1_HEADER,
        uint32_le(len(modulus) * 8),
        be_to_le(exponent),
        be_to_le(modulus),
    ])


__all__ = ["CAPI_RSA1_HEADER", "rsa_to_capi_blob"]
