import struct

from wopiproof.crypto.capi_blob import CAPI_RSA1_HEADER, rsa_to_capi_blob


def test_header_constant():
    assert CAPI_RSA1_HEADER.hex() == "0602000000a4000052534131"


def test_small_blob_layout():
    blob = rsa_to_capi_blob(bytes([0x01, 0x02]), bytes([0x03]))
    assert blob == CAPI_RSA1_HEADER + bytes([0x10, 0x00, 0x00, 0x00, 0x03, 0x02, 0x01])


def test_real_key_blob(key_pair):
    blob = rsa_to_capi_blob(key_pair.modulus, key_pair.exponent)
    assert blob[:12] == CAPI_RSA1_HEADER
    (bitlen,) = struct.unpack("<I", blob[12:16])
    assert bitlen == 2048
    assert blob[16:19] == b"\x01\x00\x01"
    assert blob[19:] == key_pair.modulus[::-1]
    assert len(blob) == 12 + 4 + 3 + 256


def test_blob_is_deterministic(key_pair):
    assert rsa_to_capi_blob(key_pair.modulus, key_pair.exponent) == rsa_to_capi_blob(
        key_pair.modulus, key_pair.exponent
    )
