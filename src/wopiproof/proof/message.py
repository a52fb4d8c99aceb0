"""Canonical WOPI proof message.

Network byte order throughout:

    [int32 len(token)] [token] [int32 len(uri)] [uri] [int32 8] [int64 ticks]

The host rebuilds the same bytes from the access token, the request URL and
the X-WOPI-TimeStamp header. The constant 8 carries no information but is part
of the stream the host expects.
"""
from __future__ import annotations

import re
from urllib.parse import unquote_to_bytes

from ..errors import EncodingOverflow, MalformedAccessToken
from ..utils.byteorder import INT32_MAX, int32_be, int64_be

TICKS_FIELD_LEN = 8

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _length_prefix(name: str, length: int) -> bytes:
    if length > INT32_MAX:
        raise EncodingOverflow(f"{name} is {length} bytes; limit is {INT32_MAX}")
    return int32_be(length)


def decode_access_token(access_token: str) -> bytes:
    # percent-decoding only; '+' stays literal
    bad = _BAD_ESCAPE.search(access_token)
    if bad is not None:
        raise MalformedAccessToken(f"invalid percent-escape at offset {bad.start()}")
    return unquote_to_bytes(access_token)


def build_proof_message(access_token: str, uri: str, ticks: int) -> bytes:
    token = decode_access_token(access_token)
    uri_bytes = uri.encode("utf-8")
    return b"".join([
        _length_prefix("access token", len(token)),
        token,
        _length_prefix("uri", len(uri_bytes)),
        uri_bytes,
        int32_be(TICKS_FIELD_LEN),
        int64_be(ticks),
    ])


__all__ = ["build_proof_message", "decode_access_token", "TICKS_FIELD_LEN"]
