"""Error taxonomy for proof-key production."""


class ProofKeyError(Exception):
    """Base class for runtime proof-key failures."""


class KeyUnavailable(ProofKeyError):
    """The proof key could not be loaded (missing, unparsable or not RSA)."""


class SigningFailure(ProofKeyError):
    """The signing primitive failed after a successful key load."""


class EncodingOverflow(AssertionError):
    """A canonical message field does not fit its 32-bit length prefix."""


class MalformedAccessToken(AssertionError):
    """The access token holds a '%' not followed by two hex digits."""


__all__ = [
    "ProofKeyError",
    "KeyUnavailable",
    "SigningFailure",
    "EncodingOverflow",
    "MalformedAccessToken",
]
