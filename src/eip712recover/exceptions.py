"""
Error types raised while recovering a signer from a typed-data signature.

Hashing and packing never raise these; they are total over well-formed input.
"""


class SignatureError(ValueError):
    """
    Base class for all failures of the signature recovery path.
    """


class InvalidSignatureError(SignatureError):
    """
    Thrown when the 64-byte `r || s` component is not a valid secp256k1
    signature encoding (wrong length, or a scalar outside `[1, n - 1]`).
    """


class InvalidRecoveryIdError(SignatureError):
    """
    Thrown when the trailing `v` byte is not 27 or 28.
    """


class RecoveryFailureError(SignatureError):
    """
    Thrown when a well-formed signature does not recover a public key
    against the computed digest.
    """
