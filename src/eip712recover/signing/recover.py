"""
Signer recovery for EIP-712 signatures (65 bytes: r || s || v, v in {27, 28}).

Only the legacy ``v`` encoding is accepted; callers holding a 0/1 recovery
byte must add 27 before calling.
"""

from __future__ import annotations

import logging

from ..curves import SECP256K1N, pubkey_to_address, recover_pubkey
from ..exceptions import (
    InvalidRecoveryIdError,
    InvalidSignatureError,
    RecoveryFailureError,
)
from .eip712 import Packable, signing_digest

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = 65
_V_OFFSET = 27
_HALF_N = SECP256K1N // 2


def split_signature(signature: bytes) -> tuple[int, int, int]:
    """
    Parse a 65-byte signature into (r, s, recovery id).

    Raises:
        InvalidSignatureError: wrong length, or r / s outside [1, n - 1].
        InvalidRecoveryIdError: v is not 27 or 28.
    """
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignatureError(
            f"signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[0:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    if not 0 < r < SECP256K1N:
        raise InvalidSignatureError("r is out of range")
    if not 0 < s < SECP256K1N:
        raise InvalidSignatureError("s is out of range")
    recid = signature[64] - _V_OFFSET
    if recid not in (0, 1):
        raise InvalidRecoveryIdError(f"v must be 27 or 28, got {signature[64]}")
    return r, s, recid


def recover_digest_signer(digest: bytes, signature: bytes) -> bytes:
    """
    Recover the 20-byte address that signed a 32-byte digest.

    High-s signatures are rejected with :class:`RecoveryFailureError`, like
    any signature that does not verify against the recovered key.
    """
    try:
        r, s, recid = split_signature(signature)
    except (InvalidSignatureError, InvalidRecoveryIdError) as e:
        logger.debug("rejecting signature: %s", e)
        raise
    if s > _HALF_N:
        logger.debug("rejecting signature: s is in the upper half of the curve order")
        raise RecoveryFailureError("signature s value is not normalized (high-s)")
    try:
        pubkey = recover_pubkey(digest, r, s, recid)
    except ValueError as e:
        logger.debug("public key recovery failed for digest %s: %s", digest.hex(), e)
        raise RecoveryFailureError(str(e)) from e
    address = pubkey_to_address(pubkey)
    logger.debug("recovered signer 0x%s for digest %s", address.hex(), digest.hex())
    return address


def recover_address(domain: Packable, message: Packable, signature: bytes) -> bytes:
    """
    Address that produced ``signature`` over the EIP-712 digest of (domain, message).

    Args:
        domain: Signing domain.
        message: Signed struct.
        signature: 65 bytes, r || s || v with v in {27, 28}.

    Returns:
        20-byte address.

    Raises:
        InvalidSignatureError, InvalidRecoveryIdError, RecoveryFailureError.
    """
    return recover_digest_signer(signing_digest(domain, message), signature)


__all__: tuple[str, ...] = (
    "SIGNATURE_LENGTH",
    "recover_address",
    "recover_digest_signer",
    "split_signature",
)
