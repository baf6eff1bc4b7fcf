"""Stability tests for the secp256k1 recovery code.

Lock-in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors) is detected.
"""

from __future__ import annotations

import pytest

from eip712recover import keccak256, pubkey_to_address, recover_pubkey

SECP_PRIV = bytes.fromhex(
    "0000000000000000000000000000000000000000000000000000000000000001"
)
SECP_MSG_HASH = bytes.fromhex(
    "2339863461be3f2dbbc5f995c5bf6953ee73f6437f37b0b44de4e67088bcd4c2"
)  # keccak256(b"message to sign")
SECP_PUB_EXPECTED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_ADDR_EXPECTED = bytes.fromhex("7e5f4552091a69125d5dfcb7b8c2659029395bdf")


def test_secp256k1_msg_hash_consistent() -> None:
    """SECP_MSG_HASH must equal keccak256(b'message to sign')."""
    assert SECP_MSG_HASH == keccak256(b"message to sign")


def test_secp256k1_generator_pubkey(pubkey_of) -> None:
    """Private key 1 maps to the generator point."""
    assert pubkey_of(SECP_PRIV) == SECP_PUB_EXPECTED


def test_pubkey_to_address_stable() -> None:
    """Address of the generator point (private key 1) must not change."""
    assert pubkey_to_address(SECP_PUB_EXPECTED) == SECP_ADDR_EXPECTED
    assert pubkey_to_address(SECP_PUB_EXPECTED[1:]) == SECP_ADDR_EXPECTED


def test_pubkey_to_address_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        pubkey_to_address(SECP_PUB_EXPECTED[:33])


def test_secp256k1_recover_pubkey_stable(signer) -> None:
    """Recovered pubkey must equal the signer's public key."""
    sig = signer(SECP_PRIV, SECP_MSG_HASH)
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    recovered = recover_pubkey(SECP_MSG_HASH, r, s, sig[64] - 27)
    assert recovered == SECP_PUB_EXPECTED


def test_recover_pubkey_other_parity_differs(signer) -> None:
    sig = signer(SECP_PRIV, SECP_MSG_HASH)
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    other = recover_pubkey(SECP_MSG_HASH, r, s, (sig[64] - 27) ^ 1)
    assert other != SECP_PUB_EXPECTED
    assert len(other) == 65 and other[0] == 0x04


def test_recover_pubkey_rejects_bad_inputs() -> None:
    with pytest.raises(ValueError):
        recover_pubkey(SECP_MSG_HASH[:31], 1, 1, 0)
    with pytest.raises(ValueError):
        recover_pubkey(SECP_MSG_HASH, 0, 1, 0)
    with pytest.raises(ValueError):
        recover_pubkey(SECP_MSG_HASH, 1, 1, 4)
