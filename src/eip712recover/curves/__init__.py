"""Elliptic-curve crypto: secp256k1 public key recovery (Ethereum)."""

from .secp256k1 import SECP256K1N, pubkey_to_address, recover_pubkey

__all__: tuple[str, ...] = (
    "SECP256K1N",
    "pubkey_to_address",
    "recover_pubkey",
)
