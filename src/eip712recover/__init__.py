"""
EIP-712 typed-data hashing and signer recovery: keccak256, secp256k1, EIP-712.
Pure Python, no eth_account dependency.
"""

from .__about__ import __version__
from .curves import pubkey_to_address, recover_pubkey
from .exceptions import (
    InvalidRecoveryIdError,
    InvalidSignatureError,
    RecoveryFailureError,
    SignatureError,
)
from .hashes import hash32, keccak256
from .signing import (
    DOMAIN_TYPEHASH,
    Domain,
    Packable,
    PropertyType,
    TypedDataEnvelope,
    TypedStruct,
    domain_and_message_hash,
    eip712_domain_type,
    recover_address,
    recover_digest_signer,
    signing_digest,
    split_signature,
    struct_hash,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "hash32",
    "keccak256",
    # Curves: secp256k1
    "pubkey_to_address",
    "recover_pubkey",
    # Signing: EIP-712 typed data
    "DOMAIN_TYPEHASH",
    "Domain",
    "Packable",
    "PropertyType",
    "TypedDataEnvelope",
    "TypedStruct",
    "domain_and_message_hash",
    "eip712_domain_type",
    "signing_digest",
    "struct_hash",
    # Signing: recovery
    "recover_address",
    "recover_digest_signer",
    "split_signature",
    # Errors
    "InvalidRecoveryIdError",
    "InvalidSignatureError",
    "RecoveryFailureError",
    "SignatureError",
)
