"""Signing schemas: EIP-712 typed data and signer recovery."""

from .eip712 import (
    DOMAIN_TYPEHASH,
    Domain,
    Packable,
    PropertyType,
    TypedStruct,
    domain_and_message_hash,
    eip712_domain_type,
    encode_type,
    hash_type,
    signing_digest,
    struct_hash,
)
from .envelope import TypedDataEnvelope
from .recover import recover_address, recover_digest_signer, split_signature

__all__: tuple[str, ...] = (
    "DOMAIN_TYPEHASH",
    "Domain",
    "Packable",
    "PropertyType",
    "TypedDataEnvelope",
    "TypedStruct",
    "domain_and_message_hash",
    "eip712_domain_type",
    "encode_type",
    "hash_type",
    "recover_address",
    "recover_digest_signer",
    "signing_digest",
    "split_signature",
    "struct_hash",
)
