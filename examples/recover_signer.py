#!/usr/bin/env python3
"""Example: EIP-712 digest and signer recovery."""

from eip712recover import Domain, recover_address, signing_digest, struct_hash

domain = Domain(
    name="daosign", version="0.1.0", chain_id=1, verifying_contract=bytes(20)
)
print("Domain hash:", struct_hash(domain).hex())
print("Digest to sign:", signing_digest(domain, domain).hex())

signature = bytes.fromhex(
    "b2e9a6c6ab877ce682c03d584fa8cae1e88d9ab290febee705b211d5033c885b"
    "3d83bce8ab90917c540c9f5367592fbeabc8125e7a75866cab4b99e1c030a6a31b"
)
print("Signer: 0x" + recover_address(domain, domain, signature).hex())
