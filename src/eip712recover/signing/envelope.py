"""
Full EIP-712 payload: types, domain, primaryType and message together.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .eip712 import (
    Domain,
    Packable,
    PropertyType,
    Types,
    TypedStruct,
    eip712_domain_type,
    signing_digest,
)
from .recover import recover_address


@dataclass(frozen=True)
class TypedDataEnvelope:
    types: Types
    domain: Domain
    primary_type: str
    message: Packable

    def __post_init__(self) -> None:
        domain_type = self.types.get(Domain.primary_type)
        if domain_type is not None and list(domain_type) != eip712_domain_type():
            raise ValueError(
                "EIP712Domain must be (string name,string version,"
                "uint256 chainId,address verifyingContract)"
            )
        declared = getattr(self.message, "primary_type", self.primary_type)
        if declared != self.primary_type:
            raise ValueError(
                f"message is a {declared!r}, envelope says {self.primary_type!r}"
            )

    @classmethod
    def from_dict(cls, full_message: Mapping[str, object]) -> TypedDataEnvelope:
        """
        Parse the JSON shape of ``eth_signTypedData_v4``.

        Args:
            full_message: Dict with keys "domain", "types", "primaryType", "message".
        """
        types = {
            type_name: [PropertyType.from_dict(prop) for prop in props]
            for type_name, props in full_message["types"].items()  # type: ignore[attr-defined]
        }
        primary_type = str(full_message["primaryType"])
        return cls(
            types=types,
            domain=Domain.from_dict(full_message["domain"]),  # type: ignore[arg-type]
            primary_type=primary_type,
            message=TypedStruct(primary_type, types, full_message["message"]),  # type: ignore[arg-type]
        )

    def digest(self) -> bytes:
        """32-byte signing digest."""
        return signing_digest(self.domain, self.message)

    def recover(self, signature: bytes) -> bytes:
        """20-byte address that signed this payload."""
        return recover_address(self.domain, self.message, signature)


__all__: tuple[str, ...] = ("TypedDataEnvelope",)
