"""
EIP-712 typed-data encoding: type hashes, struct packing, signing digest.

Any object with a ``pack()`` method returning its ``encodeData`` bytes is a
:class:`Packable`; :class:`Domain` and :class:`TypedStruct` are the two
built-in ones.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..hashes import keccak256

DOMAIN_TYPE_SIGNATURE = (
    b"EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)
DOMAIN_TYPEHASH = keccak256(DOMAIN_TYPE_SIGNATURE)

# EIP-191 version byte 0x01: structured data.
EIP191_PREFIX = b"\x19\x01"

_WORD = 32
_ADDRESS_BYTES = 20
_MAX_CHAIN_ID = 2**64

_INT_BITS = "|".join(str(bits) for bits in range(256, 0, -8))
_ATOMIC_TYPE = re.compile(
    rf"bool|address|string|bytes(?:[1-9]|[12][0-9]|3[0-2])?|u?int(?:{_INT_BITS})"
)
_DOMAIN_KEYS = frozenset({"name", "version", "chainId", "verifyingContract"})


@dataclass(frozen=True)
class PropertyType:
    """One field of a typed-data struct: (field name, solidity type name)."""

    name: str
    type: str

    def __str__(self) -> str:
        return f"{self.type} {self.name}"

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> PropertyType:
        return cls(name=data["name"], type=data["type"])


Types = Mapping[str, Sequence[PropertyType]]


@runtime_checkable
class Packable(Protocol):
    """Anything that can produce its EIP-712 ``encodeData`` bytes."""

    def pack(self) -> bytes: ...


def eip712_domain_type() -> list[PropertyType]:
    """Fields of the EIP712Domain struct, in signature order."""
    return [
        PropertyType("name", "string"),
        PropertyType("version", "string"),
        PropertyType("chainId", "uint256"),
        PropertyType("verifyingContract", "address"),
    ]


def _hex_or_bytes(value: object) -> bytes:
    if isinstance(value, int):
        raise ValueError(f"expected hex string or bytes, got int {value}")
    if isinstance(value, str):
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)
    return bytes(value)  # type: ignore[call-overload]


def to_address(value: object) -> bytes:
    """Coerce a ``0x`` hex string or byte buffer to a 20-byte address."""
    addr = _hex_or_bytes(value)
    if len(addr) != _ADDRESS_BYTES:
        raise ValueError(f"address must be 20 bytes, got {len(addr)}")
    return addr


@dataclass(frozen=True)
class Domain:
    """
    EIP-712 signing domain.

    ``greeting`` is an informational label only; it never reaches ``pack()``
    and is ignored by equality.
    """

    name: str
    version: str
    chain_id: int
    verifying_contract: bytes
    greeting: str = field(default="Hello from EIP712Domain", compare=False, repr=False)

    primary_type = "EIP712Domain"

    def __post_init__(self) -> None:
        if not 0 <= self.chain_id < _MAX_CHAIN_ID:
            raise ValueError(f"chain_id out of u64 range: {self.chain_id}")
        object.__setattr__(
            self, "verifying_contract", to_address(self.verifying_contract)
        )

    def pack(self) -> bytes:
        """typeHash || keccak(name) || keccak(version) || chainId || verifyingContract (160 bytes)."""
        enc = bytearray(DOMAIN_TYPEHASH)
        enc += keccak256(self.name.encode("utf-8"))
        enc += keccak256(self.version.encode("utf-8"))
        enc += bytes(24) + self.chain_id.to_bytes(8, "big")
        enc += bytes(12) + self.verifying_contract
        return bytes(enc)

    @classmethod
    def from_dict(cls, domain: Mapping[str, object]) -> Domain:
        """
        Build from the JSON shape used by ``eth_signTypedData`` (camelCase keys).

        Exactly the four keys name, version, chainId and verifyingContract
        are accepted; a domain with a salt or a missing field raises
        ``ValueError``.
        """
        for k in domain:
            if k not in _DOMAIN_KEYS:
                raise ValueError(f"Invalid domain key {k!r}")
        missing = _DOMAIN_KEYS - set(domain)
        if missing:
            raise ValueError(f"Missing domain keys {sorted(missing)}")
        return cls(
            name=str(domain["name"]),
            version=str(domain["version"]),
            chain_id=_to_int(domain["chainId"]),
            verifying_contract=to_address(domain["verifyingContract"]),
        )


def _to_int(value: object) -> int:
    if isinstance(value, str):
        return int(value, 16 if value.startswith("0x") else 10)
    return int(value)  # type: ignore[call-overload]


def _base_type(type_: str) -> str:
    """Strip array suffixes: 'Person[][2]' -> 'Person'."""
    return type_.split("[")[0].strip()


def _is_atomic(type_: str) -> bool:
    return _ATOMIC_TYPE.fullmatch(type_) is not None


def _find_type_dependencies(
    type_name: str, types: Types, results: set[str] | None = None
) -> set[str]:
    """Collect all struct type names that type_name depends on (recursive)."""
    if results is None:
        results = set()
    type_name = _base_type(type_name)
    if type_name in results or (type_name not in types and _is_atomic(type_name)):
        return results
    if type_name not in types:
        raise ValueError(f"Type {type_name!r} not in types")
    results.add(type_name)
    for prop in types[type_name]:
        _find_type_dependencies(prop.type, types, results)
    return results


def encode_type(type_name: str, types: Types) -> str:
    """Type signature, e.g. 'Mail(Person from,Person to,string contents)Person(string name,address wallet)'."""
    deps = _find_type_dependencies(type_name, types) - {type_name}
    out = []
    for tn in [type_name] + sorted(deps):
        fields = ",".join(str(prop) for prop in types[tn])
        out.append(f"{tn}({fields})")
    return "".join(out)


def hash_type(type_name: str, types: Types) -> bytes:
    """Keccak-256 of the type signature (type hash)."""
    return keccak256(encode_type(type_name, types).encode("utf-8"))


def _encode_int(type_: str, value: object) -> bytes:
    signed = type_.startswith("int")
    bits = int(type_[3 if signed else 4 :])
    v = _to_int(value)
    lo, hi = (-(1 << (bits - 1)), 1 << (bits - 1)) if signed else (0, 1 << bits)
    if not lo <= v < hi:
        raise ValueError(f"Value {v} out of range for {type_}")
    return v.to_bytes(_WORD, "big", signed=signed)


def _encode_field(types: Types, name: str, type_: str, value: object) -> bytes:
    """Encode one EIP-712 field to 32 bytes."""
    if type_.endswith("]"):
        if value is None:
            raise ValueError(f"Missing value for field {name!r} of type {type_!r}")
        item_type, length = type_[: type_.rindex("[")], type_[type_.rindex("[") + 1 : -1]
        items = list(value)  # type: ignore[call-overload]
        if length and len(items) != int(length):
            raise ValueError(f"Field {name!r} expects {length} items, got {len(items)}")
        return keccak256(
            b"".join(_encode_field(types, name, item_type, item) for item in items)
        )
    if type_ in types:
        if value is None:
            return bytes(_WORD)
        if isinstance(value, Packable):
            return keccak256(value.pack())
        return hash_struct(type_, types, value)  # type: ignore[arg-type]
    if type_ in ("string", "bytes") and value is None:
        return bytes(_WORD)
    if value is None:
        raise ValueError(f"Missing value for field {name!r} of type {type_!r}")
    if not _is_atomic(type_):
        raise ValueError(f"Unsupported EIP-712 type {type_!r}")
    if type_ == "string":
        if isinstance(value, str):
            return keccak256(value.encode("utf-8"))
        if isinstance(value, (bytes, bytearray)):
            return keccak256(bytes(value))
        raise ValueError(f"Field {name!r} expects str or bytes, got {type(value).__name__}")
    if type_ == "bytes":
        return keccak256(_hex_or_bytes(value))
    if type_ == "bool":
        if isinstance(value, str):
            flag = value not in {"False", "false", "0", ""}
        else:
            flag = bool(value)
        return int(flag).to_bytes(_WORD, "big")
    if type_ == "address":
        return to_address(value).rjust(_WORD, b"\x00")
    if type_.startswith("bytes"):
        size = int(type_[5:])
        raw = _hex_or_bytes(value)
        if not 1 <= size <= _WORD or len(raw) > size:
            raise ValueError(f"Value for {name!r} does not fit {type_}")
        return raw.ljust(_WORD, b"\x00")
    if type_.startswith(("int", "uint")):
        return _encode_int(type_, value)
    raise ValueError(f"Unsupported EIP-712 type {type_!r}")


def encode_data(type_name: str, types: Types, data: Mapping[str, object]) -> bytes:
    """Encode struct data as type_hash + concatenated 32-byte field encodings."""
    out = bytearray(hash_type(type_name, types))
    for prop in types[type_name]:
        out += _encode_field(types, prop.name, prop.type, data.get(prop.name))
    return bytes(out)


def hash_struct(type_name: str, types: Types, data: Mapping[str, object]) -> bytes:
    """Keccak-256 of encoded struct (struct hash)."""
    return keccak256(encode_data(type_name, types, data))


@dataclass(frozen=True)
class TypedStruct:
    """A struct value described by a types mapping, e.g. a parsed JSON message."""

    primary_type: str
    types: Types
    data: Mapping[str, object]

    def pack(self) -> bytes:
        return encode_data(self.primary_type, self.types, self.data)


def struct_hash(value: Packable) -> bytes:
    """keccak256(value.pack())."""
    return keccak256(value.pack())


def signing_digest(domain: Packable, message: Packable) -> bytes:
    """
    EIP-712 digest to sign: keccak256(0x19 0x01 || hash(domain) || hash(message)).

    Args:
        domain: Signing domain (normally a :class:`Domain`).
        message: The primary struct; the domain itself is also accepted.

    Returns:
        32-byte digest.
    """
    return keccak256(EIP191_PREFIX + struct_hash(domain) + struct_hash(message))


domain_and_message_hash = signing_digest

__all__: tuple[str, ...] = (
    "DOMAIN_TYPEHASH",
    "DOMAIN_TYPE_SIGNATURE",
    "EIP191_PREFIX",
    "Domain",
    "Packable",
    "PropertyType",
    "TypedStruct",
    "domain_and_message_hash",
    "eip712_domain_type",
    "encode_data",
    "encode_type",
    "hash_struct",
    "hash_type",
    "signing_digest",
    "struct_hash",
    "to_address",
)
