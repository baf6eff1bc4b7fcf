"""Hash functions: Keccak-256."""

from .keccak import hash32, keccak256

__all__: tuple[str, ...] = ("hash32", "keccak256")
