"""
Keccak-256 as used by Ethereum (original multirate padding, not NIST SHA3-256).
"""

from __future__ import annotations

from functools import reduce
from operator import xor

_RATE_BYTES = 1088 // 8  # 136
_LANE_BYTES = 8
_LANE_MASK = 0xFFFFFFFFFFFFFFFF
_DIGEST_BYTES = 32

_ROUND_CONSTANTS = [
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
]

# _ROTATION[y][x] is the rho offset for lane (x, y).
_ROTATION = [
    [0, 1, 62, 28, 27],
    [36, 44, 6, 55, 20],
    [3, 10, 43, 25, 39],
    [41, 45, 15, 21, 8],
    [18, 2, 61, 56, 14],
]


def _rol64(v: int, n: int) -> int:
    """Rotate 64-bit value v left by n bits (mod 64)."""
    n = n % 64
    return ((v << n) | (v >> (64 - n))) & _LANE_MASK


def _keccak_f(state: list[list[int]]) -> None:
    """Keccak-f[1600] permutation; updates state in place (24 rounds)."""
    for rc in _ROUND_CONSTANTS:
        # theta
        c = [reduce(xor, state[x]) for x in range(5)]
        d = [_rol64(c[(x + 1) % 5], 1) ^ c[(x - 1) % 5] for x in range(5)]
        for x in range(5):
            for y in range(5):
                state[x][y] ^= d[x]
        # rho and pi
        b = [[0] * 5 for _ in range(5)]
        for x in range(5):
            for y in range(5):
                b[y][(2 * x + 3 * y) % 5] = _rol64(state[x][y], _ROTATION[y][x])
        # chi
        for x in range(5):
            for y in range(5):
                state[x][y] = b[x][y] ^ ((~b[(x + 1) % 5][y]) & b[(x + 2) % 5][y])
        # iota
        state[0][0] ^= rc


def _pad(data: bytes) -> bytes:
    """Keccak pad10*1; always adds at least one byte."""
    padlen = _RATE_BYTES - (len(data) % _RATE_BYTES)
    if padlen == 1:
        return data + b"\x81"
    return data + b"\x01" + bytes(padlen - 2) + b"\x80"


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 hash (256-bit output, multirate padding).

    Args:
        data: Input bytes (any length, including empty).

    Returns:
        32-byte digest.
    """
    padded = _pad(bytes(data))
    state = [[0] * 5 for _ in range(5)]
    for block_start in range(0, len(padded), _RATE_BYTES):
        for i in range(_RATE_BYTES // _LANE_BYTES):
            off = block_start + i * _LANE_BYTES
            state[i % 5][i // 5] ^= int.from_bytes(
                padded[off : off + _LANE_BYTES], "little"
            )
        _keccak_f(state)
    # 32 bytes fit in the first squeeze block (4 lanes of row y=0).
    out = bytearray()
    for x in range(_DIGEST_BYTES // _LANE_BYTES):
        out += state[x][0].to_bytes(_LANE_BYTES, "little")
    return bytes(out)


hash32 = keccak256

__all__: tuple[str, ...] = ("hash32", "keccak256")
