"""
secp256k1 (Ethereum curve): public key recovery and address derivation.
"""

from __future__ import annotations

from ..hashes import keccak256

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_B = 7
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

SECP256K1N = _N

_UNCOMPRESSED_PREFIX = 0x04


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two secp256k1 points in affine coords; (0,0) is identity. Returns (rx, ry)."""
    if (px, py) == (0, 0):
        return (qx, qy)
    if (qx, qy) == (0, 0):
        return (px, py)
    if px == qx:
        if py == qy:
            lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
        else:
            return (0, 0)
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) on secp256k1; returns (rx, ry)."""
    d = d % _N
    rx, ry = 0, 0
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _lift_x(x: int, parity: int) -> tuple[int, int]:
    """Curve point with the given x and y parity; ValueError if x is not on the curve."""
    rhs = (x * x * x + _B) % _P
    y = pow(rhs, (_P + 1) // 4, _P)
    if (y * y) % _P != rhs:
        raise ValueError("r is not the x-coordinate of a point on secp256k1")
    if (y & 1) != parity:
        y = (_P - y) % _P
    return (x, y)


def _recover_pubkey_from_sig(
    msg_hash: bytes, r: int, s: int, recid: int
) -> tuple[int, int]:
    """Recover public key from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    if recid & 2:
        if r + _N >= _P:
            raise ValueError("recid 2/3 but r+n >= p")
        x = r + _N
    else:
        x = r
    rx, ry = _lift_x(x, recid & 1)
    r_inv = _mod_inv(r, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    u1 = (-z * r_inv) % _N
    u2 = (s * r_inv) % _N
    g_mul = _point_mul(u1, _Gx, _Gy)
    r_mul = _point_mul(u2, rx, ry)
    qx, qy = _point_add(g_mul[0], g_mul[1], r_mul[0], r_mul[1])
    if (qx, qy) == (0, 0):
        raise ValueError("recovered point at infinity")
    return (qx, qy)


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    """
    Recover uncompressed public key (65 bytes) from ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte digest that was signed.
        r, s: Signature components, each in [1, n - 1].
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key (0x04 || x || y).

    Raises:
        ValueError: if the inputs are out of range or no point recovers.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    if not (0 < r < _N and 0 < s < _N):
        raise ValueError("r and s must be in [1, n - 1]")
    if recid not in (0, 1, 2, 3):
        raise ValueError(f"invalid recovery id {recid}")
    qx, qy = _recover_pubkey_from_sig(msg_hash, r, s, recid)
    return bytes([_UNCOMPRESSED_PREFIX]) + qx.to_bytes(32, "big") + qy.to_bytes(32, "big")


def pubkey_to_address(pubkey: bytes) -> bytes:
    """
    Ethereum address (20 bytes) of a public key: keccak256(x || y)[12:32].

    Args:
        pubkey: 65-byte uncompressed key (0x04 || x || y) or the bare 64-byte x || y.

    Returns:
        20-byte address.
    """
    if len(pubkey) == 65 and pubkey[0] == _UNCOMPRESSED_PREFIX:
        pubkey = pubkey[1:]
    if len(pubkey) != 64:
        raise ValueError("pubkey must be 64 bytes, or 65 bytes with 0x04 prefix")
    return keccak256(bytes(pubkey))[12:]


__all__: tuple[str, ...] = (
    "SECP256K1N",
    "pubkey_to_address",
    "recover_pubkey",
)
