"""Test-only ECDSA signer used to exercise the recovery round trip."""

from __future__ import annotations

import pytest

from eip712recover.curves.secp256k1 import _Gx, _Gy, _N, _mod_inv, _point_mul


def sign_digest(privkey: bytes, digest: bytes) -> bytes:
    """65-byte r || s || v (v in {27, 28}, low-s) over a 32-byte digest. Deterministic k from digest+key."""
    z = int.from_bytes(digest, "big")
    d = int.from_bytes(privkey, "big")
    k_cand = 1 + (z + d) % (_N - 2)
    for attempt in range(256):
        k = (k_cand + attempt) % _N
        if k == 0:
            continue
        kx, ky = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0 or kx >= _N:
            continue
        s = (_mod_inv(k, _N) * (z + r * d)) % _N
        if s == 0:
            continue
        recid = ky & 1
        if s > _N // 2:
            s = _N - s
            recid ^= 1
        return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([27 + recid])
    raise ValueError("could not produce a signature")


def privkey_to_pubkey(privkey: bytes) -> bytes:
    x, y = _point_mul(int.from_bytes(privkey, "big"), _Gx, _Gy)
    return b"\x04" + x.to_bytes(32, "big") + y.to_bytes(32, "big")


@pytest.fixture
def signer():
    return sign_digest


@pytest.fixture
def pubkey_of():
    return privkey_to_pubkey
