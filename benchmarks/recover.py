"""
Benchmark EIP-712 hashing and signer recovery (pure Python).
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root after pip install -e .:

  python benchmarks/recover.py
"""

from __future__ import annotations

import time
import tracemalloc

from eip712recover import (
    Domain,
    TypedDataEnvelope,
    keccak256,
    recover_address,
    signing_digest,
)

N_TIME = 200
N_MEM = 50
DOMAIN = Domain("daosign", "0.1.0", 1, bytes(20))
SIGNATURE = bytes.fromhex(
    "b2e9a6c6ab877ce682c03d584fa8cae1e88d9ab290febee705b211d5033c885b"
    "3d83bce8ab90917c540c9f5367592fbeabc8125e7a75866cab4b99e1c030a6a31b"
)
FULL = {
    "domain": {
        "name": "A",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0x" + "00" * 20,
    },
    "types": {
        "Mail": [
            {"name": "from", "type": "address"},
            {"name": "message", "type": "string"},
        ]
    },
    "primaryType": "Mail",
    "message": {"from": "0x" + "00" * 20, "message": "hello"},
}


def _time_per_call(fn, *args, n: int = N_TIME) -> float:
    for _ in range(5):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    envelope = TypedDataEnvelope.from_dict(FULL)
    print("Benchmark: EIP-712 hashing and recovery (pure Python)")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()
    cases = [
        ("keccak256 (160 B)", keccak256, (DOMAIN.pack(),)),
        ("signing_digest", signing_digest, (DOMAIN, DOMAIN)),
        ("envelope.digest", envelope.digest, ()),
        ("recover_address", recover_address, (DOMAIN, DOMAIN, SIGNATURE)),
    ]
    for label, fn, args in cases:
        t = _time_per_call(fn, *args) * 1000
        m = _peak_kb(fn, *args)
        print(f"  {label:<20} {t:.4f} ms  peak {m:.2f} KiB")


if __name__ == "__main__":
    main()
