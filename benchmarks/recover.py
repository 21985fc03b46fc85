"""
Benchmark public key recovery stages.

Run from repo root:

  PYTHONPATH=src python benchmarks/recover.py
"""

from __future__ import annotations

import hashlib
import time

from ecdsa.ecdsa import Private_key, Public_key, generator_secp256k1

from picorecover import recover_pubkey, recover_pubkey_hex
from picorecover.recovery import derive_key, recover_point, reverify

SECRET = 0xC0FFEE
NONCE = 0x1234567890ABCDEF
DIGEST = int.from_bytes(hashlib.sha256(b"bench message").digest(), "big")


def _signature() -> tuple[int, int, int]:
    G = generator_secp256k1
    sig = Private_key(Public_key(G, G * SECRET), SECRET).sign(DIGEST, NONCE)
    return sig.r, sig.s, (G * NONCE).y() & 1


def _time_it(fn, *args, n: int = 50):
    # Warmup
    for _ in range(3):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def main() -> None:
    n = 50
    r, s, recid = _signature()
    R = recover_point(r, recid)
    Q = derive_key(R, r, s, DIGEST)
    print("Benchmark: picorecover (python-ecdsa arithmetic)")
    print(f"  Iterations: {n}")
    print()
    rows = [
        ("recover_point", _time_it(recover_point, r, recid, n=n)),
        ("derive_key", _time_it(derive_key, R, r, s, DIGEST, n=n)),
        ("reverify", _time_it(reverify, Q, r, s, DIGEST, n=n)),
        ("recover_pubkey", _time_it(recover_pubkey, DIGEST, r, s, recid, n=n)),
        (
            "recover_pubkey_hex",
            _time_it(recover_pubkey_hex, hex(DIGEST), str(r), str(s), recid, n=n),
        ),
    ]
    for name, t in rows:
        print(f"  {name:<20} {t*1e3:.2f} ms")


if __name__ == "__main__":
    main()
