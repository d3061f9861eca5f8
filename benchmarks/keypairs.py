"""
Benchmark keypair operations per algorithm: derive_keypair (including its
self-check), sign, verify, derive_address.

Run from repo root:

  PYTHONPATH=src python benchmarks/keypairs.py

Or after pip install -e .:

  python benchmarks/keypairs.py
"""

from __future__ import annotations

import os
import sys
import time

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picokeypairs import derive_address, derive_keypair, generate_seed, sign, verify

ENTROPY = bytes(range(1, 17))
MESSAGE_HEX = b"bench message".hex()


def _time_it(fn, *args, n: int = 20, **kwargs) -> float:
    # Warmup
    for _ in range(2):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def main() -> None:
    n = 20
    print(f"Benchmark: picokeypairs (pure Python), {n} iterations")
    print()
    for algorithm in ("secp256k1", "ed25519"):
        seed = generate_seed(ENTROPY, algorithm=algorithm)
        keypair = derive_keypair(seed)
        signature = sign(MESSAGE_HEX, keypair.private_key)
        print(algorithm)
        rows = (
            ("derive_keypair", _time_it(derive_keypair, seed, n=n)),
            ("sign", _time_it(sign, MESSAGE_HEX, keypair.private_key, n=n)),
            ("verify", _time_it(verify, MESSAGE_HEX, signature, keypair.public_key, n=n)),
            ("derive_address", _time_it(derive_address, keypair.public_key, n=n)),
        )
        for name, t in rows:
            print(f"  {name:<16} {t*1e3:8.2f} ms")
        print()


if __name__ == "__main__":
    main()
