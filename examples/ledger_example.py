#!/usr/bin/env python3
"""Example: ledger seeds, keypairs, signing and addresses (secp256k1 and Ed25519)."""

from picokeypairs import (derive_address, derive_keypair, generate_seed, sign,
                          verify)

for algorithm in ("secp256k1", "ed25519"):
    seed = generate_seed(algorithm=algorithm)
    keypair = derive_keypair(seed)
    print(f"{algorithm} seed:", seed)
    print("  Public key:", keypair.public_key)
    print("  Address:", derive_address(keypair.public_key))

    message_hex = b"Hello, ledger".hex()
    signature = sign(message_hex, keypair.private_key)
    print("  Signature:", signature[:32] + "...")
    print("  Verify:", verify(message_hex, signature, keypair.public_key))
