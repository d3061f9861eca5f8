"""
Ledger keypairs: seeds, secp256k1 and Ed25519 keypair derivation, signing,
verification and account addresses. Pure Python curves and hashes; base58
via the base58 package.
"""

from .__about__ import __version__
from .addresses import derive_address, derive_address_from_bytes, derive_node_address
from .exceptions import (DecodeError, KeypairIntegrityError, KeypairsError,
                         ValidationError)
from .keypairs import decode_seed, derive_keypair, generate_seed, sign, verify
from .schemes import ED25519, SECP256K1, Algorithm, Keypair

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Seeds and keypairs
    "generate_seed",
    "decode_seed",
    "derive_keypair",
    "Keypair",
    "Algorithm",
    "ED25519",
    "SECP256K1",
    # Signing
    "sign",
    "verify",
    # Addresses
    "derive_address",
    "derive_address_from_bytes",
    "derive_node_address",
    # Errors
    "KeypairsError",
    "ValidationError",
    "DecodeError",
    "KeypairIntegrityError",
)
