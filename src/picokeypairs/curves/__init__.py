"""Elliptic-curve primitives: secp256k1 (ECDSA), Ed25519 (EdDSA)."""

from .ed25519 import ed25519_public_key, ed25519_sign, ed25519_verify
from .secp256k1 import (CURVE_ORDER, decode_point, ecdsa_sign, ecdsa_verify,
                        encode_point, is_valid_scalar, pubkey_from_scalar,
                        pubkey_tweak_add)

__all__: tuple[str, ...] = (
    "CURVE_ORDER",
    "decode_point",
    "ecdsa_sign",
    "ecdsa_verify",
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
    "encode_point",
    "is_valid_scalar",
    "pubkey_from_scalar",
    "pubkey_tweak_add",
)
