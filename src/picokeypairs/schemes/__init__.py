"""Signing schemes and the registry that picks one by tag or by key shape."""

from __future__ import annotations

from typing import Optional

from ..exceptions import ValidationError
from ..serde.addresscodec import Algorithm
from .base import HexOrBytes, Keypair, Scheme, decode_hex
from .ed25519 import Ed25519Scheme
from .secp256k1 import (Secp256k1Scheme, account_public_from_public_generator,
                        derive_scalar, parse_private_key)

SECP256K1: Algorithm = "secp256k1"
ED25519: Algorithm = "ed25519"

_SCHEMES: dict[str, type[Scheme]] = {
    SECP256K1: Secp256k1Scheme,
    ED25519: Ed25519Scheme,
}

_ALIASES: dict[Optional[str], Algorithm] = {
    None: SECP256K1,
    SECP256K1: SECP256K1,
    "ecdsa-secp256k1": SECP256K1,
    ED25519: ED25519,
}

_ED25519_KEY_BYTE = 0xED


def normalize_algorithm(algorithm: Optional[str]) -> Algorithm:
    """Canonical tag for algorithm; None means secp256k1."""
    try:
        return _ALIASES[algorithm]
    except (KeyError, TypeError):
        raise ValidationError(f"unknown algorithm: {algorithm!r}") from None


def select(algorithm: Optional[str]) -> type[Scheme]:
    """Scheme for an explicit algorithm tag."""
    return _SCHEMES[normalize_algorithm(algorithm)]


def infer(key: HexOrBytes) -> Algorithm:
    """
    Algorithm that produced key, from its bytes alone: 33 bytes with a
    leading 0xED byte is ed25519, anything else secp256k1.
    """
    raw = decode_hex(key, "key")
    if len(raw) == 33 and raw[0] == _ED25519_KEY_BYTE:
        return ED25519
    return SECP256K1


__all__: tuple[str, ...] = (
    "ED25519",
    "SECP256K1",
    "Algorithm",
    "Ed25519Scheme",
    "Keypair",
    "Scheme",
    "Secp256k1Scheme",
    "account_public_from_public_generator",
    "derive_scalar",
    "infer",
    "normalize_algorithm",
    "parse_private_key",
    "select",
)
