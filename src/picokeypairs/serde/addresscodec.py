"""
Ledger address codec: seeds, account ids and node public keys as base58check
strings over the Ripple alphabet.
"""

from __future__ import annotations

from typing import Literal

import base58

from ..exceptions import DecodeError, ValidationError

Algorithm = Literal["secp256k1", "ed25519"]

ALPHABET = base58.RIPPLE_ALPHABET

SECP256K1_SEED_VERSION = bytes([0x21])
ED25519_SEED_VERSION = bytes([0x01, 0xE1, 0x4B])
ACCOUNT_ID_VERSION = bytes([0x00])
NODE_PUBLIC_VERSION = bytes([0x1C])

SEED_LENGTH = 16
ACCOUNT_ID_LENGTH = 20
NODE_PUBLIC_LENGTH = 33

_SEED_VERSIONS: tuple[tuple[bytes, Algorithm], ...] = (
    (ED25519_SEED_VERSION, "ed25519"),
    (SECP256K1_SEED_VERSION, "secp256k1"),
)


def _encode(payload: bytes, version: bytes, expected_length: int) -> str:
    if len(payload) != expected_length:
        raise ValidationError(f"expected {expected_length} bytes, got {len(payload)}")
    return base58.b58encode_check(version + bytes(payload), alphabet=ALPHABET).decode(
        "ascii"
    )


def _decode_check(encoded: str) -> bytes:
    if not isinstance(encoded, str) or not encoded:
        raise DecodeError("encoded value must be a non-empty string")
    try:
        return base58.b58decode_check(encoded, alphabet=ALPHABET)
    except ValueError as e:
        raise DecodeError(f"invalid base58check string: {e}") from e


def _decode(encoded: str, version: bytes, expected_length: int) -> bytes:
    raw = _decode_check(encoded)
    if raw[: len(version)] != version or len(raw) != len(version) + expected_length:
        raise DecodeError("version or length mismatch")
    return raw[len(version) :]


def encode_seed(entropy: bytes, algorithm: Algorithm) -> str:
    """
    Encode 16 bytes of entropy and an algorithm tag as a seed string.

    Args:
        entropy: Exactly 16 bytes.
        algorithm: "secp256k1" or "ed25519".

    Returns:
        Seed string ("s..." for secp256k1, "sEd..." for ed25519).
    """
    for version, name in _SEED_VERSIONS:
        if name == algorithm:
            return _encode(entropy, version, SEED_LENGTH)
    raise ValidationError(f"unknown seed algorithm: {algorithm!r}")


def decode_seed(seed: str) -> tuple[bytes, Algorithm]:
    """
    Decode a seed string.

    Args:
        seed: Seed string as produced by encode_seed.

    Returns:
        (entropy, algorithm).

    Raises:
        DecodeError: bad characters, bad checksum, unknown version or length.
    """
    raw = _decode_check(seed)
    for version, name in _SEED_VERSIONS:
        if raw[: len(version)] == version and len(raw) == len(version) + SEED_LENGTH:
            return (raw[len(version) :], name)
    raise DecodeError("seed has unknown version or wrong length")


def encode_account_id(account_id: bytes) -> str:
    """Classic address ("r...") for a 20-byte account id."""
    return _encode(account_id, ACCOUNT_ID_VERSION, ACCOUNT_ID_LENGTH)


def decode_account_id(address: str) -> bytes:
    """20-byte account id from a classic address."""
    return _decode(address, ACCOUNT_ID_VERSION, ACCOUNT_ID_LENGTH)


def is_valid_classic_address(address: str) -> bool:
    try:
        decode_account_id(address)
    except DecodeError:
        return False
    return True


def encode_node_public(public_key: bytes) -> str:
    """Node public key string ("n...") for a 33-byte compressed secp256k1 key."""
    return _encode(public_key, NODE_PUBLIC_VERSION, NODE_PUBLIC_LENGTH)


def decode_node_public(node_public: str) -> bytes:
    """33-byte generator public key from a node public key string."""
    return _decode(node_public, NODE_PUBLIC_VERSION, NODE_PUBLIC_LENGTH)


__all__: tuple[str, ...] = (
    "Algorithm",
    "decode_account_id",
    "decode_node_public",
    "decode_seed",
    "encode_account_id",
    "encode_node_public",
    "encode_seed",
    "is_valid_classic_address",
)
