"""
Account addresses from public keys, including the address of account 0 of a
node's (validator's) key family.
"""

from __future__ import annotations

from .exceptions import DecodeError
from .hashes import hash160
from .schemes import account_public_from_public_generator
from .schemes.base import HexOrBytes, decode_hex
from .serde import decode_node_public, encode_account_id


def derive_address_from_bytes(public_key: bytes) -> str:
    """Classic address of a raw public key (either algorithm)."""
    return encode_account_id(hash160(bytes(public_key)))


def derive_address(public_key: HexOrBytes) -> str:
    """
    Classic address ("r...") of a hex public key.

    The account id is RIPEMD-160(SHA-256(public key bytes)); the algorithm
    that produced the key does not matter.
    """
    return derive_address_from_bytes(decode_hex(public_key, "public key"))


def derive_node_address(node_public: str) -> str:
    """
    Classic address of account 0 of the key family a node public key
    ("n...") generates. Needs no private material.

    Raises:
        DecodeError: malformed node public key, or one that is not a
            secp256k1 curve point.
    """
    generator = decode_node_public(node_public)
    try:
        account_public = account_public_from_public_generator(generator)
    except ValueError as e:
        raise DecodeError(f"node public key is not a valid generator: {e}") from e
    return derive_address_from_bytes(account_public)


__all__: tuple[str, ...] = (
    "derive_address",
    "derive_address_from_bytes",
    "derive_node_address",
)
