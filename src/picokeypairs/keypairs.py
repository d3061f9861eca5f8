"""
Seeds and keypairs: seed generation, self-checked keypair derivation, and
sign/verify entry points that pick the algorithm from the key itself.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from . import schemes
from .exceptions import KeypairIntegrityError, ValidationError
from .hashes import sha512_half
from .schemes import Keypair
from .schemes.base import HexOrBytes, decode_hex
from .serde import decode_seed, encode_seed

log = logging.getLogger(__name__)

ENTROPY_SIZE = 16

SELF_CHECK_MESSAGE = b"This test message should verify."


def generate_seed(
    entropy: Optional[bytes] = None,
    algorithm: Optional[str] = None,
    random_bytes: Callable[[int], bytes] = os.urandom,
) -> str:
    """
    New seed string for entropy and algorithm.

    Args:
        entropy: At least 16 bytes; only the first 16 are used. Drawn from
            random_bytes when omitted.
        algorithm: "secp256k1" (default) or "ed25519".
        random_bytes: Secure random source, called as random_bytes(16).

    Returns:
        Encoded seed.

    Raises:
        ValidationError: entropy shorter than 16 bytes, or unknown algorithm.
    """
    tag = schemes.normalize_algorithm(algorithm)
    if entropy is None:
        entropy = random_bytes(ENTROPY_SIZE)
    elif len(entropy) < ENTROPY_SIZE:
        raise ValidationError(f"entropy too short: {len(entropy)} < {ENTROPY_SIZE} bytes")
    return encode_seed(bytes(entropy[:ENTROPY_SIZE]), tag)


def derive_keypair(seed: str, validator: bool = False, account_index: int = 0) -> Keypair:
    """
    Keypair for a seed, checked by signing and verifying a fixed message.

    Args:
        seed: Seed string.
        validator: secp256k1 only; return the family generator keypair
            instead of an account keypair.
        account_index: secp256k1 only; which account of the family.

    Returns:
        Keypair(private_key, public_key) as upper-case hex.

    Raises:
        DecodeError: malformed seed.
        KeypairIntegrityError: the derived keypair failed the self-check.
    """
    entropy, algorithm = decode_seed(seed)
    scheme = schemes.select(algorithm)
    keypair = scheme.derive_keypair(entropy, validator=validator, account_index=account_index)
    message = sha512_half(SELF_CHECK_MESSAGE)
    signature = scheme.sign(message, keypair.private_key)
    if not scheme.verify(message, signature, keypair.public_key):
        log.error("%s keypair %s failed its self-check", algorithm, keypair.public_key)
        raise KeypairIntegrityError("derived keypair did not generate verifiable signature")
    log.debug("derived %s keypair %s", algorithm, keypair.public_key)
    return keypair


def sign(message_hex: HexOrBytes, private_key: str) -> str:
    """
    Sign a hex message with either algorithm, chosen from the private key.

    Returns:
        Upper-case hex signature (DER for secp256k1, 64 raw bytes for ed25519).
    """
    scheme = schemes.select(schemes.infer(private_key))
    return scheme.sign(decode_hex(message_hex, "message"), private_key)


def verify(message_hex: HexOrBytes, signature: HexOrBytes, public_key: str) -> bool:
    """True iff signature over the hex message verifies; algorithm chosen from public_key."""
    scheme = schemes.select(schemes.infer(public_key))
    return scheme.verify(decode_hex(message_hex, "message"), signature, public_key)


__all__: tuple[str, ...] = (
    "ENTROPY_SIZE",
    "SELF_CHECK_MESSAGE",
    "decode_seed",
    "derive_keypair",
    "generate_seed",
    "sign",
    "verify",
)
