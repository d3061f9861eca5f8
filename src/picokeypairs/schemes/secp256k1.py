"""
secp256k1 signing scheme: family-generator key derivation, ECDSA over
SHA-512Half digests, DER signatures.
"""

from __future__ import annotations

import logging

from ..curves import secp256k1 as curve
from ..exceptions import KeypairIntegrityError, ValidationError
from ..hashes import sha512_half, sha512_half_u32
from ..serde import der_decode_signature, der_encode_signature
from .base import (HexOrBytes, Keypair, Scheme, decode_hex, decode_signature_hex,
                   encode_hex)

log = logging.getLogger(__name__)

PRIVATE_KEY_PREFIX = "00"

_MAX_INDEX = 0xFFFFFFFF


def derive_scalar(data: bytes, discriminator: int | None = None) -> int:
    """
    First valid private scalar in the hash sequence of data.

    Candidate i is sha512_half(data || [discriminator] || i), with the
    optional discriminator and i as 4-byte big-endian words. The first
    candidate with 0 < c < n is returned; this is almost always i = 0.

    Raises:
        KeypairIntegrityError: all 2**32 indices were rejected.
    """
    words = () if discriminator is None else (discriminator,)
    for index in range(_MAX_INDEX + 1):
        candidate = int.from_bytes(sha512_half_u32(data, *words, index), "big")
        if curve.is_valid_scalar(candidate):
            return candidate
        log.debug("secp256k1 key candidate %d rejected, retrying", index)
    raise KeypairIntegrityError("no valid secp256k1 scalar in 2**32 candidates")


def account_public_from_public_generator(generator: bytes) -> bytes:
    """
    Public key of account 0 of the family whose generator public key is given.

    Equals the public key of derive_keypair(entropy) when generator is the
    public key of derive_keypair(entropy, validator=True).
    """
    return curve.pubkey_tweak_add(bytes(generator), derive_scalar(generator, 0))


def parse_private_key(private_key: str) -> int:
    """
    Private scalar from a 66-hex ("00"-prefixed) or 64-hex (bare) private key.

    Raises:
        ValidationError: any other length, a wrong prefix, non-hex, or a
            scalar outside (0, n).
    """
    if not isinstance(private_key, str):
        raise ValidationError("secp256k1 private key must be a hex string")
    if len(private_key) == 66:
        if not private_key.startswith(PRIVATE_KEY_PREFIX):
            raise ValidationError("66-character secp256k1 private key must start with '00'")
        private_key = private_key[2:]
    elif len(private_key) != 64:
        raise ValidationError("secp256k1 private key must be 64 or 66 hex characters")
    d = int.from_bytes(decode_hex(private_key, "private key"), "big")
    if not curve.is_valid_scalar(d):
        raise ValidationError("secp256k1 private key is out of range")
    return d


class Secp256k1Scheme(Scheme):
    name = "secp256k1"

    @classmethod
    def derive_keypair(
        cls, entropy: bytes, validator: bool = False, account_index: int = 0
    ) -> Keypair:
        """
        Keypair from 16 bytes of entropy.

        With validator=True the family generator (root) key is returned;
        otherwise the account key at account_index, (root + tweak) mod n,
        where tweak is derived from the generator's public key.
        """
        root = derive_scalar(entropy)
        if validator:
            d = root
        else:
            generator = curve.pubkey_from_scalar(root)
            d = (derive_scalar(generator, account_index) + root) % curve.CURVE_ORDER
        private_key = PRIVATE_KEY_PREFIX + encode_hex(d.to_bytes(32, "big"))
        return Keypair(private_key, encode_hex(curve.pubkey_from_scalar(d)))

    @classmethod
    def sign(cls, message: bytes, private_key: str) -> str:
        d = parse_private_key(private_key)
        r, s = curve.ecdsa_sign(d, sha512_half(bytes(message)))
        return encode_hex(der_encode_signature(r, s))

    @classmethod
    def verify(cls, message: bytes, signature: HexOrBytes, public_key: str) -> bool:
        """
        False for a wrong key, message or non-canonical signature; malformed
        DER raises DecodeError.
        """
        r, s = der_decode_signature(decode_signature_hex(signature))
        try:
            pub = decode_hex(public_key, "public key")
        except ValidationError:
            return False
        return curve.ecdsa_verify(sha512_half(bytes(message)), r, s, pub)


__all__: tuple[str, ...] = (
    "PRIVATE_KEY_PREFIX",
    "Secp256k1Scheme",
    "account_public_from_public_generator",
    "derive_scalar",
    "parse_private_key",
)
