"""
Ed25519 signing scheme. Keys carry a one-byte 0xED prefix so they can be told
apart from compressed secp256k1 keys of the same length.
"""

from __future__ import annotations

from ..curves import ed25519_public_key, ed25519_sign, ed25519_verify
from ..exceptions import ValidationError
from ..hashes import sha512_half
from .base import (HexOrBytes, Keypair, Scheme, decode_hex, decode_signature_hex,
                   encode_hex)

KEY_PREFIX = "ED"


def _strip_prefix(key: str, what: str) -> bytes:
    if not isinstance(key, str) or len(key) != 66:
        raise ValidationError(f"ed25519 {what} must be 33 bytes (66 hex) including prefix")
    if key[:2].upper() != KEY_PREFIX:
        raise ValidationError(f"ed25519 {what} must start with '{KEY_PREFIX}'")
    return decode_hex(key[2:], what)


class Ed25519Scheme(Scheme):
    name = "ed25519"

    @classmethod
    def derive_keypair(
        cls, entropy: bytes, validator: bool = False, account_index: int = 0
    ) -> Keypair:
        # ed25519 has no key families; validator and account_index do not apply.
        seed = sha512_half(bytes(entropy))
        return Keypair(
            KEY_PREFIX + encode_hex(seed),
            KEY_PREFIX + encode_hex(ed25519_public_key(seed)),
        )

    @classmethod
    def sign(cls, message: bytes, private_key: str) -> str:
        if not isinstance(message, (bytes, bytearray, memoryview)):
            raise ValidationError("message must be bytes-like")
        seed = _strip_prefix(private_key, "private key")
        return encode_hex(ed25519_sign(bytes(message), seed))

    @classmethod
    def verify(cls, message: bytes, signature: HexOrBytes, public_key: str) -> bool:
        sig = decode_signature_hex(signature)
        try:
            pub = _strip_prefix(public_key, "public key")
        except ValidationError:
            return False
        return ed25519_verify(bytes(message), sig, pub)


__all__: tuple[str, ...] = ("Ed25519Scheme", "KEY_PREFIX")
