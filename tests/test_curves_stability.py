"""Stability tests for curve implementations.

Lock in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors) is detected. Run with PYTHONPATH=src.
"""

from __future__ import annotations

import pytest

from picokeypairs.curves import (CURVE_ORDER, decode_point, ecdsa_sign, ecdsa_verify,
                                 ed25519_public_key, ed25519_sign, ed25519_verify,
                                 encode_point, is_valid_scalar, pubkey_from_scalar,
                                 pubkey_tweak_add)
from picokeypairs.hashes import sha512_half

# --- secp256k1 ---
SECP_PUB_1 = bytes.fromhex(
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)
SECP_PUB_1_UNCOMPRESSED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_PUB_2 = bytes.fromhex(
    "02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
)
SECP_PUB_3 = bytes.fromhex(
    "02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"
)
SECP_MSG_HASH = sha512_half(b"message to sign")

# --- Ed25519: RFC 8032 test vector 1 ---
ED25519_SECRET = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
ED25519_PUBLIC_EXPECTED = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
ED25519_MSG = b""
ED25519_SIG_EXPECTED = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_secp256k1_pubkey_from_scalar_stable() -> None:
    assert pubkey_from_scalar(1) == SECP_PUB_1
    assert pubkey_from_scalar(2) == SECP_PUB_2
    assert pubkey_from_scalar(3) == SECP_PUB_3


def test_secp256k1_scalar_range() -> None:
    assert not is_valid_scalar(0)
    assert is_valid_scalar(1)
    assert is_valid_scalar(CURVE_ORDER - 1)
    assert not is_valid_scalar(CURVE_ORDER)
    with pytest.raises(ValueError):
        pubkey_from_scalar(CURVE_ORDER)


def test_secp256k1_point_encoding() -> None:
    """Compressed and uncompressed encodings decode to the same point."""
    point = decode_point(SECP_PUB_1)
    assert decode_point(SECP_PUB_1_UNCOMPRESSED) == point
    assert encode_point(*point) == SECP_PUB_1
    with pytest.raises(ValueError):
        decode_point(b"\x05" + SECP_PUB_1[1:])
    with pytest.raises(ValueError):
        decode_point(SECP_PUB_1[:-1])


def test_secp256k1_tweak_add() -> None:
    """1*G + 2*G == 3*G."""
    assert pubkey_tweak_add(SECP_PUB_1, 2) == SECP_PUB_3


def test_secp256k1_sign_deterministic_low_s() -> None:
    r, s = ecdsa_sign(1, SECP_MSG_HASH)
    assert (r, s) == ecdsa_sign(1, SECP_MSG_HASH)
    assert s <= CURVE_ORDER // 2
    assert ecdsa_verify(SECP_MSG_HASH, r, s, SECP_PUB_1) is True
    assert ecdsa_verify(SECP_MSG_HASH, r, s, SECP_PUB_1_UNCOMPRESSED) is True


def test_secp256k1_verify_rejects() -> None:
    r, s = ecdsa_sign(1, SECP_MSG_HASH)
    assert ecdsa_verify(SECP_MSG_HASH, r, s, SECP_PUB_2) is False
    assert ecdsa_verify(sha512_half(b"other"), r, s, SECP_PUB_1) is False
    assert ecdsa_verify(SECP_MSG_HASH, r, CURVE_ORDER - s, SECP_PUB_1) is False
    assert ecdsa_verify(SECP_MSG_HASH, 0, s, SECP_PUB_1) is False
    assert ecdsa_verify(SECP_MSG_HASH, r, s, b"\x02" + bytes(32)) is False


def test_ed25519_public_key_stable() -> None:
    """Ed25519 public key for RFC 8032 test secret must not change."""
    assert ed25519_public_key(ED25519_SECRET) == ED25519_PUBLIC_EXPECTED


def test_ed25519_sign_stable() -> None:
    """Ed25519 signature for RFC 8032 test vector must not change."""
    assert ed25519_sign(ED25519_MSG, ED25519_SECRET) == ED25519_SIG_EXPECTED


def test_ed25519_verify() -> None:
    assert (
        ed25519_verify(ED25519_MSG, ED25519_SIG_EXPECTED, ED25519_PUBLIC_EXPECTED)
        is True
    )
    assert ed25519_verify(b"x", ED25519_SIG_EXPECTED, ED25519_PUBLIC_EXPECTED) is False
    assert (
        ed25519_verify(ED25519_MSG, bytes(63) + b"\x00", ED25519_PUBLIC_EXPECTED)
        is False
    )
    assert ed25519_verify(ED25519_MSG, ED25519_SIG_EXPECTED, bytes(31)) is False
