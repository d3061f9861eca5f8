"""Account and node addresses."""

import pytest

from picokeypairs import (DecodeError, derive_address, derive_address_from_bytes,
                          derive_keypair, derive_node_address)
from picokeypairs.serde import encode_node_public, is_valid_classic_address

SECP256K1_PUBLIC = "030D58EB48B4420B1F7B9DF55087E0E29FEF0E8468F9A6825B01CA2C361042D435"
SECP256K1_ADDRESS = "rU6K7V3Po4snVhBBaU29sesqs2qTQJWDw1"
ED25519_PUBLIC = "ED01FA53FA5A7E77798F882ECE20B1ABC00BB358A9E55A202D0D0676BD0CE37A63"
ED25519_ADDRESS = "rLUEXYuLiQptky37CqLcm9USQpPiz5rkpD"

GENESIS_SEED = "snoPBrXtMeMyMHUVTgbuqAfg1SUTb"
GENESIS_PUBLIC = "0330E7FC9D56BB25D6893BA3F317AE5BCF33B3291BD63DB32654A313222F7FD020"
GENESIS_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"


def test_derive_address_vectors() -> None:
    assert derive_address(SECP256K1_PUBLIC) == SECP256K1_ADDRESS
    assert derive_address(ED25519_PUBLIC) == ED25519_ADDRESS
    assert derive_address(GENESIS_PUBLIC) == GENESIS_ADDRESS


def test_derive_address_deterministic() -> None:
    assert derive_address(SECP256K1_PUBLIC) == derive_address(SECP256K1_PUBLIC)
    assert derive_address(SECP256K1_PUBLIC.lower()) == SECP256K1_ADDRESS
    assert derive_address_from_bytes(bytes.fromhex(ED25519_PUBLIC)) == ED25519_ADDRESS
    assert is_valid_classic_address(derive_address(ED25519_PUBLIC))


def test_derive_node_address_matches_account_zero() -> None:
    """A node key's address is the address of account 0 of its key family."""
    generator = derive_keypair(GENESIS_SEED, validator=True).public_key
    node_public = encode_node_public(bytes.fromhex(generator))
    node_address = derive_node_address(node_public)
    assert node_address == GENESIS_ADDRESS
    assert derive_node_address(node_public) == node_address
    assert node_address != derive_address(generator)


def test_derive_node_address_rejects_malformed() -> None:
    with pytest.raises(DecodeError):
        derive_node_address(GENESIS_ADDRESS)
    with pytest.raises(DecodeError):
        derive_node_address("n9KHn8NfbBsZV5q8bLfS72XyGqwFt5mgoPbcTV4c6qKiuPTAtXYx")
    with pytest.raises(DecodeError):
        # x >= p is not a field element
        derive_node_address(encode_node_public(b"\x02" + b"\xff" * 32))
