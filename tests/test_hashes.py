"""Reference vectors for SHA-512Half, RIPEMD-160 and Hash160."""

import hashlib

import pytest

from picokeypairs.hashes import hash160, ripemd160, sha512_half, sha512_half_u32


@pytest.mark.parametrize(
    "data, digest",
    [
        (b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
        (b"a", "0bdc9d2d256b3ee9daae347be6f4dc835a467ffe"),
        (b"abc", "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"),
        (b"message digest", "5d0689ef49d2fae572b881b123a85ffa21595f36"),
        (
            b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            "12a053384a9c0c88e405a06c27dcf49ada62eb2b",
        ),
        (b"abcdefghijklmnopqrstuvwxyz", "f71c27109c692c1b56bbdceb5b9d2865b3708dbc"),
        (b"1234567890" * 8, "9b752e45573d4b39f4dbd3323cab82bf63326bfb"),
    ],
)
def test_ripemd160_vectors(data: bytes, digest: str) -> None:
    assert ripemd160(data).hex() == digest


def test_ripemd160_multi_block() -> None:
    """Inputs longer than one block, and lengths either side of a block boundary."""
    assert len(ripemd160(b"x" * 200)) == 20
    assert ripemd160(b"x" * 64) != ripemd160(b"x" * 65)


def test_hash160_of_generator_pubkey() -> None:
    pub = bytes.fromhex(
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )
    assert hash160(pub).hex() == "751e76e8199196d454941c45d1b3a323f1433bd6"


def test_sha512_half() -> None:
    assert sha512_half(b"").hex() == (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
    )
    assert len(sha512_half(b"x" * 1000)) == 32


def test_sha512_half_u32_appends_big_endian_words() -> None:
    data = b"seed"
    expected = hashlib.sha512(data + b"\x00\x00\x00\x01\x00\x00\x01\x00").digest()[:32]
    assert sha512_half_u32(data, 1, 256) == expected
    assert sha512_half_u32(data) == sha512_half(data)
