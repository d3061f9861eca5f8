"""
Common interface of the signing schemes, and the hex helpers they share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple, Union

from ..exceptions import DecodeError, ValidationError

HexOrBytes = Union[str, bytes, bytearray, memoryview]


class Keypair(NamedTuple):
    """Upper-case hex private and public key of one algorithm."""

    private_key: str
    public_key: str


def decode_hex(value: HexOrBytes, what: str = "value", *, malformed=ValidationError) -> bytes:
    """
    Bytes from a hex string; bytes-like input is passed through.

    Args:
        value: Hex string or bytes-like.
        what: Name used in the error message.
        malformed: Exception class raised for non-hex input.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be a hex string, got {type(value).__name__}")
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise malformed(f"{what} is not valid hex: {e}") from e


def decode_signature_hex(value: HexOrBytes) -> bytes:
    return decode_hex(value, "signature", malformed=DecodeError)


def encode_hex(data: bytes) -> str:
    return bytes(data).hex().upper()


class Scheme(ABC):
    """
    One signing algorithm: keypair derivation from 16 bytes of entropy,
    signing, verification. Implementations are stateless; all methods are
    classmethods.
    """

    name: str

    @classmethod
    @abstractmethod
    def derive_keypair(
        cls, entropy: bytes, validator: bool = False, account_index: int = 0
    ) -> Keypair: ...

    @classmethod
    @abstractmethod
    def sign(cls, message: bytes, private_key: str) -> str: ...

    @classmethod
    @abstractmethod
    def verify(cls, message: bytes, signature: HexOrBytes, public_key: str) -> bool: ...


__all__: tuple[str, ...] = (
    "HexOrBytes",
    "Keypair",
    "Scheme",
    "decode_hex",
    "decode_signature_hex",
    "encode_hex",
)
