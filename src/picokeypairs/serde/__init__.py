"""Serialization / deserialization (serde): ledger base58check codec, DER signatures."""

from .addresscodec import (
    decode_account_id,
    decode_node_public,
    decode_seed,
    encode_account_id,
    encode_node_public,
    encode_seed,
    is_valid_classic_address,
)
from .der import der_decode_signature, der_encode_signature

__all__: tuple[str, ...] = (
    "decode_account_id",
    "decode_node_public",
    "decode_seed",
    "der_decode_signature",
    "der_encode_signature",
    "encode_account_id",
    "encode_node_public",
    "encode_seed",
    "is_valid_classic_address",
)
