"""
Strict DER encoding of ECDSA signatures: SEQUENCE { INTEGER r, INTEGER s }.
"""

from __future__ import annotations

from ..exceptions import DecodeError

_TAG_SEQUENCE = 0x30
_TAG_INTEGER = 0x02


def _encode_length(n: int) -> bytes:
    if n < 0x80:
        return bytes([n])
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(body)]) + body


def _encode_integer(v: int) -> bytes:
    if v < 0:
        raise ValueError("DER integer must be non-negative")
    body = v.to_bytes(max(1, (v.bit_length() + 7) // 8), "big")
    if body[0] & 0x80:
        body = b"\x00" + body
    return bytes([_TAG_INTEGER]) + _encode_length(len(body)) + body


def der_encode_signature(r: int, s: int) -> bytes:
    """
    DER-encode an ECDSA signature.

    Args:
        r, s: Signature scalars.

    Returns:
        DER bytes (SEQUENCE of two INTEGERs).
    """
    body = _encode_integer(r) + _encode_integer(s)
    return bytes([_TAG_SEQUENCE]) + _encode_length(len(body)) + body


def _read_tlv(data: bytes, pos: int, tag: int) -> tuple[bytes, int]:
    """Read one tag-length-value at pos; returns (value, next position)."""
    if pos + 2 > len(data):
        raise DecodeError("DER: truncated")
    if data[pos] != tag:
        raise DecodeError(f"DER: expected tag 0x{tag:02x}, got 0x{data[pos]:02x}")
    length = data[pos + 1]
    pos += 2
    if length & 0x80:
        n_bytes = length & 0x7F
        if n_bytes == 0 or n_bytes > 2 or pos + n_bytes > len(data):
            raise DecodeError("DER: invalid length")
        length = int.from_bytes(data[pos : pos + n_bytes], "big")
        if length < 0x80 or data[pos] == 0:
            raise DecodeError("DER: non-minimal length")
        pos += n_bytes
    end = pos + length
    if end > len(data):
        raise DecodeError("DER: truncated")
    return data[pos:end], end


def _decode_integer(body: bytes) -> int:
    if not body:
        raise DecodeError("DER: empty integer")
    if body[0] & 0x80:
        raise DecodeError("DER: negative integer")
    if len(body) > 1 and body[0] == 0 and not body[1] & 0x80:
        raise DecodeError("DER: unnecessary leading zero")
    return int.from_bytes(body, "big")


def der_decode_signature(der: bytes) -> tuple[int, int]:
    """
    Parse a DER-encoded ECDSA signature.

    Args:
        der: DER bytes.

    Returns:
        (r, s) as integers.

    Raises:
        DecodeError: on any structural defect, including trailing bytes.
    """
    seq, end = _read_tlv(der, 0, _TAG_SEQUENCE)
    if end != len(der):
        raise DecodeError("DER: trailing bytes after signature")
    r_body, pos = _read_tlv(seq, 0, _TAG_INTEGER)
    s_body, pos = _read_tlv(seq, pos, _TAG_INTEGER)
    if pos != len(seq):
        raise DecodeError("DER: trailing bytes inside sequence")
    return (_decode_integer(r_body), _decode_integer(s_body))


__all__: tuple[str, ...] = ("der_decode_signature", "der_encode_signature")
