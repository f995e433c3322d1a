"""Transcoding between fixed-width ``r || s`` signatures and ASN.1 DER.

JWS carries ECDSA signatures as the concatenation of ``r`` and ``s``, each
left-padded to the curve's coordinate width.  OpenSSL-style APIs produce and
consume the DER form instead::

    SEQUENCE { INTEGER r, INTEGER s }

Decoding is strict: only minimal (canonical) DER is accepted.
"""

from __future__ import annotations

from typing import Tuple, Union

from .errors import MalformedSignature

_SEQUENCE = 0x30
_INTEGER = 0x02

BytesLike = Union[bytes, bytearray, memoryview]


def _encode_length(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    if length <= 0xFF:
        return bytes([0x81, length])
    raise MalformedSignature(f"DER length too large: {length}")


def _encode_integer(value: bytes) -> bytes:
    stripped = value.lstrip(b"\x00") or b"\x00"
    if stripped[0] & 0x80:
        stripped = b"\x00" + stripped
    return bytes([_INTEGER]) + _encode_length(len(stripped)) + stripped


def concat_to_der(sig: BytesLike, width: int) -> bytes:
    """Encode a ``2 * width`` byte ``r || s`` signature as DER."""
    sig = bytes(sig)
    if len(sig) != 2 * width:
        raise MalformedSignature(
            f"expected {2 * width} byte signature, got {len(sig)}"
        )
    body = _encode_integer(sig[:width]) + _encode_integer(sig[width:])
    return bytes([_SEQUENCE]) + _encode_length(len(body)) + body


def _read_tlv(data: bytes, offset: int, tag: int) -> Tuple[bytes, int]:
    """Read one TLV with ``tag`` at ``offset``; return (value, next offset)."""
    if offset + 2 > len(data):
        raise MalformedSignature("truncated DER signature")
    if data[offset] != tag:
        raise MalformedSignature(
            f"unexpected DER tag 0x{data[offset]:02x}, wanted 0x{tag:02x}"
        )
    length = data[offset + 1]
    offset += 2
    if length == 0x81:
        if offset >= len(data):
            raise MalformedSignature("truncated DER length")
        length = data[offset]
        offset += 1
        if length < 0x80:
            raise MalformedSignature("non-minimal DER length")
    elif length & 0x80:
        raise MalformedSignature("unsupported DER length form")
    end = offset + length
    if end > len(data):
        raise MalformedSignature("truncated DER value")
    return data[offset:end], end


def _decode_integer(value: bytes, width: int) -> bytes:
    if not value:
        raise MalformedSignature("empty DER integer")
    if value[0] & 0x80:
        raise MalformedSignature("negative DER integer")
    if value[0] == 0 and len(value) > 1:
        if value[1] & 0x80 == 0:
            raise MalformedSignature("non-minimal DER integer")
        value = value[1:]
    if len(value) > width:
        raise MalformedSignature(
            f"DER integer of {len(value)} bytes exceeds width {width}"
        )
    return value.rjust(width, b"\x00")


def der_to_concat(der: BytesLike, width: int) -> bytes:
    """Decode a DER ECDSA signature into ``2 * width`` bytes of ``r || s``."""
    der = bytes(der)
    body, end = _read_tlv(der, 0, _SEQUENCE)
    if end != len(der):
        raise MalformedSignature("trailing bytes after DER sequence")
    r, offset = _read_tlv(body, 0, _INTEGER)
    s, offset = _read_tlv(body, offset, _INTEGER)
    if offset != len(body):
        raise MalformedSignature("DER sequence must hold exactly two integers")
    return _decode_integer(r, width) + _decode_integer(s, width)


__all__ = ["concat_to_der", "der_to_concat"]
