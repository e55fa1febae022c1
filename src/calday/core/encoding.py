"""Binary form of a day count: zig-zag signed varint.

The encoding is the usual protobuf/LEB128 layout: the signed value is
zig-zag mapped to an unsigned one (0, -1, 1, -2 ... -> 0, 1, 2, 3 ...) and
written in little-endian 7-bit groups, the high bit of each byte flagging a
continuation. A signed 64-bit value needs at most ten bytes.

Decoding is strict. Three failure kinds are kept apart because they mean
different things to a caller:
    - TruncatedDateError: input ended inside the varint (or was empty)
    - DateOverflowError: the varint does not fit a signed 64-bit integer
    - TrailingDataError: a complete varint was followed by more bytes

Python 3.13+. Zero external dependencies.
"""

from calday.constants import INT64_MAX, INT64_MIN, MAX_VARINT_LEN
from calday.diagnostics import (
    DateOverflowError,
    ErrorTemplate,
    TrailingDataError,
    TruncatedDateError,
)

__all__ = ["decode_varint", "encode_varint"]


def encode_varint(value: int) -> bytes:
    """Encode a signed 64-bit integer as a zig-zag varint.

    Raises:
        DateOverflowError: If value is outside the signed 64-bit range.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise DateOverflowError(ErrorTemplate.encode_overflow(value))

    ux = (value << 1) if value >= 0 else ~(value << 1)
    out = bytearray()
    while ux >= 0x80:
        out.append((ux & 0x7F) | 0x80)
        ux >>= 7
    out.append(ux)
    return bytes(out)


def decode_varint(data: bytes) -> int:
    """Decode exactly one zig-zag varint occupying all of data.

    Raises:
        TruncatedDateError: If data is empty or ends mid-varint.
        DateOverflowError: If the encoded value overflows 64 bits.
        TrailingDataError: If data continues after the varint.
    """
    ux = 0
    shift = 0
    for i, b in enumerate(data):
        if i == MAX_VARINT_LEN:
            raise DateOverflowError(ErrorTemplate.decode_overflow(len(data)))
        if b < 0x80:
            # The tenth byte may only carry the single remaining bit.
            if i == MAX_VARINT_LEN - 1 and b > 1:
                raise DateOverflowError(ErrorTemplate.decode_overflow(len(data)))
            ux |= b << shift
            if i + 1 != len(data):
                raise TrailingDataError(ErrorTemplate.decode_trailing(len(data) - i - 1))
            x = ux >> 1
            return ~x if ux & 1 else x
        ux |= (b & 0x7F) << shift
        shift += 7
    raise TruncatedDateError(ErrorTemplate.decode_truncated(len(data)))
