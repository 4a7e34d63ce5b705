"""Binary NUMERIC framing.

PostgreSQL sends NUMERIC in binary format as a big-endian header followed
by the digit array:

    int16  ndigits
    int16  weight
    uint16 sign     (0x0000 positive, 0x4000 negative, 0xC000 NaN)
    uint16 dscale
    int16  digits[ndigits]

pack()/unpack() translate between this layout and wire values; to_sql()
and from_sql() chain them with the Decimal codec.
"""

from __future__ import annotations

import struct
from decimal import Decimal

import structlog

from pgnumeric.codec import decode, encode
from pgnumeric.config import DEFAULT_CODEC_CONFIG, CodecConfig
from pgnumeric.constants import INT16_MAX
from pgnumeric.errors import MalformedNumeric, NumericOutOfRange, UnexpectedNull
from pgnumeric.wire import Negative, NotANumber, PgNumeric, Positive, Sign

logger = structlog.get_logger()

_HEADER = struct.Struct(">hhHH")
HEADER_SIZE = _HEADER.size
DIGIT_SIZE = 2


def pack(numeric: PgNumeric) -> bytes:
    """Serialize a wire value to the binary NUMERIC layout.

    NotANumber is written with no digits, weight 0 and dscale 0.

    Raises:
        NumericOutOfRange: If the digit count does not fit the int16 header field
    """
    match numeric:
        case Positive() | Negative():
            digits = numeric.digits
            if len(digits) > INT16_MAX:
                raise NumericOutOfRange(
                    f"{len(digits)} digits exceed the NUMERIC limit of {INT16_MAX}"
                )
            header = _HEADER.pack(len(digits), numeric.weight, numeric.sign, numeric.scale)
            return header + struct.pack(f">{len(digits)}h", *digits)
        case NotANumber():
            return _HEADER.pack(0, 0, Sign.NAN, 0)
        case _:
            raise TypeError(f"pack requires a wire value, got {type(numeric).__name__}")


def unpack(data: bytes) -> PgNumeric:
    """Parse the binary NUMERIC layout into a wire value.

    Raises:
        MalformedNumeric: If the buffer is truncated, has trailing bytes,
            declares a negative digit count or carries an unknown sign tag
        InvalidWireValue: If a digit lies outside [0, 9999]
    """
    if len(data) < HEADER_SIZE:
        raise MalformedNumeric(f"NUMERIC header needs {HEADER_SIZE} bytes, got {len(data)}")

    ndigits, weight, sign_tag, scale = _HEADER.unpack_from(data)
    if ndigits < 0:
        raise MalformedNumeric(f"Negative digit count: {ndigits}")

    expected = HEADER_SIZE + ndigits * DIGIT_SIZE
    if len(data) != expected:
        raise MalformedNumeric(
            f"NUMERIC with {ndigits} digits needs {expected} bytes, got {len(data)}"
        )

    try:
        sign = Sign(sign_tag)
    except ValueError as err:
        raise MalformedNumeric(f"Unknown NUMERIC sign tag: {sign_tag:#06x}") from err

    if sign is Sign.NAN:
        return NotANumber()

    digits = struct.unpack_from(f">{ndigits}h", data, HEADER_SIZE)
    if sign is Sign.NEGATIVE:
        return Negative(weight=weight, scale=scale, digits=digits)
    return Positive(weight=weight, scale=scale, digits=digits)


def to_sql(value: Decimal | int, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bytes:
    """Encode a Decimal straight to binary NUMERIC bytes."""
    return pack(encode(value, config))


def from_sql(data: bytes | None) -> Decimal:
    """Decode binary NUMERIC bytes into a Decimal.

    Raises:
        UnexpectedNull: If data is None (SQL NULL)
        MalformedNumeric: If the payload cannot be parsed
        UnsupportedValue: If the payload is NaN
    """
    if data is None:
        logger.debug("numeric_unexpected_null")
        raise UnexpectedNull("Unexpected null for non-null NUMERIC column")
    return decode(unpack(data))


__all__ = ["HEADER_SIZE", "DIGIT_SIZE", "pack", "unpack", "to_sql", "from_sql"]
