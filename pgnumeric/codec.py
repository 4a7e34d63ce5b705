"""Conversion between Decimal and NUMERIC wire values.

encode() and decode() are pure functions: every call builds a fresh wire
value or Decimal and shares no state with other calls.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from pgnumeric.config import DEFAULT_CODEC_CONFIG, CodecConfig
from pgnumeric.constants import DEC_DIGITS, INT16_MAX, INT16_MIN
from pgnumeric.digits import from_base_10000, to_base_10000
from pgnumeric.errors import NumericOutOfRange, UnsupportedValue
from pgnumeric.wire import ZERO, Negative, NotANumber, PgNumeric, Positive

logger = structlog.get_logger()


def _as_decimal(value: Decimal | int) -> Decimal:
    """Accept Decimal or int; floats are rejected since they are not exact."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(f"encode requires Decimal or int, got {type(value).__name__}")


def _split_decimal(value: Decimal) -> tuple[bool, int, int]:
    """Split a finite Decimal into (negative, magnitude, scale).

    A positive exponent (e.g. Decimal("1E+3")) is multiplied into the
    magnitude so the scale is never negative.
    """
    sign, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int)  # Checked by caller: value is finite
    magnitude = int(Decimal((0, digits, 0)))
    if exponent > 0:
        return bool(sign), magnitude * 10**exponent, 0
    return bool(sign), magnitude, -exponent


def encode(value: Decimal | int, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> PgNumeric:
    """Encode a Decimal as a NUMERIC wire value.

    The magnitude is padded with decimal zeros until the decimal point lies
    on a base-10000 digit boundary, split into base-10000 digits, and then
    stripped of trailing zero digits after the point (those only come from
    the padding). Zero always encodes to the canonical form
    Positive(weight=0, scale=0, digits=(0,)).

    Args:
        value: Decimal (or int) to encode
        config: Codec configuration

    Returns:
        Positive, Negative or NotANumber wire value

    Raises:
        UnsupportedValue: If value is infinite, or NaN with encode_nan disabled
        NumericOutOfRange: If scale exceeds config.max_scale or the weight
            does not fit in int16
        TypeError: If value is neither Decimal nor int

    Examples:
        >>> encode(Decimal("-123.456"))
        Negative(weight=0, scale=3, digits=(123, 4560))
    """
    number = _as_decimal(value)

    if number.is_nan():
        if not config.encode_nan:
            raise UnsupportedValue("NaN encoding is disabled by configuration")
        return NotANumber()
    if number.is_infinite():
        raise UnsupportedValue(f"Cannot encode {number} as NUMERIC")
    if number.is_zero():
        return ZERO

    # The most significant decimal digit at 10^a lands in base-10000 digit a // 4
    leading_weight = number.adjusted() // DEC_DIGITS
    if not INT16_MIN <= leading_weight <= INT16_MAX:
        raise NumericOutOfRange(f"Weight {leading_weight} does not fit in int16")

    negative, integer, scale = _split_decimal(number)
    if scale > config.max_scale:
        raise NumericOutOfRange(f"Scale {scale} exceeds maximum {config.max_scale}")

    # Pad so the decimal point lies on a digit boundary. A scale that is
    # already a multiple of 4 still gets a full extra digit, trimmed below.
    integer *= 10 ** (DEC_DIGITS - scale % DEC_DIGITS)

    digits = list(to_base_10000(integer))
    digits.reverse()

    digits_after_decimal = scale // DEC_DIGITS + 1
    weight = len(digits) - digits_after_decimal - 1

    # Trailing zero digits after the point are padding, not significant figures
    index_of_decimal = max(weight + 1, 0)
    relevant = len(digits)
    while relevant > index_of_decimal and digits[relevant - 1] == 0:
        relevant -= 1
    del digits[relevant:]

    logger.debug(
        "numeric_encoded",
        negative=negative,
        weight=weight,
        scale=scale,
        ndigits=len(digits),
    )

    if negative:
        return Negative(weight=weight, scale=scale, digits=tuple(digits))
    return Positive(weight=weight, scale=scale, digits=tuple(digits))


def decode(numeric: PgNumeric) -> Decimal:
    """Decode a NUMERIC wire value into a Decimal.

    Digits are accumulated most significant first, which gives the first
    digit a place value of 10000^(ndigits - 1); the exponent is corrected
    so that it gets 10000^weight instead.

    The wire scale is not consulted, so trailing zero digits in the last
    base-10000 group survive as decimal zeros: a server value of 0.01
    (weight=-1, digits=(100,)) decodes to Decimal("0.0100").

    Args:
        numeric: Wire value to decode

    Returns:
        The exact Decimal value (no context rounding is applied)

    Raises:
        UnsupportedValue: If numeric is NotANumber
        TypeError: If numeric is not a wire value
    """
    match numeric:
        case Positive(weight=weight, digits=digits):
            sign = 0
        case Negative(weight=weight, digits=digits):
            sign = 1
        case NotANumber():
            logger.debug("numeric_decode_nan")
            raise UnsupportedValue("NaN is not supported when decoding to Decimal")
        case _:
            raise TypeError(f"decode requires a wire value, got {type(numeric).__name__}")

    magnitude = from_base_10000(digits)
    correction_exp = DEC_DIGITS * (weight - len(digits) + 1)

    # Built from the digit tuple so the result is exact regardless of the
    # active decimal context precision
    result = Decimal((sign, Decimal(magnitude).as_tuple().digits, correction_exp))

    logger.debug("numeric_decoded", weight=weight, ndigits=len(digits), exponent=correction_exp)
    return result


__all__ = ["encode", "decode"]
