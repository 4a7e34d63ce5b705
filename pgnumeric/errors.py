"""Numeric codec error classes."""


class NumericError(Exception):
    """Base error for recoverable numeric codec failures."""

    pass


class UnsupportedValue(NumericError):
    """Value has no counterpart on the other side of the codec (NaN, infinity)."""

    pass


class NumericOutOfRange(NumericError):
    """Decimal cannot be represented within the wire header's field widths."""

    pass


class InvalidWireValue(NumericError, ValueError):
    """Wire value violates a structural invariant (digit, weight or scale range)."""

    pass


class MalformedNumeric(NumericError):
    """Binary NUMERIC payload could not be parsed."""

    pass


class UnexpectedNull(NumericError):
    """SQL NULL was passed where a NUMERIC payload was required."""

    pass


class InternalInvariantViolation(AssertionError):
    """Codec logic produced an impossible intermediate value.

    Not a NumericError: this indicates a bug in the codec, not bad input,
    and callers are not expected to recover from it.
    """

    pass
