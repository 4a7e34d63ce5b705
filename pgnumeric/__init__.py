"""PostgreSQL NUMERIC codec for Python Decimal values."""

from pgnumeric.binary import from_sql, pack, to_sql, unpack
from pgnumeric.codec import decode, encode
from pgnumeric.config import DEFAULT_CODEC_CONFIG, CodecConfig
from pgnumeric.errors import (
    InternalInvariantViolation,
    InvalidWireValue,
    MalformedNumeric,
    NumericError,
    NumericOutOfRange,
    UnexpectedNull,
    UnsupportedValue,
)
from pgnumeric.wire import ZERO, Negative, NotANumber, PgNumeric, Positive, Sign

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "pack",
    "unpack",
    "to_sql",
    "from_sql",
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    "NumericError",
    "UnsupportedValue",
    "NumericOutOfRange",
    "InvalidWireValue",
    "MalformedNumeric",
    "UnexpectedNull",
    "InternalInvariantViolation",
    "Positive",
    "Negative",
    "NotANumber",
    "PgNumeric",
    "Sign",
    "ZERO",
    "__version__",
]
