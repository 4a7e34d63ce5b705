"""Codec configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pgnumeric.constants import UINT16_MAX

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class CodecConfig:
    """Behavior flags for the numeric codec.

    Attributes:
        encode_nan: If True, Decimal NaN encodes to NotANumber. If False,
            encoding NaN raises UnsupportedValue.
        max_scale: Largest decimal scale accepted by encode (default: the
            uint16 limit of the wire header). Lower it to 16383 to match the
            server's NUMERIC_DSCALE_MAX.
    """

    encode_nan: bool = True
    max_scale: int = UINT16_MAX

    def __post_init__(self) -> None:
        """Validate max_scale fits the wire header."""
        if not 0 <= self.max_scale <= UINT16_MAX:
            raise ValueError(f"max_scale must be in [0, {UINT16_MAX}], got {self.max_scale}")

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Build a config from environment variables.

        - PGNUMERIC_ENCODE_NAN: encode NaN as NotANumber (default: true)
        - PGNUMERIC_MAX_SCALE: largest accepted scale (default: 65535)
        """
        encode_nan = os.environ.get("PGNUMERIC_ENCODE_NAN", "true").lower() in _TRUE_VALUES
        max_scale = int(os.environ.get("PGNUMERIC_MAX_SCALE", str(UINT16_MAX)))
        return cls(encode_nan=encode_nan, max_scale=max_scale)


# Default configuration instance
DEFAULT_CODEC_CONFIG = CodecConfig()
