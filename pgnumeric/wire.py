"""Structured NUMERIC wire values.

A wire value is one of three variants:

    Positive(weight, scale, digits)
    Negative(weight, scale, digits)
    NotANumber()

`digits` holds base-10000 digits, most significant first. `weight` is the
power of 10000 of the first digit; `scale` is the number of decimal digits
after the point in the logical value.

Code that consumes a PgNumeric dispatches on the concrete variant, e.g.:

    match numeric:
        case Positive() | Negative():
            ...
        case NotANumber():
            ...
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from pgnumeric.constants import (
    INT16_MAX,
    INT16_MIN,
    MAX_DIGIT,
    NUMERIC_NAN,
    NUMERIC_NEG,
    NUMERIC_POS,
    UINT16_MAX,
)
from pgnumeric.errors import InvalidWireValue


class Sign(int, Enum):
    """Sign tag of a wire value, as carried in the binary header."""

    POSITIVE = NUMERIC_POS
    NEGATIVE = NUMERIC_NEG
    NAN = NUMERIC_NAN


def _freeze_digits(digits: Iterable[int]) -> tuple[int, ...]:
    """Convert digits to a tuple, validating the base-10000 range."""
    frozen = tuple(digits)
    for position, digit in enumerate(frozen):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise InvalidWireValue(f"Digit {position} must be int, got {type(digit).__name__}")
        if not 0 <= digit <= MAX_DIGIT:
            raise InvalidWireValue(f"Digit {position} out of range [0, {MAX_DIGIT}]: {digit}")
    return frozen


def _check_header(weight: int, scale: int) -> None:
    if not INT16_MIN <= weight <= INT16_MAX:
        raise InvalidWireValue(f"Weight out of int16 range: {weight}")
    if not 0 <= scale <= UINT16_MAX:
        raise InvalidWireValue(f"Scale out of uint16 range: {scale}")


@dataclass(frozen=True)
class Positive:
    """Non-negative numeric value (zero included).

    Attributes:
        weight: Power of 10000 of the first digit
        scale: Decimal digits after the point in the logical value
        digits: Base-10000 digits, most significant first
    """

    weight: int
    scale: int
    digits: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        _check_header(self.weight, self.scale)
        object.__setattr__(self, "digits", _freeze_digits(self.digits))

    @property
    def sign(self) -> Sign:
        return Sign.POSITIVE


@dataclass(frozen=True)
class Negative:
    """Negative numeric value.

    Attributes:
        weight: Power of 10000 of the first digit
        scale: Decimal digits after the point in the logical value
        digits: Base-10000 digits, most significant first
    """

    weight: int
    scale: int
    digits: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        _check_header(self.weight, self.scale)
        object.__setattr__(self, "digits", _freeze_digits(self.digits))

    @property
    def sign(self) -> Sign:
        return Sign.NEGATIVE


@dataclass(frozen=True)
class NotANumber:
    """The NUMERIC NaN value."""

    @property
    def sign(self) -> Sign:
        return Sign.NAN


PgNumeric: TypeAlias = Positive | Negative | NotANumber

# Canonical representation of zero
ZERO = Positive(weight=0, scale=0, digits=(0,))


__all__ = [
    "Sign",
    "Positive",
    "Negative",
    "NotANumber",
    "PgNumeric",
    "ZERO",
]
