"""Base-10000 digit conversion for arbitrary-precision integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pgnumeric.constants import MAX_DIGIT, NBASE
from pgnumeric.errors import InternalInvariantViolation


def to_base_10000(value: int) -> Iterator[int]:
    """Yield the base-10000 digits of a non-negative integer.

    Digits come out least significant first, one per repeated division by
    10000, until the quotient reaches zero. Zero yields a single 0 digit.
    The generator owns its running quotient and cannot be restarted.

    Args:
        value: Non-negative integer to split

    Yields:
        Digits in [0, 9999], least significant first

    Raises:
        ValueError: If value is negative
        InternalInvariantViolation: If a produced digit leaves [0, 9999]

    Examples:
        >>> list(to_base_10000(100020003))
        [3, 2, 1]
    """
    if value < 0:
        raise ValueError(f"Cannot split a negative integer into base-10000 digits: {value}")

    remaining: int | None = value
    while remaining is not None:
        quotient, digit = divmod(remaining, NBASE)
        remaining = quotient if quotient else None
        if not 0 <= digit <= MAX_DIGIT:
            raise InternalInvariantViolation(f"Base-10000 digit out of range: {digit}")
        yield digit


def from_base_10000(digits: Iterable[int]) -> int:
    """Accumulate base-10000 digits (most significant first) into an integer."""
    result = 0
    for digit in digits:
        result = result * NBASE + digit
    return result


__all__ = ["to_base_10000", "from_base_10000"]
