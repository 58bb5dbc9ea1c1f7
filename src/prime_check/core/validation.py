"""Input normalisation shared by every primality checker.

All checkers accept any real number and work on its floor. Values that
cannot be floored to an exact integer are rejected before any arithmetic
happens.
"""

from __future__ import annotations

import decimal
import math
import numbers

# Largest integer a double represents exactly (2**53 - 1).
MAX_SAFE_INTEGER = 2**53 - 1


def to_integer(number) -> int:
    """Floor a numeric input to a Python int.

    Args:
        number: Any real number (int, float, bool, Fraction, Decimal or a
            numpy scalar).

    Returns:
        The floor of ``number``.

    Raises:
        TypeError: If ``number`` is not a real number.
        ValueError: If ``number`` is NaN, infinite, or its magnitude
            exceeds MAX_SAFE_INTEGER.
    """
    if isinstance(number, numbers.Integral):
        value = int(number)
    elif isinstance(number, numbers.Rational):
        value = int(math.floor(number))
    elif isinstance(number, (numbers.Real, decimal.Decimal)):
        if not math.isfinite(number):
            raise ValueError(f"Number must be finite, got {number}")
        value = int(math.floor(number))
    else:
        raise TypeError(f"Number must be a real number, got {type(number).__name__}")

    if abs(value) > MAX_SAFE_INTEGER:
        raise ValueError(
            f"Number must be within +/-{MAX_SAFE_INTEGER}, got {value}"
        )

    return value
