"""Deterministic primality checks by trial division.

Two variants are provided:

- ``is_prime`` skips candidate divisors using the 6k +/- 1 pattern.
- ``is_prime_wheel`` uses a 2-3-5 wheel, so only the 8 residues coprime
  to 30 are ever tried as divisors.

Both floor their input first and give the same answer for every number.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from prime_check.core.validation import to_integer

SMALL_PRIMES = frozenset({2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31})

# Gaps between consecutive residues coprime to 30, starting from 7:
# 7, 11, 13, 17, 19, 23, 29, 31, 37, ...
WHEEL_GAPS = (4, 2, 4, 2, 4, 6, 2, 6)


def is_prime(number) -> bool:
    """Check if a number is prime.

    Uses 6k +/- 1 optimization: after ruling out 2, 3 and 5, only
    divisors of the form 6k + 1 and 6k + 5 up to sqrt(n) are tested.

    Args:
        number: Number to check. Non-integers are floored.

    Returns:
        True if floor(number) is prime, False otherwise.
    """
    n = to_integer(number)

    if n < 2:
        return False
    if n < 4:
        return True
    if n < 6:
        return n == 5
    if n < 8:
        return n == 7
    if n < 12:
        return n == 11

    if n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False

    limit = math.isqrt(n)
    i = 7
    while i <= limit:
        if n % i == 0 or n % (i + 4) == 0:
            return False
        i += 6

    return True


def is_prime_wheel(number) -> bool:
    """Check if a number is prime using 2-3-5 wheel factorization.

    Args:
        number: Number to check. Non-integers are floored.

    Returns:
        True if floor(number) is prime, False otherwise.
    """
    n = to_integer(number)

    if n <= 31:
        return n in SMALL_PRIMES

    if n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False

    limit = math.isqrt(n)
    candidate = 7
    index = 0
    while candidate <= limit:
        if n % candidate == 0:
            return False
        candidate += WHEEL_GAPS[index]
        index = (index + 1) % len(WHEEL_GAPS)

    return True


def is_prime_batch(numbers: Iterable) -> list[bool]:
    """Check primality for each number in a sequence.

    Args:
        numbers: Numbers to check, in order.

    Returns:
        List of booleans, one per input, in input order.
    """
    return [is_prime(n) for n in numbers]


def is_prime_array(numbers) -> np.ndarray:
    """Check primality element-wise for an array of numbers.

    Args:
        numbers: Array-like of numbers of any shape.

    Returns:
        Boolean array with the same shape as ``numbers``.
    """
    values = np.asarray(numbers)

    if values.size == 0:
        return np.zeros(values.shape, dtype=bool)

    flags = np.fromiter(
        (is_prime(n) for n in values.ravel()),
        dtype=bool,
        count=values.size,
    )
    return flags.reshape(values.shape)
