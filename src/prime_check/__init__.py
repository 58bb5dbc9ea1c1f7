"""prime_check - deterministic primality testing with trial division and wheel factorization."""

__version__ = "0.1.0"

from prime_check.core.primality import (
    is_prime,
    is_prime_wheel,
    is_prime_batch,
    is_prime_array,
)
from prime_check.core.memo import (
    is_prime_memoized,
    is_prime_wheel_memoized,
    clear_caches,
    configure_caches,
)

__all__ = [
    "is_prime",
    "is_prime_wheel",
    "is_prime_memoized",
    "is_prime_wheel_memoized",
    "is_prime_batch",
    "is_prime_array",
    "clear_caches",
    "configure_caches",
]
