"""Core primality checks and their memoized wrappers."""

from prime_check.core.validation import MAX_SAFE_INTEGER, to_integer
from prime_check.core.primality import (
    is_prime,
    is_prime_wheel,
    is_prime_batch,
    is_prime_array,
)
from prime_check.core.memo import (
    CacheInfo,
    PrimeCache,
    prime_cache,
    prime_wheel_cache,
    is_prime_memoized,
    is_prime_wheel_memoized,
    clear_caches,
    configure_caches,
)

__all__ = [
    "MAX_SAFE_INTEGER",
    "to_integer",
    "is_prime",
    "is_prime_wheel",
    "is_prime_batch",
    "is_prime_array",
    "CacheInfo",
    "PrimeCache",
    "prime_cache",
    "prime_wheel_cache",
    "is_prime_memoized",
    "is_prime_wheel_memoized",
    "clear_caches",
    "configure_caches",
]
