"""Timing comparison of the primality checkers.

Every checker runs over the same random sample so the timings are
directly comparable. The memoized variants start from empty caches.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

from prime_check.core.memo import clear_caches, is_prime_memoized, is_prime_wheel_memoized
from prime_check.core.primality import is_prime, is_prime_batch, is_prime_wheel

logger = logging.getLogger(__name__)

CHECKERS: Dict[str, Callable[[object], bool]] = {
    "is_prime": is_prime,
    "is_prime_wheel": is_prime_wheel,
    "is_prime_memoized": is_prime_memoized,
    "is_prime_wheel_memoized": is_prime_wheel_memoized,
}


@dataclass
class BenchmarkResult:
    """Timing for one checker."""
    name: str
    count: int
    seconds: float
    primes_found: int

    @property
    def per_call_us(self) -> float:
        if self.count == 0:
            return 0.0
        return self.seconds / self.count * 1e6


def random_sample(count: int, max_value: int, seed: Optional[int] = None) -> np.ndarray:
    """Draw ``count`` integers uniformly from [0, max_value).

    Args:
        count: Number of values.
        max_value: Exclusive upper bound.
        seed: Random seed for reproducibility.

    Returns:
        Array of int64 values.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if max_value < 1:
        raise ValueError(f"max_value must be >= 1, got {max_value}")

    rng = np.random.default_rng(seed)
    return rng.integers(0, max_value, size=count, dtype=np.int64)


def run_benchmark(
    count: int = 1000,
    max_value: int = 10_000,
    seed: Optional[int] = None,
) -> list[BenchmarkResult]:
    """Time each checker, then the batch mapper, over one random sample.

    Args:
        count: Sample size.
        max_value: Exclusive upper bound of sampled values.
        seed: Random seed for reproducibility.

    Returns:
        One result per checker, batch mapper last.
    """
    sample = random_sample(count, max_value, seed).tolist()
    clear_caches()

    results = []
    for name, check in CHECKERS.items():
        start = time.perf_counter()
        found = sum(1 for n in sample if check(n))
        elapsed = time.perf_counter() - start
        results.append(BenchmarkResult(name, len(sample), elapsed, found))
        logger.debug("%s: %d values in %.6fs", name, len(sample), elapsed)

    start = time.perf_counter()
    found = sum(is_prime_batch(sample))
    elapsed = time.perf_counter() - start
    results.append(BenchmarkResult("is_prime_batch", len(sample), elapsed, found))

    return results


def format_results(results: list[BenchmarkResult]) -> str:
    """Render results as a fixed-width table."""
    lines = [f"{'Checker':<26} {'Calls':>8} {'Primes':>8} {'Total ms':>10} {'us/call':>9}"]
    for r in results:
        lines.append(
            f"{r.name:<26} {r.count:>8} {r.primes_found:>8} "
            f"{r.seconds * 1000:>10.3f} {r.per_call_us:>9.3f}"
        )
    return "\n".join(lines)
