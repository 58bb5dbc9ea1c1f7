"""Tests for memoized primality checks."""

import threading

import pytest

from prime_check.core import memo
from prime_check.core.memo import (
    PrimeCache,
    clear_caches,
    configure_caches,
    is_prime_memoized,
    is_prime_wheel_memoized,
    prime_cache,
    prime_wheel_cache,
)
from prime_check.core.primality import is_prime, is_prime_wheel


class CountingChecker:
    """Wraps a checker and records every call."""

    def __init__(self, checker=is_prime):
        self.checker = checker
        self.calls = []
        self.__name__ = "counting"

    def __call__(self, number):
        self.calls.append(number)
        return self.checker(number)


class TestMemoizedWrappers:
    """Tests for is_prime_memoized and is_prime_wheel_memoized."""

    def test_matches_base_checkers(self):
        for n in list(range(-10, 500)) + [0.5, 2.9, 3.1, 100.7]:
            assert is_prime_memoized(n) == is_prime(n), n
            assert is_prime_wheel_memoized(n) == is_prime_wheel(n), n

    def test_idempotent(self):
        first = is_prime_memoized(1009)
        second = is_prime_memoized(1009)
        assert first is True
        assert second is first

        first = is_prime_wheel_memoized(1013)
        assert is_prime_wheel_memoized(1013) is first is True

    def test_stores_values_above_one(self):
        is_prime_memoized(97)
        is_prime_memoized(100)
        assert 97 in prime_cache
        assert 100 in prime_cache
        assert 97 not in prime_wheel_cache

    def test_never_stores_values_at_or_below_one(self):
        for n in [-5, -1, 0, 0.5, 1]:
            assert is_prime_memoized(n) is False
            assert is_prime_wheel_memoized(n) is False
        assert len(prime_cache) == 0
        assert len(prime_wheel_cache) == 0

    def test_keys_by_raw_input(self):
        is_prime_memoized(2.9)
        assert 2.9 in prime_cache
        assert 2 not in prime_cache

    def test_separate_caches(self):
        is_prime_wheel_memoized(41)
        assert 41 in prime_wheel_cache
        assert 41 not in prime_cache

    def test_clear_caches(self):
        is_prime_memoized(13)
        is_prime_wheel_memoized(13)
        clear_caches()
        assert len(prime_cache) == 0
        assert len(prime_wheel_cache) == 0

    def test_invalid_input_not_cached(self):
        with pytest.raises(ValueError):
            is_prime_memoized(float("inf"))
        with pytest.raises(TypeError):
            is_prime_wheel_memoized("7")
        assert len(prime_cache) == 0
        assert len(prime_wheel_cache) == 0

    def test_module_level_caches_wrap_base_checkers(self):
        assert memo.prime_cache.checker is is_prime
        assert memo.prime_wheel_cache.checker is is_prime_wheel


class TestPrimeCache:
    """Tests for PrimeCache container."""

    def test_hit_skips_recomputation(self):
        checker = CountingChecker()
        cache = PrimeCache(checker)

        assert cache(29) is True
        assert cache(29) is True
        assert checker.calls == [29]

        info = cache.info()
        assert info.hits == 1
        assert info.misses == 1
        assert info.size == 1
        assert info.maxsize is None

    def test_small_values_recomputed_every_call(self):
        checker = CountingChecker()
        cache = PrimeCache(checker)

        cache(1)
        cache(1)
        cache(-3)
        assert checker.calls == [1, 1, -3]
        assert len(cache) == 0

    def test_unbounded_by_default(self):
        cache = PrimeCache(is_prime)
        for n in range(2, 2002):
            cache(n)
        assert len(cache) == 2000

    def test_bounded_evicts_least_recently_used(self):
        checker = CountingChecker()
        cache = PrimeCache(checker, maxsize=2)

        cache(11)
        cache(12)
        cache(11)  # 12 is now least recently used
        cache(13)

        assert len(cache) == 2
        assert 11 in cache
        assert 13 in cache
        assert 12 not in cache

        cache(12)
        assert checker.calls == [11, 12, 13, 12]

    def test_resize_shrinks(self):
        cache = PrimeCache(is_prime)
        for n in range(2, 12):
            cache(n)
        cache.resize(3)
        assert len(cache) == 3
        assert cache.maxsize == 3
        assert 11 in cache
        assert 2 not in cache

    def test_resize_to_unbounded(self):
        cache = PrimeCache(is_prime, maxsize=1)
        cache.resize(None)
        for n in range(2, 10):
            cache(n)
        assert len(cache) == 8

    def test_invalid_maxsize(self):
        with pytest.raises(ValueError):
            PrimeCache(is_prime, maxsize=0)
        cache = PrimeCache(is_prime)
        with pytest.raises(ValueError):
            cache.resize(-1)

    def test_clear_resets_statistics(self):
        cache = PrimeCache(is_prime)
        cache(5)
        cache(5)
        cache.clear()
        assert cache.info() == (0, 0, 0, None)

    def test_configure_caches(self):
        configure_caches(4)
        assert prime_cache.maxsize == 4
        assert prime_wheel_cache.maxsize == 4
        for n in range(2, 20):
            is_prime_memoized(n)
        assert len(prime_cache) == 4

    def test_concurrent_callers(self):
        cache = PrimeCache(is_prime)
        numbers = list(range(2, 3000))
        errors = []

        def worker():
            try:
                for n in numbers:
                    assert cache(n) == is_prime(n)
            except AssertionError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(cache) == len(numbers)
