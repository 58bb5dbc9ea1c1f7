"""Self-test harness for the primality checkers.

Runs fixed fixtures against every checker and prints one coloured
pass/fail line per case. A failing case is reported and counted, and the
run carries on; the overall status is non-zero if anything failed.

Usage:
    prime-check selftest
    prime-check selftest --no-color
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from prime_check.core.memo import clear_caches, is_prime_memoized, is_prime_wheel_memoized
from prime_check.core.primality import is_prime, is_prime_batch, is_prime_wheel

logger = logging.getLogger(__name__)

PRIMES = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
]
COMPOSITES = [
    4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25, 26, 27, 28, 30, 32,
    33, 34, 35, 36, 38, 39, 40, 42, 44, 45, 46, 48, 49, 50, 51, 52, 54, 55, 56,
    57, 58, 60,
]
EDGE_CASES = [-10, -1, 0, 1, 0.5, 1.7, 2.9, 3.1, 100.7]
LARGE_PRIMES = [1009, 1013, 1019, 1021, 1031, 1033, 1039, 1049, 1051, 1061]
LARGE_COMPOSITES = [1000, 1001, 1002, 1004, 1006, 1008, 1010, 1012, 1014, 1015]
# Squares of primes above the wheel base; trial division must reach sqrt(n).
PRIME_SQUARES = [49, 121, 169, 289, 361, 529, 841, 961, 1369, 1681]

COLORS = {
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "reset": "\x1b[0m",
}


@dataclass
class Checkers:
    """The set of functions under test."""
    is_prime: Callable[[object], bool] = is_prime
    is_prime_wheel: Callable[[object], bool] = is_prime_wheel
    is_prime_memoized: Callable[[object], bool] = is_prime_memoized
    is_prime_wheel_memoized: Callable[[object], bool] = is_prime_wheel_memoized
    is_prime_batch: Callable[[list], List[bool]] = is_prime_batch


@dataclass
class SuiteResult:
    """Outcome of one suite."""
    name: str
    passed: int = 0
    total: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.passed == self.total


class Reporter:
    """Writes coloured lines to a stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def log(self, message: str, color: str = "reset") -> None:
        if self.color:
            message = f"{COLORS[color]}{message}{COLORS['reset']}"
        print(message, file=self.stream)


def _expect(actual, expected, message: str) -> None:
    if actual is not expected:
        raise AssertionError(f"{message} (got {actual!r})")


def _expect_all(check: Callable[[object], bool], numbers, expected: bool, label: str) -> None:
    for n in numbers:
        _expect(check(n), expected, f"{n} {label}")


def _expect_match(check: Callable, reference: Callable, numbers) -> None:
    for n in numbers:
        _expect(check(n), reference(n), f"{n} results should match")


class Suite:
    """Collects named cases and runs each in isolation."""

    def __init__(self, name: str, reporter: Reporter):
        self.result = SuiteResult(name)
        self.reporter = reporter

    def case(self, description: str, body: Callable[[], None]) -> None:
        self.result.total += 1
        try:
            body()
        except AssertionError as exc:
            self._fail(description, str(exc))
        except Exception as exc:
            self._fail(description, f"{type(exc).__name__}: {exc}")
        else:
            self.result.passed += 1
            self.reporter.log(f"✓ {description}", "green")

    def _fail(self, description: str, error: str) -> None:
        self.result.failures.append(f"{description}: {error}")
        self.reporter.log(f"✗ {description}", "red")
        self.reporter.log(f"  Error: {error}", "red")

    def __enter__(self) -> "Suite":
        self.reporter.log(f"\n=== Testing {self.result.name} ===", "blue")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        r = self.result
        self.reporter.log(
            f"{r.name}: {r.passed}/{r.total} tests passed\n",
            "green" if r.ok else "red",
        )


def check_is_prime(c: Checkers, reporter: Reporter) -> SuiteResult:
    with Suite("is_prime", reporter) as suite:
        suite.case("Known primes should return true",
                   lambda: _expect_all(c.is_prime, PRIMES, True, "should be prime"))
        suite.case("Known composites should return false",
                   lambda: _expect_all(c.is_prime, COMPOSITES, False, "should not be prime"))

        def edge_cases():
            _expect_all(c.is_prime, [-10, -1, 0, 1, 0.5], False, "should not be prime")
            _expect(c.is_prime(2.9), True, "2.9 should be prime (floor to 2)")
            _expect(c.is_prime(3.1), True, "3.1 should be prime (floor to 3)")

        suite.case("Edge cases should be handled correctly", edge_cases)
        suite.case("Large primes should return true",
                   lambda: _expect_all(c.is_prime, LARGE_PRIMES, True, "should be prime"))
        suite.case("Large composites should return false",
                   lambda: _expect_all(c.is_prime, LARGE_COMPOSITES, False, "should not be prime"))
        suite.case("Prime squares should return false",
                   lambda: _expect_all(c.is_prime, PRIME_SQUARES, False, "should not be prime"))
    return suite.result


def check_is_prime_wheel(c: Checkers, reporter: Reporter) -> SuiteResult:
    with Suite("is_prime_wheel", reporter) as suite:
        suite.case("Should match is_prime results for primes",
                   lambda: _expect_match(c.is_prime_wheel, c.is_prime, PRIMES))
        suite.case("Should match is_prime results for composites",
                   lambda: _expect_match(c.is_prime_wheel, c.is_prime, COMPOSITES))
        suite.case("Should handle edge cases like is_prime",
                   lambda: _expect_match(c.is_prime_wheel, c.is_prime, EDGE_CASES))
        suite.case("Should handle large numbers",
                   lambda: _expect_match(c.is_prime_wheel, c.is_prime,
                                         LARGE_PRIMES + LARGE_COMPOSITES))
        suite.case("Prime squares should return false",
                   lambda: _expect_all(c.is_prime_wheel, PRIME_SQUARES, False, "should not be prime"))
    return suite.result


def check_is_prime_memoized(c: Checkers, reporter: Reporter) -> SuiteResult:
    with Suite("is_prime_memoized", reporter) as suite:
        suite.case("Should match is_prime results",
                   lambda: _expect_match(c.is_prime_memoized, c.is_prime,
                                         PRIMES[:20] + COMPOSITES[:20]))

        def caches():
            first = c.is_prime_memoized(1009)
            second = c.is_prime_memoized(1009)
            _expect(second, first, "Cached result should match first result")
            _expect(first, True, "1009 should be prime")

        suite.case("Should cache results", caches)
        suite.case("Should handle edge cases with caching",
                   lambda: _expect_all(c.is_prime_memoized, [0, 1, -5], False, "should not be prime"))
    return suite.result


def check_is_prime_wheel_memoized(c: Checkers, reporter: Reporter) -> SuiteResult:
    with Suite("is_prime_wheel_memoized", reporter) as suite:
        suite.case("Should match is_prime_wheel results",
                   lambda: _expect_match(c.is_prime_wheel_memoized, c.is_prime_wheel,
                                         PRIMES[:15] + COMPOSITES[:15]))

        def caches():
            first = c.is_prime_wheel_memoized(1013)
            second = c.is_prime_wheel_memoized(1013)
            _expect(second, first, "Cached result should match")
            _expect(first, True, "1013 should be prime")

        suite.case("Should cache wheel results", caches)
    return suite.result


def check_is_prime_batch(c: Checkers, reporter: Reporter) -> SuiteResult:
    def matches_individual(numbers):
        result = c.is_prime_batch(numbers)
        _expect(len(result) == len(numbers), True, "Result should have same length")
        for n, flag in zip(numbers, result):
            _expect(flag, c.is_prime(n), f"Batch result for {n} should match individual test")

    with Suite("is_prime_batch", reporter) as suite:
        suite.case("Should process lists correctly",
                   lambda: matches_individual([2, 3, 4, 5, 6, 7, 8, 9, 10, 11]))
        suite.case("Should handle empty list",
                   lambda: _expect(len(c.is_prime_batch([])) == 0, True,
                                   "Empty list should return empty result"))

        def single():
            result = c.is_prime_batch([17])
            _expect(len(result) == 1, True, "Single element should return single result")
            _expect(result[0], True, "17 should be prime")

        suite.case("Should handle single element list", single)
        suite.case("Should handle mixed numbers",
                   lambda: matches_individual(PRIMES[:10] + COMPOSITES[:10] + EDGE_CASES[:5]))
    return suite.result


def check_consistency(c: Checkers, reporter: Reporter) -> SuiteResult:
    def all_agree():
        for n in [2, 3, 4, 5, 17, 25, 97, 100, 1009]:
            basic = c.is_prime(n)
            _expect(c.is_prime_wheel(n), basic, f"is_prime_wheel({n}) should match is_prime({n})")
            _expect(c.is_prime_memoized(n), basic, f"is_prime_memoized({n}) should match is_prime({n})")
            _expect(c.is_prime_wheel_memoized(n), basic,
                    f"is_prime_wheel_memoized({n}) should match is_prime({n})")

    def batch_agrees():
        numbers = [2, 4, 7, 9, 11, 15, 17, 21, 23, 25]
        for n, flag in zip(numbers, c.is_prime_batch(numbers)):
            _expect(flag, c.is_prime(n), f"Batch result for {n} should match individual result")

    with Suite("Cross-function consistency", reporter) as suite:
        suite.case("All functions should return consistent results for same inputs", all_agree)
        suite.case("Batch processing should match individual calls", batch_agrees)
    return suite.result


SUITES = [
    check_is_prime,
    check_is_prime_wheel,
    check_is_prime_memoized,
    check_is_prime_wheel_memoized,
    check_is_prime_batch,
    check_consistency,
]


def run_all(
    checkers: Optional[Checkers] = None,
    stream: Optional[TextIO] = None,
    color: bool = True,
) -> int:
    """Run every suite and print a summary.

    Args:
        checkers: Functions under test. Defaults to the package's own.
        stream: Where to write output. Defaults to stdout.
        color: Wrap lines in ANSI colour codes.

    Returns:
        0 if every case passed, 1 otherwise.
    """
    checkers = checkers if checkers is not None else Checkers()
    reporter = Reporter(stream, color)

    clear_caches()

    reporter.log("Starting prime_check self-test", "yellow")
    reporter.log("=" * 37, "yellow")

    results = [suite(checkers, reporter) for suite in SUITES]

    passed = sum(r.passed for r in results)
    total = sum(r.total for r in results)

    reporter.log("=" * 37, "yellow")
    reporter.log(f"Final Results: {passed}/{total} tests passed",
                 "green" if passed == total else "red")

    if passed == total:
        reporter.log("All tests passed!", "green")
        logger.debug("Self-test passed: %d cases", total)
        return 0

    reporter.log("Some tests failed. Please review the output above.", "red")
    for r in results:
        for failure in r.failures:
            logger.debug("%s: %s", r.name, failure)
    return 1
