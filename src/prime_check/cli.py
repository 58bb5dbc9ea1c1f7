"""Command-line interface for prime_check."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger("prime_check")


def parse_number(text: str) -> int | float:
    """Parse a command-line number, keeping integers exact."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def cmd_check(args: argparse.Namespace) -> int:
    """Check each number with the selected method."""
    from prime_check.core.memo import is_prime_memoized, is_prime_wheel_memoized
    from prime_check.core.primality import is_prime, is_prime_wheel

    if args.method == "wheel":
        check = is_prime_wheel_memoized if args.memoize else is_prime_wheel
    else:
        check = is_prime_memoized if args.memoize else is_prime

    logger.debug("Checking %d numbers with %s", len(args.numbers), check.__name__)

    for n in args.numbers:
        print(f"{n} is prime: {_format_bool(check(n))}")

    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Check a list of numbers in one call."""
    from prime_check.core.primality import is_prime_batch

    results = is_prime_batch(args.numbers)
    print("[" + ", ".join(_format_bool(r) for r in results) + "]")
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    """Time every checker on the same random sample."""
    from prime_check.benchmark import format_results, run_benchmark

    print(f"Benchmarking: count={args.count}, max_value={args.max_value}, seed={args.seed}")

    results = run_benchmark(args.count, args.max_value, args.seed)
    print(format_results(results))
    return 0


def cmd_selftest(args: argparse.Namespace) -> int:
    """Run the fixture self-test."""
    from prime_check.harness import run_all

    return run_all(color=not args.no_color)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="prime-check",
        description="Deterministic primality testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug messages")
    parser.add_argument("--log-file", type=Path, default=None, help="Append log messages to file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check numbers one at a time")
    check_parser.add_argument("numbers", type=parse_number, nargs="+", help="Numbers to check")
    check_parser.add_argument("--method", choices=["trial", "wheel"], default="trial",
                              help="Checking algorithm")
    check_parser.add_argument("--memoize", action="store_true", help="Use the memoized checker")

    batch_parser = subparsers.add_parser("batch", help="Check a list of numbers")
    batch_parser.add_argument("numbers", type=parse_number, nargs="*", help="Numbers to check")

    bench_parser = subparsers.add_parser("benchmark", help="Compare checker performance")
    bench_parser.add_argument("--count", type=int, default=1000, help="Sample size")
    bench_parser.add_argument("--max-value", type=int, default=10000,
                              help="Exclusive upper bound of sampled values")
    bench_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    selftest_parser = subparsers.add_parser("selftest", help="Run fixture self-test")
    selftest_parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")

    args = parser.parse_args(argv)

    from prime_check.utils.logging import setup_logger
    setup_logger(verbose=args.verbose, log_path=args.log_file)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "check": cmd_check,
        "batch": cmd_batch,
        "benchmark": cmd_benchmark,
        "selftest": cmd_selftest,
    }

    try:
        return commands[args.command](args)
    except (TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
