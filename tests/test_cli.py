"""Tests for the command-line interface."""

import pytest

from prime_check.cli import main, parse_number
from prime_check.core.memo import prime_cache, prime_wheel_cache


class TestParseNumber:
    """Tests for parse_number function."""

    def test_integers_stay_exact(self):
        assert parse_number("9007199254740991") == 9007199254740991
        assert isinstance(parse_number("7"), int)

    def test_floats(self):
        assert parse_number("2.9") == 2.9

    def test_rejects_garbage(self):
        import argparse
        with pytest.raises(argparse.ArgumentTypeError):
            parse_number("seven")


class TestCommands:
    """Tests for CLI sub-commands."""

    def test_check(self, capsys):
        assert main(["check", "2", "97", "1000", "2.9"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "2 is prime: true",
            "97 is prime: true",
            "1000 is prime: false",
            "2.9 is prime: true",
        ]

    def test_check_wheel_memoized(self, capsys):
        assert main(["check", "--method", "wheel", "--memoize", "121", "1013"]) == 0
        out = capsys.readouterr().out
        assert "121 is prime: false" in out
        assert "1013 is prime: true" in out
        assert 1013 in prime_wheel_cache
        assert 1013 not in prime_cache

    def test_batch(self, capsys):
        assert main(["batch", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == "[true, true, false, true, false, true, false, false, false, true]"

    def test_batch_empty(self, capsys):
        assert main(["batch"]) == 0
        assert capsys.readouterr().out.strip() == "[]"

    def test_benchmark(self, capsys):
        assert main(["benchmark", "--count", "50", "--max-value", "500", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "is_prime_wheel_memoized" in out

    def test_selftest(self, capsys):
        assert main(["selftest", "--no-color"]) == 0
        assert "All tests passed!" in capsys.readouterr().out

    def test_non_finite_input_exit_code(self, capsys):
        assert main(["check", "inf"]) == 2
        assert "finite" in capsys.readouterr().err

    def test_out_of_range_exit_code(self, capsys):
        assert main(["check", "9007199254740992"]) == 2

    def test_invalid_number_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(["check", "seven"])
        assert exc.value.code == 2

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_log_file(self, tmp_path, capsys):
        log_path = tmp_path / "run.log"
        assert main(["--verbose", "--log-file", str(log_path), "check", "5"]) == 0
        assert "Checking 1 numbers with is_prime" in log_path.read_text()
