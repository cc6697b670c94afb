"""Integration tests for the CLI entry point."""

import pytest

from src.cli import main as cli
from src.lib.exceptions import InvalidArgumentError


EXPECTED_HEADER = [
    "DoubleIt(4) = 8",
    "Pure Function: Add(2, 3) = 5",
    "Immutability: Alice age 30 -> Alice age 31",
    "Higher-Order Function: operation(5, 7) = 12",
    "Function Composition: doubleThenSquare(3) = 36",
    "Declarative Style: even squares = [4, 16]",
    "Pattern Matching: area of Circle(radius=5.0) = 78.54",
    "Pattern Matching: area of Rectangle(width=4.0, height=6.0) = 24.00",
    "Pattern Matching: area of Triangle(base=3.0, height=4.0) = 6.00",
    "Pattern Matching: area of no shape = 0.00",
    "Pattern Matching: ClassifyPerson(Tommy, 10) = Child",
    "Pattern Matching: ClassifyPerson(Jane, 16) = Teenager",
    "Pattern Matching: ClassifyPerson(Bob, 35) = Adult",
    "Pattern Matching: ClassifyPerson(Martha, 70) = Senior",
    "Pattern Matching: CompareNumbers(0, 0) = Both zero",
    "Pattern Matching: CompareNumbers(5, 3) = First is larger",
    "Pattern Matching: CompareNumbers(2, 7) = Second is larger",
    "Pattern Matching: CompareNumbers(4, 4) = Both are equal",
    "Immutable Calculation: CalculateNonsense(2, 3) = 121",
    "Immutable Doubling Example:",
    "Original: 1, 2, 3, 4, 5",
    "Doubled: 2, 4, 6, 8, 10",
    "Pure Function Example: Multiply(4, 5) = 20",
    "Pure Function Example: Factorial(5) = 120",
]


class TestMain:
    """Tests for main()."""

    def test_runs_without_error(self, capsys):
        """Test that a default run exits cleanly."""
        exit_code = cli.main(["--seed", "1"])

        assert exit_code == cli.EXIT_SUCCESS

    def test_output_lines(self, capsys):
        """Test the labelled lines printed to stdout."""
        cli.main(["--calls", "3", "--seed", "1"])

        lines = capsys.readouterr().out.splitlines()

        assert lines[: len(EXPECTED_HEADER)] == EXPECTED_HEADER
        service_lines = lines[len(EXPECTED_HEADER):]
        assert len(service_lines) == 3
        assert all(line.startswith("CallExternalService Result: Success = ") for line in service_lines)

    def test_default_call_count_from_settings(self, capsys):
        """Test that 100 service calls are made by default."""
        cli.main(["--seed", "1"])

        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == len(EXPECTED_HEADER) + 100

    def test_call_count_from_env(self, capsys, monkeypatch):
        """Test that FPDEMO_SERVICE_CALLS is honoured."""
        monkeypatch.setenv("FPDEMO_SERVICE_CALLS", "2")

        cli.main([])

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(EXPECTED_HEADER) + 2

    def test_empty_seed_env_runs_unseeded(self, capsys, monkeypatch):
        """Test that an empty FPDEMO_SEED falls back to an unseeded run."""
        monkeypatch.setenv("FPDEMO_SEED", "")

        exit_code = cli.main(["--calls", "1"])

        assert exit_code == cli.EXIT_SUCCESS
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(EXPECTED_HEADER) + 1

    def test_cli_flag_overrides_env(self, capsys, monkeypatch):
        """Test that --calls takes precedence over the environment."""
        monkeypatch.setenv("FPDEMO_SERVICE_CALLS", "2")

        cli.main(["--calls", "0"])

        lines = capsys.readouterr().out.splitlines()
        assert lines == EXPECTED_HEADER

    def test_seed_makes_output_repeatable(self, capsys):
        """Test that the same seed yields the same service outcomes."""
        cli.main(["--calls", "10", "--seed", "7"])
        first = capsys.readouterr().out

        cli.main(["--calls", "10", "--seed", "7"])
        second = capsys.readouterr().out

        assert first == second

    def test_negative_calls_is_usage_error(self, capsys):
        """Test that a negative call count is rejected."""
        exit_code = cli.main(["--calls", "-1"])

        assert exit_code == cli.EXIT_USAGE_ERROR
        assert "non-negative" in capsys.readouterr().err

    def test_invalid_env_is_config_error(self, capsys, monkeypatch):
        """Test that invalid environment values map to the config exit code."""
        monkeypatch.setenv("FPDEMO_SERVICE_CALLS", "many")

        exit_code = cli.main([])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        assert "Invalid configuration" in capsys.readouterr().err

    def test_invalid_argument_exit_code(self, capsys, monkeypatch):
        """Test that an escaping InvalidArgumentError gives a non-zero exit."""

        def failing_lines(self):
            raise InvalidArgumentError("Unknown shape: Hexagon", param_name="shape")
            yield  # pragma: no cover

        monkeypatch.setattr(cli.ShowcaseRunner, "lines", failing_lines)

        exit_code = cli.main([])

        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert "Unknown shape: Hexagon" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])

        assert exc_info.value.code == 0
        assert "fpdemo" in capsys.readouterr().out
