"""CLI entry point for the functional showcase."""

import argparse
import logging
import random
import sys

from pydantic import ValidationError

from src import __version__
from src.services.showcase import ShowcaseRunner
from src.lib.config import get_settings
from src.lib.exceptions import ShowcaseError, InvalidArgumentError


# Exit codes per CLI contract
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INVALID_ARGUMENT = 3
EXIT_INTERNAL_ERROR = 5

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="fpdemo",
        description="Walk through functional programming idioms and print the results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fpdemo
  fpdemo --calls 10 --seed 42
  fpdemo --verbose
        """,
    )

    parser.add_argument(
        "-n", "--calls",
        type=int,
        default=None,
        help="Number of simulated service calls (default: 100)",
    )

    parser.add_argument(
        "-s", "--seed",
        type=int,
        default=None,
        help="Seed for the random source (default: unseeded)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    format_str = "[%(asctime)s] %(levelname)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=format_str,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(args: argparse.Namespace) -> int:
    """
    Run the showcase with the given arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # Resolve configuration (CLI args override env vars)
    service_calls = args.calls if args.calls is not None else settings.service_calls
    seed = args.seed if args.seed is not None else settings.seed
    verbose = args.verbose or settings.verbose

    if service_calls < 0:
        print(f"Error: --calls must be non-negative, got {service_calls}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    setup_logging(verbose)
    logger.debug(f"Running showcase: calls={service_calls}, seed={seed}")

    runner = ShowcaseRunner(service_calls=service_calls, rng=random.Random(seed))

    try:
        for line in runner.lines():
            print(line)

        return EXIT_SUCCESS

    except InvalidArgumentError as e:
        print(f"Error: Invalid argument: {e.message}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    except ShowcaseError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    except Exception as e:
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
