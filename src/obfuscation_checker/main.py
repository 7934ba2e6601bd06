"""Main entry point for the obfuscation checker."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from .application import ModuleScanner, ObfuscationChecker, print_report
from .exceptions import UsageError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger

USAGE = "Usage: obfuscation-checker <file|directory>"
FAILURE_EXIT_CODE = -1


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises on bad command lines instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = _ArgumentParser(
        prog="obfuscation-checker",
        description="Detect identifier-renaming obfuscation in .NET assemblies",
        epilog="""
Exit code:
  single file   1 if obfuscated, 0 otherwise
  directory     number of obfuscated files
  error         -1

Examples:
  # Check one assembly
  obfuscation-checker bin/Release/MyApp.dll

  # Check every .dll/.exe below a directory
  obfuscation-checker bin/

  # Use 4 worker processes and write a debug log
  obfuscation-checker bin/ --jobs 4 --log-dir logs/

  # Using .env file for configuration
  echo 'CHECKER_TARGET_PATH=bin/' > .env
  obfuscation-checker
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        help="Module file or directory to check (optional if using .env)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        metavar="N",
        help="Worker processes for directory scans (default: 1)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="DIR",
        help="Write a timestamped debug log file to DIR",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check a file or directory and return the exit code."""
    try:
        args = parse_args(argv)
        config = Config.from_args(
            target_path=args.path,
            verbose=args.verbose,
            log_dir=args.log_dir,
            max_workers=args.jobs,
        )
        if config.target_path is None:
            print(USAGE)
            return FAILURE_EXIT_CODE

        config.validate()
        config.ensure_log_dir()
        LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
        logger = get_logger(__name__)
        logger.debug(f"Target: {config.target_path}")

        scanner = ModuleScanner(ObfuscationChecker(), max_workers=config.max_workers)
        summary = scanner.scan(config.target_path, on_result=print_report)
    except Exception as e:
        print(f"Error: {e}")
        return FAILURE_EXIT_CODE

    if config.target_path.is_dir():
        return summary.obfuscated_count
    return 1 if summary.obfuscated_count else 0


def run() -> NoReturn:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
