"""Configuration management for the obfuscation checker."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on")


@dataclass
class Config:
    """Configuration for the obfuscation checker."""

    target_path: Optional[Path] = None
    verbose: bool = False
    log_dir: Optional[Path] = None
    max_workers: int = 1

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        target_path_str = os.getenv("CHECKER_TARGET_PATH")
        log_dir_str = os.getenv("CHECKER_LOG_DIR")
        verbose_str = os.getenv("CHECKER_VERBOSE", "false")
        max_workers_str = os.getenv("CHECKER_MAX_WORKERS", "1")

        try:
            max_workers = int(max_workers_str)
        except ValueError:
            raise ValueError(f"CHECKER_MAX_WORKERS is not an integer: {max_workers_str}")

        return cls(
            target_path=Path(target_path_str) if target_path_str else None,
            verbose=_parse_bool(verbose_str),
            log_dir=Path(log_dir_str) if log_dir_str else None,
            max_workers=max_workers,
        )

    @classmethod
    def from_args(
        cls,
        target_path: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        max_workers: Optional[int] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            target_path: File or directory to check (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)
            max_workers: Worker processes for directory scans (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if target_path is not None:
            config.target_path = target_path
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir
        if max_workers is not None:
            config.max_workers = max_workers

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.target_path is None:
            raise ValueError("No file or directory to check")

        if not self.target_path.exists():
            raise ValueError(f"Path not found: {self.target_path}")

        if self.max_workers < 1:
            raise ValueError(f"Worker count must be at least 1: {self.max_workers}")

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
