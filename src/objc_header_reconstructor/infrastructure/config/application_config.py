"""Configuration management for the ObjC header reconstructor."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ... import __version__


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


@dataclass
class Config:
    """Configuration for the ObjC header reconstructor."""

    binary_path: Optional[Path]
    output_dir: Path
    shared_cache_path: Optional[Path] = None
    verbose: bool = False
    log_dir: Optional[Path] = Path("logs")
    tool_version: str = __version__

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

        verbose_str = os.getenv("VERBOSE", "false").lower()
        log_dir_str = os.getenv("LOG_DIR", "logs")

        return cls(
            binary_path=_optional_path(os.getenv("BINARY_PATH")),
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            shared_cache_path=_optional_path(os.getenv("SHARED_CACHE_PATH")),
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        binary_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        shared_cache_path: Optional[Path] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            binary_path: Path to the binary metadata document (overrides env)
            output_dir: Output directory (overrides env)
            shared_cache_path: Path to the shared cache document (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if binary_path is not None:
            config.binary_path = binary_path
        if output_dir is not None:
            config.output_dir = output_dir
        if shared_cache_path is not None:
            config.shared_cache_path = shared_cache_path
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self, require_binary: bool = True) -> None:
        """
        Validate the configuration.

        Args:
            require_binary: Whether a binary path must be configured

        Raises:
            ValueError: If configuration is invalid
        """
        if require_binary:
            if self.binary_path is None:
                raise ValueError("No binary given (argument or BINARY_PATH)")
            if not self.binary_path.exists():
                raise ValueError(f"Binary not found: {self.binary_path}")
            if not self.binary_path.is_file():
                raise ValueError(f"Not a file: {self.binary_path}")

        if self.shared_cache_path is not None and not self.shared_cache_path.is_file():
            raise ValueError(f"Shared cache not found: {self.shared_cache_path}")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
