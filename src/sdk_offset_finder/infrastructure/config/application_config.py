"""Configuration management for the SDK offset finder."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigError(ValueError):
    """Raised when the configured input cannot be used."""


class InputFormat(Enum):
    """Supported SDK input representations."""

    SCHEMA_DIR = "schema-dir"
    SCHEMA_FILE = "schema-file"
    HEADER_DUMP = "header-dump"

    @property
    def env_var(self) -> str:
        return self.name


# Environment variables checked in order when no input is given explicitly
ENV_INPUT_ORDER = (InputFormat.SCHEMA_DIR, InputFormat.SCHEMA_FILE, InputFormat.HEADER_DUMP)


def infer_input_format(path: Path) -> InputFormat:
    """
    Guess the input format from a path.

    Directories are schema directories, ``.json`` files are flat schema
    files, anything else is treated as a header dump.
    """
    if path.is_dir():
        return InputFormat.SCHEMA_DIR
    if path.suffix.lower() == ".json":
        return InputFormat.SCHEMA_FILE
    return InputFormat.HEADER_DUMP


@dataclass
class Config:
    """Configuration for the SDK offset finder."""

    input_path: Optional[Path]
    input_format: Optional[InputFormat]
    verbose: bool = False
    color: bool = True
    log_dir: Optional[Path] = Path("logs")

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

        input_path = None
        input_format = None
        for candidate in ENV_INPUT_ORDER:
            value = os.getenv(candidate.env_var)
            if value:
                input_path = Path(value)
                input_format = candidate
                break

        log_dir_str = os.getenv("LOG_DIR", "logs")

        return cls(
            input_path=input_path,
            input_format=input_format,
            verbose=os.getenv("VERBOSE", "false").lower() in TRUE_VALUES,
            color=not os.getenv("NO_COLOR"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        input_path: Optional[Path] = None,
        input_format: Optional[InputFormat] = None,
        verbose: Optional[bool] = None,
        color: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        An explicit input path replaces whatever input the environment
        selected; its format is inferred unless given.

        Args:
            input_path: Path to the SDK input (overrides env)
            input_format: Format of the input (overrides inference)
            verbose: Enable verbose output (overrides env)
            color: Enable colored output (overrides env)
            log_dir: Directory for log files (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if input_path is not None:
            config.input_path = input_path
            config.input_format = input_format or infer_input_format(input_path)
        elif input_format is not None:
            config.input_format = input_format
        if verbose is not None:
            config.verbose = verbose
        if color is not None:
            config.color = color
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigError: If configuration is invalid
        """
        if self.input_path is None or self.input_format is None:
            names = ", ".join(fmt.env_var for fmt in ENV_INPUT_ORDER)
            raise ConfigError(f"No input configured: pass a path or set one of {names}")

        if not self.input_path.exists():
            raise ConfigError(f"Input not found: {self.input_path}")

        if self.input_format is InputFormat.SCHEMA_DIR:
            if not self.input_path.is_dir():
                raise ConfigError(f"Not a directory: {self.input_path}")
        elif not self.input_path.is_file():
            raise ConfigError(f"Not a file: {self.input_path}")
