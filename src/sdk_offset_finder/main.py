"""Main entry point for the SDK offset finder."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from colorama import just_fix_windows_console

from .application import InteractiveShell, SdkLoader
from .domain.errors import HeaderDumpSyntaxError, SdkError
from .infrastructure.config import Config, ConfigError, InputFormat
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Look up which class fields live at a given byte offset "
        "in a dumped SDK layout",
        epilog="""
Examples:
  # Directory of JSON schema fragments
  python main.py schemas/

  # Single flat JSON schema file
  python main.py offsets.json

  # Pseudo-header dump
  python main.py client.hpp --format header-dump

  # Verbose mode with debug logs
  python main.py schemas/ --verbose

  # Using .env file for configuration
  echo 'SCHEMA_DIR=schemas' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Schema directory, schema file or header dump "
        "(optional if SCHEMA_DIR, SCHEMA_FILE or HEADER_DUMP is set)",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in InputFormat],
        help="Input format (default: inferred from the input path)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--no-color",
        action="store_false",
        dest="color",
        default=None,
        help="Disable colored output",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for log files (default: ./logs)",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Load the configured SDK, build the offset index and run the shell."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            input_path=args.input,
            input_format=InputFormat(args.format) if args.format else None,
            verbose=args.verbose,
            color=args.color,
            log_dir=args.log_dir,
        )
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    assert config.input_path is not None and config.input_format is not None
    logger.debug(f"Input: {config.input_path} ({config.input_format.value})")

    try:
        index = SdkLoader(config.input_path, config.input_format).load_index()
    except HeaderDumpSyntaxError as e:
        logger.error(f"Syntax error in {config.input_path}, {e}")
        if e.line:
            logger.error(f"  {e.line}")
        sys.exit(1)
    except SdkError as e:
        logger.error(f"Invalid schema: {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Cannot decode {config.input_path}: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        sys.exit(1)

    color = config.color and sys.stdout.isatty()
    if color:
        just_fix_windows_console()

    sys.exit(InteractiveShell(index, color=color).run())


if __name__ == "__main__":
    main()
