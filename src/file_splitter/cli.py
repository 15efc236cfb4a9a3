"""Command-line interface for file splitter."""

import argparse
import logging
import os
import sys

from file_splitter.errors import SplitterError
from file_splitter.runner.execution import DEFAULT_EXECUTOR_POLICY, EXECUTOR_POLICIES
from file_splitter.runner.run import SplitConfig, main_split
from file_splitter.split.types import DEFAULT_ROWS_PER_FILE

logger = logging.getLogger(__name__)

# Environment variable for the default log level.
LOG_LEVEL_ENV = "SPLITTER_LOG_LEVEL"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def positive_int(value: str) -> int:
    """Argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a number of at least 1, got {number}")
    return number


def default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="splitter",
        description=(
            "Split a file into multiple files of a fixed number of rows. "
            "The split files are written next to the original as <name>00001.<ext>, "
            "<name>00002.<ext> and so on."
        ),
        epilog="Example: splitter --copy-headers /home/piet/Downloads/my-file.csv --rows 5000",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="File to split: a file name in the current folder or a full path",
    )

    parser.add_argument(
        "--file",
        "-f",
        dest="file_option",
        metavar="FILE",
        help="Same as the positional file argument",
    )

    parser.add_argument(
        "--rows",
        "-r",
        type=positive_int,
        default=DEFAULT_ROWS_PER_FILE,
        help=f"Number of rows after which a new file is started (default: {DEFAULT_ROWS_PER_FILE})",
    )

    parser.add_argument(
        "--copy-headers",
        action="store_true",
        help="Repeat the first line of the file at the top of every split file",
    )

    parser.add_argument(
        "--executor",
        choices=EXECUTOR_POLICIES,
        default=DEFAULT_EXECUTOR_POLICY,
        help=f"How split files are written in parallel (default: {DEFAULT_EXECUTOR_POLICY})",
    )

    parser.add_argument(
        "--workers",
        type=positive_int,
        default=None,
        help="Number of parallel writers (default: chosen by the executor)",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help=f"Logging level (default: INFO, or ${LOG_LEVEL_ENV})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.file and args.file_option and args.file != args.file_option:
        parser.error("give the file either as argument or with --file, not both")

    file_path = args.file or args.file_option
    if not file_path:
        logger.error("The file has not been given, use: splitter [--copy-headers] FILE [--rows ROWS]")
        parser.print_help(sys.stderr)
        return 1

    config = SplitConfig(
        file_path=file_path,
        rows_per_file=args.rows,
        copy_headers=args.copy_headers,
        executor=args.executor,
        workers=args.workers,
    )

    try:
        main_split(config)
    except SplitterError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
