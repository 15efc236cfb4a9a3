import logging
import time
from dataclasses import dataclass
from pathlib import Path

from file_splitter.paths import resolve_path
from file_splitter.runner.execution import (
    DEFAULT_EXECUTOR_POLICY,
    describe_executor,
    get_executor_class,
)
from file_splitter.split.partition import split_file
from file_splitter.split.types import DEFAULT_ROWS_PER_FILE, SplitResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Validated settings for a single split run."""

    file_path: str
    rows_per_file: int = DEFAULT_ROWS_PER_FILE
    copy_headers: bool = False
    executor: str = DEFAULT_EXECUTOR_POLICY
    workers: int | None = None


def run_split(config: SplitConfig) -> SplitResult:
    """
    Resolve the input path and split it.

    Errors from the split are propagated unchanged.
    """
    input_path = resolve_path(config.file_path)

    executor_class = get_executor_class(config.executor)
    executor_name = describe_executor(executor_class)
    workers_desc = "auto" if config.workers is None else str(config.workers)

    logger.info(
        f"Starting: file={Path(input_path).name}, rows={config.rows_per_file}, "
        f"copy_headers={config.copy_headers}, executor={executor_name}, workers={workers_desc}"
    )

    result = split_file(
        input_path,
        rows_per_file=config.rows_per_file,
        copy_headers=config.copy_headers,
        executor_class=executor_class,
        workers=config.workers,
    )

    logger.debug("Split done: %d files written", result.files)
    return result


def main_split(config: SplitConfig) -> SplitResult:
    """Main entry point that logs the split summary."""
    start = time.perf_counter()
    result = run_split(config)
    elapsed = time.perf_counter() - start

    logger.info(
        'This file "%s" with %d rows is split per %d rows into %d files at the same folder.',
        config.file_path,
        result.rows,
        config.rows_per_file,
        result.files,
    )
    logger.info("The file splitting took this long: %.3fs.", elapsed)
    return result
