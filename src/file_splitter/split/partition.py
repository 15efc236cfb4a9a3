"""Sequential scan that partitions an input file into row groups."""

import logging
from concurrent.futures import ThreadPoolExecutor

from file_splitter.errors import InputFileError
from file_splitter.runner.execution import ExecutorClass
from file_splitter.split.tasks import WriterGroup
from file_splitter.split.types import BUFFER_SIZE, DEFAULT_ROWS_PER_FILE, RowGroup, SplitResult

logger = logging.getLogger(__name__)


def strip_line_ending(raw_line: bytes) -> bytes:
    """Drop the trailing newline and a carriage return right before it."""
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
    if raw_line.endswith(b"\r"):
        raw_line = raw_line[:-1]
    return raw_line


def split_file(
    input_path: str,
    rows_per_file: int = DEFAULT_ROWS_PER_FILE,
    copy_headers: bool = False,
    executor_class: ExecutorClass = ThreadPoolExecutor,
    workers: int | None = None,
) -> SplitResult:
    """
    Split input file into files of rows_per_file lines each.

    A group is flushed to a writer task every time the row counter hits a
    multiple of rows_per_file, the boundary line included. Whatever is left
    at EOF becomes the last file. With copy_headers, every group after the
    first starts with the first line of the input.

    Args:
        input_path: Path to the input file.
        rows_per_file: Maximum number of input rows per output file.
        copy_headers: Repeat the header line at the top of files 2..N.
        executor_class: Executor running the writers, None to write inline.
        workers: Worker count passed to the executor.

    Returns:
        SplitResult with the number of files written and rows read.
    """
    if rows_per_file < 1:
        raise ValueError(f"rows_per_file must be positive, got {rows_per_file}")

    try:
        handle = open(input_path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
    except OSError as exc:
        raise InputFileError(f"cannot open input file {input_path}: {exc}") from exc

    rows = 0
    group_index = 0
    header: bytes = b""
    group: RowGroup = []

    with handle, WriterGroup(executor_class, workers) as writers:
        try:
            for raw_line in handle:
                line = strip_line_ending(raw_line)
                rows += 1
                if rows == 1:
                    header = line

                group.append(line)

                if rows % rows_per_file == 0:
                    group_index += 1
                    logger.debug("Dispatching group %d (%d lines)", group_index, len(group))
                    writers.dispatch(input_path, group, group_index)
                    writers.raise_failures()
                    group = [header] if copy_headers else []
        except OSError as exc:
            raise InputFileError(f"cannot read input file {input_path}: {exc}") from exc

        # Trailing partial group; a group holding only the copied header is skipped.
        if rows % rows_per_file:
            group_index += 1
            logger.debug("Dispatching last group %d (%d lines)", group_index, len(group))
            writers.dispatch(input_path, group, group_index)

        output_paths = writers.join()

    return SplitResult(files=group_index, rows=rows, output_paths=output_paths)
