"""Persist a single row group to its output file."""

import logging
from collections.abc import Iterable
from pathlib import Path

from file_splitter.errors import OutputFileError
from file_splitter.split.naming import output_path_for
from file_splitter.split.types import BUFFER_SIZE

logger = logging.getLogger(__name__)


def write_group(input_path: str, lines: Iterable[bytes], group_index: int) -> Path:
    """
    Write one row group to the output file derived from input_path.

    The file is created or truncated. Each line is terminated by a newline.
    A failure on a single line is logged and the remaining lines are still
    written; failing to open or close the file raises OutputFileError.
    """
    output_path = output_path_for(input_path, group_index)

    try:
        handle = open(output_path, "wb", buffering=BUFFER_SIZE)  # noqa: SIM115
    except OSError as exc:
        raise OutputFileError(f"cannot create output file {output_path}: {exc}") from exc

    written = 0
    try:
        for line in lines:
            try:
                handle.write(line + b"\n")
            except OSError as exc:
                logger.warning("Could not write a line to %s: %s", output_path, exc)
                continue
            written += 1
    finally:
        try:
            handle.close()
        except OSError as exc:
            raise OutputFileError(f"cannot close output file {output_path}: {exc}") from exc

    logger.debug("Wrote %d lines to %s", written, output_path.name)
    return output_path
