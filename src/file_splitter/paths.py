"""Resolution of the input path given on the command line."""

import logging
import os

logger = logging.getLogger(__name__)


def has_separator(raw_path: str) -> bool:
    """Check whether the path already names a directory."""
    if os.sep in raw_path:
        return True
    return os.altsep is not None and os.altsep in raw_path


def resolve_path(raw_path: str) -> str:
    """
    Resolve a bare file name against the current working directory.

    Paths containing a separator are returned unchanged. If the working
    directory cannot be determined, the raw path is used as is.
    """
    if has_separator(raw_path):
        return raw_path

    try:
        working_directory = os.getcwd()
    except OSError as exc:
        logger.warning("Could not determine the working directory: %s", exc)
        return raw_path

    return f"{working_directory}{os.sep}{raw_path}"
