"""Fatal error types raised by the split pipeline."""


class SplitterError(Exception):
    """Base class for errors that abort a split."""


class InputFileError(SplitterError):
    """The input file could not be opened or read."""


class OutputFileError(SplitterError):
    """An output file could not be created or closed."""
