"""File Splitter - Split large line-oriented files into smaller ones."""

from file_splitter.runner.run import main_split, run_split
from file_splitter.split.partition import split_file

__all__ = ["split_file", "run_split", "main_split"]
