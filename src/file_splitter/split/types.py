"""Shared constants and result structures for splitting."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Rows per output file when none is given.
DEFAULT_ROWS_PER_FILE = 10000

# Width of the zero-padded group index in output file names.
INDEX_WIDTH = 5

# Groups submitted to writers but not yet written, each held in memory.
MAX_PENDING_GROUPS = 64

RowGroup: TypeAlias = list[bytes]


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Result of a split: output file count and input rows read."""

    files: int
    rows: int
    output_paths: list[Path] = field(default_factory=list)
