"""Output file naming."""

from pathlib import Path

from file_splitter.split.types import INDEX_WIDTH


def separate_name_and_extension(file_name: str) -> tuple[str, str]:
    """
    Split a file name at its last dot.

    Returns (base, extension); extension is empty when there is no dot.
    """
    base, dot, extension = file_name.rpartition(".")
    if not dot:
        return file_name, ""
    return base, extension


def output_path_for(input_path: str | Path, group_index: int) -> Path:
    """
    Build the output path for a group, next to the input file.

    data.csv + 3 -> data00003.csv, README + 1 -> README00001
    """
    source = Path(input_path)
    base, extension = separate_name_and_extension(source.name)
    name = f"{base}{group_index:0{INDEX_WIDTH}d}"
    if extension:
        name = f"{name}.{extension}"
    return source.with_name(name)
