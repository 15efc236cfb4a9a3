"""Tests for writing a single row group."""

import logging
from pathlib import Path

import pytest

from file_splitter.errors import OutputFileError
from file_splitter.split import writer
from file_splitter.split.writer import write_group


class FlakyHandle:
    """File stand-in that fails to write one specific line."""

    def __init__(self, bad_line: bytes):
        self.bad_line = bad_line
        self.written: list[bytes] = []
        self.closed = False

    def write(self, data: bytes) -> int:
        if data == self.bad_line + b"\n":
            raise OSError("disk hiccup")
        self.written.append(data)
        return len(data)

    def close(self) -> None:
        self.closed = True


class UnclosableHandle(FlakyHandle):
    def close(self) -> None:
        raise OSError("no space left on device")


def test_writes_lines_newline_terminated(tmp_path: Path) -> None:
    source = tmp_path / "data.csv"

    output = write_group(str(source), [b"id,name", b"1,a", b"2,b"], 1)

    assert output == tmp_path / "data00001.csv"
    assert output.read_bytes() == b"id,name\n1,a\n2,b\n"


def test_truncates_existing_output(tmp_path: Path) -> None:
    source = tmp_path / "data.csv"
    existing = tmp_path / "data00002.csv"
    existing.write_bytes(b"stale content that is longer\n" * 10)

    write_group(str(source), [b"fresh"], 2)

    assert existing.read_bytes() == b"fresh\n"


def test_raises_when_output_cannot_be_created(tmp_path: Path) -> None:
    source = tmp_path / "missing-dir" / "data.csv"

    with pytest.raises(OutputFileError):
        write_group(str(source), [b"row"], 1)


def test_line_write_failure_is_logged_and_skipped(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    handle = FlakyHandle(bad_line=b"2")
    monkeypatch.setattr(writer, "open", lambda *args, **kwargs: handle, raising=False)

    with caplog.at_level(logging.WARNING, logger="file_splitter.split.writer"):
        write_group(str(tmp_path / "data.csv"), [b"1", b"2", b"3"], 1)

    assert handle.written == [b"1\n", b"3\n"]
    assert handle.closed
    assert "disk hiccup" in caplog.text


def test_close_failure_is_fatal(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    handle = UnclosableHandle(bad_line=b"")
    monkeypatch.setattr(writer, "open", lambda *args, **kwargs: handle, raising=False)

    with pytest.raises(OutputFileError, match="cannot close"):
        write_group(str(tmp_path / "data.csv"), [b"1"], 1)
