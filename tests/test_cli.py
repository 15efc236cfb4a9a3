"""Tests for the command-line interface."""

import logging
from pathlib import Path

import pytest

from file_splitter import cli


def test_splits_file_and_returns_zero(tmp_path: Path) -> None:
    source = tmp_path / "data.csv"
    source.write_bytes(b"id\n1\n2\n3\n4\n")

    exit_code = cli.main([str(source), "--rows", "2", "--copy-headers"])

    assert exit_code == 0
    assert (tmp_path / "data00001.csv").read_bytes() == b"id\n1\n"
    assert (tmp_path / "data00002.csv").read_bytes() == b"id\n2\n3\n"
    assert (tmp_path / "data00003.csv").read_bytes() == b"id\n4\n"


def test_file_option_spelling(tmp_path: Path) -> None:
    source = tmp_path / "notes"
    source.write_bytes(b"a\nb\n")

    assert cli.main(["--file", str(source), "-r", "1", "--executor", "serial"]) == 0
    assert (tmp_path / "notes00002").read_bytes() == b"b\n"


def test_missing_file_argument(
    capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR):
        assert cli.main([]) == 1

    assert "file has not been given" in caplog.text
    assert "usage: splitter" in capsys.readouterr().err


def test_missing_input_file_exits_non_zero(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert cli.main([str(tmp_path / "missing.csv")]) == 1

    assert "cannot open input file" in caplog.text


@pytest.mark.parametrize("rows", ["0", "-3", "many"])
def test_rows_must_be_positive(rows: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["data.csv", "--rows", rows])
    assert excinfo.value.code == 2


def test_log_level_default_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(cli.LOG_LEVEL_ENV, "debug")
    assert cli.create_parser().parse_args(["x"]).log_level == "DEBUG"

    monkeypatch.setenv(cli.LOG_LEVEL_ENV, "chatty")
    assert cli.create_parser().parse_args(["x"]).log_level == "INFO"
