from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process with a byte sink and checks exit codes,
stdout contents and the reporting of partial failures.
"""

import errno
import io
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirtree.infra.fs import list_entries
from dirtree.interface.cli.app import EXIT_OK, EXIT_ROOT_ERROR, LOG_FILE_ENV, main


def test_main_prints_tree(two_entry_dir: Path):
    out = io.BytesIO()

    code = main([str(two_entry_dir), "-f"], out=out)

    assert code == EXIT_OK
    assert out.getvalue().decode("utf-8") == "├───b\n└───c.txt (5b)\n"


def test_main_directories_only(two_entry_dir: Path):
    out = io.BytesIO()

    assert main([str(two_entry_dir)], out=out) == EXIT_OK
    assert out.getvalue().decode("utf-8") == "└───b\n"


def test_main_missing_root_returns_error(tmp_path: Path, capsys):
    out = io.BytesIO()

    code = main([str(tmp_path / "missing")], out=out)

    assert code == EXIT_ROOT_ERROR
    assert out.getvalue() == b""
    err = capsys.readouterr().err
    assert err.count("Cannot inspect root path") == 1


def test_main_usage_error_does_not_touch_filesystem():
    with patch("dirtree.core.analysis.tree_builder.inspect_path") as inspect:
        with pytest.raises(SystemExit) as exc_info:
            main(["a", "b", "c"], out=io.BytesIO())

    assert exc_info.value.code == 2
    inspect.assert_not_called()


def test_main_reports_listing_warnings_without_failing(sample_project: Path, caplog):
    blocked = os.path.join(str(sample_project), "docs")

    def fake_list(path):
        if path == blocked:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        return list_entries(path)

    out = io.BytesIO()
    with patch("dirtree.core.analysis.tree_builder.list_entries", side_effect=fake_list):
        code = main([str(sample_project)], out=out)

    assert code == EXIT_OK
    assert out.getvalue().decode("utf-8") == "├───docs\n└───src\n\t└───pkg\n"
    assert f"Skipped '{blocked}'" in caplog.text


def test_main_unknown_second_argument_lists_directories(two_entry_dir: Path):
    out = io.BytesIO()

    assert main([str(two_entry_dir), "-x"], out=out) == EXIT_OK
    assert out.getvalue().decode("utf-8") == "└───b\n"


def test_main_dash_prefixed_root(tmp_path: Path, monkeypatch):
    root = tmp_path / "-dir"
    root.mkdir()
    (root / "inner").mkdir()
    monkeypatch.chdir(tmp_path)

    out = io.BytesIO()
    assert main(["-dir"], out=out) == EXIT_OK
    assert out.getvalue().decode("utf-8") == "└───inner\n"


def test_main_leading_flag_is_treated_as_root(two_entry_dir: Path, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.BytesIO()

    assert main(["-f", str(two_entry_dir)], out=out) == EXIT_ROOT_ERROR
    assert out.getvalue() == b""


class ClosedPipe:
    """Sink that behaves like a pipe whose reader has exited."""

    def write(self, data: bytes) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")


def test_main_broken_pipe_exits_quietly(two_entry_dir: Path, capsys):
    code = main([str(two_entry_dir), "-f"], out=ClosedPipe())

    assert code == EXIT_OK
    err = capsys.readouterr().err
    assert "Traceback" not in err
    assert "CRITICAL" not in err


def test_main_writes_warnings_to_log_file(sample_project: Path, tmp_path: Path, monkeypatch):
    log_file = tmp_path / "logs" / "dirtree.log"
    monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
    blocked = os.path.join(str(sample_project), "src")

    def fake_list(path):
        if path == blocked:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        return list_entries(path)

    with patch("dirtree.core.analysis.tree_builder.list_entries", side_effect=fake_list):
        assert main([str(sample_project)], out=io.BytesIO()) == EXIT_OK

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING" in content
    assert f"Skipped '{blocked}'" in content
