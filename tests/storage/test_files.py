"""Tests for FileStorage."""

from pathlib import Path

import pytest

from catfetch.storage import FileStorage


@pytest.fixture
def files() -> FileStorage:
    return FileStorage()


def test_write_creates_parent_dirs(files: FileStorage, tmp_path: Path):
    path = tmp_path / "nested" / "dir" / "records.jsonl"
    files.write(path, '{"fact": "one"}')
    assert path.read_text(encoding="utf-8") == '{"fact": "one"}\n'


def test_write_appends(files: FileStorage, tmp_path: Path):
    path = tmp_path / "records.jsonl"
    files.write(path, "first")
    files.write(path, "second\n")
    assert files.read_all(path) == "first\nsecond\n"


def test_accepts_string_paths(files: FileStorage, tmp_path: Path):
    path = str(tmp_path / "records.jsonl")
    files.write(path, "line")
    assert files.read_all(path) == "line\n"


def test_read_missing_file(files: FileStorage, tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        files.read_all(tmp_path / "missing.jsonl")


def test_write_into_directory_path_fails(files: FileStorage, tmp_path: Path):
    with pytest.raises(OSError):
        files.write(tmp_path, "content")
