"""
Tests for whole-file text reads.
"""

import pytest

from onehelpers.utils.files import read_text


def test_reads_content_unchanged(write_bytes):
    path = write_bytes("hello.txt", b"hello\nworld")

    assert read_text(path) == "hello\nworld"
    assert read_text(str(path)) == "hello\nworld"


def test_line_endings_are_not_normalized(write_bytes):
    path = write_bytes("crlf.txt", b"one\r\ntwo\rthree\n")

    assert read_text(path) == "one\r\ntwo\rthree\n"


def test_empty_file_gives_empty_string(write_bytes):
    path = write_bytes("empty.txt", b"")

    assert read_text(path) == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "does-not-exist.txt")


def test_directory_path_raises(tmp_path):
    with pytest.raises(OSError):
        read_text(tmp_path)


def test_undecodable_bytes_raise(write_bytes):
    path = write_bytes("latin.txt", "café".encode("latin-1"))

    with pytest.raises(UnicodeDecodeError):
        read_text(path)


def test_explicit_encoding(write_bytes):
    path = write_bytes("latin.txt", "café".encode("latin-1"))

    assert read_text(path, encoding="latin-1") == "café"


def test_default_encoding_comes_from_settings(monkeypatch, write_bytes):
    from onehelpers.config import get_settings

    monkeypatch.setenv("ONEHELPERS_ENCODING", "latin-1")
    get_settings.cache_clear()
    path = write_bytes("latin.txt", "café".encode("latin-1"))

    assert read_text(path) == "café"


@pytest.fixture
def opened_files(monkeypatch):
    """Record every file object handed out by open() during the test."""
    import builtins

    handles = []
    real_open = builtins.open

    def _tracking_open(*args, **kwargs):
        fh = real_open(*args, **kwargs)
        handles.append(fh)
        return fh

    monkeypatch.setattr(builtins, "open", _tracking_open)
    return handles


def test_handle_closed_after_successful_read(write_bytes, opened_files):
    path = write_bytes("hello.txt", b"hello")

    assert read_text(path) == "hello"

    assert len(opened_files) == 1
    assert opened_files[0].closed


def test_handle_closed_after_decode_error(write_bytes, opened_files):
    path = write_bytes("latin.txt", "café".encode("latin-1"))

    with pytest.raises(UnicodeDecodeError):
        read_text(path)

    assert len(opened_files) == 1
    assert opened_files[0].closed
