from __future__ import annotations

import io

import pytest

from tarsym.common.errors import ArchiveFormatError
from tarsym.core.index import (
    DirectoryEntry,
    FileEntry,
    SymlinkEntry,
    build_index,
    normalize_path,
    open_index,
)


def test_normalize_path():
    assert normalize_path("a/b/") == "a/b"
    assert normalize_path("/a/b") == "a/b"
    assert normalize_path("./a/b") == "a/b"
    assert normalize_path("./") == "."
    assert normalize_path("a") == "a"


def test_build_index_classifies_entries(make_tar, scenario_members):
    index = build_index(io.BytesIO(make_tar(scenario_members)))

    assert list(index) == ["a", "a/f.txt", "a/link"]
    assert index["a"] == DirectoryEntry("a")
    assert index["a/f.txt"] == FileEntry("a/f.txt", 1024, 5)
    assert index["a/link"] == SymlinkEntry("a/link", "f.txt")
    assert index.files() == [FileEntry("a/f.txt", 1024, 5)]
    assert len(index) == 3


def test_directory_ancestors_are_synthesized(make_tar):
    index = build_index(io.BytesIO(make_tar([("dir", "a/b/c/")])))
    assert list(index) == ["a", "a/b", "a/b/c"]
    assert all(isinstance(entry, DirectoryEntry) for entry in index.entries())


def test_file_does_not_synthesize_parents(make_tar):
    index = build_index(io.BytesIO(make_tar([("file", "deep/dir/f.txt", b"x")])))
    assert "deep" not in index
    assert "deep/dir" not in index
    assert "deep/dir/f.txt" in index


def test_root_file_without_directory_headers(make_tar):
    index = build_index(io.BytesIO(make_tar([("file", "x.txt", b"data")])))
    assert index.get("x.txt") == FileEntry("x.txt", 512, 4)


def test_leading_dot_slash_is_stripped(make_tar):
    index = build_index(io.BytesIO(make_tar([("dir", "./"), ("file", "./x.txt", b"1")])))
    assert "x.txt" in index
    assert "./x.txt" not in index


def test_symlink_target_trailing_slash_stripped(make_tar):
    index = build_index(io.BytesIO(make_tar([("link", "l", "some/dir/")])))
    assert index["l"] == SymlinkEntry("l", "some/dir")


def test_duplicate_file_last_write_wins(make_tar):
    index = build_index(io.BytesIO(make_tar([
        ("file", "x.txt", b"old"),
        ("file", "x.txt", b"newer"),
    ])))
    assert index["x.txt"].size == 5
    assert index["x.txt"].offset == 1536


def test_directory_insertion_is_idempotent(make_tar):
    index = build_index(io.BytesIO(make_tar([
        ("dir", "a/b/"),
        ("link", "a/b/c", "elsewhere"),
        ("dir", "a/"),
        ("dir", "a/b/c/d/"),
    ])))
    assert list(index) == ["a", "a/b", "a/b/c", "a/b/c/d"]
    # the symlink is not replaced by a synthesized directory
    assert index["a/b/c"] == SymlinkEntry("a/b/c", "elsewhere")


def test_unsupported_typeflag_fails(make_tar):
    with pytest.raises(ArchiveFormatError, match="unhandled"):
        build_index(io.BytesIO(make_tar([("file", "ok", b""), ("fifo", "pipe")])))


def test_incompatible_archive_fails():
    with pytest.raises(ArchiveFormatError, match="not a compatible"):
        build_index(io.BytesIO(b"\x00" * 1024))
    with pytest.raises(ArchiveFormatError):
        build_index(io.BytesIO(b""))


def test_open_index_from_disk(tar_file, scenario_members):
    index = open_index(tar_file(scenario_members))
    assert "a/link" in index


def test_root_symlink_target_is_kept(make_tar):
    index = build_index(io.BytesIO(make_tar([("link", "r", "/")])))
    assert index["r"] == SymlinkEntry("r", "/")
