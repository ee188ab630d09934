"""Test configuration: a stable temp directory on WSL and in-memory archive builders."""

from __future__ import annotations

import io
import os
import platform
import sys
import tarfile
import tempfile

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def _is_wsl() -> bool:
    release = platform.release().lower()
    version = platform.version().lower()
    return "microsoft" in release or "microsoft" in version


if _is_wsl() and os.path.isdir("/tmp"):
    os.environ["TMPDIR"] = "/tmp"
    os.environ["TEMP"] = "/tmp"
    os.environ["TMP"] = "/tmp"
    tempfile.tempdir = "/tmp"


def build_tar(members) -> bytes:
    """Build a GNU-format archive (magic "ustar  ") from member tuples.

    Supported tuples:
        ("dir", name)
        ("file", name, content_bytes)
        ("link", name, target)
        ("fifo", name)
    """
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w", format=tarfile.GNU_FORMAT) as tar:
        for member in members:
            kind, name = member[0], member[1]
            info = tarfile.TarInfo(name)
            if kind == "dir":
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
            elif kind == "file":
                info.size = len(member[2])
                tar.addfile(info, io.BytesIO(member[2]))
            elif kind == "link":
                info.type = tarfile.SYMTYPE
                info.linkname = member[2]
                tar.addfile(info)
            elif kind == "fifo":
                info.type = tarfile.FIFOTYPE
                tar.addfile(info)
            else:
                raise ValueError(f"unknown member kind {kind!r}")
    return buf.getvalue()


@pytest.fixture
def make_tar():
    """Return a builder producing archive bytes."""
    return build_tar


@pytest.fixture
def tar_file(tmp_path):
    """Return a builder that writes an archive to disk and returns its path."""

    def _write(members, name: str = "archive.tar") -> str:
        path = tmp_path / name
        path.write_bytes(build_tar(members))
        return str(path)

    return _write


@pytest.fixture
def scenario_members():
    """Directory a/, file a/f.txt ("hello") and symlink a/link -> f.txt."""
    return [
        ("dir", "a/"),
        ("file", "a/f.txt", b"hello"),
        ("link", "a/link", "f.txt"),
    ]
