"""Unit tests for display names, extensions and symlink targets."""

import os

import pytest

from dirmeta.attributes.file_type import FileType
from dirmeta.attributes.name import display_name, extension_of
from dirmeta.attributes.symlink import SymLink, symlink_from
from dirmeta.types import EntryKind

FILE = FileType(EntryKind.FILE)
DIRECTORY = FileType(EntryKind.DIRECTORY)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/tmp/notes.txt", "notes.txt"),
        ("relative/dir", "dir"),
        ("/", "/"),
        (".", "."),
        ("..", ".."),
    ],
)
def test_display_name(path, expected):
    assert display_name(path, DIRECTORY) == expected


@pytest.mark.parametrize(
    "name,file_type,expected",
    [
        ("main.py", FILE, "py"),
        ("archive.tar.gz", FILE, "gz"),
        (".bashrc", FILE, None),
        (".config.yml", FILE, "yml"),
        ("Makefile", FILE, None),
        ("trailing.", FILE, None),
        ("package.d", DIRECTORY, None),
    ],
)
def test_extension_of(name, file_type, expected):
    assert extension_of(name, file_type) == expected


def test_symlink_from_regular_file(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("content")
    assert symlink_from(target) == SymLink()
    assert not symlink_from(target).is_unreadable


def test_symlink_from_valid_link(tmp_path, symlinks_supported):
    (tmp_path / "file.txt").write_text("content")
    os.symlink("file.txt", tmp_path / "link")

    link = symlink_from(tmp_path / "link")
    assert link.target == "file.txt"
    assert link.valid


def test_symlink_from_dangling_link(tmp_path, symlinks_supported):
    os.symlink("missing", tmp_path / "link")

    link = symlink_from(tmp_path / "link")
    assert link.target == "missing"
    assert not link.valid
    assert link.is_unreadable


def test_symlink_from_unreadable_link(tmp_path, symlinks_supported, monkeypatch):
    os.symlink("file.txt", tmp_path / "link")

    def failing_readlink(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "readlink", failing_readlink)
    assert symlink_from(tmp_path / "link") == SymLink(target=None, valid=False)
