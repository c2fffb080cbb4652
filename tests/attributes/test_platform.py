"""Unit tests for the platform owner/permission extractors."""

import os
import stat
from datetime import datetime

import pytest

from dirmeta.attributes.date import date_from
from dirmeta.attributes.owner import Owner
from dirmeta.attributes.platform import AttributeExtractor, get_attribute_extractor
from dirmeta.attributes.size import size_from


def test_get_attribute_extractor_matches_platform():
    extractor = get_attribute_extractor()
    assert isinstance(extractor, AttributeExtractor)
    expected = "WindowsAttributeExtractor" if os.name == "nt" else "PosixAttributeExtractor"
    assert type(extractor).__name__ == expected


@pytest.mark.skipif(os.name == "nt", reason="POSIX ownership only")
def test_posix_extractor_reads_owner_and_mode(tmp_path):
    import grp
    import pwd

    from dirmeta.attributes.posix import PosixAttributeExtractor

    target = tmp_path / "file.txt"
    target.write_text("content")
    target.chmod(0o640)
    metadata = os.stat(target)

    owner, permissions = PosixAttributeExtractor().owner_and_permissions(target, metadata)

    assert owner == Owner(user=pwd.getpwuid(metadata.st_uid).pw_name, group=grp.getgrgid(metadata.st_gid).gr_name)
    assert permissions.user_read and permissions.user_write
    assert permissions.group_read and not permissions.group_write
    assert not permissions.other_read


@pytest.mark.skipif(os.name == "nt", reason="POSIX ownership only")
def test_posix_extractor_falls_back_to_numeric_ids(monkeypatch):
    from dirmeta.attributes import posix

    def unknown(_):
        raise KeyError("unknown id")

    monkeypatch.setattr(posix.pwd, "getpwuid", unknown)
    monkeypatch.setattr(posix.grp, "getgrgid", unknown)

    metadata = os.stat_result((stat.S_IFREG | 0o600, 0, 0, 1, 4242, 4343, 0, 0, 0, 0))
    owner, _ = posix.PosixAttributeExtractor().owner_and_permissions("/nowhere", metadata)
    assert owner == Owner(user="4242", group="4343")


def test_size_and_date_from_metadata(tmp_path):
    target = tmp_path / "file.txt"
    target.write_bytes(b"12345")
    os.utime(target, (1_600_000_000, 1_600_000_000))
    metadata = os.stat(target)

    assert size_from(metadata) == 5
    date = date_from(metadata)
    assert isinstance(date, datetime)
    assert date.tzinfo is not None
    assert date.timestamp() == 1_600_000_000
