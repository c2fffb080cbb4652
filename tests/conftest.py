"""Test configuration and fixtures for dirmeta."""

import os

import pytest

from dirmeta.meta_tree.error_reporter import CollectingErrorReporter


@pytest.fixture
def reporter():
    return CollectingErrorReporter()


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/a (10 bytes) and root/sub/b (5 bytes)."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a").write_bytes(b"x" * 10)
    (root / "sub").mkdir()
    (root / "sub" / "b").write_bytes(b"y" * 5)
    return root


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip the test when symlinks cannot be created here."""
    probe = tmp_path / ".symlink_probe"
    try:
        os.symlink(tmp_path, probe)
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    probe.unlink()


@pytest.fixture
def permissions_enforced():
    """Skip the test when permission bits are not enforced (Windows, or running as root)."""
    if os.name == "nt" or os.geteuid() == 0:
        pytest.skip("Permission bits are not enforced for this user/platform")
