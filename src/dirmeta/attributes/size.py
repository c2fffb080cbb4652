"""Byte size of a filesystem entry."""

import os


def size_from(metadata: os.stat_result) -> int:
    """Return the size in bytes reported by metadata.

    For symlinks read with ``os.lstat`` this is the length of the link text, and for
    directories it is the size of the directory entry itself, not its contents.
    """
    return int(metadata.st_size)
