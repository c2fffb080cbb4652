"""File type classification from raw metadata."""

import os
import stat
from dataclasses import dataclass

from dirmeta.attributes.permissions import Permissions
from dirmeta.types import EntryKind


@dataclass(frozen=True)
class FileType:
    """Classification of an entry plus the flags that depend on its permission bits.

    Attributes:
        kind (EntryKind): What the entry is, classified without following a final symlink.
        executable (bool): For regular files, whether any execute bit is set.
        setuid (bool): For regular files and directories, whether the setuid bit is set.

    Example:
        >>> FileType(EntryKind.DIRECTORY).is_dir
        True
        >>> FileType(EntryKind.SYMLINK).is_dir
        False
    """

    kind: EntryKind
    executable: bool = False
    setuid: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


def file_type_from(metadata: os.stat_result, permissions: Permissions) -> FileType:
    """Classify an entry from its metadata and decoded permissions.

    Args:
        metadata: Result of ``os.lstat`` for symlinks, ``os.stat`` otherwise.
        permissions: Permissions decoded for the same entry. On Windows these are
            derived from attributes and file extension, which is why classification
            takes them instead of re-reading the mode.

    Returns:
        The FileType of the entry.
    """
    mode = metadata.st_mode
    if stat.S_ISLNK(mode):
        return FileType(EntryKind.SYMLINK)
    if stat.S_ISDIR(mode):
        return FileType(EntryKind.DIRECTORY, setuid=permissions.setuid)
    if stat.S_ISREG(mode):
        return FileType(EntryKind.FILE, executable=permissions.is_executable(), setuid=permissions.setuid)
    if stat.S_ISFIFO(mode):
        return FileType(EntryKind.PIPE)
    if stat.S_ISSOCK(mode):
        return FileType(EntryKind.SOCKET)
    if stat.S_ISBLK(mode):
        return FileType(EntryKind.BLOCK_DEVICE)
    if stat.S_ISCHR(mode):
        return FileType(EntryKind.CHAR_DEVICE)
    return FileType(EntryKind.SPECIAL)
