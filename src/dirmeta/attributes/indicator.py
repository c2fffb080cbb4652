"""Indicator characters used by presentation to pick a color or icon class."""

from enum import Enum

from dirmeta.attributes.file_type import FileType
from dirmeta.types import EntryKind


class Indicator(str, Enum):
    """Classify-style suffix for an entry.

    Values:
        DIRECTORY: "/"
        EXECUTABLE: "*" for regular files with an execute bit set
        SYMLINK: "@"
        PIPE: "|"
        SOCKET: "="
        NONE: "" for everything else
    """

    DIRECTORY = "/"
    EXECUTABLE = "*"
    SYMLINK = "@"
    PIPE = "|"
    SOCKET = "="
    NONE = ""


_KIND_INDICATORS = {
    EntryKind.DIRECTORY: Indicator.DIRECTORY,
    EntryKind.SYMLINK: Indicator.SYMLINK,
    EntryKind.PIPE: Indicator.PIPE,
    EntryKind.SOCKET: Indicator.SOCKET,
}


def indicator_for(file_type: FileType) -> Indicator:
    """Return the indicator for a file type.

    Example:
        >>> indicator_for(FileType(EntryKind.FILE, executable=True)).value
        '*'
        >>> indicator_for(FileType(EntryKind.FILE)).value
        ''
    """
    if file_type.kind is EntryKind.FILE:
        return Indicator.EXECUTABLE if file_type.executable else Indicator.NONE
    return _KIND_INDICATORS.get(file_type.kind, Indicator.NONE)
