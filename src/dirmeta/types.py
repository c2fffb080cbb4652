from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Enumeration of the kinds of filesystem entries a tree node can describe.

    The kind is always classified from metadata that does not follow a final
    symlink, so a symlink to a directory is a SYMLINK, never a DIRECTORY.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        PIPE: Named pipe (FIFO)
        SOCKET: Unix domain socket
        BLOCK_DEVICE: Block special device
        CHAR_DEVICE: Character special device
        SPECIAL: Anything the platform reports that fits none of the above
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    SPECIAL = "special"
