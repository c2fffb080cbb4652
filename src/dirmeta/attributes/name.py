"""Display names and extensions of filesystem entries."""

from pathlib import Path
from typing import Optional

from dirmeta.attributes.file_type import FileType
from dirmeta.types import EntryKind, PathType


def display_name(path: PathType, file_type: FileType) -> str:
    """Return the name an entry is listed under.

    The final path component is used. Paths without one (``/``, ``.``, ``..`` or a
    bare drive on Windows) are listed under the path as given.

    Example:
        >>> from dirmeta.types import EntryKind
        >>> display_name("/tmp/notes.txt", FileType(EntryKind.FILE))
        'notes.txt'
        >>> display_name("/", FileType(EntryKind.DIRECTORY))
        '/'
    """
    path = Path(path)
    if path.name and path.name != "..":
        return path.name
    return str(path)


def extension_of(name: str, file_type: FileType) -> Optional[str]:
    """Return the extension of a regular file name, without the leading dot.

    Directories, links and special files have no extension, and neither do dotfiles
    such as ``.bashrc`` whose only dot is the leading one.

    Example:
        >>> from dirmeta.types import EntryKind
        >>> extension_of("archive.tar.gz", FileType(EntryKind.FILE))
        'gz'
        >>> extension_of(".bashrc", FileType(EntryKind.FILE)) is None
        True
    """
    if file_type.kind is not EntryKind.FILE:
        return None
    stem, dot, extension = name.lstrip(".").rpartition(".")
    if not dot or not stem or not extension:
        return None
    return extension
