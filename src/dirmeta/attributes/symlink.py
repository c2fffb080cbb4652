"""Symlink target resolution."""

import os
from dataclasses import dataclass
from typing import Optional

from dirmeta.types import PathType


@dataclass(frozen=True)
class SymLink:
    """Target of a symbolic link as stored in the link itself.

    Attributes:
        target (Optional[str]): The raw link text, or None when the entry is not a
            symlink or the link text could not be read.
        valid (bool): False for a link whose text could not be read or whose target
            does not exist. Entries that are not symlinks are always valid.
    """

    target: Optional[str] = None
    valid: bool = True

    @property
    def is_unreadable(self) -> bool:
        """True when this marks a dangling or unreadable link."""
        return not self.valid


def symlink_from(path: PathType) -> SymLink:
    """Resolve the symlink target of ``path`` without ever raising.

    Non-symlinks yield ``SymLink()``. A link whose text cannot be read, or whose
    target does not exist, yields ``valid=False`` instead of an error.
    """
    if not os.path.islink(path):
        return SymLink()

    try:
        target = os.readlink(path)
    except OSError:
        return SymLink(valid=False)

    # Relative targets are resolved against the directory holding the link
    target_path = os.path.join(os.path.dirname(os.fspath(path)), target)
    return SymLink(target=target, valid=os.path.exists(target_path))
