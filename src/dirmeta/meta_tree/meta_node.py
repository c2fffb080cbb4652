"""Node representation for filesystem entries in a metadata tree."""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from anytree import NodeMixin

from dirmeta.attributes.date import date_from
from dirmeta.attributes.file_type import FileType, file_type_from
from dirmeta.attributes.indicator import Indicator, indicator_for
from dirmeta.attributes.name import display_name, extension_of
from dirmeta.attributes.owner import Owner
from dirmeta.attributes.permissions import Permissions
from dirmeta.attributes.platform import AttributeExtractor, get_attribute_extractor
from dirmeta.attributes.size import size_from
from dirmeta.attributes.symlink import SymLink, symlink_from
from dirmeta.types import PathType


def read_metadata(path: PathType) -> os.stat_result:
    """Read the metadata describing ``path`` itself.

    A symlink is described by its own metadata (the final link is not followed).
    Any other path is read normally, following intermediate symlinks.

    Raises:
        OSError: If the metadata cannot be read. ``filename`` holds the path.
    """
    if os.path.islink(path):
        return os.lstat(path)
    return os.stat(path)


class MetaNode(NodeMixin):  # type: ignore
    """One filesystem entry plus the attributes a listing displays for it.

    Extends anytree.NodeMixin, which maintains the ``parent``/``children`` links and
    provides the traversal properties (``descendants``, ``root``, ``depth``).
    ``path`` and ``size`` are redefined here as the entry's filesystem path and byte
    size, so anytree's node-path based helpers such as ``ancestors`` are not used.

    anytree's ``children`` is always a tuple, so ``entries`` carries the listing
    state instead: None means the entry was never enumerated (not a directory,
    depth exhausted, directory-only display or an unreadable directory), while an
    empty list means it was enumerated and nothing matched. The size aggregator
    relies on that difference.

    Attributes:
        name (str): Display name. Forced to "." or ".." for synthetic entries.
        path (Path): Filesystem path of the entry, read-only.
        permissions (Permissions): Decoded permission bits.
        owner (Owner): User and group owning the entry.
        date (datetime): Modification time.
        size (int): Size in bytes. Directories may later hold their total size.
        file_type (FileType): Classification, never following a final symlink.
        symlink (SymLink): Link target, or ``SymLink()`` for non-links.
        indicator (Indicator): Classify-style suffix derived from ``file_type``.
        entries (Optional[List[MetaNode]]): Enumerated entries, or None.
        is_synthetic (bool): True for the "." and ".." entries.

    Example:
        >>> node = MetaNode.from_path("/")  # doctest: +SKIP
        >>> node.name, node.is_dir, node.entries  # doctest: +SKIP
        ('/', True, None)
    """

    def __init__(
        self,
        name: str,
        path: PathType,
        permissions: Permissions,
        owner: Owner,
        date: datetime,
        size: int,
        file_type: FileType,
        symlink: SymLink,
        indicator: Indicator,
    ) -> None:
        self.name = name
        self._entry_path = Path(path)
        self.permissions = permissions
        self.owner = owner
        self.date = date
        self._size = size
        self.file_type = file_type
        self.symlink = symlink
        self.indicator = indicator
        self.is_synthetic = False
        self._traversed = False

    @classmethod
    def from_path(cls, path: PathType, extractor: Optional[AttributeExtractor] = None) -> "MetaNode":
        """Build a node for ``path`` from its metadata.

        Args:
            path: Path of the entry to describe.
            extractor: Platform extractor for owner and permissions. Defaults to the
                one for the running platform.

        Returns:
            A node with ``entries`` set to None.

        Raises:
            OSError: If the metadata, or the platform's ownership query, fails.
                A dangling or unreadable symlink target is not an error.
        """
        if extractor is None:
            extractor = get_attribute_extractor()

        metadata = read_metadata(path)
        owner, permissions = extractor.owner_and_permissions(path, metadata)
        file_type = file_type_from(metadata, permissions)

        return cls(
            name=display_name(path, file_type),
            path=path,
            permissions=permissions,
            owner=owner,
            date=date_from(metadata),
            size=size_from(metadata),
            file_type=file_type,
            symlink=symlink_from(path),
            indicator=indicator_for(file_type),
        )

    @property
    def path(self) -> Path:
        return self._entry_path

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, size: int) -> None:
        self._size = size

    @property
    def entries(self) -> Optional[List["MetaNode"]]:
        if not self._traversed:
            return None
        return list(self.children)

    @entries.setter
    def entries(self, entries: Optional[List["MetaNode"]]) -> None:
        # Attaching through anytree sets each entry's parent
        self.children = entries if entries is not None else ()
        self._traversed = entries is not None

    @property
    def is_dir(self) -> bool:
        return self.file_type.is_dir

    @property
    def is_symlink(self) -> bool:
        return self.file_type.is_symlink

    @property
    def is_traversed(self) -> bool:
        return self._traversed

    @property
    def extension(self) -> Optional[str]:
        return extension_of(self.name, self.file_type)

    def clone(self) -> "MetaNode":
        """Return a detached copy of this node's attributes, without entries."""
        return MetaNode(
            name=self.name,
            path=self._entry_path,
            permissions=self.permissions,
            owner=self.owner,
            date=self.date,
            size=self._size,
            file_type=self.file_type,
            symlink=self.symlink,
            indicator=self.indicator,
        )

    def __repr__(self) -> str:
        return f"MetaNode({str(self._entry_path)!r}, name={self.name!r}, kind={self.file_type.kind.value!r})"
