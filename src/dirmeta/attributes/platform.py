"""Platform capability for extracting owner and permissions from metadata."""

import os
from abc import ABC, abstractmethod
from typing import Tuple

from dirmeta.attributes.owner import Owner
from dirmeta.attributes.permissions import Permissions
from dirmeta.types import PathType


class AttributeExtractor(ABC):
    """
    Abstract base class for the platform-specific part of node construction.

    Everything else about a node is derived the same way on every platform; only
    ownership and permission bits need a per-platform query. Implementations may
    perform additional I/O and may raise ``OSError``, which fails the construction of
    the node being built.
    """

    @abstractmethod
    def owner_and_permissions(self, path: PathType, metadata: os.stat_result) -> Tuple[Owner, Permissions]:
        """
        Extract the owner and permission bits of an entry.

        Args:
            path: Path of the entry, for platforms that query attributes by path.
            metadata: Metadata already read for the entry (not following a final symlink).

        Returns:
            Tuple of (Owner, Permissions).

        Raises:
            OSError: If an additional platform query fails.
        """
        pass


def get_attribute_extractor() -> AttributeExtractor:
    """Return the extractor for the running platform."""
    if os.name == "nt":
        from dirmeta.attributes.windows import WindowsAttributeExtractor

        return WindowsAttributeExtractor()

    from dirmeta.attributes.posix import PosixAttributeExtractor

    return PosixAttributeExtractor()
