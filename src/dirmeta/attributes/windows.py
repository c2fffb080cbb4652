"""Owner and permission extraction on Windows."""

import os
from pathlib import Path
from typing import Tuple

from dirmeta.attributes.owner import Owner
from dirmeta.attributes.permissions import Permissions
from dirmeta.attributes.platform import AttributeExtractor
from dirmeta.types import PathType


class WindowsAttributeExtractor(AttributeExtractor):
    """Queries ownership by path and decodes the mode Python emulates on Windows.

    Ownership lookups open the entry's security descriptor, so they are extra I/O and
    an ``OSError`` from them fails the node. Interpreters without ownership support
    on Windows report an empty owner instead.
    """

    def owner_and_permissions(self, path: PathType, metadata: os.stat_result) -> Tuple[Owner, Permissions]:
        entry = Path(path)
        try:
            owner = Owner(user=entry.owner(), group=entry.group())
        except NotImplementedError:
            owner = Owner(user="", group="")
        return owner, Permissions.from_mode(metadata.st_mode)
