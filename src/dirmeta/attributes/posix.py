"""Owner and permission extraction from POSIX metadata bits."""

import grp
import os
import pwd
from typing import Tuple

from dirmeta.attributes.owner import Owner
from dirmeta.attributes.permissions import Permissions
from dirmeta.attributes.platform import AttributeExtractor
from dirmeta.types import PathType


class PosixAttributeExtractor(AttributeExtractor):
    """Reads ownership from ``st_uid``/``st_gid`` and permissions from ``st_mode``.

    Ids without a user or group database entry are reported numerically. No I/O is
    performed beyond the passwd/group lookups.
    """

    def owner_and_permissions(self, path: PathType, metadata: os.stat_result) -> Tuple[Owner, Permissions]:
        owner = Owner(user=_user_name(metadata.st_uid), group=_group_name(metadata.st_gid))
        return owner, Permissions.from_mode(metadata.st_mode)


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)
