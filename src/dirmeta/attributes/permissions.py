"""Permission bits of a filesystem entry."""

import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class Permissions:
    """The nine rwx bits plus the setuid, setgid and sticky bits of an entry.

    On Windows the bits come from the mode Python emulates from file attributes:
    read-only entries lose their write bits and executables are recognized by
    extension.

    Example:
        >>> perms = Permissions.from_mode(0o4755)
        >>> perms.user_write, perms.other_write, perms.setuid
        (True, False, True)
        >>> perms.is_executable()
        True
    """

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        """Decode the permission bits of an ``st_mode`` value."""
        return cls(
            user_read=bool(mode & stat.S_IRUSR),
            user_write=bool(mode & stat.S_IWUSR),
            user_execute=bool(mode & stat.S_IXUSR),
            group_read=bool(mode & stat.S_IRGRP),
            group_write=bool(mode & stat.S_IWGRP),
            group_execute=bool(mode & stat.S_IXGRP),
            other_read=bool(mode & stat.S_IROTH),
            other_write=bool(mode & stat.S_IWOTH),
            other_execute=bool(mode & stat.S_IXOTH),
            sticky=bool(mode & stat.S_ISVTX),
            setgid=bool(mode & stat.S_ISGID),
            setuid=bool(mode & stat.S_ISUID),
        )

    def is_executable(self) -> bool:
        """Return True if any of the user, group or other execute bits is set."""
        return self.user_execute or self.group_execute or self.other_execute
