"""Display mode enum controlling recursion, dotfiles and synthetic entries."""

from enum import Enum


class DisplayMode(str, Enum):
    """Which entries of a directory a listing asks for.

    Values:
        DIRECTORY_ITSELF: Describe the directory only, never read its contents
        ONLY_VISIBLE: Hide entries whose name starts with "."
        ALMOST_ALL: Show dotfiles, but no synthetic "." and ".." entries
        ALL: Show dotfiles and prepend synthetic "." and ".." entries
        DEFAULT: Same as ONLY_VISIBLE
    """

    DIRECTORY_ITSELF = "directory_itself"
    ONLY_VISIBLE = "only_visible"
    ALMOST_ALL = "almost_all"
    ALL = "all"
    DEFAULT = "default"

    @property
    def hides_dotfiles(self) -> bool:
        return self in (DisplayMode.ONLY_VISIBLE, DisplayMode.DEFAULT)

    @property
    def shows_synthetic_entries(self) -> bool:
        return self is DisplayMode.ALL
