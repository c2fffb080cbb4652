"""Owner identity of a filesystem entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Owner:
    """User and group names owning an entry.

    Platforms that cannot resolve a name fall back to the numeric id as a string,
    and to an empty string when no ownership information is available at all.
    """

    user: str
    group: str
