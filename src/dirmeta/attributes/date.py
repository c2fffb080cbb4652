"""Modification date of a filesystem entry."""

import os
from datetime import datetime


def date_from(metadata: os.stat_result) -> datetime:
    """Return the modification time as a timezone-aware local datetime."""
    return datetime.fromtimestamp(metadata.st_mtime).astimezone()
