"""Filesystem metadata trees for directory listings.

This package builds in-memory trees mirroring part of a filesystem, annotating
each entry with the metadata a directory-listing tool needs for display.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for programmatic use
try:
    __version__ = version("dirmeta")
except PackageNotFoundError:
    __version__ = "unknown"
