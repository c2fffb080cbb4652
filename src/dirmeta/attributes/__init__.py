"""Per-field attribute extractors for filesystem entries.

Each extractor turns a raw metadata record (or a path) into one typed attribute of
a tree node. Only owner and permission extraction differs between platforms.
"""

from .date import date_from
from .file_type import FileType, file_type_from
from .indicator import Indicator, indicator_for
from .name import display_name, extension_of
from .owner import Owner
from .permissions import Permissions
from .platform import AttributeExtractor, get_attribute_extractor
from .size import size_from
from .symlink import SymLink, symlink_from

__all__ = [
    "AttributeExtractor",
    "FileType",
    "Indicator",
    "Owner",
    "Permissions",
    "SymLink",
    "date_from",
    "display_name",
    "extension_of",
    "file_type_from",
    "get_attribute_extractor",
    "indicator_for",
    "size_from",
    "symlink_from",
]
