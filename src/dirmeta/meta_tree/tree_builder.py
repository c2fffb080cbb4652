"""Bounded-depth construction of metadata trees.

The builder reads one directory level per call and recurses into each constructed
child with one less level of depth budget. Problems with individual entries or
subdirectories are reported through an ErrorReporter and never abort the listing.
"""

import logging
import os
from typing import List, Optional

from dirmeta.attributes.platform import AttributeExtractor
from dirmeta.exceptions import InvalidEntryNameError
from dirmeta.exclusion_rules.base_rules import BaseExclusionRules
from dirmeta.meta_tree.display_mode import DisplayMode
from dirmeta.meta_tree.error_reporter import ErrorReporter, StderrErrorReporter, report_os_error
from dirmeta.meta_tree.meta_node import MetaNode

logger = logging.getLogger(__name__)


def recurse_into(
    node: MetaNode,
    depth: int,
    display: DisplayMode = DisplayMode.DEFAULT,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    reporter: Optional[ErrorReporter] = None,
    extractor: Optional[AttributeExtractor] = None,
) -> Optional[List[MetaNode]]:
    """Build the children of ``node``, recursively, up to ``depth`` levels deep.

    Entries are returned in the order the directory enumeration yields them. Each
    returned child already has its own ``entries`` set from a recursive call with
    ``depth - 1``.

    Args:
        node: The node to enumerate.
        depth: Remaining levels. Zero means ``node`` is not enumerated at all.
        display: Which entries to include and whether to prepend "." and "..".
        exclusion_rules: Names matching these rules are skipped entirely.
        reporter: Error channel for recoverable failures. Defaults to stderr.
        extractor: Platform extractor passed on to node construction.

    Returns:
        The list of child nodes, or None when ``node`` was not enumerated: depth is
        exhausted, the display mode is DIRECTORY_ITSELF, the node is not a directory,
        or the directory could not be opened (the failure is reported).

    Raises:
        OSError: If canonicalizing the path or reading the parent for the ".." entry
            fails, or if reading an already opened directory fails.
        InvalidEntryNameError: If an entry has no usable name.
    """
    if depth == 0:
        return None

    if display is DisplayMode.DIRECTORY_ITSELF:
        return None

    if not node.is_dir:
        return None

    if reporter is None:
        reporter = StderrErrorReporter()

    try:
        entries = os.scandir(node.path)
    except OSError as e:
        report_os_error(reporter, node.path, e)
        return None

    children: List[MetaNode] = []

    with entries:
        if display.shows_synthetic_entries:
            children.extend(_synthetic_entries(node, extractor))

        for entry in entries:
            name = entry.name
            if not name:
                raise InvalidEntryNameError(entry.path)

            if exclusion_rules is not None and exclusion_rules.exclude(name):
                logger.debug("Excluded %s", entry.path)
                continue

            if display.hides_dotfiles and name.startswith("."):
                continue

            path = node.path / name
            try:
                child = MetaNode.from_path(path, extractor)
            except OSError as e:
                report_os_error(reporter, path, e)
                continue

            try:
                child.entries = recurse_into(child, depth - 1, display, exclusion_rules, reporter, extractor)
            except (OSError, InvalidEntryNameError) as e:
                # The entry is still listed, just without its contents
                report_os_error(reporter, path, e)

            children.append(child)

    return children


def _synthetic_entries(node: MetaNode, extractor: Optional[AttributeExtractor]) -> List[MetaNode]:
    """Build the "." and ".." entries of a directory listing, in that order."""
    absolute_path = node.path.resolve(strict=True)
    # The filesystem root is its own parent
    parent_path = absolute_path.parent

    current = node.clone()
    current.name = "."
    current.is_synthetic = True

    parent = MetaNode.from_path(parent_path, extractor)
    parent.name = ".."
    parent.is_synthetic = True

    return [current, parent]
