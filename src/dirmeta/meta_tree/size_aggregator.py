"""Total size computation for directory nodes."""

import os
import stat
from typing import Optional

from dirmeta.attributes.size import size_from
from dirmeta.exclusion_rules.base_rules import BaseExclusionRules
from dirmeta.meta_tree.display_mode import DisplayMode
from dirmeta.meta_tree.error_reporter import ErrorReporter, StderrErrorReporter, report_os_error
from dirmeta.meta_tree.meta_node import MetaNode, read_metadata
from dirmeta.types import PathType


def calculate_total_size(
    node: MetaNode,
    display: Optional[DisplayMode] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    reporter: Optional[ErrorReporter] = None,
) -> None:
    """Replace the size of every directory node with its total size.

    The total is the directory's own entry size plus the totals of all its
    descendants, computed children first. Directories that were never enumerated
    (``entries`` is None, usually because the depth budget ran out) are measured with
    a direct, unbounded filesystem walk instead. Sizes of other entries are left as
    read from their metadata, and the synthetic "." and ".." entries are neither
    measured nor added to their directory's total.

    The sizes are summed in place, so calling this twice on the same tree counts
    descendants twice. Apply it once per built tree.

    Args:
        node: Root of the (sub)tree to finalize.
        display: When given, the fallback walk skips dotfiles the same way the tree
            builder does for this mode.
        exclusion_rules: When given, the fallback walk skips excluded names.
        reporter: Error channel for the fallback walk. Defaults to stderr.
    """
    if not node.is_dir or node.is_synthetic:
        return

    if reporter is None:
        reporter = StderrErrorReporter()

    if node.entries is None:
        # Possibly cut short by the depth budget
        node.size = total_file_size(node.path, display, exclusion_rules, reporter)
        return

    total = node.size
    for child in node.entries:
        if child.is_synthetic:
            continue
        calculate_total_size(child, display, exclusion_rules, reporter)
        total += child.size
    node.size = total


def total_file_size(
    path: PathType,
    display: Optional[DisplayMode] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    reporter: Optional[ErrorReporter] = None,
) -> int:
    """Return the byte total of everything under ``path`` by walking the filesystem.

    A symlink counts its own size and is not followed. A directory counts its entry
    size plus the total of each entry inside it. Every other entry counts its size.
    I/O errors are reported and the affected entry contributes what could be read,
    which is zero when its metadata itself is unreadable.

    Args:
        path: Entry to measure.
        display: When given, dotfiles are skipped if the mode hides them.
        exclusion_rules: When given, entries with excluded names are skipped.
        reporter: Error channel. Defaults to stderr.

    Returns:
        The total size in bytes.
    """
    if reporter is None:
        reporter = StderrErrorReporter()

    try:
        metadata = read_metadata(path)
    except OSError as e:
        report_os_error(reporter, path, e)
        return 0

    size = size_from(metadata)
    if not stat.S_ISDIR(metadata.st_mode):
        return size

    try:
        entries = os.scandir(path)
    except OSError as e:
        report_os_error(reporter, path, e)
        return size

    try:
        with entries:
            for entry in entries:
                if _is_filtered(entry.name, display, exclusion_rules):
                    continue
                size += total_file_size(entry.path, display, exclusion_rules, reporter)
    except OSError as e:
        report_os_error(reporter, path, e)

    return size


def _is_filtered(name: str, display: Optional[DisplayMode], exclusion_rules: Optional[BaseExclusionRules]) -> bool:
    if exclusion_rules is not None and exclusion_rules.exclude(name):
        return True
    return display is not None and display.hides_dotfiles and name.startswith(".")
