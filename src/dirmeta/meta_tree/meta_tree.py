"""Metadata tree of a directory listing with configurable depth and filtering.

This module provides the MetaTree class, which builds the node tree for one listed
path, optionally computes total directory sizes, and keeps simple counts.
"""

import sys
from pathlib import Path
from typing import Iterator, Optional, Union

from anytree import PreOrderIter

from dirmeta.attributes.platform import AttributeExtractor
from dirmeta.exclusion_rules.base_rules import BaseExclusionRules
from dirmeta.meta_tree.display_mode import DisplayMode
from dirmeta.meta_tree.error_reporter import ErrorReporter, StderrErrorReporter
from dirmeta.meta_tree.meta_node import MetaNode
from dirmeta.meta_tree.size_aggregator import calculate_total_size
from dirmeta.meta_tree.tree_builder import recurse_into
from dirmeta.types import EntryKind, PathType

# Depth budget for a fully recursive listing
UNLIMITED_DEPTH = sys.maxsize


class MetaTree:
    """The metadata tree for one listed path.

    The tree is built lazily on first access and can be refreshed to reflect
    filesystem changes. Metadata is never cached across builds.

    Error Handling:
        Failing to read the listed path itself raises. Everything below it degrades
        gracefully: unreadable directories and entries are reported through the
        reporter and appear without contents, or not at all if their metadata could
        not be read.

    Attributes:
        root_path (Path): The listed path.
        depth (int): Depth budget. 1 lists the directory's entries, UNLIMITED_DEPTH
            lists recursively.
        display (DisplayMode): Entry filtering and synthetic entry policy.
        exclusion_rules (Optional[BaseExclusionRules]): Names to leave out.
        total_size (bool): Whether directory sizes are replaced by totals.
        reporter (ErrorReporter): Channel for recoverable errors.

    Example:
        >>> tree = MetaTree("src", depth=UNLIMITED_DEPTH, total_size=True)  # doctest: +SKIP
        >>> root = tree.get_tree()  # doctest: +SKIP
        >>> [child.name for child in root.entries]  # doctest: +SKIP
        ['dirmeta']
    """

    def __init__(
        self,
        root_path: PathType,
        depth: int = 1,
        display: Union[str, DisplayMode] = DisplayMode.DEFAULT,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        total_size: bool = False,
        reporter: Optional[ErrorReporter] = None,
        extractor: Optional[AttributeExtractor] = None,
    ) -> None:
        """Initialize a MetaTree.

        Args:
            root_path: Path to list. May be a file, a directory or a symlink.
            depth: Depth budget, a non-negative integer. Defaults to 1.
            display: A DisplayMode or its string value. Defaults to DEFAULT.
            exclusion_rules: Rules for excluding entries by name. Defaults to None.
            total_size: Replace directory sizes with their total size. Defaults to False.
            reporter: Error channel. Defaults to a StderrErrorReporter.
            extractor: Platform extractor for owner and permissions. Defaults to the
                one for the running platform.

        Raises:
            ValueError: If depth is negative or display is not a known mode.
        """
        if depth < 0:
            raise ValueError(f"Invalid depth: {depth}. Must be a non-negative integer")

        if not isinstance(display, DisplayMode):
            valid = ", ".join(f"'{mode.value}'" for mode in DisplayMode)
            if not isinstance(display, str):
                raise ValueError(f"Invalid display mode: {display!r}. Must be one of: {valid}")
            try:
                display = DisplayMode(display.lower())
            except ValueError:
                raise ValueError(f"Invalid display mode: {display}. Must be one of: {valid}")

        self.root_path = Path(root_path)
        self.depth = depth
        self.display = display
        self.exclusion_rules = exclusion_rules
        self.total_size = total_size
        self.reporter = reporter if reporter is not None else StderrErrorReporter()
        self.extractor = extractor
        self._tree: Optional[MetaNode] = None

    def get_tree(self) -> MetaNode:
        """Get the root node of the tree, building it on first access.

        Returns:
            The root node.

        Raises:
            OSError: If the metadata of the root path cannot be read, or another fatal
                traversal error occurs.
            InvalidEntryNameError: If a directory entry has no usable name.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> MetaNode:
        root = MetaNode.from_path(self.root_path, self.extractor)
        root.entries = recurse_into(
            root, self.depth, self.display, self.exclusion_rules, self.reporter, self.extractor
        )

        if self.total_size:
            calculate_total_size(root, self.display, self.exclusion_rules, self.reporter)

        return root

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._tree = None
        self._tree = self._build_tree()

    def iterate_nodes(self) -> Iterator[MetaNode]:
        """Yield every non-synthetic node below the root, depth-first in pre-order."""
        root = self.get_tree()
        yield from PreOrderIter(root, filter_=lambda node: node is not root and not node.is_synthetic)

    def get_file_count(self) -> int:
        """Number of regular files in the tree."""
        return self._count(EntryKind.FILE)

    def get_directory_count(self) -> int:
        """Number of directories in the tree, excluding the root and "."/".." entries."""
        return self._count(EntryKind.DIRECTORY)

    def get_symlink_count(self) -> int:
        """Number of symlinks in the tree."""
        return self._count(EntryKind.SYMLINK)

    def _count(self, kind: EntryKind) -> int:
        return sum(1 for node in self.iterate_nodes() if node.file_type.kind is kind)
