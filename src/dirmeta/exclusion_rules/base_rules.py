from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirmeta.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree builder consults the rules with the bare file name of every directory
    entry before constructing a node for it. An entry whose name is excluded never
    appears in the tree, whatever the display mode. File loading and individual rule
    addition are optional capabilities that depend on the rule type.

    Example:
        >>> from dirmeta.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(["*.pyc"])
        >>> rules.exclude("module.pyc")
        True
        >>> rules.exclude("module.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The file name of the entry (its final path component).

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, e.g. a glob pattern like "*.pyc".

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
