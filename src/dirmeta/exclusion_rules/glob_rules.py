"""Exclusion rules built from glob patterns matched against entry names."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from pathspec import PathSpec

from dirmeta.types import PathType

from .base_rules import BaseExclusionRules


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternations in a glob pattern, nested groups included.

    A brace group without a top-level comma, or without a closing brace, is kept
    literally. Backslash-escaped characters are never treated as group syntax.

    Example:
        >>> expand_braces("*.{py,txt}")
        ['*.py', '*.txt']
        >>> expand_braces("{a,b{1,2}}.c")
        ['a.c', 'b1.c', 'b2.c']
        >>> expand_braces("{single}")
        ['{single}']
    """
    start = _find_brace_group(pattern)
    if start is None:
        return [pattern]

    begin, end, alternatives = start
    prefix, suffix = pattern[:begin], pattern[end + 1 :]
    expanded: List[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


def _find_brace_group(pattern: str) -> Optional[Tuple[int, int, List[str]]]:
    """Locate the first brace group with a top-level comma.

    Returns:
        ``(open_index, close_index, alternatives)``, or None when there is no such group.
    """
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            group = _split_group(pattern, i)
            if group is not None:
                return group
        i += 1
    return None


def _split_group(pattern: str, begin: int) -> Optional[Tuple[int, int, List[str]]]:
    depth = 0
    alternatives: List[str] = []
    current = begin + 1
    i = begin
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                if not alternatives:
                    return None
                alternatives.append(pattern[current:i])
                return begin, i, alternatives
        elif char == "," and depth == 1:
            alternatives.append(pattern[current:i])
            current = i + 1
        i += 1
    return None


def to_gitignore_lines(pattern: str) -> List[str]:
    """Translate one glob pattern into .gitignore lines that match it literally.

    The gitignore syntax gives a leading ``#`` or ``!`` and trailing spaces special
    meaning, so these are escaped, and brace alternations are expanded since
    gitignore has none.

    Example:
        >>> to_gitignore_lines("#*#")
        ['\\\\#*#']
        >>> to_gitignore_lines("!{a,b}")
        ['\\\\!a', '\\\\!b']
    """
    lines = []
    for glob in expand_braces(pattern):
        if not glob:
            continue
        if glob[0] in "#!":
            glob = "\\" + glob
        if glob.endswith(" "):
            glob = glob[:-1] + "\\ "
        lines.append(glob)
    return lines


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion set of glob patterns, compiled with the pathspec library.

    Patterns use shell glob syntax (``*``, ``?``, ``[abc]``, ``[!abc]``, ``{a,b}``)
    and are matched against the bare name of each entry, so ``*.log`` excludes every
    log file at any depth. An entry is excluded when any pattern matches its name.
    Every character of a pattern is part of the glob: ``#notes#`` and ``!draft``
    are ordinary patterns, not comments or negations.

    Pattern files hold one pattern per line. Blank lines and lines starting with
    ``#`` in pattern files are ignored.

    Attributes:
        patterns (List[str]): The raw patterns, in the order they were added.
        spec (PathSpec): Compiled matcher for ``patterns``.

    Example:
        >>> rules = GlobExclusionRules(["*.{log,tmp}", "node_modules"])
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("node_modules")
        True
        >>> rules.add_rule("#*#")
        >>> rules.exclude("#draft#")
        True
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize GlobExclusionRules with patterns and/or pattern files.

        Args:
            patterns: Glob patterns to exclude. Defaults to none.
            rules_files: Path(s) to file(s) with one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.patterns: List[str] = list(patterns) if patterns is not None else []
        self._compile()

        if rules_files is not None:
            self.load_rules(rules_files)

    def _compile(self) -> None:
        lines = [line for pattern in self.patterns for line in to_gitignore_lines(pattern)]
        self.spec = PathSpec.from_lines("gitignore", lines)

    def exclude(self, name: str) -> bool:
        """Check if an entry name matches any of the patterns.

        Args:
            name: The file name to check.

        Returns:
            bool: True if at least one pattern matches ``name``.
        """
        return self.spec.match_file(name)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more files.

        Args:
            rules_files: Path(s) to file(s) with one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                for line in f.read().splitlines():
                    if line.strip() and not line.startswith("#"):
                        self.patterns.append(line)

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Args:
            rule: A glob pattern, e.g. "*.pyc" or "*.{o,a}".
        """
        self.patterns.append(rule)
        self._compile()
