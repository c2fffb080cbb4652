"""Error channel for failures that must not abort a listing.

Traversal problems such as an unreadable subdirectory or an entry deleted while it
was being read are reported here and the traversal carries on. Reporting never
affects control flow.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

from dirmeta.types import PathType


class ErrorReporter(ABC):
    """Receives ``(path, message)`` pairs for non-fatal errors."""

    @abstractmethod
    def report(self, path: PathType, message: str) -> None:
        """Record that ``path`` could not be accessed.

        Args:
            path: The entry the error concerns.
            message: Human-readable description of the failure.
        """
        pass


class StderrErrorReporter(ErrorReporter):
    """Writes ``cannot access '<path>': <message>`` lines to a stream.

    Attributes:
        stream (Optional[TextIO]): Destination stream. When None, ``sys.stderr`` is
            looked up on every report so that redirections made later are honored.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def report(self, path: PathType, message: str) -> None:
        print(f"cannot access '{path}': {message}", file=self.stream or sys.stderr)


class CollectingErrorReporter(ErrorReporter):
    """Keeps every report in memory, in the order received.

    Example:
        >>> reporter = CollectingErrorReporter()
        >>> reporter.report("/srv/private", "Permission denied")
        >>> reporter.errors
        [('/srv/private', 'Permission denied')]
    """

    def __init__(self) -> None:
        self.errors: List[Tuple[str, str]] = []

    def report(self, path: PathType, message: str) -> None:
        self.errors.append((str(path), message))

    def paths(self) -> List[str]:
        """Return the reported paths, in order."""
        return [path for path, _ in self.errors]


class LoggingErrorReporter(ErrorReporter):
    """Forwards reports to the standard logging module at WARNING level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("dirmeta")

    def report(self, path: PathType, message: str) -> None:
        self.logger.warning("cannot access '%s': %s", path, message)


def report_os_error(reporter: ErrorReporter, path: PathType, error: BaseException) -> None:
    """Report an exception through ``reporter`` using its most readable message.

    ``OSError`` instances are reported by their ``strerror`` (e.g. "Permission
    denied") since the path is already part of the report.
    """
    message = error.strerror if isinstance(error, OSError) and error.strerror else str(error)
    reporter.report(path, message)
