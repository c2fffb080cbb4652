class InvalidEntryNameError(Exception):
    """
    Exception raised when a directory entry has no usable file name.

    A tree node cannot be reported or filtered without a name, so this condition is
    fatal for the directory being read rather than a per-entry skip. Ordinary I/O
    failures are raised as the builtin ``OSError`` subclasses instead.

    Attributes:
        path (str): Path of the entry that had no usable name.

    Example:
        >>> error = InvalidEntryNameError("/some/dir/..")
        >>> str(error)
        'Invalid file name: /some/dir/..'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending entry path.

        Args:
            path (str): Path of the entry that had no usable name.
        """
        self.path = path
        super().__init__(f"Invalid file name: {path}")
