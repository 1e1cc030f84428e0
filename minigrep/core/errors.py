from typing import Optional


class MinigrepError(Exception):
    """Base class for errors surfaced to the command line."""


class MissingArgument(MinigrepError):
    """
    A positional argument was not supplied.
    `argument` is "query" or "file_path".
    """

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class FileAccessError(MinigrepError):
    """
    The target file could not be opened, read or decoded as text.
    The underlying exception is kept as `reason` and chained as __cause__.
    """

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Could not read {path}{detail}")
        self.path = path
        self.reason = reason
