"""Custom exception classes for the splitter."""

from typing import Optional


class SplitterError(Exception):
    """
    Base exception class for all split-related errors.
    """
    pass


class InvalidInput(SplitterError):
    """
    Raised when the input path is missing or is not a regular file.
    """
    pass


class InvalidFormat(SplitterError):
    """
    Raised when a chunk size expression cannot be parsed.
    """
    pass


class InvalidChunkSize(SplitterError):
    """
    Raised when the resolved chunk size is not a positive byte count.
    """
    pass


class DirectoryCreationFailure(SplitterError):
    """
    Raised when the output directory cannot be created.
    """
    pass


class UserCancelled(SplitterError):
    """
    Raised when the split is declined or cancelled. Not a failure.
    """

    def __init__(self, message: str = "Operation cancelled", chunks_written: int = 0):
        super().__init__(message)
        self.chunks_written = chunks_written


class IOFailure(SplitterError):
    """
    Raised when reading the input or writing a chunk fails mid-pass.

    Chunks written before the failure are left on disk.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None, chunks_written: int = 0):
        super().__init__(message)
        self.cause = cause
        self.chunks_written = chunks_written
