"""
Virtual shell exception classes.

This package provides all exception types used throughout the virtual shell
for consistent error handling and reporting.
"""

from virtualshell.exceptions.core import (
    ConfigurationError,
    DirectoryNotFoundError,
    EmptyListingError,
    ErrorKind,
    InvalidArgumentsError,
    InvalidDirectoryError,
    InvalidPathError,
    NotRemovableError,
    UnrecognizedCommandError,
    UnsupportedSessionArgumentError,
    VirtualShellError,
)

__all__ = [
    "VirtualShellError",
    "ErrorKind",
    "ConfigurationError",
    "DirectoryNotFoundError",
    "EmptyListingError",
    "InvalidArgumentsError",
    "InvalidDirectoryError",
    "InvalidPathError",
    "NotRemovableError",
    "UnrecognizedCommandError",
    "UnsupportedSessionArgumentError",
]
