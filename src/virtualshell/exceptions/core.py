"""
Exception classes for virtual shell command processing.

This module defines specific exception types for the recoverable error
conditions that can occur while parsing and executing shell commands. The
string form of every exception is the exact text shown to the user.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a recoverable command failure."""

    INVALID_ARGUMENTS = "invalid_arguments"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    INVALID_PATH = "invalid_path"
    INVALID_DIRECTORY = "invalid_directory"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    NOT_REMOVABLE = "not_removable"
    EMPTY_LISTING = "empty_listing"
    UNSUPPORTED_SESSION_ARGUMENT = "unsupported_session_argument"
    CONFIGURATION = "configuration"


class VirtualShellError(Exception):
    """Base exception for all virtual shell errors."""

    kind: ErrorKind


class InvalidArgumentsError(VirtualShellError):
    """Raised when a command that requires arguments received none."""

    kind = ErrorKind.INVALID_ARGUMENTS

    def __init__(self, command: str):
        """
        Initialize the exception.

        Params:
            command: Keyword of the command that was missing arguments
        """
        self.command = command
        super().__init__("ERR: INVALID ARGUMENTS")


class UnrecognizedCommandError(VirtualShellError):
    """Raised when the command keyword is not part of the supported set."""

    kind = ErrorKind.UNRECOGNIZED_COMMAND

    def __init__(self, keyword: str):
        """
        Initialize the exception.

        Params:
            keyword: The lowercased keyword that could not be recognized
        """
        self.keyword = keyword
        super().__init__("ERR: CANNOT RECOGNIZE INPUT")


class InvalidPathError(VirtualShellError):
    """Raised when a multi-segment path does not fully resolve."""

    kind = ErrorKind.INVALID_PATH

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: The raw path argument that failed to resolve
        """
        self.path = path
        super().__init__("ERR: INVALID PATH")


class InvalidDirectoryError(VirtualShellError):
    """Raised when a single-segment cd target is not a child of the working directory."""

    kind = ErrorKind.INVALID_DIRECTORY

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The directory name that was not found
        """
        self.name = name
        super().__init__("ERR: INVALID DIRECTORY")


class DirectoryNotFoundError(VirtualShellError):
    """Raised when a single-segment rm target is not a child of the working directory."""

    kind = ErrorKind.DIRECTORY_NOT_FOUND

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The directory name that was not found
        """
        self.name = name
        super().__init__("ERR: DIRECTORY DOESN'T EXIST")


class NotRemovableError(VirtualShellError):
    """Raised when rm targets the working directory or one of its ancestors."""

    kind = ErrorKind.NOT_REMOVABLE

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: Full path of the directory that was refused
        """
        self.path = path
        super().__init__("ERR: CANNOT REMOVE CURRENT DIRECTORY OR ITS PARENT")


class EmptyListingError(VirtualShellError):
    """Raised when ls finds no children in the working directory."""

    kind = ErrorKind.EMPTY_LISTING

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: Full path of the directory that was listed
        """
        self.path = path
        super().__init__("DIRS: NO DIRECTORY EXIST")


class UnsupportedSessionArgumentError(VirtualShellError):
    """Raised when session is given anything other than 'clear'."""

    kind = ErrorKind.UNSUPPORTED_SESSION_ARGUMENT

    def __init__(self, argument: str):
        """
        Initialize the exception.

        Params:
            argument: The rejected session argument
        """
        self.argument = argument
        super().__init__("ERR: UNSUPPORTED ARGUMENTS.")


class ConfigurationError(VirtualShellError):
    """Raised when a shell configuration value is invalid."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, setting: str, reason: str):
        """
        Initialize the exception.

        Params:
            setting: Name of the offending setting
            reason: Why the value was rejected
        """
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid setting '{setting}': {reason}")
