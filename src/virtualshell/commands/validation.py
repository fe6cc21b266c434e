"""
Argument validation for virtual shell commands.

This module contains the checks run on parsed commands before their handlers
touch the directory tree.
"""

from virtualshell.commands.parser import ParsedCommand
from virtualshell.exceptions import (
    InvalidArgumentsError,
    UnsupportedSessionArgumentError,
)

SESSION_CLEAR = "clear"


def require_arguments(command: ParsedCommand) -> list[str]:
    """
    Ensure a command received at least one argument.

    Params:
        command: Parsed command to validate

    Returns:
        The command's arguments

    Raises:
        InvalidArgumentsError: When no arguments were given
    """
    if not command.arguments:
        raise InvalidArgumentsError(command.command_type.value)
    return command.arguments


def validate_session_argument(command: ParsedCommand) -> None:
    """
    Ensure a session command asks for 'clear'.

    Params:
        command: Parsed session command

    Raises:
        InvalidArgumentsError: When no argument was given
        UnsupportedSessionArgumentError: When the argument is anything but 'clear'
    """
    argument = require_arguments(command)[0]
    if argument != SESSION_CLEAR:
        raise UnsupportedSessionArgumentError(argument)
