"""
Parser for virtual shell command lines.

This module splits a raw command line into a keyword and its arguments and
maps the keyword onto the closed set of supported commands.
"""

from dataclasses import dataclass, field
from enum import Enum

from virtualshell.exceptions import UnrecognizedCommandError


class CommandType(Enum):
    """Commands understood by the command engine."""

    PWD = "pwd"
    LS = "ls"
    MKDIR = "mkdir"
    CD = "cd"
    RM = "rm"
    SESSION = "session"

    @classmethod
    def from_keyword(cls, keyword: str) -> "CommandType":
        """
        Map a lowercased keyword onto its command.

        Params:
            keyword: First token of the command line, already lowercased

        Returns:
            The matching CommandType

        Raises:
            UnrecognizedCommandError: When the keyword is not supported
        """
        try:
            return cls(keyword)
        except ValueError:
            raise UnrecognizedCommandError(keyword) from None


@dataclass
class ParsedCommand:
    """A tokenised command line."""

    command_type: CommandType
    arguments: list[str] = field(default_factory=list)
    raw: str = ""

    def __str__(self) -> str:
        return " ".join([self.command_type.value, *self.arguments])

    @property
    def first_argument(self) -> str | None:
        return self.arguments[0] if self.arguments else None


def tokenize(line: str) -> list[str]:
    """Split a command line on runs of whitespace."""
    return line.split()


def parse_command(line: str) -> ParsedCommand | None:
    """
    Parse a raw command line.

    Only the keyword is case-insensitive; arguments keep their case.

    Params:
        line: The raw line as typed at the prompt

    Returns:
        ParsedCommand, or None when the line is blank

    Raises:
        UnrecognizedCommandError: When the keyword is not supported
    """
    tokens = tokenize(line.strip())
    if not tokens:
        return None

    keyword, arguments = tokens[0].lower(), tokens[1:]
    return ParsedCommand(
        command_type=CommandType.from_keyword(keyword),
        arguments=arguments,
        raw=line.strip(),
    )
