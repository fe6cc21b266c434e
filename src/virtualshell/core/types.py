"""
Core type definitions for the virtual shell.

This module contains the result descriptors the command engine hands back to
its caller. The engine never writes to the console itself; it returns these
messages for the REPL to render.
"""

from enum import Enum

from attrs import field, frozen


class MessageLevel(Enum):
    """Severity of a message returned by the command engine."""

    INFO = "info"
    ERROR = "error"


@frozen
class ShellMessage:
    """A single line of user-facing output."""

    level: MessageLevel
    text: str

    @classmethod
    def info(cls, text: str) -> "ShellMessage":
        return cls(MessageLevel.INFO, text)

    @classmethod
    def error(cls, text: str) -> "ShellMessage":
        return cls(MessageLevel.ERROR, text)

    @property
    def is_error(self) -> bool:
        return self.level is MessageLevel.ERROR


@frozen
class CommandOutcome:
    """
    Everything one command line produced, in the order it was reported.

    Commands that accept several arguments (mkdir, rm) or walk several
    segments (cd) report one message per event, so an outcome may mix info
    and error messages.
    """

    messages: tuple[ShellMessage, ...] = field(default=(), converter=tuple)

    @property
    def ok(self) -> bool:
        """True when no error-level message was reported."""
        return not any(message.is_error for message in self.messages)

    @property
    def texts(self) -> list[str]:
        return [message.text for message in self.messages]

    def __bool__(self) -> bool:
        return bool(self.messages)
