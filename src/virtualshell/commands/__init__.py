"""
Virtual shell command processing.

This package contains command line parsing, argument validation, path
resolution against the directory tree, and the command engine.
"""

from virtualshell.commands.engine import CommandEngine
from virtualshell.commands.parser import CommandType, ParsedCommand, parse_command
from virtualshell.commands.path_resolver import PathResolver, WalkStep

__all__ = [
    "CommandEngine",
    "CommandType",
    "ParsedCommand",
    "PathResolver",
    "WalkStep",
    "parse_command",
]
