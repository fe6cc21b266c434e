"""
virtualshell - An interactive in-memory virtual filesystem shell

virtualshell simulates a directory tree and a small set of navigation and
mutation commands typed at a REPL, keeping all state in process memory.
"""

from importlib.metadata import PackageNotFoundError, version

from virtualshell.commands import CommandEngine
from virtualshell.config import ShellConfig
from virtualshell.core import CommandOutcome, DirectoryNode, MessageLevel, ShellMessage

try:
    __version__ = version("virtualshell")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CommandEngine",
    "CommandOutcome",
    "DirectoryNode",
    "MessageLevel",
    "ShellConfig",
    "ShellMessage",
]
