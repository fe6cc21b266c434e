"""
Core virtual shell components.

This package provides the directory tree model, path expression utilities
and the result types returned by the command engine.
"""

from virtualshell.core.directory import (
    ROOT_LABEL,
    DirectoryNode,
    attach_child,
    detach_child,
    path_from_root,
    root_of,
)
from virtualshell.core.path_utils import (
    ClassifiedPath,
    PathForm,
    classify_path,
    parse_path,
    split_segments,
)
from virtualshell.core.types import CommandOutcome, MessageLevel, ShellMessage

__all__ = [
    "ROOT_LABEL",
    "DirectoryNode",
    "attach_child",
    "detach_child",
    "path_from_root",
    "root_of",
    "ClassifiedPath",
    "PathForm",
    "classify_path",
    "parse_path",
    "split_segments",
    "CommandOutcome",
    "MessageLevel",
    "ShellMessage",
]
