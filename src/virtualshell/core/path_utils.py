"""
Path expression utilities for the virtual shell.

This module classifies raw path arguments into the forms the commands
understand and splits them into directory name segments.
"""

import re
from dataclasses import dataclass
from enum import Enum

from virtualshell.core.directory import PATH_SEPARATOR

_ONLY_SEPARATORS = re.compile(r"/+")


class PathForm(Enum):
    """How a path argument is anchored."""

    ROOT = "root"  # starts with '/', resolved from the tree root
    DEEP = "deep"  # contains '/' elsewhere, resolved from the working directory
    SIMPLE = "simple"  # a single name inside the working directory


@dataclass
class ClassifiedPath:
    """
    A path argument with its form and name segments extracted.

    Params:
        original_path: The raw argument as typed
        form: Anchoring of the path
        segments: Non-empty names in order
    """

    original_path: str
    form: PathForm
    segments: list[str]

    def __str__(self) -> str:
        """Return the original path string."""
        return self.original_path

    @property
    def is_anchored(self) -> bool:
        """Check if this path is resolved from the tree root."""
        return self.form is PathForm.ROOT

    @property
    def is_root_only(self) -> bool:
        """Check if this path is nothing but separators, e.g. '/' or '///'."""
        return _ONLY_SEPARATORS.fullmatch(self.original_path.strip()) is not None


def classify_path(path: str) -> PathForm:
    """
    Decide how a raw path argument is anchored.

    Examples:
        "/a/b" -> PathForm.ROOT
        "a/b" -> PathForm.DEEP
        "a" -> PathForm.SIMPLE
    """
    if path.startswith(PATH_SEPARATOR):
        return PathForm.ROOT
    if PATH_SEPARATOR in path:
        return PathForm.DEEP
    return PathForm.SIMPLE


def split_segments(path: str) -> list[str]:
    """
    Split a path on '/' and drop the empty segments.

    Leading, trailing and doubled separators never produce a segment.

    Examples:
        "/a//b/" -> ["a", "b"]
        "///" -> []
    """
    return [segment for segment in path.strip().split(PATH_SEPARATOR) if segment.strip()]


def parse_path(path: str) -> ClassifiedPath:
    """Classify a raw path argument and split it into segments."""
    return ClassifiedPath(
        original_path=path,
        form=classify_path(path),
        segments=split_segments(path),
    )
