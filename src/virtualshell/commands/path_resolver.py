"""
Path resolution against the directory tree.

This module resolves classified path arguments to directory nodes: picking
the anchor (tree root or working directory), checking that every segment
exists, walking or creating segments, and deciding whether a node may be
removed while the session sits in a given working directory.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from virtualshell.core.directory import (
    DirectoryNode,
    attach_child,
    root_of,
)
from virtualshell.core.path_utils import ClassifiedPath
from virtualshell.exceptions import InvalidPathError


@dataclass
class WalkStep:
    """One segment visited by a create-walk."""

    node: DirectoryNode
    created: bool


class PathResolver:
    """Resolves classified paths against a working directory."""

    @staticmethod
    def anchor(path: ClassifiedPath, current: DirectoryNode) -> DirectoryNode:
        """
        Pick the node a path is resolved from.

        Params:
            path: Classified path argument
            current: The session's working directory

        Returns:
            The tree root for root-anchored paths, otherwise current
        """
        return root_of(current) if path.is_anchored else current

    @staticmethod
    def lookup(start: DirectoryNode, segments: list[str]) -> DirectoryNode | None:
        """
        Follow segments child by child from a start node.

        Params:
            start: Node to begin at
            segments: Directory names to descend through

        Returns:
            The node reached, or None as soon as a segment is missing
        """
        node = start
        for name in segments:
            child = node.find_child(name)
            if child is None:
                return None
            node = child
        return node

    @staticmethod
    def is_path_available(path: ClassifiedPath, current: DirectoryNode) -> bool:
        """
        Check that a multi-segment path fully resolves.

        A path without any segment does not count as available.
        """
        if not path.segments:
            return False
        start = PathResolver.anchor(path, current)
        return PathResolver.lookup(start, path.segments) is not None

    @staticmethod
    def resolve(path: ClassifiedPath, current: DirectoryNode) -> list[DirectoryNode]:
        """
        Resolve every segment of a path, validating the whole path first.

        Params:
            path: Classified path argument with at least one segment
            current: The session's working directory

        Returns:
            The nodes visited, one per segment, the last being the target

        Raises:
            InvalidPathError: When the path is empty or any segment is missing
        """
        if not PathResolver.is_path_available(path, current):
            raise InvalidPathError(path.original_path)

        visited = []
        node = PathResolver.anchor(path, current)
        for name in path.segments:
            node = node.find_child(name)
            visited.append(node)
        return visited

    @staticmethod
    def walk_or_create(start: DirectoryNode, segments: list[str]) -> Iterator[WalkStep]:
        """
        Descend through segments, creating the ones that are missing.

        Each step is yielded as soon as it happens, so a caller sees every
        existing and newly created directory in order.

        Params:
            start: Node to begin at
            segments: Directory names to descend through
        """
        node = start
        for name in segments:
            child = node.find_child(name)
            created = child is None
            if created:
                child = attach_child(node, DirectoryNode(name=name))
            node = child
            yield WalkStep(node=node, created=created)

    @staticmethod
    def is_removable(target: DirectoryNode, current: DirectoryNode) -> bool:
        """
        Check that a node is neither the working directory nor one of its ancestors.

        Params:
            target: Node about to be removed
            current: The session's working directory
        """
        return not any(node is target for node in current.ancestors())
