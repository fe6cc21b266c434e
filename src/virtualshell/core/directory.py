"""
Directory tree model for the virtual shell.

This module contains the DirectoryNode class and the structural operations
used by the command engine: attaching and detaching children, walking to the
root and rendering a node's full path.
"""

from collections.abc import Iterator
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr

ROOT_LABEL = "/"
PATH_SEPARATOR = "/"


class DirectoryNode(BaseModel):
    """
    A single directory in the in-memory tree.

    The children list owns the child nodes. The parent link is a non-owning
    back-reference kept as a private attribute, so it takes no part in
    validation, serialization or repr. Nodes compare by identity: two
    directories with the same name and contents are still distinct entries.
    """

    name: str = Field(min_length=1)
    children: list["DirectoryNode"] = Field(default_factory=list)

    _parent: Optional["DirectoryNode"] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        for child in self.children:
            child._parent = self

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    @property
    def parent(self) -> Optional["DirectoryNode"]:
        """The directory holding this node, or None for a root."""
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def find_child(self, name: str) -> Optional["DirectoryNode"]:
        """
        Look up an immediate child by exact name.

        Params:
            name: Child name to search for (case-sensitive)

        Returns:
            The first child with that name, or None
        """
        for child in self.children:
            if child.name == name:
                return child
        return None

    def child_names(self) -> list[str]:
        """Names of the immediate children in insertion order."""
        return [child.name for child in self.children]

    def ancestors(self) -> Iterator["DirectoryNode"]:
        """Yield this node, then each parent up to and including the root."""
        node: DirectoryNode | None = self
        while node is not None:
            yield node
            node = node._parent


def attach_child(parent: DirectoryNode, node: DirectoryNode) -> DirectoryNode:
    """
    Attach a node as the last child of a parent.

    No name uniqueness check is performed here; callers verify that a
    sibling with the same name does not already exist.

    Params:
        parent: Directory that will own the node
        node: Node to attach

    Returns:
        The attached node
    """
    node._parent = parent
    parent.children.append(node)
    return node


def detach_child(parent: DirectoryNode, node: DirectoryNode) -> bool:
    """
    Remove a node from its parent's children by identity.

    Params:
        parent: Directory currently holding the node
        node: Node to remove

    Returns:
        True if the node was a child of parent and has been removed
    """
    for index, child in enumerate(parent.children):
        if child is node:
            del parent.children[index]
            node._parent = None
            return True
    return False


def root_of(node: DirectoryNode) -> DirectoryNode:
    """Walk parent links to the node that has no parent."""
    root = node
    while root.parent is not None:
        root = root.parent
    return root


def path_from_root(node: DirectoryNode) -> str:
    """
    Render the full path of a node.

    The root contributes its own label. A root label that already ends with
    the separator is not doubled, so the child 'a' of root '/' renders as
    '/a' and the root alone renders as '/'.

    Params:
        node: Node whose path to render

    Returns:
        Names from the root down to node joined with '/'
    """
    names = [each.name for each in node.ancestors()]
    names.reverse()
    root_label, rest = names[0], names[1:]
    if not rest:
        return root_label
    if root_label.endswith(PATH_SEPARATOR):
        return root_label + PATH_SEPARATOR.join(rest)
    return PATH_SEPARATOR.join([root_label, *rest])
