"""
Tests for the directory tree model.

Focus Areas:
1. Structural operations keep parent and child links consistent
2. Path rendering and root lookup
3. Identity semantics of nodes
"""

import pytest
from pydantic import ValidationError

from virtualshell.core.directory import (
    DirectoryNode,
    attach_child,
    detach_child,
    path_from_root,
    root_of,
)


class TestDirectoryNode:
    """Test DirectoryNode construction and lookups."""

    def test_new_node_is_root(self):
        """A freshly created node has no parent and no children."""
        node = DirectoryNode(name="/")
        assert node.parent is None
        assert node.is_root
        assert node.children == []

    def test_empty_name_rejected(self):
        """Names must be non-empty."""
        with pytest.raises(ValidationError):
            DirectoryNode(name="")

    def test_children_given_at_construction_get_parent(self):
        """Children passed to the constructor point back at their parent."""
        child = DirectoryNode(name="a")
        root = DirectoryNode(name="/", children=[child])
        assert root.children[0] is child
        assert child.parent is root

    def test_find_child_exact_match(self, tree):
        """find_child matches names exactly."""
        assert tree["a"].find_child("b") is tree["b"]
        assert tree["a"].find_child("B") is None
        assert tree["a"].find_child("c") is None

    def test_child_names_keep_insertion_order(self):
        """Children are listed in the order they were attached."""
        root = DirectoryNode(name="/")
        for name in ["zeta", "alpha", "mid"]:
            attach_child(root, DirectoryNode(name=name))
        assert root.child_names() == ["zeta", "alpha", "mid"]

    def test_ancestors_walks_to_root(self, tree):
        """ancestors yields the node itself first and the root last."""
        chain = list(tree["c"].ancestors())
        assert chain == [tree["c"], tree["b"], tree["a"], tree["/"]]

    def test_nodes_compare_by_identity(self):
        """Two nodes with identical content are still different nodes."""
        first = DirectoryNode(name="a")
        second = DirectoryNode(name="a")
        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_repr_does_not_recurse_through_parent(self, tree):
        """The parent back-reference is not part of the repr."""
        text = repr(tree["c"])
        assert "name='c'" in text


class TestAttachDetach:
    """Test attach_child and detach_child."""

    def test_attach_sets_both_links(self):
        """Attaching sets the parent and appends to children."""
        root = DirectoryNode(name="/")
        child = attach_child(root, DirectoryNode(name="a"))
        assert child.parent is root
        assert root.children == [child]

    def test_attach_does_not_check_duplicates(self):
        """Duplicate names are the caller's concern, not the structure's."""
        root = DirectoryNode(name="/")
        attach_child(root, DirectoryNode(name="a"))
        attach_child(root, DirectoryNode(name="a"))
        assert root.child_names() == ["a", "a"]

    def test_detach_removes_by_identity(self):
        """Detaching removes the exact node even when a sibling shares its name."""
        root = DirectoryNode(name="/")
        first = attach_child(root, DirectoryNode(name="a"))
        second = attach_child(root, DirectoryNode(name="a"))

        assert detach_child(root, second) is True
        assert root.children == [first]
        assert root.children[0] is first
        assert second.parent is None

    def test_detach_missing_node_returns_false(self, tree):
        """Detaching a node that is not a child reports no removal."""
        assert detach_child(tree["/"], tree["c"]) is False
        assert tree["c"].parent is tree["b"]

    def test_detach_takes_subtree_along(self, tree):
        """The detached node keeps its own children."""
        detach_child(tree["/"], tree["a"])
        assert tree["/"].children == []
        assert tree["a"].find_child("b") is tree["b"]


class TestPathFromRoot:
    """Test path rendering."""

    def test_root_alone(self):
        """The root renders as its own label."""
        assert path_from_root(DirectoryNode(name="/")) == "/"

    def test_nested_path(self, tree):
        """Nested nodes render without a doubled leading separator."""
        assert path_from_root(tree["a"]) == "/a"
        assert path_from_root(tree["c"]) == "/a/b/c"
        assert path_from_root(tree["d"]) == "/a/d"

    def test_custom_root_label(self):
        """A root label without a trailing separator is joined with one."""
        root = DirectoryNode(name="home")
        child = attach_child(root, DirectoryNode(name="docs"))
        assert path_from_root(root) == "home"
        assert path_from_root(child) == "home/docs"

    def test_pure_read(self, tree):
        """Rendering twice gives the same result and leaves the tree as it was."""
        assert path_from_root(tree["c"]) == path_from_root(tree["c"])
        assert tree["b"].children == [tree["c"]]


class TestRootOf:
    """Test root lookup."""

    def test_root_of_root(self, tree):
        assert root_of(tree["/"]) is tree["/"]

    def test_root_of_deep_node(self, tree):
        assert root_of(tree["c"]) is tree["/"]

    def test_detached_node_is_its_own_root(self, tree):
        """After detaching, the subtree has a new root."""
        detach_child(tree["a"], tree["b"])
        assert root_of(tree["c"]) is tree["b"]
