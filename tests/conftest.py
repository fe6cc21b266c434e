"""
Shared test fixtures and utilities for the virtualshell test suite.
"""

import pytest

from virtualshell.commands.engine import CommandEngine
from virtualshell.core.directory import DirectoryNode, attach_child


@pytest.fixture
def engine():
    """Fresh command engine sitting at an empty root '/'."""
    return CommandEngine()


@pytest.fixture
def run(engine):
    """Execute a command line on the shared engine and return its message texts.

    Usage:
        def test_something(run):
            assert run("pwd") == ["PATH: /"]
    """

    def _run(line: str) -> list[str]:
        return engine.execute(line).texts

    return _run


@pytest.fixture
def tree():
    """Small tree: / -> a -> (b -> c), d.

    Returns a dict of name -> node so tests can reach any level directly.
    """
    root = DirectoryNode(name="/")
    a = attach_child(root, DirectoryNode(name="a"))
    b = attach_child(a, DirectoryNode(name="b"))
    c = attach_child(b, DirectoryNode(name="c"))
    d = attach_child(a, DirectoryNode(name="d"))
    return {"/": root, "a": a, "b": b, "c": c, "d": d}
