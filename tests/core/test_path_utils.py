"""
Tests for path classification and segment splitting.
"""

import pytest

from virtualshell.core.path_utils import (
    ClassifiedPath,
    PathForm,
    classify_path,
    parse_path,
    split_segments,
)


class TestClassifyPath:
    """Test path form classification."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/", PathForm.ROOT),
            ("/a", PathForm.ROOT),
            ("//a/b//", PathForm.ROOT),
            ("a/b", PathForm.DEEP),
            ("a/", PathForm.DEEP),
            ("a", PathForm.SIMPLE),
            ("..", PathForm.SIMPLE),
        ],
    )
    def test_forms(self, path, expected):
        assert classify_path(path) is expected


class TestSplitSegments:
    """Test splitting on '/'."""

    def test_empty_segments_dropped(self):
        """Leading, trailing and doubled separators produce no segment."""
        assert split_segments("/a//b/") == ["a", "b"]

    def test_only_separators(self):
        assert split_segments("///") == []

    def test_single_name(self):
        assert split_segments("a") == ["a"]


class TestParsePath:
    """Test ClassifiedPath construction."""

    def test_root_anchored(self):
        path = parse_path("/x/y")
        assert path == ClassifiedPath("/x/y", PathForm.ROOT, ["x", "y"])
        assert path.is_anchored
        assert not path.is_root_only
        assert str(path) == "/x/y"

    def test_deep_relative(self):
        path = parse_path("x/y/")
        assert path.form is PathForm.DEEP
        assert path.segments == ["x", "y"]
        assert not path.is_anchored

    @pytest.mark.parametrize("raw", ["/", "//", "/////"])
    def test_root_only(self, raw):
        """Any run of separators addresses the root itself."""
        path = parse_path(raw)
        assert path.is_root_only
        assert path.segments == []

    def test_root_with_segment_is_not_root_only(self):
        assert not parse_path("//a").is_root_only
