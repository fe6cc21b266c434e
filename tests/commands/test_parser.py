"""
Tests for command line parsing.
"""

import pytest

from virtualshell.commands.parser import CommandType, ParsedCommand, parse_command, tokenize
from virtualshell.exceptions import UnrecognizedCommandError


class TestTokenize:
    """Test whitespace splitting."""

    def test_runs_of_whitespace(self):
        assert tokenize("mkdir   a \t b") == ["mkdir", "a", "b"]

    def test_blank(self):
        assert tokenize("   ") == []


class TestParseCommand:
    """Test keyword and argument extraction."""

    def test_blank_line_is_none(self):
        assert parse_command("") is None
        assert parse_command("  \t ") is None

    @pytest.mark.parametrize("keyword", ["pwd", "PWD", "Pwd"])
    def test_keyword_case_insensitive(self, keyword):
        command = parse_command(keyword)
        assert command.command_type is CommandType.PWD
        assert command.arguments == []

    def test_arguments_keep_case(self):
        """Only the keyword is lowercased."""
        command = parse_command("MKDIR Docs /Home/Me")
        assert command.command_type is CommandType.MKDIR
        assert command.arguments == ["Docs", "/Home/Me"]

    def test_surrounding_whitespace_trimmed(self):
        command = parse_command("   cd   a/b   ")
        assert command.command_type is CommandType.CD
        assert command.arguments == ["a/b"]
        assert command.raw == "cd   a/b"

    def test_session_clear(self):
        command = parse_command("session clear")
        assert command.command_type is CommandType.SESSION
        assert command.first_argument == "clear"

    @pytest.mark.parametrize("line", ["touch a", "exit", "dir", "mkdirs a"])
    def test_unknown_keyword(self, line):
        """Keywords outside the supported set are rejected."""
        with pytest.raises(UnrecognizedCommandError) as exc_info:
            parse_command(line)
        assert exc_info.value.keyword == line.split()[0]


class TestParsedCommand:
    """Test ParsedCommand helpers."""

    def test_str(self):
        assert str(ParsedCommand(CommandType.RM, ["a", "b"])) == "rm a b"

    def test_first_argument_missing(self):
        assert ParsedCommand(CommandType.CD).first_argument is None
