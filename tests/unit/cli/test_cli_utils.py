"""
Unit tests for CLI utility functions.
"""

import pytest

from winres.build.version_info import VersionInfo, pack_version
from winres.cli_utils import AssignmentParser, ErrorFormatter


class TestAssignmentParser:
    """Tests for AssignmentParser."""

    @pytest.mark.parametrize(
        "text,expected",
        [("0", 0), ("1033", 1033), ("0x0409", 0x0409), ("0X3F", 0x3F), ("0b101", 5), ("0x0001_0000", 0x10000)],
    )
    def test_parse_int(self, text, expected):
        assert AssignmentParser.parse_int(text) == expected

    def test_parse_int_invalid(self):
        with pytest.raises(ValueError):
            AssignmentParser.parse_int("english")

    def test_split_first_equals(self):
        assert AssignmentParser.split("Comments=a=b") == ("Comments", "a=b")

    def test_split_empty_value(self):
        assert AssignmentParser.split("Comments=") == ("Comments", "")

    @pytest.mark.parametrize("text", ["Comments", "=value"])
    def test_split_invalid(self, text):
        with pytest.raises(ValueError, match="KEY=VALUE"):
            AssignmentParser.split(text)

    def test_parse_properties(self):
        assert AssignmentParser.parse_properties(["A=1", "B=two words", "A=3"]) == {
            "A": "3",
            "B": "two words",
        }

    def test_parse_version_info(self):
        fields = AssignmentParser.parse_version_info(
            ["filetype=2", "FILEFLAGS=0x08", "FILEVERSION=1.2", "PRODUCTVERSION=0x0001000000000000"]
        )
        assert fields == {
            VersionInfo.FILETYPE: 2,
            VersionInfo.FILEFLAGS: 0x08,
            VersionInfo.FILEVERSION: pack_version(1, 2, 0, 0),
            VersionInfo.PRODUCTVERSION: 0x0001000000000000,
        }

    def test_parse_version_info_too_many_words(self):
        with pytest.raises(ValueError, match="Too many"):
            AssignmentParser.parse_version_info(["FILEVERSION=1.2.3.4.5"])

    def test_parse_version_info_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown version info field"):
            AssignmentParser.parse_version_info(["LANGUAGE=1"])


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_print_error_to_stderr(self, capsys):
        ErrorFormatter.print_error("Compile error", "rc.exe failed")
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "Compile error" in captured.err
        assert "rc.exe failed" in captured.err

    def test_unexpected_error_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_unexpected_error(RuntimeError("boom"))
        assert exc_info.value.code == 1
        assert "RuntimeError: boom" in capsys.readouterr().err
