"""
Unit tests for the resource script writer.
"""

import pytest

from winres.build.rc_writer import (
    ResourceScriptWriter,
    escape_rc_string,
    format_version_field,
    string_block_name,
)
from winres.build.version_info import (
    VFT_DLL,
    VS_FF_PRIVATEBUILD,
    VS_FF_SPECIALBUILD,
    VersionInfo,
    default_version_info,
    pack_version,
)
from winres.errors import ResourceScriptError


@pytest.fixture
def version_info():
    return default_version_info(pack_version(1, 2, 3))


@pytest.fixture
def properties():
    return {
        "FileVersion": "1.2.3",
        "ProductVersion": "1.2.3",
        "ProductName": "demo",
        "FileDescription": "A demo",
    }


def render_lines(writer):
    return writer.render().splitlines()


class TestFormatting:
    """Test suite for the line formatting helpers."""

    def test_version_field_words(self):
        value = pack_version(10, 0, 65535, 7)
        assert format_version_field(VersionInfo.FILEVERSION, value) == "FILEVERSION 10, 0, 65535, 7"

    def test_flag_field_lowercase_hex(self):
        assert format_version_field(VersionInfo.FILEOS, 0x00040004) == "FILEOS 0x40004"
        assert format_version_field(VersionInfo.FILEFLAGSMASK, 0x3F) == "FILEFLAGSMASK 0x3f"
        assert format_version_field(VersionInfo.FILEFLAGS, 0) == "FILEFLAGS 0x0"

    def test_build_flags_combined(self):
        flags = VS_FF_PRIVATEBUILD | VS_FF_SPECIALBUILD
        assert format_version_field(VersionInfo.FILEFLAGS, flags) == "FILEFLAGS 0x28"

    @pytest.mark.parametrize(
        "language,expected",
        [(0, "000004b0"), (0x0409, "040904b0"), (0x0C07, "0c0704b0"), (0xFFFF, "ffff04b0")],
    )
    def test_string_block_name(self, language, expected):
        assert string_block_name(language) == expected

    def test_escape_doubles_quotes(self):
        assert escape_rc_string('a "b" c') == 'a ""b"" c'
        assert escape_rc_string("plain") == "plain"


class TestResourceScriptWriter:
    """Test suite for ResourceScriptWriter."""

    def test_minimal_layout(self, version_info, properties):
        lines = render_lines(ResourceScriptWriter(version_info, properties))

        assert lines[0] == "#pragma code_page(65001)"
        assert lines[1] == "1 VERSIONINFO"
        assert sorted(lines[2:9]) == sorted(
            [
                "FILEVERSION 1, 2, 3, 0",
                "PRODUCTVERSION 1, 2, 3, 0",
                "FILEOS 0x40004",
                "FILETYPE 0x1",
                "FILESUBTYPE 0x0",
                "FILEFLAGSMASK 0x3f",
                "FILEFLAGS 0x0",
            ]
        )
        assert lines[9:14] == ["{", 'BLOCK "StringFileInfo"', "{", 'BLOCK "000004b0"', "{"]
        assert sorted(lines[14:18]) == sorted(
            [
                'VALUE "FileVersion", "1.2.3"',
                'VALUE "ProductVersion", "1.2.3"',
                'VALUE "ProductName", "demo"',
                'VALUE "FileDescription", "A demo"',
            ]
        )
        assert lines[18:] == [
            "}",
            "}",
            'BLOCK "VarFileInfo" {',
            'VALUE "Translation", 0x0, 0x04b0',
            "}",
            "}",
        ]

    def test_empty_properties_skipped(self, version_info, properties):
        properties["Comments"] = ""
        properties["CompanyName"] = "ACME"
        text = ResourceScriptWriter(version_info, properties).render()

        assert '"Comments"' not in text
        assert 'VALUE "CompanyName", "ACME"' in text

    def test_language(self, version_info, properties):
        lines = render_lines(ResourceScriptWriter(version_info, properties, language=0x0409))

        assert 'BLOCK "040904b0"' in lines
        assert 'VALUE "Translation", 0x409, 0x04b0' in lines

    def test_icon(self, version_info, properties):
        lines = render_lines(ResourceScriptWriter(version_info, properties, icon="app.ico"))
        assert lines[-1] == '1 ICON "app.ico"'

    def test_no_icon(self, version_info, properties):
        assert "ICON" not in ResourceScriptWriter(version_info, properties).render()

    def test_inline_manifest(self, version_info, properties):
        writer = ResourceScriptWriter(version_info, properties, manifest='<a b="c"/>\n')
        lines = render_lines(writer)

        assert lines[-4:] == ["1 24", "{", '"<a b=""c""/>"', "}"]

    def test_inline_manifest_lines_trimmed(self, version_info, properties):
        manifest = '<assembly>\n    <trustInfo level="x" />\r\n</assembly>'
        lines = render_lines(ResourceScriptWriter(version_info, properties, manifest=manifest))

        assert lines[-5:] == [
            "{",
            '"<assembly>"',
            '"<trustInfo level=""x"" />"',
            '"</assembly>"',
            "}",
        ]

    def test_inline_manifest_splits_on_newline_only(self, version_info, properties):
        manifest = '<a b="x\x0cy"/>\n<c d="e\u2028f"/>'
        writer = ResourceScriptWriter(version_info, properties, manifest=manifest)
        lines = list(writer.iter_lines())

        assert lines[-4:] == [
            "{",
            '"<a b=""x\x0cy""/>"',
            '"<c d=""e\u2028f""/>"',
            "}",
        ]

    def test_inline_manifest_blank_lines_kept(self, version_info, properties):
        writer = ResourceScriptWriter(version_info, properties, manifest="<a>\n\n</a>\n")
        lines = list(writer.iter_lines())

        assert lines[-5:] == ["{", '"<a>"', '""', '"</a>"', "}"]

    def test_manifest_file(self, version_info, properties):
        version_info[VersionInfo.FILETYPE] = VFT_DLL
        writer = ResourceScriptWriter(version_info, properties, manifest_file="app.manifest")
        lines = render_lines(writer)

        assert lines[-1] == '2 24 "app.manifest"'
        assert lines[-2] == "}"

    def test_manifest_needs_filetype(self, version_info, properties):
        del version_info[VersionInfo.FILETYPE]
        text = ResourceScriptWriter(version_info, properties, manifest="<x/>").render()

        assert " 24" not in text
        assert "<x/>" not in text

    def test_inline_manifest_wins_over_file(self, version_info, properties):
        writer = ResourceScriptWriter(
            version_info, properties, manifest="<x/>", manifest_file="app.manifest"
        )
        text = writer.render()

        assert '"<x/>"' in text
        assert "app.manifest" not in text

    def test_icon_before_manifest(self, version_info, properties):
        writer = ResourceScriptWriter(
            version_info, properties, icon="app.ico", manifest_file="app.manifest"
        )
        lines = render_lines(writer)
        assert lines[-2:] == ['1 ICON "app.ico"', '1 24 "app.manifest"']

    def test_write_utf8(self, tmp_path, version_info, properties):
        properties["LegalCopyright"] = "Copyright © 2016"
        properties["FileDescription"] = "⛄❤☕"
        writer = ResourceScriptWriter(version_info, properties)
        path = writer.write(tmp_path / "resource.rc")

        data = path.read_bytes()
        assert data.decode("utf-8") == writer.render()
        assert "Copyright © 2016".encode("utf-8") in data
        assert b"\r\n" not in data

    def test_write_failure(self, tmp_path, version_info, properties):
        missing = tmp_path / "missing" / "resource.rc"
        with pytest.raises(ResourceScriptError, match="Failed to write"):
            ResourceScriptWriter(version_info, properties).write(missing)
