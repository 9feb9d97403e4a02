"""Resource Script Writer.

This module renders a version resource, an optional icon and an optional
application manifest into a Windows resource script (.rc).

Design:
    - The script is UTF-8 and starts with `#pragma code_page(65001)`
    - Numeric constants are written instead of winver.h macro names, so no
      include paths are needed by the resource compiler
    - Inline manifests are embedded as a user-defined resource of type 24
      (RT_MANIFEST), one quoted string per line with `"` doubled
"""

from pathlib import Path
from typing import Iterator, Mapping, Optional

from winres.build.version_info import RT_MANIFEST, VersionInfo, unpack_version
from winres.errors import ResourceScriptError

# Unicode (UTF-16) code page identifier used in the translation table
CODEPAGE_UNICODE = "04b0"


def escape_rc_string(text: str) -> str:
    """Escape text for use inside a quoted .rc string literal."""
    return text.replace('"', '""')


def format_version_field(field: VersionInfo, value: int) -> str:
    """Format one line of the VERSIONINFO header."""
    if field.is_version:
        return f"{field.name} " + ", ".join(str(word) for word in unpack_version(value))
    return f"{field.name} {value:#x}"


def string_block_name(language: int) -> str:
    """Name of the StringFileInfo block for a language, e.g. `040904b0`."""
    return f"{language:04x}{CODEPAGE_UNICODE}"


class ResourceScriptWriter:
    """Renders resource settings into .rc source text.

    Usage:
        writer = ResourceScriptWriter(version_info, properties, language=0x0409)
        writer.write(Path("resource.rc"))
    """

    def __init__(
        self,
        version_info: Mapping[VersionInfo, int],
        properties: Mapping[str, str],
        language: int = 0,
        icon: Optional[str] = None,
        manifest: Optional[str] = None,
        manifest_file: Optional[str] = None,
    ):
        self.version_info = version_info
        self.properties = properties
        self.language = language
        self.icon = icon
        self.manifest = manifest
        self.manifest_file = manifest_file

    def iter_lines(self) -> Iterator[str]:
        """Yield the lines of the resource script."""
        yield "#pragma code_page(65001)"
        yield "1 VERSIONINFO"
        for field, value in self.version_info.items():
            yield format_version_field(field, value)

        yield "{"
        yield 'BLOCK "StringFileInfo"'
        yield "{"
        yield f'BLOCK "{string_block_name(self.language)}"'
        yield "{"
        for key, value in self.properties.items():
            if value:
                yield f'VALUE "{key}", "{value}"'
        yield "}"
        yield "}"

        yield 'BLOCK "VarFileInfo" {'
        yield f'VALUE "Translation", {self.language:#x}, 0x{CODEPAGE_UNICODE}'
        yield "}"
        yield "}"

        if self.icon is not None:
            yield f'1 ICON "{self.icon}"'

        yield from self._iter_manifest_lines()

    def _iter_manifest_lines(self) -> Iterator[str]:
        # The manifest resource id is the file type: 1 for an EXE, 2 for a DLL
        file_type = self.version_info.get(VersionInfo.FILETYPE)
        if file_type is None:
            return
        if self.manifest is not None:
            yield f"{file_type} {RT_MANIFEST}"
            yield "{"
            # Only "\n" ends a line; "\r" goes with the strip below
            lines = self.manifest.split("\n")
            if lines[-1] == "":
                lines.pop()
            for line in lines:
                yield f'"{escape_rc_string(line).strip()}"'
            yield "}"
        elif self.manifest_file is not None:
            yield f'{file_type} {RT_MANIFEST} "{self.manifest_file}"'

    def render(self) -> str:
        """Render the complete resource script."""
        return "".join(f"{line}\n" for line in self.iter_lines())

    def write(self, path: Path) -> Path:
        """Write the resource script to a file.

        Args:
            path: Output .rc path

        Returns:
            The path written

        Raises:
            ResourceScriptError: If the file cannot be written
        """
        path = Path(path)
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for line in self.iter_lines():
                    f.write(f"{line}\n")
        except OSError as e:
            raise ResourceScriptError(f"Failed to write resource script {path}: {e}") from e
        return path
