"""Windows resource builder.

`WindowsResource` collects the version information, string table, icon and
manifest of a Windows binary and compiles them with the resource toolchain of
the current cargo target. It is meant to be used from a build script:

    res = WindowsResource()
    res.set_icon("test.ico").set("InternalName", "TEST.EXE")
    res.compile()

Defaults come from cargo's build environment:

    | Property            | Source                         |
    |---------------------|--------------------------------|
    | FileVersion         | CARGO_PKG_VERSION              |
    | ProductVersion      | CARGO_PKG_VERSION              |
    | ProductName         | CARGO_PKG_NAME                 |
    | FileDescription     | CARGO_PKG_DESCRIPTION          |

String values in a `[package.metadata.winres]` table of Cargo.toml take
precedence over these. The version struct is set up for an executable:
FILEOS is VOS_NT_WINDOWS32 (0x40004), FILETYPE is VFT_APP (0x1),
FILEFLAGSMASK is VS_FFI_FILEFLAGSMASK (0x3F).
"""

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

from winres.build.compiler import IResourceCompiler, create_compiler
from winres.build.rc_writer import ResourceScriptWriter
from winres.build.version_info import (
    MAX_VERSION_VALUE,
    VersionInfo,
    default_version_info,
    pack_version,
)
from winres.config import PackageEnvironment, apply_winres_metadata
from winres.errors import SDKLocatorError
from winres.packages.platform_utils import Toolkit
from winres.packages.sdk_locator import SDKLocator, get_sdk

RESOURCE_SCRIPT_NAME = "resource.rc"


def default_toolkit_path(locator: Optional[SDKLocator] = None) -> str:
    """Newest registered Windows Kits root, or an empty string."""
    try:
        kits = get_sdk(locator)
    except SDKLocatorError as e:
        logging.debug(f"Windows SDK lookup failed: {e}")
        return ""
    return kits[-1] if kits else ""


class WindowsResource:
    """Builder for a Windows resource compiled into a cargo build.

    All setters return the resource itself so calls can be chained.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        toolkit: Optional[Toolkit] = None,
        sdk_locator: Optional[SDKLocator] = None,
    ):
        """Create a resource seeded from the cargo environment.

        Args:
            environ: Environment mapping (defaults to os.environ)
            toolkit: Toolkit override (defaults to CARGO_CFG_TARGET_ENV)
            sdk_locator: Windows SDK locator (defaults to the registry)

        Raises:
            MissingEnvironmentError: If a required cargo variable is not set
            ManifestReadError: If Cargo.toml exists but cannot be read
        """
        env = PackageEnvironment.from_env(environ)
        self.manifest_dir = env.manifest_dir
        self._toolkit = toolkit if toolkit is not None else Toolkit.detect(environ)

        self.properties: Dict[str, str] = {
            "FileVersion": env.version,
            "ProductVersion": env.version,
            "ProductName": env.name,
            "FileDescription": env.description,
        }
        apply_winres_metadata(env.manifest_path, self.properties)

        version = pack_version(env.version_major, env.version_minor, env.version_patch)
        self.version_info: Dict[VersionInfo, int] = default_version_info(version)

        self.toolkit_path = default_toolkit_path(sdk_locator)
        self.rc_file: Optional[str] = None
        self.icon: Optional[str] = None
        self.language = 0
        self.manifest: Optional[str] = None
        self.manifest_file: Optional[str] = None
        self.output_directory = env.out_dir

    @staticmethod
    def toolkit(environ: Optional[Mapping[str, str]] = None) -> Toolkit:
        """Toolkit of the current cargo target."""
        return Toolkit.detect(environ)

    def set(self, name: str, value: str) -> "WindowsResource":
        """Set a string property of the version info.

        Windows Explorer shows FileVersion, FileDescription, ProductVersion,
        ProductName, OriginalFilename, LegalCopyright, LegalTrademark,
        CompanyName, Comments and InternalName. PrivateBuild and SpecialBuild
        should only be set together with the matching FILEFLAGS bits
        (VS_FF_PRIVATEBUILD 0x08, VS_FF_SPECIALBUILD 0x20). Other names are
        written as given.
        """
        self.properties[name] = value
        return self

    def set_toolkit_path(self, path: str) -> "WindowsResource":
        """Set the toolkit location.

        For MSVC this is the Windows SDK root, e.g.
        `C:\\Program Files (x86)\\Windows Kits\\10`. For GNU it is the
        directory containing windres.exe and ar.exe.
        """
        self.toolkit_path = str(path)
        return self

    def set_language(self, language: int) -> "WindowsResource":
        """Set the user interface language (a LANGID such as 0x0409)."""
        if not 0 <= language <= 0xFFFF:
            raise ValueError(f"Language id out of range (0..0xffff): {language:#x}")
        self.language = language
        return self

    def set_icon(self, path: str) -> "WindowsResource":
        """Set an .ico file, absolute or relative to the package root."""
        self.icon = str(path)
        return self

    def set_version_info(self, field: VersionInfo, value: int) -> "WindowsResource":
        """Set a numeric field of the version info."""
        if not 0 <= value <= MAX_VERSION_VALUE:
            raise ValueError(f"{field.name} value out of range (0..2^64-1): {value}")
        self.version_info[field] = value
        return self

    def set_manifest(self, manifest: str) -> "WindowsResource":
        """Embed an application manifest given as XML text."""
        self.manifest_file = None
        self.manifest = manifest
        return self

    def set_manifest_file(self, path: str) -> "WindowsResource":
        """Embed an application manifest file, included by the resource compiler."""
        self.manifest_file = str(path)
        self.manifest = None
        return self

    def set_resource_file(self, path: str) -> "WindowsResource":
        """Compile an existing .rc file instead of the generated one.

        The file is neither modified nor parsed.
        """
        self.rc_file = str(path)
        return self

    def set_output_directory(self, path: str) -> "WindowsResource":
        """Override the output directory (OUT_DIR by default)."""
        self.output_directory = str(path)
        return self

    def script_writer(self) -> ResourceScriptWriter:
        return ResourceScriptWriter(
            self.version_info,
            self.properties,
            language=self.language,
            icon=self.icon,
            manifest=self.manifest,
            manifest_file=self.manifest_file,
        )

    def write_resource_file(self, path: Path) -> Path:
        """Write a resource script with the current settings.

        Raises:
            ResourceScriptError: If the file cannot be written
        """
        return self.script_writer().write(Path(path))

    def compiler(self) -> IResourceCompiler:
        """Resource compiler for the selected toolkit."""
        return create_compiler(self._toolkit, self.toolkit_path, self.manifest_dir)

    def compile(self) -> Path:
        """Generate (unless overridden) and compile the resource script.

        Prints the cargo link directives on success.

        Returns:
            Path to the compiled resource library

        Raises:
            WinresError: On the first failing step
        """
        compiler = self.compiler()
        if self.rc_file is None:
            rc = self.write_resource_file(Path(self.output_directory) / RESOURCE_SCRIPT_NAME)
        else:
            rc = Path(self.rc_file)
        return compiler.compile(rc, self.output_directory)
