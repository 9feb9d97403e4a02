"""Windows resources for cargo build scripts.

winres generates a Windows resource script (.rc) with version information, an
icon and an application manifest, compiles it with rc.exe (MSVC) or
windres.exe and ar.exe (GNU), and prints the cargo directives that link the
result into the crate being built.
"""

from .build.version_info import (
    VFT_APP,
    VFT_DLL,
    VS_FF_PRIVATEBUILD,
    VS_FF_SPECIALBUILD,
    VersionInfo,
    pack_version,
    unpack_version,
)
from .errors import (
    ArchiveError,
    CompileError,
    ManifestReadError,
    MissingEnvironmentError,
    ResourceScriptError,
    SDKLocatorError,
    ToolchainError,
    ToolchainInvocationError,
    ToolkitNotFoundError,
    UnsupportedToolkitError,
    WinresError,
)
from .packages.platform_utils import Toolkit
from .resource import WindowsResource

__version__ = "0.1.0"

__all__ = [
    "WindowsResource",
    "VersionInfo",
    "Toolkit",
    "pack_version",
    "unpack_version",
    "VFT_APP",
    "VFT_DLL",
    "VS_FF_PRIVATEBUILD",
    "VS_FF_SPECIALBUILD",
    "WinresError",
    "MissingEnvironmentError",
    "ManifestReadError",
    "ResourceScriptError",
    "ToolchainError",
    "ToolchainInvocationError",
    "CompileError",
    "ArchiveError",
    "ToolkitNotFoundError",
    "UnsupportedToolkitError",
    "SDKLocatorError",
]
