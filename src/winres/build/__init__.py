"""
Build components for winres.

This module provides:
- VERSIONINFO field definitions and version packing
- Resource script (.rc) generation
- Resource compilation (rc.exe, windres.exe + ar.exe)
"""

from .archive_creator import ArchiveCreator
from .compiler import (
    IResourceCompiler,
    ResourceCompilerGNU,
    ResourceCompilerMSVC,
    create_compiler,
    emit_link_directives,
)
from .rc_writer import ResourceScriptWriter
from .version_info import (
    VFT_APP,
    VFT_DLL,
    VS_FF_PRIVATEBUILD,
    VS_FF_SPECIALBUILD,
    VersionInfo,
    default_version_info,
    pack_version,
    unpack_version,
)

__all__ = [
    "ArchiveCreator",
    "IResourceCompiler",
    "ResourceCompilerGNU",
    "ResourceCompilerMSVC",
    "create_compiler",
    "emit_link_directives",
    "ResourceScriptWriter",
    "VersionInfo",
    "default_version_info",
    "pack_version",
    "unpack_version",
    "VFT_APP",
    "VFT_DLL",
    "VS_FF_PRIVATEBUILD",
    "VS_FF_SPECIALBUILD",
]
