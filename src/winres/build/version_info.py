"""VERSIONINFO field definitions.

The FILEVERSION and PRODUCTVERSION fields hold four 16 bit words packed into a
single 64 bit value:

    MAJOR << 48 | MINOR << 32 | PATCH << 16 | RELEASE

All other fields are plain flag or enumeration values from winver.h.
"""

from enum import Enum
from typing import Dict, Tuple

MAX_VERSION_VALUE = 0xFFFF_FFFF_FFFF_FFFF
MAX_WORD = 0xFFFF

# winver.h constants used for the defaults
VOS_NT_WINDOWS32 = 0x00040004
VFT_APP = 0x1
VFT_DLL = 0x2
VFT2_UNKNOWN = 0x0
VS_FFI_FILEFLAGSMASK = 0x3F
VS_FF_PRIVATEBUILD = 0x08
VS_FF_SPECIALBUILD = 0x20

# Resource type identifier of an application manifest (RT_MANIFEST)
RT_MANIFEST = 24


class VersionInfo(Enum):
    """Fields of the fixed part of a VERSIONINFO resource."""

    FILEVERSION = "FILEVERSION"
    PRODUCTVERSION = "PRODUCTVERSION"
    FILEOS = "FILEOS"
    # 1 for an executable, 2 for a DLL
    FILETYPE = "FILETYPE"
    # only used for drivers
    FILESUBTYPE = "FILESUBTYPE"
    FILEFLAGSMASK = "FILEFLAGSMASK"
    # only the bits set in FILEFLAGSMASK are read
    FILEFLAGS = "FILEFLAGS"

    @property
    def is_version(self) -> bool:
        """True for the fields holding four packed version words."""
        return self in (VersionInfo.FILEVERSION, VersionInfo.PRODUCTVERSION)

    @classmethod
    def parse(cls, name: str) -> "VersionInfo":
        """Look up a field by its name, case-insensitively.

        Raises:
            ValueError: If the name is not a VERSIONINFO field
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(field.name for field in cls)
            raise ValueError(f"Unknown version info field '{name}'. Valid fields: {valid}") from None


def pack_version(major: int, minor: int, patch: int, release: int = 0) -> int:
    """Pack four version words into a 64 bit FILEVERSION value.

    Raises:
        ValueError: If any word does not fit into 16 bits
    """
    words = (major, minor, patch, release)
    for word in words:
        if not 0 <= word <= MAX_WORD:
            raise ValueError(f"Version component out of range (0..{MAX_WORD}): {word}")
    return (major << 48) | (minor << 32) | (patch << 16) | release


def unpack_version(value: int) -> Tuple[int, int, int, int]:
    """Split a packed 64 bit version value into its four words."""
    return (
        (value >> 48) & MAX_WORD,
        (value >> 32) & MAX_WORD,
        (value >> 16) & MAX_WORD,
        value & MAX_WORD,
    )


def default_version_info(version: int) -> Dict[VersionInfo, int]:
    """Version info for an executable with the given packed version."""
    return {
        VersionInfo.FILEVERSION: version,
        VersionInfo.PRODUCTVERSION: version,
        VersionInfo.FILEOS: VOS_NT_WINDOWS32,
        VersionInfo.FILETYPE: VFT_APP,
        VersionInfo.FILESUBTYPE: VFT2_UNKNOWN,
        VersionInfo.FILEFLAGSMASK: VS_FFI_FILEFLAGSMASK,
        VersionInfo.FILEFLAGS: 0,
    }
