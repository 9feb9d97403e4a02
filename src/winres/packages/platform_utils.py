"""Platform Detection Utilities.

This module provides utilities for detecting the host architecture and the
target environment cargo is building for, used to pick the resource toolchain
and the Windows SDK binary directory.
"""

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

# Windows SDK version whose rc.exe layout is hard-coded
SDK_BIN_VERSION = "10.0.15063.0"


class Toolkit(Enum):
    """Resource toolchain, selected by cargo's target environment."""

    # Microsoft Visual C and the Windows SDK
    MSVC = "msvc"
    # GNU binutils (MinGW)
    GNU = "gnu"
    # neither msvc nor gnu was targeted
    UNKNOWN = "unknown"

    @staticmethod
    def detect(environ: Optional[Mapping[str, str]] = None) -> "Toolkit":
        """Detect the toolkit from CARGO_CFG_TARGET_ENV.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Toolkit.MSVC, Toolkit.GNU or Toolkit.UNKNOWN
        """
        env = os.environ if environ is None else environ
        target_env = env.get("CARGO_CFG_TARGET_ENV", "").strip().lower()
        if target_env == "msvc":
            return Toolkit.MSVC
        if target_env == "gnu":
            return Toolkit.GNU
        return Toolkit.UNKNOWN


class PlatformDetector:
    """Detects the host architecture for SDK binary selection."""

    @staticmethod
    def is_64bit() -> bool:
        """Check if the running interpreter is 64 bit."""
        return sys.maxsize > 2**32

    @staticmethod
    def sdk_arch() -> str:
        """Windows SDK binary directory name for the host architecture.

        Returns:
            'x64' on 64 bit hosts, 'x86' otherwise
        """
        return "x64" if PlatformDetector.is_64bit() else "x86"

    @staticmethod
    def rc_exe_path(kits_root: str) -> Path:
        """Location of rc.exe below a Windows Kits root.

        For example `<kits_root>\\bin\\10.0.15063.0\\x64\\rc.exe`.
        """
        return Path(kits_root, "bin", SDK_BIN_VERSION, PlatformDetector.sdk_arch(), "rc.exe")
