"""Windows SDK Locator.

This module discovers installed Windows Kits by querying the registry with the
`reg` command line tool.

Registry layout:
    HKLM\\SOFTWARE\\Microsoft\\Windows Kits\\Installed Roots
        KitsRoot10    REG_SZ    C:\\Program Files (x86)\\Windows Kits\\10\\

Only roots that actually ship rc.exe for the host architecture under the
hard-coded SDK version directory are reported.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional

from winres.errors import SDKLocatorError
from winres.packages.platform_utils import PlatformDetector

INSTALLED_ROOTS_KEY = r"HKLM\SOFTWARE\Microsoft\Windows Kits\Installed Roots"


class SDKLocator(ABC):
    """Interface for Windows SDK discovery."""

    @abstractmethod
    def find_kits(self) -> List[str]:
        """Find installed Windows Kits roots.

        Returns:
            Kits roots containing a usable rc.exe, in discovery order

        Raises:
            SDKLocatorError: If the SDKs cannot be enumerated
        """
        pass


class RegistrySDKLocator(SDKLocator):
    """Finds Windows Kits through `reg query` on the Installed Roots key."""

    def __init__(
        self,
        rc_exe_path: Callable[[str], Path] = PlatformDetector.rc_exe_path,
        reg_command: str = "reg",
    ):
        """Initialize the locator.

        Args:
            rc_exe_path: Maps a kits root to its expected rc.exe path
            reg_command: Registry query tool to run
        """
        self.rc_exe_path = rc_exe_path
        self.reg_command = reg_command

    def query_registry(self) -> str:
        """Run the registry query and return its decoded standard output."""
        cmd = [self.reg_command, "query", INSTALLED_ROOTS_KEY]
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise SDKLocatorError(f"Failed to run registry query: {e}") from e

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SDKLocatorError(f"Registry query output is not valid UTF-8: {e}") from e

    def parse_kits_roots(self, output: str) -> List[str]:
        """Extract the KitsRoot values from `reg query` output.

        Args:
            output: Text printed by `reg query`

        Returns:
            All KitsRoot values, without checking for rc.exe
        """
        roots = []
        for line in output.splitlines():
            if not line.strip().startswith("KitsRoot"):
                continue
            marker = line.find("REG_SZ")
            if marker < 0:
                continue
            roots.append(line[marker + len("REG_SZ"):].lstrip())
        return roots

    def find_kits(self) -> List[str]:
        kits = []
        for root in self.parse_kits_roots(self.query_registry()):
            rc_exe = self.rc_exe_path(root)
            if rc_exe.exists():
                logging.debug(f"Found Windows SDK: {root}")
                kits.append(root)
            else:
                logging.debug(f"Skipping Windows SDK without {rc_exe}")
        return kits


def get_sdk(locator: Optional[SDKLocator] = None) -> List[str]:
    """Find installed Windows Kits roots with the registry locator.

    Raises:
        SDKLocatorError: If the registry query cannot be run or decoded
    """
    return (locator or RegistrySDKLocator()).find_kits()
