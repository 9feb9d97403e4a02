"""Host toolchain discovery for winres.

This module detects the host platform and target toolkit and locates
installed Windows SDKs.
"""

from .platform_utils import SDK_BIN_VERSION, PlatformDetector, Toolkit
from .sdk_locator import RegistrySDKLocator, SDKLocator, get_sdk

__all__ = [
    "SDK_BIN_VERSION",
    "PlatformDetector",
    "Toolkit",
    "SDKLocator",
    "RegistrySDKLocator",
    "get_sdk",
]
