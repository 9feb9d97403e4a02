"""Configuration sources for winres: the cargo environment and Cargo.toml."""

from .environment import MANIFEST_FILENAME, PackageEnvironment
from .manifest_metadata import apply_winres_metadata

__all__ = [
    "MANIFEST_FILENAME",
    "PackageEnvironment",
    "apply_winres_metadata",
]
