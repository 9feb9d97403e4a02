"""Cargo build-script environment.

Cargo passes package information to build scripts through environment
variables. This module collects the ones needed to seed a version resource.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from winres.errors import MissingEnvironmentError

MANIFEST_FILENAME = "Cargo.toml"


@dataclass
class PackageEnvironment:
    """Package metadata provided by the build driver."""

    version: str
    name: str
    description: str
    version_major: int
    version_minor: int
    version_patch: int
    manifest_dir: str
    out_dir: str

    @property
    def manifest_path(self) -> Path:
        """Path of the package's Cargo.toml."""
        return Path(self.manifest_dir) / MANIFEST_FILENAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PackageEnvironment":
        """Read the package environment.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            PackageEnvironment populated from the cargo variables

        Raises:
            MissingEnvironmentError: If a required variable is not set
        """
        env = os.environ if environ is None else environ

        def required(name: str) -> str:
            value = env.get(name)
            if value is None:
                raise MissingEnvironmentError(name)
            return value

        return cls(
            version=required("CARGO_PKG_VERSION"),
            name=required("CARGO_PKG_NAME"),
            description=required("CARGO_PKG_DESCRIPTION"),
            version_major=_version_component(env, "CARGO_PKG_VERSION_MAJOR"),
            version_minor=_version_component(env, "CARGO_PKG_VERSION_MINOR"),
            version_patch=_version_component(env, "CARGO_PKG_VERSION_PATCH"),
            manifest_dir=required("CARGO_MANIFEST_DIR"),
            out_dir=env.get("OUT_DIR", "."),
        )


def _version_component(env: Mapping[str, str], name: str) -> int:
    """Parse a numeric version component, falling back to 0.

    Values that are not decimal numbers or do not fit into a 16 bit word are
    reported and replaced by 0 rather than failing the build.
    """
    raw = env.get(name)
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        logging.warning(f"{name}={raw!r} is not a number, using 0")
        return 0
    if not 0 <= value <= 0xFFFF:
        logging.warning(f"{name}={raw!r} does not fit into 16 bits, using 0")
        return 0
    return value
