"""Cargo.toml metadata reader.

This module reads the optional `[package.metadata.winres]` table from a
package manifest. Values in that table override the string properties that
are otherwise derived from the cargo environment.

Example Cargo.toml:
    [package.metadata.winres]
    OriginalFilename = "testing.exe"
    LegalCopyright = "Copyright © 2016"

The table is optional enrichment, so every problem on the way to it (missing
file, parse error, missing section, non-string value) is reported as a
diagnostic line on stdout and the build carries on.
"""

import logging
from pathlib import Path
from typing import Any, Dict, MutableMapping

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib

from winres.errors import ManifestReadError

METADATA_PATH = ("package", "metadata", "winres")


def _diagnostic(message: str) -> None:
    print(message)


def load_manifest(manifest_path: Path) -> Dict[str, Any]:
    """Parse a Cargo.toml file.

    Raises:
        FileNotFoundError: If the file does not exist
        ManifestReadError: If the file cannot be read
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    try:
        with open(manifest_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise
    except OSError as e:
        raise ManifestReadError(f"Failed to read {manifest_path}: {e}") from e


def find_winres_table(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve `package.metadata.winres`, reporting the first missing step.

    Returns:
        The winres table, or an empty dict if it is missing or not a table
    """
    package = manifest.get("package")
    if not isinstance(package, dict):
        _diagnostic("package section missing")
        return {}

    metadata = package.get("metadata")
    table = metadata.get("winres") if isinstance(metadata, dict) else None
    if table is None:
        _diagnostic("package.metadata.winres does not exist")
        return {}
    if not isinstance(table, dict):
        _diagnostic("package.metadata.winres is not a table")
        return {}
    return table


def apply_winres_metadata(
    manifest_path: Path, properties: MutableMapping[str, str]
) -> MutableMapping[str, str]:
    """Overlay the string values of `package.metadata.winres` onto properties.

    Args:
        manifest_path: Path to Cargo.toml
        properties: String table to update in place

    Returns:
        The same properties mapping

    Raises:
        ManifestReadError: If Cargo.toml exists but cannot be read
    """
    try:
        manifest = load_manifest(manifest_path)
    except FileNotFoundError:
        _diagnostic(f"{manifest_path} does not exist")
        return properties
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        _diagnostic(f"parsing error: {e}")
        return properties

    for key, value in find_winres_table(manifest).items():
        if isinstance(value, str):
            logging.debug(f"{manifest_path.name} overrides {key}")
            properties[key] = value
        else:
            _diagnostic(f"package.metadata.winres.{key} is not a string")
    return properties
