"""Shared fixtures: a cargo build-script environment in a temp directory."""

import pytest

CARGO_VARIABLES = (
    "CARGO_PKG_VERSION",
    "CARGO_PKG_NAME",
    "CARGO_PKG_DESCRIPTION",
    "CARGO_PKG_VERSION_MAJOR",
    "CARGO_PKG_VERSION_MINOR",
    "CARGO_PKG_VERSION_PATCH",
    "CARGO_MANIFEST_DIR",
    "OUT_DIR",
    "CARGO_CFG_TARGET_ENV",
)


@pytest.fixture
def package_dir(tmp_path):
    """Package root (CARGO_MANIFEST_DIR) with an empty winres table.

    The table exists so that constructing a resource prints no diagnostics.
    """
    path = tmp_path / "pkg"
    path.mkdir()
    (path / "Cargo.toml").write_text(
        '[package]\nname = "demo"\nversion = "1.2.3"\n\n[package.metadata.winres]\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def out_dir(tmp_path):
    """Build output directory (OUT_DIR)."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def cargo_env(monkeypatch, package_dir, out_dir):
    """Set the cargo variables for package `demo` 1.2.3 targeting msvc.

    The registry lookup is disabled so no `reg` process is started.
    """
    for name in CARGO_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    values = {
        "CARGO_PKG_VERSION": "1.2.3",
        "CARGO_PKG_NAME": "demo",
        "CARGO_PKG_DESCRIPTION": "A demo",
        "CARGO_PKG_VERSION_MAJOR": "1",
        "CARGO_PKG_VERSION_MINOR": "2",
        "CARGO_PKG_VERSION_PATCH": "3",
        "CARGO_MANIFEST_DIR": str(package_dir),
        "OUT_DIR": str(out_dir),
        "CARGO_CFG_TARGET_ENV": "msvc",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setattr("winres.resource.get_sdk", lambda locator=None: [])
    return values
