"""Resource compilers.

This module defines the interface for toolkit-specific resource compilers and
its two implementations:

- MSVC: rc.exe from the Windows SDK, producing resource.lib
- GNU: windres.exe plus ar.exe from MinGW, producing libresource.a

After a successful compile each implementation prints the two cargo link
directives that make rustc link the compiled resource.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional

from winres.build.archive_creator import ArchiveCreator
from winres.errors import (
    CompileError,
    ToolchainInvocationError,
    ToolkitNotFoundError,
    UnsupportedToolkitError,
)
from winres.packages.platform_utils import PlatformDetector, Toolkit

LIBRARY_NAME = "resource"


def emit_link_directives(output_dir: str, kind: str, out: Callable[[str], None] = print) -> None:
    """Print the cargo directives that link the compiled resource.

    Args:
        output_dir: Directory holding the resource library
        kind: rustc link kind ('dylib' or 'static')
        out: Line writer (stdout by default)
    """
    out(f"cargo:rustc-link-search=native={output_dir}")
    out(f"cargo:rustc-link-lib={kind}={LIBRARY_NAME}")


def run_tool(cmd: List[str], cwd: Optional[str] = None) -> int:
    """Run a toolchain command with inherited standard streams.

    Returns:
        The process exit status

    Raises:
        ToolchainInvocationError: If the process cannot be started
    """
    logging.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, cwd=cwd)
    except OSError as e:
        raise ToolchainInvocationError(f"Failed to run {cmd[0]}: {e}") from e
    return result.returncode


class IResourceCompiler(ABC):
    """Interface for resource compilers."""

    link_kind: str = ""

    def __init__(self, toolkit_path: str, include_dir: str):
        """Initialize the compiler.

        Args:
            toolkit_path: Windows Kits root (MSVC) or MinGW bin directory (GNU)
            include_dir: Directory passed as include path, the package root
        """
        self.toolkit_path = toolkit_path
        self.include_dir = include_dir

    @abstractmethod
    def compile_resource(self, input_path: Path, output_dir: Path) -> Path:
        """Compile a resource script into a linkable library.

        Args:
            input_path: Path to the .rc file
            output_dir: Directory for the compiled artifacts

        Returns:
            Path to the library to link

        Raises:
            CompileError: If the resource compiler fails
            ArchiveError: If the archiver fails
            ToolchainInvocationError: If a tool cannot be started
        """
        pass

    def compile(self, input_path: Path, output_dir: str) -> Path:
        """Compile the resource and print the cargo link directives."""
        library = self.compile_resource(Path(input_path), Path(output_dir))
        emit_link_directives(output_dir, self.link_kind)
        return library


class ResourceCompilerMSVC(IResourceCompiler):
    """Compiles resources with rc.exe from the Windows SDK."""

    link_kind = "dylib"

    def rc_exe(self) -> Path:
        """Path of rc.exe for the host architecture."""
        if not self.toolkit_path:
            raise ToolkitNotFoundError(
                "No Windows SDK found. Install the Windows 10 SDK or set the toolkit path."
            )
        return PlatformDetector.rc_exe_path(self.toolkit_path)

    def compile_resource(self, input_path: Path, output_dir: Path) -> Path:
        output = output_dir / f"{LIBRARY_NAME}.lib"
        cmd = [
            str(self.rc_exe()),
            f"/I{self.include_dir}",
            "/nologo",
            f"/fo{output}",
            str(input_path),
        ]
        returncode = run_tool(cmd)
        if returncode != 0:
            raise CompileError(f"Could not compile resource file (rc.exe exited with {returncode})")
        return output


class ResourceCompilerGNU(IResourceCompiler):
    """Compiles resources with windres.exe and archives them with ar.exe."""

    link_kind = "static"
    windres_command = "windres.exe"
    ar_command = "ar.exe"

    def compile_resource(self, input_path: Path, output_dir: Path) -> Path:
        cwd = self.toolkit_path or None
        obj = output_dir / f"{LIBRARY_NAME}.o"
        cmd = [
            self.windres_command,
            f"-I{self.include_dir}",
            str(input_path),
            str(obj),
        ]
        returncode = run_tool(cmd, cwd=cwd)
        if returncode != 0:
            raise CompileError(f"Could not compile resource file (windres exited with {returncode})")

        archiver = ArchiveCreator(self.ar_command, cwd=cwd)
        return archiver.create_archive(output_dir / f"lib{LIBRARY_NAME}.a", [obj])


def create_compiler(toolkit: Toolkit, toolkit_path: str, include_dir: str) -> IResourceCompiler:
    """Create the resource compiler for a toolkit.

    Raises:
        UnsupportedToolkitError: For Toolkit.UNKNOWN
    """
    if toolkit == Toolkit.MSVC:
        return ResourceCompilerMSVC(toolkit_path, include_dir)
    if toolkit == Toolkit.GNU:
        return ResourceCompilerGNU(toolkit_path, include_dir)
    raise UnsupportedToolkitError(
        "Cannot compile resources: the target environment is neither msvc nor gnu"
    )
