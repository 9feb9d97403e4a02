"""Archive Creator.

This module handles creating the static library archive (.a file) that wraps
the object file produced by windres, so that rustc can link it with
`static=resource`.

Design:
    - Wraps ar command execution
    - Runs ar from the toolkit directory, like windres
    - Leaves ar's own output on the inherited streams
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from winres.errors import ArchiveError, ToolchainInvocationError


class ArchiveCreator:
    """Creates static library archives from object files."""

    def __init__(self, ar_command: str = "ar.exe", cwd: Optional[str] = None):
        """Initialize archive creator.

        Args:
            ar_command: Archiver executable
            cwd: Working directory for the archiver (the MinGW bin directory)
        """
        self.ar_command = ar_command
        self.cwd = cwd

    def create_archive(self, archive_path: Path, object_files: List[Path]) -> Path:
        """Create static library archive from object files.

        Args:
            archive_path: Path for output .a file
            object_files: List of object file paths to archive

        Returns:
            Path to generated archive file

        Raises:
            ArchiveError: If ar exits with a non-zero status
            ToolchainInvocationError: If ar cannot be started
        """
        if not object_files:
            raise ArchiveError("No object files provided for archive")

        # 'rsc' flags: r=insert/replace, s=index (ranlib), c=create
        cmd = [self.ar_command, "rsc", str(archive_path)]
        cmd.extend([str(obj) for obj in object_files])

        logging.info(f"Creating {archive_path.name} from {len(object_files)} object file(s)")
        try:
            result = subprocess.run(cmd, cwd=self.cwd)
        except OSError as e:
            raise ToolchainInvocationError(f"Failed to run {self.ar_command}: {e}") from e

        if result.returncode != 0:
            raise ArchiveError(
                f"Could not create static library for resource file "
                f"({self.ar_command} exited with {result.returncode})"
            )
        return archive_path
