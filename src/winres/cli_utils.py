"""CLI utility functions for winres.

This module provides common utilities used by the CLI including:
- Parsing KEY=VALUE assignments and numeric literals
- Error handling and formatting

Everything here writes to stderr: stdout is reserved for cargo directives.
"""

import sys
from typing import Dict, List, Tuple

from winres.build.version_info import VersionInfo, pack_version


class AssignmentParser:
    """Parses command-line assignments such as `CompanyName=ACME`."""

    @staticmethod
    def parse_int(text: str) -> int:
        """Parse a decimal, 0x hex, 0o octal or 0b binary integer.

        Raises:
            ValueError: If the text is not an integer literal
        """
        return int(text.strip().replace("_", ""), 0)

    @staticmethod
    def split(assignment: str) -> Tuple[str, str]:
        """Split `KEY=VALUE` at the first '='.

        Raises:
            ValueError: If there is no '=' or the key is empty
        """
        key, sep, value = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{assignment}'")
        return key, value

    @staticmethod
    def parse_properties(assignments: List[str]) -> Dict[str, str]:
        """Parse `--set` assignments into a string table, in order."""
        properties = {}
        for assignment in assignments:
            key, value = AssignmentParser.split(assignment)
            properties[key] = value
        return properties

    @staticmethod
    def parse_version_info(assignments: List[str]) -> Dict[VersionInfo, int]:
        """Parse `--version-info` assignments such as `FILETYPE=2`.

        The FILEVERSION and PRODUCTVERSION fields also accept dotted versions
        (`1.2.3.4`), which are packed into four 16 bit words.
        """
        fields = {}
        for assignment in assignments:
            key, value = AssignmentParser.split(assignment)
            field = VersionInfo.parse(key)
            if field.is_version and "." in value:
                words = [int(word) for word in value.strip().split(".")]
                if len(words) > 4:
                    raise ValueError(f"Too many version components in '{value}'")
                words += [0] * (4 - len(words))
                fields[field] = pack_version(*words)
            else:
                fields[field] = AssignmentParser.parse_int(value)
        return fields


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Compile error")
            message: Error message details
        """
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(message, file=sys.stderr)

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message."""
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:", file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

        sys.exit(1)
