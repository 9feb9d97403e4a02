"""
Command-line interface for winres.

This module provides the `winres` CLI, which lets a cargo build script
delegate resource compilation to a single command:

    // build.rs
    std::process::Command::new("winres").args(["compile", "--icon", "app.ico"])

The command reads cargo's build-script environment, so it must run with the
environment cargo gives build scripts.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from winres.cli_utils import AssignmentParser, ErrorFormatter
from winres.errors import (
    ArchiveError,
    CompileError,
    MissingEnvironmentError,
    WinresError,
)
from winres.packages.platform_utils import Toolkit
from winres.resource import RESOURCE_SCRIPT_NAME, WindowsResource


@dataclass
class ResourceArgs:
    """Resource settings shared by all commands."""

    icon: Optional[str] = None
    language: Optional[int] = None
    manifest: Optional[str] = None
    manifest_file: Optional[str] = None
    properties: List[str] = field(default_factory=list)
    version_info: List[str] = field(default_factory=list)
    output_dir: Optional[str] = None
    verbose: bool = False


@dataclass
class CompileArgs(ResourceArgs):
    """Arguments for the compile command."""

    rc_file: Optional[str] = None
    toolkit_path: Optional[str] = None
    toolkit: Optional[str] = None


@dataclass
class WriteArgs(ResourceArgs):
    """Arguments for the write command."""

    output: Optional[Path] = None


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout carries cargo directives."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="winres: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_resource(args: ResourceArgs, toolkit: Optional[Toolkit] = None) -> WindowsResource:
    """Create a resource from the environment and apply the CLI settings."""
    res = WindowsResource(toolkit=toolkit)
    for key, value in AssignmentParser.parse_properties(args.properties).items():
        res.set(key, value)
    for version_field, value in AssignmentParser.parse_version_info(args.version_info).items():
        res.set_version_info(version_field, value)
    if args.icon is not None:
        res.set_icon(args.icon)
    if args.language is not None:
        res.set_language(args.language)
    if args.manifest_file is not None:
        res.set_manifest_file(args.manifest_file)
    if args.manifest is not None:
        try:
            manifest = Path(args.manifest).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read manifest {args.manifest}: {e}") from e
        res.set_manifest(manifest)
    if args.output_dir is not None:
        res.set_output_directory(args.output_dir)
    return res


def compile_command(args: CompileArgs) -> None:
    """Generate and compile the resource, then print the link directives.

    Examples:
        winres compile
        winres compile --icon app.ico --language 0x0409
        winres compile --set LegalCopyright="(c) ACME" --version-info FILETYPE=2
        winres compile --rc-file app.rc
    """
    toolkit = Toolkit(args.toolkit) if args.toolkit else None
    res = build_resource(args, toolkit)
    if args.rc_file is not None:
        res.set_resource_file(args.rc_file)
    if args.toolkit_path is not None:
        res.set_toolkit_path(args.toolkit_path)
    library = res.compile()
    logging.info(f"Compiled resource: {library}")


def write_command(args: WriteArgs) -> None:
    """Write the generated resource script without compiling it.

    Examples:
        winres write                    # OUT_DIR/resource.rc
        winres write -o app.rc --icon app.ico
    """
    res = build_resource(args)
    output = args.output or Path(res.output_directory) / RESOURCE_SCRIPT_NAME
    res.write_resource_file(output)
    logging.info(f"Wrote resource script: {output}")


def add_resource_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--icon", default=None, help="Icon file (.ico) to embed")
    parser.add_argument(
        "--language",
        default=None,
        type=AssignmentParser.parse_int,
        help="Language id, e.g. 0x0409 for English (US) (default: 0, neutral)",
    )
    manifest_group = parser.add_mutually_exclusive_group()
    manifest_group.add_argument(
        "--manifest",
        default=None,
        help="Application manifest file to embed inline in the script",
    )
    manifest_group.add_argument(
        "--manifest-file",
        default=None,
        help="Application manifest file included by the resource compiler",
    )
    parser.add_argument(
        "--set",
        dest="properties",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set a string property, e.g. CompanyName=ACME (repeatable)",
    )
    parser.add_argument(
        "--version-info",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Set a version info field, e.g. FILETYPE=2 or FILEVERSION=1.2.3.4 (repeatable)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory (default: OUT_DIR)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log to stderr what is being done",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="winres",
        description="Compile a Windows resource in a cargo build script",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    compile_parser = subparsers.add_parser(
        "compile",
        help="Generate and compile the resource, printing cargo link directives",
    )
    add_resource_arguments(compile_parser)
    compile_parser.add_argument(
        "--rc-file",
        default=None,
        help="Compile this .rc file instead of a generated one",
    )
    compile_parser.add_argument(
        "--toolkit-path",
        default=None,
        help="Windows SDK root (msvc) or directory of windres.exe and ar.exe (gnu)",
    )
    compile_parser.add_argument(
        "--toolkit",
        choices=[Toolkit.MSVC.value, Toolkit.GNU.value],
        default=None,
        help="Toolkit to use (default: from CARGO_CFG_TARGET_ENV)",
    )

    write_parser = subparsers.add_parser(
        "write",
        help="Write the generated resource script without compiling it",
    )
    add_resource_arguments(write_parser)
    write_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output .rc path (default: OUT_DIR/resource.rc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """winres - Windows resources for cargo builds."""
    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help(sys.stderr)
        sys.exit(0)

    configure_logging(parsed_args.verbose)
    common = dict(
        icon=parsed_args.icon,
        language=parsed_args.language,
        manifest=parsed_args.manifest,
        manifest_file=parsed_args.manifest_file,
        properties=parsed_args.properties,
        version_info=parsed_args.version_info,
        output_dir=parsed_args.output_dir,
        verbose=parsed_args.verbose,
    )

    try:
        if parsed_args.command == "compile":
            compile_command(
                CompileArgs(
                    rc_file=parsed_args.rc_file,
                    toolkit_path=parsed_args.toolkit_path,
                    toolkit=parsed_args.toolkit,
                    **common,
                )
            )
        elif parsed_args.command == "write":
            write_command(WriteArgs(output=parsed_args.output, **common))
    except MissingEnvironmentError as e:
        ErrorFormatter.print_error("Missing cargo environment", f"{e}. Run winres from a cargo build script.")
        sys.exit(1)
    except (CompileError, ArchiveError) as e:
        ErrorFormatter.print_error(e.kind.capitalize(), str(e))
        sys.exit(1)
    except WinresError as e:
        ErrorFormatter.print_error("Resource error", str(e))
        sys.exit(1)
    except ValueError as e:
        ErrorFormatter.print_error("Invalid argument", str(e))
        sys.exit(2)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, parsed_args.verbose)


if __name__ == "__main__":
    main()
