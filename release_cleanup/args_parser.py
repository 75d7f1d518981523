"""
Argument parsing for the release cleanup CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .cleaner import CleanupScope
from .umbrella import discover_projects


def add_scope_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments selecting what gets removed."""
    scope = parser.add_mutually_exclusive_group()
    scope.add_argument(
        "--implode",
        action="store_true",
        help="Remove all release files for the project, including every past release.",
    )
    scope.add_argument(
        "--relfiles",
        action="store_true",
        help="Remove only the release generation scaffold files.",
    )
    parser.add_argument(
        "--no-confirm",
        action="store_true",
        help="With --implode, skip the confirmation prompt (DANGEROUS).",
    )


def add_project_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments locating the project(s) to clean."""
    parser.add_argument(
        "--project-dir",
        action="append",
        type=Path,
        default=[],
        help="Project directory to clean; repeat for several projects (default: current directory).",
    )
    parser.add_argument(
        "--apps-path",
        type=Path,
        help="Umbrella apps directory; every sub-directory with a .env file is cleaned.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Project configuration file, relative to each project directory (default: .env).",
    )


def add_hook_arguments(parser: argparse.ArgumentParser) -> None:
    """Add hook registration arguments."""
    parser.add_argument(
        "--hook",
        action="append",
        default=[],
        metavar="MODULE:ATTR",
        help="after_cleanup hook to run, after those listed in RELEASE_HOOKS. Repeatable.",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add output arguments."""
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def build_parser() -> argparse.ArgumentParser:
    """Create the ArgumentParser for the release cleanup CLI."""
    parser = argparse.ArgumentParser(
        description="Clean up release files generated for the current project.",
        epilog=(
            "examples:\n"
            "  clean-release                          remove the release for the current version\n"
            "  clean-release --implode                remove all release files, including releases\n"
            "  clean-release --implode --no-confirm   implode without asking (DANGEROUS)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_scope_arguments(parser)
    add_project_arguments(parser)
    add_hook_arguments(parser)
    add_output_arguments(parser)
    return parser


def _validate_and_transform_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate and transform parsed arguments."""
    if args.implode:
        args.scope = CleanupScope.ALL
    elif args.relfiles:
        args.scope = CleanupScope.RELFILES
    else:
        args.scope = CleanupScope.BUILD

    project_dirs = [path.expanduser() for path in args.project_dir]
    if args.apps_path is not None:
        apps_path = args.apps_path.expanduser()
        if not apps_path.is_dir():
            parser.error(f"--apps-path {apps_path} is not a directory.")
        discovered = discover_projects(apps_path)
        if not discovered:
            parser.error(f"No sub-projects with a .env file found under {apps_path}.")
        project_dirs.extend(discovered)
    for project_dir in project_dirs:
        if not project_dir.is_dir():
            parser.error(f"Project directory {project_dir} does not exist.")
    args.project_dirs = [path.resolve() for path in project_dirs] or [Path.cwd()]


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and process command-line arguments for the release cleanup CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_and_transform_args(args, parser)
    return args
