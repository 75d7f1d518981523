"""
Command-line interface and main entry point for release_cleanup.

Handles workflow orchestration and user interaction.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .args_parser import parse_args
from .cleaner import CleanupResult, CleanupScope
from .config import load_project_context
from .confirmation import confirm_destruction
from .errors import DeletionFailedError
from .hooks import load_hooks
from .umbrella import run_for_projects
from .workflow import RunState, run_cleanup

SUCCESS_MESSAGES = {
    CleanupScope.BUILD: "The release for {label} has been removed.",
    CleanupScope.RELFILES: "Release generation files for {label} were removed.",
    CleanupScope.ALL: "All release files for {label} were removed successfully!",
}

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_DELETION_ERRORS = 2


def _report_failures(result: CleanupResult) -> None:
    """Print every deletion failure in result."""
    for failure in result.failures:
        print(str(failure))
    print(f"Completed with {len(result.failures)} error(s); see log for details.")


def clean_project(project_dir: Path, args: argparse.Namespace, hook_args: list[str]) -> None:
    """Clean one project, raising the first error that should fail the run."""
    context = load_project_context(project_dir, env_file=args.env_file, extra_hooks=tuple(args.hook))
    hooks = load_hooks(context.hook_specs)
    confirm = None if args.no_confirm else confirm_destruction

    run = run_cleanup(args.scope, context, hooks=hooks, hook_args=hook_args, confirm=confirm)
    if run.state is RunState.ABORTED:
        return

    if not run.result.ok:
        _report_failures(run.result)
    if run.hook_error is not None:
        raise run.hook_error
    if run.result.error is not None:
        raise run.result.error
    print(SUCCESS_MESSAGES[args.scope].format(label=context.identity.label))


def _exit_code(error: Exception) -> int:
    if isinstance(error, DeletionFailedError):
        return EXIT_DELETION_ERRORS
    return EXIT_FAILURE


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the release cleanup CLI."""
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    if args.no_confirm and not args.implode:
        logging.debug("--no-confirm only applies to --implode; ignoring it")

    failures = run_for_projects(
        args.project_dirs,
        lambda project_dir: clean_project(project_dir, args, argv),
    )
    return max((_exit_code(failure.error) for failure in failures), default=EXIT_OK)
