"""
Release cleanup package.

Remove generated release files for a project, optionally wiping every release,
and run after_cleanup hooks once the files are gone.
"""

from . import args_parser, cleaner, config, confirmation, errors, hooks, paths, umbrella, workflow
from .cleaner import CleanupResult, CleanupScope, clean
from .config import ProjectContext, ProjectIdentity, load_project_context
from .confirmation import confirm_destruction
from .errors import (
    CleanupError,
    ConfigurationError,
    DeletionFailedError,
    HookFailedError,
    HookLoadError,
)
from .hooks import CleanupHook, load_hooks, run_after_cleanup
from .paths import ArtifactSet, resolve
from .workflow import CleanupRun, RunState, run_cleanup

__all__ = [
    "ArtifactSet",
    "CleanupError",
    "CleanupHook",
    "CleanupResult",
    "CleanupRun",
    "CleanupScope",
    "ConfigurationError",
    "DeletionFailedError",
    "HookFailedError",
    "HookLoadError",
    "ProjectContext",
    "ProjectIdentity",
    "RunState",
    "args_parser",
    "clean",
    "cleaner",
    "config",
    "confirm_destruction",
    "confirmation",
    "errors",
    "hooks",
    "load_hooks",
    "load_project_context",
    "paths",
    "resolve",
    "run_after_cleanup",
    "run_cleanup",
    "umbrella",
    "workflow",
]
