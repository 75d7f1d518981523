"""
Scope-based deletion of release artifacts.

Each path is removed independently; failures are collected and the first one
is reported once every path in the scope has been attempted.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import ProjectContext
from .errors import DeletionFailedError
from .paths import ArtifactSet, resolve


class CleanupScope(Enum):
    """Breadth of a cleanup run."""

    BUILD = "build"
    RELFILES = "relfiles"
    ALL = "all"


@dataclass
class CleanupResult:
    """Paths removed by a cleanup run and the failures met along the way."""

    removed: list[Path] = field(default_factory=list)
    failures: list[DeletionFailedError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every path was removed."""
        return not self.failures

    @property
    def error(self) -> DeletionFailedError | None:
        """Return the first deletion failure, if any."""
        return self.failures[0] if self.failures else None


def remove_path(path: Path, result: CleanupResult) -> None:
    """Remove path if it exists, recording the outcome in result."""
    try:
        if not path.exists() and not path.is_symlink():
            return
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except (OSError, shutil.Error) as exc:
        logging.exception("Failed to delete %s", path)
        result.failures.append(DeletionFailedError(path, exc))
    else:
        logging.info("Deleted %s", path)
        result.removed.append(path)


def _clean_build(artifacts: ArtifactSet, result: CleanupResult) -> None:
    for path in artifacts.build_files:
        remove_path(path, result)
    try:
        build_dirs = list(artifacts.iter_build_dirs())
    except OSError as exc:
        logging.exception("Failed to list %s", artifacts.prod_build_root)
        result.failures.append(DeletionFailedError(artifacts.prod_build_root, exc))
        return
    for build_dir in build_dirs:
        remove_path(build_dir, result)


def clean(scope: CleanupScope, context: ProjectContext) -> CleanupResult:
    """Delete the artifacts covered by scope for the project in context."""
    artifacts = resolve(
        context.identity,
        context.build_root,
        build_env=context.build_env,
        dest_root=context.dest_root,
    )
    result = CleanupResult()
    if scope is CleanupScope.RELFILES:
        remove_path(artifacts.rel_scaffold, result)
        return result

    _clean_build(artifacts, result)
    if scope is CleanupScope.ALL:
        remove_path(artifacts.release_root, result)
    return result
