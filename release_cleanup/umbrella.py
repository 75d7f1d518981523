"""
Run a cleanup once per sub-project of an umbrella checkout.

Each sub-project runs from its own working directory. A failing sub-project is
recorded and the next one still runs.
"""

from __future__ import annotations

import contextlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator

from .config import DEFAULT_ENV_FILE


@dataclass
class ProjectFailure:
    """A sub-project whose cleanup raised."""

    project_dir: Path
    error: Exception


@contextlib.contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Temporarily change the working directory to path."""
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


def discover_projects(apps_path: Path) -> list[Path]:
    """Return the sub-directories of apps_path that carry a .env file, sorted by name."""
    if not apps_path.is_dir():
        return []
    return sorted(
        child for child in apps_path.iterdir() if child.is_dir() and (child / DEFAULT_ENV_FILE).is_file()
    )


def run_for_projects(
    project_dirs: Iterable[Path],
    run_one: Callable[[Path], None],
) -> list[ProjectFailure]:
    """Call run_one inside each project directory, collecting failures."""
    failures: list[ProjectFailure] = []
    for project_dir in project_dirs:
        logging.debug("Cleaning project at %s", project_dir)
        try:
            with working_directory(project_dir):
                run_one(project_dir)
        except Exception as exc:  # noqa: BLE001
            logging.error("Cleanup of %s failed: %s", project_dir, exc)
            failures.append(ProjectFailure(project_dir, exc))
    return failures
