"""
Top-level cleanup run: confirmation, deletion, then hooks.

A declined confirmation ends the run before anything is deleted. Hooks run
after deletion even when some paths could not be removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .cleaner import CleanupResult, CleanupScope, clean
from .config import ProjectContext
from .confirmation import ConfirmFunc, confirm_destruction
from .errors import HookFailedError
from .hooks import CleanupHook, run_after_cleanup


class RunState(Enum):
    """Terminal state of a cleanup run."""

    DONE = "done"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass
class CleanupRun:
    """Outcome of run_cleanup."""

    state: RunState
    result: CleanupResult | None = None
    hook_error: HookFailedError | None = None


def run_cleanup(
    scope: CleanupScope,
    context: ProjectContext,
    *,
    hooks: Iterable[CleanupHook] = (),
    hook_args: Sequence[str] = (),
    confirm: ConfirmFunc | None = confirm_destruction,
) -> CleanupRun:
    """Run one cleanup for context.

    Args:
        scope: Which artifacts to remove
        context: Project being cleaned
        hooks: after_cleanup hooks, in the order they should run
        hook_args: Arguments handed to every hook
        confirm: Asked before the ALL scope; None skips the question
    """
    identity = context.identity
    logging.debug("Removing release files for %s...", identity.label)

    if scope is CleanupScope.ALL and confirm is not None and not confirm(identity.name):
        logging.debug("Implode of %s declined", identity.name)
        return CleanupRun(RunState.ABORTED)

    result = clean(scope, context)
    hook_error = run_after_cleanup(hooks, hook_args)
    if hook_error is not None:
        return CleanupRun(RunState.FAILED, result, hook_error)
    return CleanupRun(RunState.DONE, result)
