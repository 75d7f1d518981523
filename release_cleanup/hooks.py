"""
Post-cleanup extension hooks.

Hooks run in registration order. The first failure is logged and returned and
no later hook runs.
"""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points
from typing import Any, Iterable, Protocol, Sequence

from .errors import HookFailedError, HookLoadError

ENTRY_POINT_GROUP = "release_cleanup.hooks"


class CleanupHook(Protocol):
    """Extension invoked after release files are removed."""

    def after_cleanup(self, args: Sequence[str]) -> None: ...


def hook_name(hook: Any) -> str:
    """Return a human-readable name identifying hook."""
    name = getattr(hook, "name", None)
    if isinstance(name, str) and name:
        return name
    module_name = getattr(hook, "__name__", None)
    if isinstance(module_name, str):
        return module_name
    hook_type = type(hook)
    return f"{hook_type.__module__}.{hook_type.__qualname__}"


def run_after_cleanup(hooks: Iterable[CleanupHook], args: Sequence[str]) -> HookFailedError | None:
    """Invoke after_cleanup on each hook, stopping at the first failure.

    Returns:
        HookFailedError naming the failing hook, or None when every hook ran.
    """
    for hook in hooks:
        name = hook_name(hook)
        logging.debug("Running after_cleanup hook %s", name)
        try:
            hook.after_cleanup(args)
        except Exception as exc:  # noqa: BLE001
            logging.exception("Failed to execute after_cleanup hook for %s!", name)
            return HookFailedError(name, exc)
    return None


def _resolve_spec(spec: str) -> CleanupHook:
    module_name, sep, attr_path = spec.partition(":")
    if not module_name:
        raise HookLoadError(f"Invalid hook spec {spec!r}; expected module:attribute")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise HookLoadError(f"Cannot import hook module {module_name!r}: {exc}") from exc
    if sep:
        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as exc:
                raise HookLoadError(f"Hook {spec!r} not found: {exc}") from exc
    return _as_hook(target, spec)


def _as_hook(target: Any, label: str) -> CleanupHook:
    if isinstance(target, type):
        target = target()
    if not callable(getattr(target, "after_cleanup", None)):
        raise HookLoadError(f"Hook {label!r} does not define after_cleanup")
    return target


def _entry_point_hooks() -> list[CleanupHook]:
    hooks = []
    for entry in sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name):
        try:
            target = entry.load()
        except ImportError as exc:
            raise HookLoadError(f"Cannot load hook entry point {entry.name!r}: {exc}") from exc
        hooks.append(_as_hook(target, entry.name))
    return hooks


def load_hooks(specs: Iterable[str], *, include_entry_points: bool = True) -> list[CleanupHook]:
    """Load hooks from ``module:attribute`` specs followed by installed entry points.

    Raises:
        HookLoadError: If a spec cannot be imported or lacks after_cleanup.
    """
    hooks = [_resolve_spec(spec) for spec in specs]
    if include_entry_points:
        hooks.extend(_entry_point_hooks())
    return hooks
