"""Exception types shared across release_cleanup."""

from __future__ import annotations

from pathlib import Path


class CleanupError(RuntimeError):
    """Base class for release cleanup failures."""


class ConfigurationError(CleanupError):
    """Raised when required project configuration is missing."""


class DeletionFailedError(CleanupError):
    """Raised when an artifact path could not be removed."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"Failed to remove {path}: {cause}")
        self.path = path
        self.cause = cause


class HookLoadError(CleanupError):
    """Raised when a configured hook cannot be imported."""


class HookFailedError(CleanupError):
    """Raised when an after_cleanup hook fails."""

    def __init__(self, hook_name: str, cause: BaseException):
        super().__init__(f"after_cleanup hook {hook_name} failed: {cause}")
        self.hook_name = hook_name
        self.cause = cause
