"""
Project configuration for release_cleanup.

Resolves project identity, build paths and hook specs from the environment and
an optional project-local .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from .errors import ConfigurationError

DEFAULT_ENV_FILE = ".env"
DEFAULT_BUILD_ENV = "dev"
PROD_ENV = "prod"


@dataclass(frozen=True)
class ProjectIdentity:
    """Name and version of the project whose releases are cleaned."""

    name: str
    version: str

    @property
    def label(self) -> str:
        """Return the ``name-version`` label used in messages."""
        return f"{self.name}-{self.version}"


@dataclass(frozen=True)
class ProjectContext:
    """Everything one cleanup invocation needs to know about a project."""

    identity: ProjectIdentity
    build_root: Path
    build_env: str
    dest_root: Path
    hook_specs: tuple[str, ...] = ()

    @property
    def is_prod(self) -> bool:
        """Return True when the build environment is production."""
        return self.build_env == PROD_ENV


def _read_env_file(env_file: Path) -> dict[str, str]:
    """Return the values from env_file, or an empty dict if it does not exist."""
    if not env_file.is_file():
        return {}
    return {key: value for key, value in dotenv_values(env_file).items() if value is not None}


def _merge_sources(file_values: Mapping[str, str], environ: Mapping[str, str]) -> dict[str, str]:
    """Layer the process environment over values read from the .env file."""
    merged = dict(file_values)
    merged.update({key: value for key, value in environ.items() if value})
    return merged


def _require(values: Mapping[str, str], key: str) -> str:
    value = (values.get(key) or "").strip()
    if not value:
        raise ConfigurationError(f"{key} must be set in the environment or the project .env file")
    return value


def _absolute(path_text: str, base: Path) -> Path:
    path = Path(path_text).expanduser()
    if not path.is_absolute():
        path = base / path
    return path.resolve()


def parse_hook_specs(text: str | None) -> tuple[str, ...]:
    """Split a comma-separated ``module:attribute`` list into specs."""
    if not text:
        return ()
    return tuple(spec.strip() for spec in text.split(",") if spec.strip())


def load_project_context(
    project_dir: Path,
    *,
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
    extra_hooks: tuple[str, ...] = (),
) -> ProjectContext:
    """Build the ProjectContext for the project rooted at project_dir.

    Environment variables win over the .env file. Relative paths are resolved
    against project_dir so the returned build root is always absolute.

    Raises:
        ConfigurationError: If the project name or version is missing.
    """
    project_dir = project_dir.resolve()
    if env_file is None:
        env_file = project_dir / DEFAULT_ENV_FILE
    elif not env_file.is_absolute():
        env_file = project_dir / env_file
    values = _merge_sources(_read_env_file(env_file), os.environ if environ is None else environ)

    identity = ProjectIdentity(
        name=_require(values, "RELEASE_APP"),
        version=_require(values, "RELEASE_VERSION"),
    )
    build_env = values.get("RELEASE_ENV") or values.get("MIX_ENV") or DEFAULT_BUILD_ENV

    build_path = values.get("RELEASE_BUILD_PATH")
    if build_path:
        build_root = _absolute(build_path, project_dir)
    else:
        build_root = (project_dir / "_build" / build_env).resolve()

    dest_path = values.get("RELEASE_DEST_PATH")
    dest_root = _absolute(dest_path, project_dir) if dest_path else build_root / "rel"

    return ProjectContext(
        identity=identity,
        build_root=build_root,
        build_env=build_env,
        dest_root=dest_root,
        hook_specs=parse_hook_specs(values.get("RELEASE_HOOKS")) + tuple(extra_hooks),
    )
