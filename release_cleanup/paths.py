"""
Artifact path resolution for release_cleanup.

Every location is derived from the project identity and build root; nothing is
cached between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .config import PROD_ENV, ProjectIdentity

SCAFFOLD_DIR_NAME = ".files"


@dataclass(frozen=True)
class ArtifactSet:
    """On-disk locations of every release artifact class for one project."""

    release_root: Path
    release: Path
    releases_index: Path
    start_data: Path
    lib_copy: Path
    relup: Path
    rel_scaffold: Path
    prod_build_root: Path | None

    @property
    def build_files(self) -> tuple[Path, ...]:
        """Paths removed by the build scope, in removal order."""
        return (self.release, self.releases_index, self.start_data, self.lib_copy, self.relup)

    def iter_build_dirs(self) -> Iterator[Path]:
        """Yield the children of the sibling prod build directory.

        Yields nothing in the prod environment or when the directory is missing.
        """
        if self.prod_build_root is None or not self.prod_build_root.is_dir():
            return
        yield from sorted(self.prod_build_root.iterdir())


def resolve(
    identity: ProjectIdentity,
    build_root: Path,
    *,
    build_env: str,
    dest_root: Path | None = None,
) -> ArtifactSet:
    """Compute the ArtifactSet for identity under build_root.

    Raises:
        ValueError: If the identity is incomplete or build_root is relative.
    """
    if not identity.name or not identity.version:
        raise ValueError("Project name and version must be non-empty")
    if not build_root.is_absolute():
        raise ValueError(f"Build root {build_root} must be an absolute path")
    if dest_root is None:
        dest_root = build_root / "rel"

    release_root = dest_root / identity.name
    releases = release_root / "releases"
    prod_build_root = None
    if build_env != PROD_ENV:
        prod_build_root = build_root.parent / PROD_ENV

    return ArtifactSet(
        release_root=release_root,
        release=releases / identity.version,
        releases_index=releases / "RELEASES",
        start_data=releases / "start_erl.data",
        lib_copy=release_root / "lib" / f"{identity.name}-{identity.version}",
        relup=release_root / "relup",
        rel_scaffold=dest_root / SCAFFOLD_DIR_NAME,
        prod_build_root=prod_build_root,
    )
