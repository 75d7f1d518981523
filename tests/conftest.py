"""Shared pytest fixtures for release cleanup tests."""

from __future__ import annotations

import pytest

from tests.release_tree_test_utils import build_release_tree, make_context

CONFIG_KEYS = (
    "RELEASE_APP",
    "RELEASE_VERSION",
    "RELEASE_ENV",
    "RELEASE_BUILD_PATH",
    "RELEASE_DEST_PATH",
    "RELEASE_HOOKS",
    "MIX_ENV",
)


@pytest.fixture(autouse=True)
def clear_release_env(monkeypatch):
    """Keep the caller's shell configuration out of every test."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(name="project_dir")
def fixture_project_dir(tmp_path):
    """Provide an empty project directory."""
    project = tmp_path / "myapp"
    project.mkdir()
    return project


@pytest.fixture(name="prod_context")
def fixture_prod_context(project_dir):
    """ProjectContext for myapp 1.0.0 built in the prod environment."""
    return make_context(project_dir, build_env="prod")


@pytest.fixture(name="release_tree")
def fixture_release_tree(prod_context):
    """Release output for myapp 1.0.0 under _build/prod/rel."""
    return build_release_tree(prod_context)
