#!/usr/bin/env python3
"""
Remove generated release files for the project in the current directory.

Pass --implode to remove every release, --no-confirm to skip the prompt.

This is a thin wrapper around the release_cleanup package.
"""
from __future__ import annotations

from release_cleanup.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
