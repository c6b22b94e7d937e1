"""Filesystem helpers for sourcegraph-open."""

from __future__ import annotations

from pathlib import Path

GIT_MARKER = ".git"


def locate_repo_root(path: Path, marker: str = GIT_MARKER) -> Path | None:
    """Return the nearest ancestor of ``path`` containing ``marker``, if any."""

    current = path.expanduser().absolute()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / marker).exists():
            return candidate
    return None
