"""Thin wrappers around the git commands used to resolve remotes."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import (
    BranchResolutionError,
    CommandError,
    NoRemotesError,
    RemoteListError,
    RemoteUrlError,
)

logger = logging.getLogger(__name__)


def run_git(
    args: Sequence[str],
    *,
    cwd: Path,
    executable: str = "git",
) -> str:
    """Run git in ``cwd`` and return its merged output minus one trailing newline."""

    command = [executable, *args]
    logger.debug("Running command in %s: %s", cwd, " ".join(command))
    try:
        proc = subprocess.run(
            command,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise CommandError(executable, list(args), 127, str(exc)) from exc
    output = proc.stdout or ""
    if proc.returncode != 0:
        raise CommandError(executable, list(args), proc.returncode, output)
    if output.endswith("\n"):
        output = output[:-1]
    return output


def get_local_branch(repo_root: Path, *, executable: str = "git") -> str:
    try:
        return run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root, executable=executable)
    except CommandError as exc:
        raise BranchResolutionError(f"Unable to determine the current branch in {repo_root}.") from exc


def get_remotes(repo_root: Path, *, executable: str = "git") -> set[str]:
    try:
        output = run_git(["remote"], cwd=repo_root, executable=executable)
    except CommandError as exc:
        raise RemoteListError(f"Unable to list the remotes in {repo_root}.") from exc
    remotes = set(output.split())
    if not remotes:
        raise NoRemotesError(f"No git remotes are configured in {repo_root}.")
    return remotes


def get_remote_url(remote: str, repo_root: Path, *, executable: str = "git") -> str:
    try:
        return run_git(["remote", "get-url", remote], cwd=repo_root, executable=executable)
    except CommandError as exc:
        raise RemoteUrlError(f"Unable to read the URL of remote '{remote}'.") from exc


def get_upstream_remote_and_branch(repo_root: Path, *, executable: str = "git") -> str:
    """Return the upstream of HEAD as ``<remote>/<branch>``."""

    return run_git(
        ["rev-parse", "--abbrev-ref", "HEAD@{upstream}"],
        cwd=repo_root,
        executable=executable,
    )


__all__ = [
    "run_git",
    "get_local_branch",
    "get_remotes",
    "get_remote_url",
    "get_upstream_remote_and_branch",
]
