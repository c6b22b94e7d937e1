"""Resolve the upstream remote and its URL for a working copy."""

from __future__ import annotations

import logging
from pathlib import Path

from . import git
from .exceptions import DetachedHeadError, NoRemotesError, SourcegraphError, UserInputError
from .interactive import PromptProvider
from .models import Config

logger = logging.getLogger(__name__)

DETACHED_HEAD = "HEAD"


def _caused_by_no_remotes(exc: BaseException) -> bool:
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, NoRemotesError):
            return True
        current = current.__cause__
    return False


def remote_from_upstream(upstream: str, branch: str) -> str | None:
    """Extract the remote name from a ``<remote>/<branch>`` string.

    The first occurrence of ``branch`` marks the start of the branch part;
    anything before it, minus the separator, is the remote.
    """

    index = upstream.find(branch) if branch else -1
    if index < 0:
        return None
    remote = upstream[:index].rstrip("/")
    return remote or None


def choose_remote(repo_root: Path, config: Config, prompts: PromptProvider) -> str:
    remotes = git.get_remotes(repo_root, executable=config.git_executable)
    selection = prompts.choose_remote(sorted(remotes))
    if selection not in remotes:
        raise UserInputError(f"'{selection}' is not a configured remote.")
    return selection


def resolve_upstream_remote(
    branch: str,
    repo_root: Path,
    config: Config,
    prompts: PromptProvider,
) -> str:
    try:
        upstream = git.get_upstream_remote_and_branch(repo_root, executable=config.git_executable)
    except SourcegraphError as exc:
        if _caused_by_no_remotes(exc):
            raise
        logger.debug("No upstream configured for %s, asking for a remote: %s", branch, exc)
        return choose_remote(repo_root, config, prompts)
    remote = remote_from_upstream(upstream, branch)
    if remote is None:
        logger.debug("Upstream %s does not track %s, asking for a remote", upstream, branch)
        return choose_remote(repo_root, config, prompts)
    return remote


def get_branch_and_remote_url(
    repo_root: Path,
    config: Config,
    prompts: PromptProvider,
) -> tuple[str, str]:
    branch = git.get_local_branch(repo_root, executable=config.git_executable)
    if branch == DETACHED_HEAD:
        raise DetachedHeadError("HEAD is detached. Check out a branch to open it on Sourcegraph.")
    remote = resolve_upstream_remote(branch, repo_root, config, prompts)
    url = git.get_remote_url(remote, repo_root, executable=config.git_executable)
    logger.debug("Resolved branch %s on remote %s (%s)", branch, remote, url)
    return branch, url


__all__ = [
    "remote_from_upstream",
    "choose_remote",
    "resolve_upstream_remote",
    "get_branch_and_remote_url",
]
