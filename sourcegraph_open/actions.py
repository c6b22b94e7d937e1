"""The user-facing commands: open a location and run a search."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from .buffer import selected_text, symbol_at
from .exceptions import UserInputError
from .fs import locate_repo_root
from .interactive import PromptProvider
from .links import build_editor_url, build_search_url, repo_relative_path
from .models import Config, Region
from .remotes import get_branch_and_remote_url

logger = logging.getLogger(__name__)

UrlOpener = Callable[[str], object]


def require_base_url(config: Config) -> str:
    if not config.base_url:
        raise UserInputError(
            "The Sourcegraph URL is empty. Set SOURCEGRAPH_URL or pass --url."
        )
    return config.base_url


def require_git(config: Config) -> str:
    resolved = shutil.which(config.git_executable)
    if resolved is None:
        raise UserInputError(f"Required binary not found in PATH: {config.git_executable}")
    return resolved


def open_in_browser(
    config: Config,
    file_path: Path | None,
    region: Region,
    *,
    cwd: Path | None = None,
    prompts: PromptProvider,
    opener: UrlOpener,
) -> str:
    """Open ``region`` of ``file_path`` on Sourcegraph and return the URL used."""

    require_git(config)
    base_url = require_base_url(config)
    if file_path is None or not file_path.is_file():
        raise UserInputError("The current buffer is not visiting a file.")
    workdir = cwd or file_path.parent
    repo_root = locate_repo_root(workdir)
    if repo_root is None:
        raise UserInputError(f"{workdir} is not inside a git repository.")

    branch, remote_url = get_branch_and_remote_url(repo_root, config, prompts)
    if not branch:
        raise UserInputError("Could not determine the current branch.")
    if not remote_url:
        raise UserInputError("Could not determine the remote URL.")

    url = build_editor_url(
        base_url,
        remote_url,
        branch,
        repo_relative_path(file_path, repo_root),
        region,
    )
    logger.debug("Opening %s", url)
    opener(url)
    return url


def default_search_query(text: str, start: int, end: int) -> str:
    """Prefer the selection, then the symbol at the cursor."""

    if start != end:
        selection = selected_text(text, start, end)
        if selection:
            return selection
    return symbol_at(text, start)


def search(config: Config, query: str, *, opener: UrlOpener) -> str:
    url = build_search_url(require_base_url(config), query)
    logger.debug("Opening %s", url)
    opener(url)
    return url
