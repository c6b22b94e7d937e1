"""Load configuration from the environment and CLI overrides."""

from __future__ import annotations

import logging
import os

from .models import Config

DEFAULT_BASE_URL = "https://sourcegraph.com"
DEFAULT_GIT_EXECUTABLE = "git"

URL_ENV = "SOURCEGRAPH_URL"
GIT_ENV = "SOURCEGRAPH_GIT_EXECUTABLE"


def load_config(base_url: str | None = None, git_executable: str | None = None) -> Config:
    """Build a Config, preferring explicit values over the environment.

    An environment variable that is set but empty is kept as-is so the
    commands can report the misconfiguration instead of silently using
    the default.
    """

    url = base_url if base_url is not None else os.environ.get(URL_ENV, DEFAULT_BASE_URL)
    git = git_executable or os.environ.get(GIT_ENV) or DEFAULT_GIT_EXECUTABLE
    return Config(base_url=url.strip(), git_executable=git)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
