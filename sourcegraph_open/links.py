"""Format Sourcegraph deep links."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from requests.utils import requote_uri

from .exceptions import UserInputError
from .models import Region

EDITOR_NAME = "Emacs"
EDITOR_PROTOCOL_VERSION = "1"


def _encode(value: object) -> str:
    return quote(str(value), safe="")


def _join(base_url: str, path: str, params: list[tuple[str, object]]) -> str:
    query = "&".join(f"{key}={_encode(value)}" for key, value in params)
    return requote_uri(f"{base_url.rstrip('/')}{path}?{query}")


def build_editor_url(
    base_url: str,
    remote_url: str,
    branch: str,
    file_path: str,
    region: Region,
) -> str:
    """Return the ``/-/editor`` link that opens ``file_path`` at ``region``."""

    return _join(
        base_url,
        "/-/editor",
        [
            ("remote_url", remote_url),
            ("branch", branch),
            ("file", file_path),
            ("editor", EDITOR_NAME),
            ("version", EDITOR_PROTOCOL_VERSION),
            ("start_row", region.start_line),
            ("start_col", region.start_col),
            ("end_row", region.end_line),
            ("end_col", region.end_col),
        ],
    )


def build_search_url(base_url: str, query: str) -> str:
    return _join(base_url, "/search", [("patternType", "literal"), ("q", query)])


def repo_relative_path(file_path: Path, repo_root: Path) -> str:
    try:
        relative = file_path.absolute().relative_to(repo_root.absolute())
    except ValueError:
        try:
            relative = file_path.resolve().relative_to(repo_root.resolve())
        except ValueError as exc:
            raise UserInputError(f"{file_path} is not inside the repository at {repo_root}.") from exc
    return relative.as_posix()
