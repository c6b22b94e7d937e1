"""Typer CLI entrypoint for sourcegraph-open."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .actions import default_search_query, open_in_browser, require_base_url, search
from .buffer import region_from_offsets, region_from_positions
from .config import configure_logging, load_config
from .exceptions import SourcegraphError
from .interactive import InquirerPrompts
from .models import Config, Region

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Open files and searches on a Sourcegraph instance.",
)


@dataclass(slots=True)
class AppState:
    config: Config
    console: Console
    verbose: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sourcegraph-open {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="Base URL of the Sourcegraph instance (defaults to $SOURCEGRAPH_URL).",
    ),
    git_executable: Optional[str] = typer.Option(
        None,
        "--git",
        help="Git executable to run (defaults to $SOURCEGRAPH_GIT_EXECUTABLE or 'git').",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the sourcegraph-open version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    ctx.obj = AppState(
        config=load_config(url, git_executable),
        console=Console(stderr=True, soft_wrap=True),
        verbose=verbose,
    )


def _require_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if not isinstance(state, AppState):  # pragma: no cover
        raise typer.Exit(1)
    return state


def parse_position(value: str) -> tuple[int, int]:
    """Parse ``LINE`` or ``LINE:COL`` (both 1-based)."""

    line, _, col = value.partition(":")
    try:
        return int(line), int(col) if col else 1
    except ValueError as exc:
        raise typer.BadParameter(f"Expected LINE or LINE:COL, got {value!r}.") from exc


def parse_offsets(value: str) -> tuple[int, int]:
    """Parse ``START:END`` character offsets; a bare ``N`` means a point."""

    start, sep, end = value.partition(":")
    try:
        first = int(start)
        return first, int(end) if sep else first
    except ValueError as exc:
        raise typer.BadParameter(f"Expected START:END offsets, got {value!r}.") from exc


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc


def _build_region(file: Path, line: Optional[str], end: Optional[str], offsets: Optional[str]) -> Region:
    if offsets is not None:
        if line is not None or end is not None:
            raise typer.BadParameter("--offsets cannot be combined with --line/--end.")
        start_offset, end_offset = parse_offsets(offsets)
        return region_from_offsets(_read_text(file), start_offset, end_offset)
    start_line, start_col = parse_position(line) if line else (1, 1)
    end_line, end_col = parse_position(end) if end else (None, None)
    try:
        return region_from_positions(start_line, start_col, end_line, end_col)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(url: str, print_only: bool) -> None:
    if print_only:
        typer.echo(url)
    else:
        typer.launch(url)


def _fail(state: AppState, exc: SourcegraphError) -> None:
    state.console.print(f"[red]Error:[/red] {escape(str(exc))}")
    if state.verbose and exc.__cause__ is not None:
        state.console.print(f"Caused by: {escape(str(exc.__cause__))}")
    raise typer.Exit(1) from exc


@app.command("open")
def open_(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File to open on Sourcegraph.", dir_okay=False),
    line: Optional[str] = typer.Option(None, "--line", "-l", help="Start position as LINE[:COL], 1-based."),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="End position as LINE[:COL], 1-based."),
    offsets: Optional[str] = typer.Option(
        None,
        "--offsets",
        help="Selection as START:END character offsets into the file.",
    ),
    cwd: Optional[Path] = typer.Option(
        None,
        "--cwd",
        help="Directory used to locate the repository (defaults to the file's directory).",
        file_okay=False,
    ),
    print_only: bool = typer.Option(False, "--print", help="Print the URL instead of opening a browser."),
) -> None:
    """Open FILE, optionally at a position or selection, in the browser."""

    state = _require_state(ctx)
    file = file.expanduser().absolute()
    try:
        require_base_url(state.config)
        region = _build_region(file, line, end, offsets) if file.is_file() else Region.point(0, 0)
        open_in_browser(
            state.config,
            file,
            region,
            cwd=cwd,
            prompts=InquirerPrompts(),
            opener=lambda url: _emit(url, print_only),
        )
    except SourcegraphError as exc:
        _fail(state, exc)


@app.command("search")
def search_(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Literal search query. Prompted for when omitted."),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="File whose selection or symbol provides the default query.",
        dir_okay=False,
    ),
    offsets: Optional[str] = typer.Option(
        None,
        "--offsets",
        help="Selection or cursor in --file as START:END character offsets.",
    ),
    print_only: bool = typer.Option(False, "--print", help="Print the URL instead of opening a browser."),
) -> None:
    """Search Sourcegraph for a literal query."""

    state = _require_state(ctx)
    try:
        require_base_url(state.config)
        if query is None:
            default = ""
            if file is not None and offsets is not None:
                start, stop = parse_offsets(offsets)
                default = default_search_query(_read_text(file), start, stop)
            query = InquirerPrompts().read_query(default)
        search(state.config, query, opener=lambda url: _emit(url, print_only))
    except SourcegraphError as exc:
        _fail(state, exc)


if __name__ == "__main__":
    app()
