"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Protocol, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import UserAbort, UserInputError


class PromptProvider(Protocol):
    """The prompts the resolution logic may need from a user."""

    def choose_remote(self, remotes: Sequence[str]) -> str: ...

    def read_query(self, default: str) -> str: ...


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise UserInputError(
            "Interactive mode requires a TTY. Provide the missing arguments to run non-interactively."
        )


def select(message: str, choices: Sequence[Choice | str]) -> str:
    _ensure_tty()
    try:
        result = inquirer.select(message=message, choices=list(choices), mandatory=True).execute()
    except KeyboardInterrupt as exc:
        raise UserAbort("Selection cancelled.") from exc
    if result is None:
        raise UserAbort("Selection cancelled.")
    return str(result)


def text_input(message: str, default: str = "") -> str:
    _ensure_tty()
    try:
        result = inquirer.text(message=message, default=default).execute()
    except KeyboardInterrupt as exc:
        raise UserAbort("Input cancelled.") from exc
    if result is None:
        raise UserAbort("Input cancelled.")
    return result.strip()


def build_choices(options: Sequence[str]) -> list[Choice]:
    return [Choice(value=item, name=item) for item in options if item]


class InquirerPrompts:
    """PromptProvider backed by terminal prompts."""

    def choose_remote(self, remotes: Sequence[str]) -> str:
        return select("Select remote", build_choices(remotes))

    def read_query(self, default: str) -> str:
        return text_input("Search for", default=default)
