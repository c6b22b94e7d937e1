"""Custom error hierarchy for sourcegraph-open."""

from __future__ import annotations


class SourcegraphError(RuntimeError):
    """Base error for the CLI."""


class CommandError(SourcegraphError):
    """Raised when an underlying git command exits nonzero."""

    def __init__(
        self,
        command: str,
        args: list[str],
        returncode: int,
        output: str | None = None,
    ):
        self.command = command
        self.arguments = list(args)
        self.returncode = returncode
        self.output = output or ""
        message = f"git command failed (exit {returncode}): {' '.join([command, *self.arguments])}"
        if self.output.strip():
            message = f"{message}\n{self.output.strip()}"
        super().__init__(message)


class BranchResolutionError(SourcegraphError):
    """Raised when the checked-out branch cannot be determined."""


class DetachedHeadError(BranchResolutionError):
    """Raised when HEAD does not point at a branch."""


class RemoteUrlError(SourcegraphError):
    """Raised when a remote's URL cannot be read."""


class RemoteListError(SourcegraphError):
    """Raised when the configured remotes cannot be listed."""


class NoRemotesError(SourcegraphError):
    """Raised when the repository has no remotes configured."""


class UserInputError(SourcegraphError):
    """Raised for misconfiguration or invalid input from the user."""


class UserAbort(SourcegraphError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "SourcegraphError",
    "CommandError",
    "BranchResolutionError",
    "DetachedHeadError",
    "RemoteUrlError",
    "RemoteListError",
    "NoRemotesError",
    "UserInputError",
    "UserAbort",
]
