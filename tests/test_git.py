"""Tests for the git command wrappers."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest import mock

from sourcegraph_open import git
from sourcegraph_open.exceptions import (
    BranchResolutionError,
    CommandError,
    NoRemotesError,
    RemoteListError,
    RemoteUrlError,
)

REPO = Path("/tmp/repo")


def _completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout)


class RunGitTests(unittest.TestCase):
    def test_strips_exactly_one_trailing_newline(self) -> None:
        with mock.patch.object(git.subprocess, "run", return_value=_completed("  value\n\n")) as run:
            output = git.run_git(["status"], cwd=REPO, executable="/usr/bin/git")

        self.assertEqual(output, "  value\n")
        command = run.call_args.args[0]
        self.assertEqual(command, ["/usr/bin/git", "status"])
        self.assertEqual(run.call_args.kwargs["cwd"], str(REPO))
        self.assertEqual(run.call_args.kwargs["stderr"], subprocess.STDOUT)

    def test_nonzero_exit_raises_command_error(self) -> None:
        with mock.patch.object(git.subprocess, "run", return_value=_completed("fatal: nope\n", 128)):
            with self.assertRaises(CommandError) as ctx:
                git.run_git(["remote", "get-url", "origin"], cwd=REPO)

        err = ctx.exception
        self.assertEqual(err.command, "git")
        self.assertEqual(err.arguments, ["remote", "get-url", "origin"])
        self.assertEqual(err.returncode, 128)
        self.assertEqual(err.output, "fatal: nope\n")
        self.assertIn("fatal: nope", str(err))

    def test_undecodable_output_is_replaced(self) -> None:
        with mock.patch.object(git.subprocess, "run", return_value=_completed("https://h/caf\ufffd.git\n")) as run:
            output = git.run_git(["remote", "get-url", "origin"], cwd=REPO)

        self.assertEqual(output, "https://h/caf\ufffd.git")
        self.assertEqual(run.call_args.kwargs["errors"], "replace")

    def test_missing_executable_raises_command_error(self) -> None:
        with mock.patch.object(git.subprocess, "run", side_effect=FileNotFoundError("no such file")):
            with self.assertRaises(CommandError) as ctx:
                git.run_git(["remote"], cwd=REPO, executable="not-git")

        self.assertEqual(ctx.exception.returncode, 127)


class ResolverCommandTests(unittest.TestCase):
    def test_local_branch(self) -> None:
        with mock.patch.object(git, "run_git", return_value="main") as run:
            self.assertEqual(git.get_local_branch(REPO), "main")
        self.assertEqual(run.call_args.args[0], ["rev-parse", "--abbrev-ref", "HEAD"])

    def test_local_branch_wraps_command_error(self) -> None:
        failure = CommandError("git", ["rev-parse"], 128, "fatal")
        with mock.patch.object(git, "run_git", side_effect=failure):
            with self.assertRaises(BranchResolutionError) as ctx:
                git.get_local_branch(REPO)
        self.assertIs(ctx.exception.__cause__, failure)

    def test_remotes_split_on_whitespace(self) -> None:
        with mock.patch.object(git, "run_git", return_value="origin\nupstream\n  fork"):
            self.assertEqual(git.get_remotes(REPO), {"origin", "upstream", "fork"})

    def test_no_remotes(self) -> None:
        with mock.patch.object(git, "run_git", return_value=""):
            with self.assertRaises(NoRemotesError):
                git.get_remotes(REPO)

    def test_remote_list_failure_is_wrapped(self) -> None:
        failure = CommandError("git", ["remote"], 128, "fatal: not a git repository")
        with mock.patch.object(git, "run_git", side_effect=failure):
            with self.assertRaises(RemoteListError) as ctx:
                git.get_remotes(REPO)
        self.assertIs(ctx.exception.__cause__, failure)

    def test_remote_url(self) -> None:
        with mock.patch.object(git, "run_git", return_value="https://example.com/r.git") as run:
            self.assertEqual(git.get_remote_url("origin", REPO), "https://example.com/r.git")
        self.assertEqual(run.call_args.args[0], ["remote", "get-url", "origin"])

    def test_remote_url_wraps_command_error(self) -> None:
        with mock.patch.object(git, "run_git", side_effect=CommandError("git", [], 2, "")):
            with self.assertRaises(RemoteUrlError):
                git.get_remote_url("missing", REPO)

    def test_upstream_query(self) -> None:
        with mock.patch.object(git, "run_git", return_value="origin/main") as run:
            self.assertEqual(git.get_upstream_remote_and_branch(REPO), "origin/main")
        self.assertEqual(run.call_args.args[0], ["rev-parse", "--abbrev-ref", "HEAD@{upstream}"])


if __name__ == "__main__":
    unittest.main()
