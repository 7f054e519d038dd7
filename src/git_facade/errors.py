"""Exceptions raised by the git wrapper."""

from collections.abc import Sequence


class GitError(Exception):
    """Base class for git wrapper failures."""


class NotFoundError(GitError):
    """Raised when a repository path is not an existing directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Directory "{path}" does not exist')


class CommandError(GitError):
    """Raised when a git command exits with a non-zero status.

    The message is the combined stdout/stderr of the failed command so the
    caller sees exactly what git reported.
    """

    def __init__(self, args: Sequence[str], exit_code: int, output: Sequence[str]):
        self.command_args = list(args)
        self.exit_code = exit_code
        self.output = list(output)
        message = "\n".join(self.output).strip()
        if not message:
            message = f"git {' '.join(self.command_args)} failed with exit status {exit_code}"
        super().__init__(message)
