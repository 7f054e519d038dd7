"""Thin wrapper around the git command-line tool."""

from .errors import CommandError, GitError, NotFoundError
from .executor import CommandExecutor, CommandResult, SubprocessExecutor
from .models import Revision, SortOrder
from .repository import Git

__all__ = [
    "CommandError",
    "CommandExecutor",
    "CommandResult",
    "Git",
    "GitError",
    "NotFoundError",
    "Revision",
    "SortOrder",
    "SubprocessExecutor",
]
