"""Command executor capability for running git.

``Git`` never calls ``subprocess`` directly; it hands an argument vector to a
``CommandExecutor``. Tests substitute an executor that returns canned output
so parsing can be exercised without a real working copy.
"""

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from git_facade.common.constants import COMMAND_NOT_FOUND_EXIT_CODE
from git_facade.common.env import env
from git_facade.common.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Merged output lines and exit status of one git invocation."""

    lines: list[str] = field(default_factory=list)
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandExecutor(Protocol):
    """Anything able to run a git subcommand inside a working directory."""

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult: ...


class SubprocessExecutor:
    """Run git as a child process, stderr merged into stdout.

    Args:
        executable: git executable name or path (default: GIT_EXECUTABLE or 'git')
        locale: LC_ALL value forced on POSIX hosts (default: GIT_LOCALE)
    """

    def __init__(self, executable: str | None = None, locale: str | None = None):
        self.executable = executable or env.git_executable()
        self.locale = locale or env.git_locale()

    def _environment(self) -> dict[str, str]:
        child_env = dict(os.environ)
        if os.name == "posix":
            # Stable dates and messages regardless of the host locale
            child_env["LC_ALL"] = self.locale
        return child_env

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        cmd = [self.executable, *args]
        logger.debug(f"Running {' '.join(cmd)} in {cwd}")

        try:
            completed = subprocess.run(
                cmd,
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=self._environment(),
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(
                lines=[f"{self.executable}: command not found"],
                exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
            )

        output = completed.stdout.decode("utf-8", errors="replace")
        return CommandResult(lines=output.splitlines(), exit_code=completed.returncode)
