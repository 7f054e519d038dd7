"""Repository handle wrapping the git command-line tool."""

from collections.abc import Sequence
from pathlib import Path

from git_facade.common.logger import get_logger

from .errors import CommandError, NotFoundError
from .executor import CommandExecutor, SubprocessExecutor
from .log_parser import build_log_args, parse_revisions
from .models import Revision, SortOrder
from .status import is_clean_status_output

logger = get_logger(__name__)


class Git:
    """Run git commands against one working copy.

    The directory must exist when the handle is created. Whether it is
    actually a git repository is only discovered by the first command that
    fails.

    Args:
        repository_path: Path to the working copy
        executor: Command executor (default: SubprocessExecutor)

    Raises:
        NotFoundError: If repository_path is not an existing directory
    """

    def __init__(self, repository_path: str | Path, executor: CommandExecutor | None = None):
        path = Path(repository_path)
        if not path.is_dir():
            raise NotFoundError(str(repository_path))

        self._repository_path = path.resolve()
        self.executor = executor or SubprocessExecutor()

    @property
    def repository_path(self) -> Path:
        return self._repository_path

    def execute(self, args: Sequence[str]) -> list[str]:
        """Run ``git <args>`` in the working copy and return its output lines.

        Raises:
            CommandError: If git exits with a non-zero status
        """
        result = self.executor.run(list(args), self._repository_path)
        if not result.ok:
            logger.debug(f"git {' '.join(args)} exited with status {result.exit_code}")
            raise CommandError(args, result.exit_code, result.lines)
        return list(result.lines)

    def checkout(self, revision: str) -> None:
        """Force-checkout ``revision``, discarding local modifications."""
        self.execute(["checkout", "--force", "--quiet", revision])

    def get_current_branch(self) -> str:
        """Return the short name of the checked-out branch.

        Raises:
            CommandError: If HEAD is detached or the query fails
        """
        args = ["symbolic-ref", "--short", "HEAD"]
        output = self.execute(args)
        if not output:
            raise CommandError(args, 0, ["git symbolic-ref printed no branch name"])
        return output[0]

    def get_diff(self, from_ref: str, to_ref: str) -> str:
        """Return the textual diff between two references ("" if identical)."""
        output = self.execute(["diff", "--no-ext-diff", from_ref, to_ref])
        return "\n".join(output)

    def get_revisions(
        self,
        order: SortOrder | str = SortOrder.DESC,
        count: int | None = None,
    ) -> list[Revision]:
        """Return non-merge commits in date order.

        Args:
            order: DESC for newest first, ASC for oldest first
            count: Number of commits to return; None or 0 returns all. With
                ASC this returns the oldest ``count`` commits.

        Raises:
            CommandError: If git log fails
            ValueError: If order is unknown or count is negative
        """
        args, stop_at_count = build_log_args(order, count)
        try:
            output = self.execute(args)
        except CommandError:
            # git log refuses to run on a branch with no commits yet
            if self._has_unborn_head():
                logger.debug("HEAD has no commits yet, history is empty")
                return []
            raise
        revisions = parse_revisions(output, count=count, stop_at_count=stop_at_count)
        logger.debug(f"Parsed {len(revisions)} revisions from {len(output)} lines")
        return revisions

    def _has_unborn_head(self) -> bool:
        """True if this is a git repository whose HEAD points at no commit."""
        if not self.executor.run(["rev-parse", "--git-dir"], self._repository_path).ok:
            return False
        head = self.executor.run(["rev-parse", "--verify", "--quiet", "HEAD"], self._repository_path)
        return not head.ok

    def is_working_copy_clean(self) -> bool:
        """Return True if ``git status`` reports nothing to commit."""
        return is_clean_status_output(self.execute(["status"]))
