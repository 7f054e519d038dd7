"""Parser for ``git log --format=medium`` output.

The medium format renders each commit as a header block followed by an
indented message::

    commit 3f1c2e...
    Author: Jane Doe <jane@example.com>
    Date:   Mon Jan 2 15:04:05 2024 +0000

        Subject line

        Body paragraph

Records are assembled in a single pass. A record is only emitted once the
next ``commit`` line or the end of input is reached.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from git_facade.common.constants import GIT_MONTH_NAMES, GIT_NUMERIC_DATE_FORMAT, GIT_WEEKDAY_NAMES
from git_facade.common.logger import get_logger

from .models import Revision, SortOrder

logger = get_logger(__name__)

LOG_BASE_ARGS = ("log", "--no-merges", "--date-order", "--format=medium")


def parse_git_date(text: str) -> datetime | None:
    """Parse git's default date rendering into a timezone-aware datetime.

    The text follows GIT_DATE_FORMAT. Day and month names are matched against
    fixed English tables so the result does not depend on the process locale.
    Returns None and logs a warning when the text does not match.
    """
    fields = text.split()
    try:
        weekday, month, rest = fields[0], fields[1], fields[2:]
        if weekday not in GIT_WEEKDAY_NAMES:
            raise ValueError(f"unknown weekday {weekday!r}")
        month_number = GIT_MONTH_NAMES.index(month) + 1
        return datetime.strptime(" ".join([str(month_number), *rest]), GIT_NUMERIC_DATE_FORMAT)
    except (IndexError, ValueError):
        logger.warning(f"Could not parse commit date {text!r}")
        return None


def build_log_args(
    order: SortOrder | str = SortOrder.DESC,
    count: int | None = None,
) -> tuple[list[str], bool]:
    """Build the ``git log`` argument vector for an order and count.

    git can return the newest N commits natively, but ``-N`` combined with
    ``--reverse`` yields the newest N reversed rather than the oldest N. For
    ascending requests the full history is fetched and the parser stops early.

    Returns:
        (args, stop_at_count) where stop_at_count tells the parser to stop
        accumulating once ``count`` records are collected
    """
    order = SortOrder.coerce(order)
    count = _normalize_count(count)

    args = list(LOG_BASE_ARGS)
    stop_at_count = False

    if order is SortOrder.ASC:
        args.append("--reverse")
        stop_at_count = count is not None
    elif count is not None:
        args.append(f"-{count}")

    return args, stop_at_count


def _normalize_count(count: int | None) -> int | None:
    # 0 means "no limit"
    if count is None or count == 0:
        return None
    count = int(count)
    if count < 0:
        raise ValueError(f"Revision count must not be negative, got {count}")
    return count


@dataclass
class _PendingRevision:
    sha1: str
    author: str | None = None
    date: datetime | None = None
    message_parts: list[str] = field(default_factory=list)

    def build(self) -> Revision:
        return Revision(
            sha1=self.sha1,
            author=self.author,
            date=self.date,
            message=" ".join(self.message_parts),
        )


class RevisionLogParser:
    """Finite-state accumulator turning log lines into Revision records.

    State is the record in progress, the finished records and the remaining
    budget. Feed lines one at a time with ``feed``; call ``finish`` to flush
    the last record and get the result.

    Args:
        count: Maximum records to collect when ``stop_at_count`` is set
        stop_at_count: Stop scanning as soon as ``count`` records are emitted
    """

    def __init__(self, count: int | None = None, stop_at_count: bool = False):
        self.count = _normalize_count(count)
        self.stop_at_count = stop_at_count and self.count is not None
        self.revisions: list[Revision] = []
        self.pending: _PendingRevision | None = None
        self.done = False

    @property
    def remaining(self) -> int | None:
        """Records still wanted, or None when unbounded."""
        if not self.stop_at_count:
            return None
        return self.count - len(self.revisions)

    def feed(self, line: str) -> bool:
        """Consume one output line.

        Returns:
            False once the count budget is exhausted and no more lines are wanted
        """
        if self.done:
            return False

        fields = line.split(" ")
        token = fields[0]

        if token == "commit":
            self._emit()
            if self.done:
                return False
            self.pending = _PendingRevision(sha1=fields[1] if len(fields) > 1 else "")
        elif token == "Author:":
            if self.pending is not None:
                self.pending.author = " ".join(fields[1:])
        elif (
            token == "Date:"
            and self.pending is not None
            and self.pending.sha1
            and self.pending.author is not None
        ):
            # "Date:   Mon ..." splits into "Date:", "", "" before the value
            self.pending.date = parse_git_date(" ".join(fields[3:]))
        elif line.strip() and self.pending is not None:
            self.pending.message_parts.append(line.strip())

        return not self.done

    def finish(self) -> list[Revision]:
        """Flush the record in progress and return all records."""
        self._emit()
        return self.revisions

    def _emit(self) -> None:
        if self.pending is None or self.done:
            return
        if self.pending.sha1:
            self.revisions.append(self.pending.build())
        self.pending = None
        if self.remaining is not None and self.remaining <= 0:
            self.done = True


def parse_revisions(
    lines: Iterable[str],
    count: int | None = None,
    stop_at_count: bool = False,
) -> list[Revision]:
    """Parse medium-format log output into Revision records.

    Args:
        lines: Output lines of ``git log --format=medium``
        count: Record limit applied while scanning when ``stop_at_count`` is set
        stop_at_count: Discard the rest of the input once ``count`` records exist

    Returns:
        Revisions in the order git printed them
    """
    parser = RevisionLogParser(count=count, stop_at_count=stop_at_count)
    for line in lines:
        if not parser.feed(line):
            break
    return parser.finish()
