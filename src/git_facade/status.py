"""Working copy state detection from ``git status`` output."""

from collections.abc import Sequence

from git_facade.common.constants import CLEAN_STATUS_SENTINELS


def is_clean_status_output(
    lines: Sequence[str],
    sentinels: Sequence[str] = CLEAN_STATUS_SENTINELS,
) -> bool:
    """Return True if ``git status`` output reports a clean working copy.

    Only the last output line is inspected and it must equal one of the
    known "nothing to commit" phrasings exactly. Any other wording, including
    a translated one, counts as not clean.
    """
    if not lines:
        return False
    return lines[-1] in sentinels
