"""Shared constants for git-facade.

For environment-based configuration (executable name, locale), use the env module:
    from git_facade.common.env import env
    executable = env.git_executable()
"""

# Rendering of git's default ("medium") date style, e.g. "Mon Jan 2 15:04:05 2024 +0000"
GIT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"

# GIT_DATE_FORMAT once the English day and month names are replaced by numbers.
# strptime reads %a and %b from the process LC_TIME, git always prints English.
GIT_NUMERIC_DATE_FORMAT = "%m %d %H:%M:%S %Y %z"

GIT_WEEKDAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
GIT_MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Last line printed by `git status` on a clean working copy.
# Older git releases said "working directory", newer ones say "working tree".
CLEAN_STATUS_SENTINELS: tuple[str, ...] = (
    "nothing to commit, working directory clean",
    "nothing to commit, working tree clean",
)

# Exit status a POSIX shell reports when the command cannot be found
COMMAND_NOT_FOUND_EXIT_CODE = 127
