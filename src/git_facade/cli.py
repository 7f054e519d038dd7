#!/usr/bin/env python3
"""CLI interface for git_facade."""

import argparse
import json
from pathlib import Path

from git_facade.common.logger import error, progress, setup_logging, success

from .errors import GitError
from .models import SortOrder
from .repository import Git


def cmd_checkout(args):
    """Force-checkout a revision.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    Git(args.repo).checkout(args.revision)
    success(f"Checked out {args.revision}")
    return 0


def cmd_branch(args):
    """Print the current branch name."""
    progress(Git(args.repo).get_current_branch())
    return 0


def cmd_diff(args):
    """Print the diff between two references."""
    diff = Git(args.repo).get_diff(args.from_ref, args.to_ref)
    if diff:
        progress(diff)
    return 0


def cmd_log(args):
    """Print revisions, as text or JSON."""
    revisions = Git(args.repo).get_revisions(order=args.order, count=args.count)

    if args.json:
        print(json.dumps([revision.to_dict() for revision in revisions], indent=2))
        return 0

    for revision in revisions:
        date = revision.date.isoformat() if revision.date else "unknown date"
        progress(f"{revision.sha1[:12]}  {date}  {revision.author or ''}")
        progress(f"    {revision.message}")
    return 0


def cmd_status(args):
    """Report whether the working copy is clean.

    Returns:
        0 when clean, 1 when there is something to commit
    """
    if Git(args.repo).is_working_copy_clean():
        success("Working copy is clean")
        return 0
    progress("Working copy has uncommitted changes")
    return 1


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def build_parser():
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(description="Query and drive a git working copy")
    parser.add_argument(
        "--repo",
        type=Path,
        default=Path("."),
        help="Working copy directory (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    checkout_parser = subparsers.add_parser("checkout", help="Force-checkout a revision")
    checkout_parser.add_argument("revision", help="Branch, tag or commit to check out")
    checkout_parser.set_defaults(func=cmd_checkout)

    branch_parser = subparsers.add_parser("branch", help="Print the current branch name")
    branch_parser.set_defaults(func=cmd_branch)

    diff_parser = subparsers.add_parser("diff", help="Show the diff between two references")
    diff_parser.add_argument("from_ref", metavar="FROM", help="Starting reference")
    diff_parser.add_argument("to_ref", metavar="TO", help="Ending reference")
    diff_parser.set_defaults(func=cmd_diff)

    log_parser = subparsers.add_parser("log", help="List non-merge revisions")
    log_parser.add_argument(
        "--order",
        type=str.upper,
        choices=[order.value for order in SortOrder],
        default=SortOrder.DESC.value,
        help="ASC for oldest first, DESC for newest first (default: DESC)",
    )
    log_parser.add_argument(
        "--count",
        type=_non_negative_int,
        default=None,
        help="Number of revisions to show (default: all)",
    )
    log_parser.add_argument("--json", action="store_true", help="Print revisions as JSON")
    log_parser.set_defaults(func=cmd_log)

    status_parser = subparsers.add_parser(
        "status", help="Exit 0 if the working copy is clean, 1 otherwise"
    )
    status_parser.set_defaults(func=cmd_status)

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    try:
        return args.func(args)
    except GitError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    exit(main())
