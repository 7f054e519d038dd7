"""Unit tests for the medium-format log parser."""

import locale
from datetime import datetime, timedelta, timezone

import pytest

from git_facade.log_parser import (
    LOG_BASE_ARGS,
    RevisionLogParser,
    build_log_args,
    parse_git_date,
    parse_revisions,
)
from git_facade.models import SortOrder


def medium_entry(sha1, author, date, *message_lines):
    """Render one commit the way `git log --format=medium` prints it."""
    lines = [f"commit {sha1}", f"Author: {author}", f"Date:   {date}", ""]
    lines.extend(f"    {line}" if line else "" for line in message_lines)
    lines.append("")
    return lines


THREE_COMMITS = (
    medium_entry("ccc333", "Carol <carol@example.com>", "Wed Jan 3 12:00:00 2024 +0000", "Third")
    + medium_entry("bbb222", "Bob <bob@example.com>", "Tue Jan 2 12:00:00 2024 +0000", "Second")
    + medium_entry("aaa111", "Alice <alice@example.com>", "Mon Jan 1 12:00:00 2024 +0000", "First")
)


class TestParseGitDate:
    """Tests for parse_git_date."""

    def test_parses_default_rendering(self):
        """Test that git's default date text becomes an aware datetime."""
        result = parse_git_date("Mon Jan 2 15:04:05 2024 +0000")
        assert result == datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone.utc)

    def test_keeps_timezone_offset(self):
        """Test that a non-UTC offset is preserved."""
        result = parse_git_date("Fri Mar 15 09:30:00 2024 +0530")
        assert result.utcoffset() == timedelta(hours=5, minutes=30)

    def test_every_month_name(self):
        """Test that all English month abbreviations are recognised."""
        months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
        for number, month in enumerate(months, start=1):
            result = parse_git_date(f"Mon {month} 1 00:00:00 2024 +0000")
            assert result is not None
            assert result.month == number

    def test_unknown_weekday_returns_none(self):
        """Test that a weekday outside the English table is rejected."""
        assert parse_git_date("Mo Jan 1 00:00:00 2024 +0000") is None

    def test_unknown_month_returns_none(self):
        """Test that a localized month name is rejected."""
        assert parse_git_date("Mon Mär 1 00:00:00 2024 +0000") is None

    def test_independent_of_process_locale(self):
        """Test that a non-English LC_TIME does not break English date parsing."""
        previous = locale.setlocale(locale.LC_TIME)
        for candidate in ("de_DE.UTF-8", "fr_FR.UTF-8", "de_DE.utf8", "fr_FR.utf8"):
            try:
                locale.setlocale(locale.LC_TIME, candidate)
                break
            except locale.Error:
                continue
        else:
            pytest.skip("no non-English locale installed")

        try:
            result = parse_git_date("Tue Mar 5 09:30:00 2024 +0100")
        finally:
            locale.setlocale(locale.LC_TIME, previous)

        assert result == datetime(2024, 3, 5, 9, 30, 0, tzinfo=timezone(timedelta(hours=1)))

    def test_malformed_returns_none(self, caplog):
        """Test that unparseable text yields None and a warning."""
        assert parse_git_date("2024-01-02T15:04:05Z") is None
        assert "Could not parse commit date" in caplog.text


class TestBuildLogArgs:
    """Tests for build_log_args."""

    def test_desc_without_count(self):
        """Test that DESC with no count uses only the base flags."""
        args, stop = build_log_args(SortOrder.DESC, None)
        assert args == list(LOG_BASE_ARGS)
        assert stop is False

    def test_desc_with_count_is_native(self):
        """Test that DESC with a count passes -N to git."""
        args, stop = build_log_args("DESC", 2)
        assert args == [*LOG_BASE_ARGS, "-2"]
        assert stop is False

    def test_asc_without_count(self):
        """Test that ASC appends --reverse."""
        args, stop = build_log_args("asc", None)
        assert args == [*LOG_BASE_ARGS, "--reverse"]
        assert stop is False

    def test_asc_with_count_fetches_all(self):
        """Test that ASC with a count fetches everything and stops while parsing."""
        args, stop = build_log_args(SortOrder.ASC, 2)
        assert args == [*LOG_BASE_ARGS, "--reverse"]
        assert stop is True

    def test_zero_count_means_no_limit(self):
        """Test that a count of 0 behaves like no count."""
        assert build_log_args(SortOrder.DESC, 0) == (list(LOG_BASE_ARGS), False)
        assert build_log_args(SortOrder.ASC, 0) == ([*LOG_BASE_ARGS, "--reverse"], False)

    def test_negative_count_rejected(self):
        """Test that a negative count raises ValueError."""
        with pytest.raises(ValueError, match="negative"):
            build_log_args(SortOrder.DESC, -1)

    def test_unknown_order_rejected(self):
        """Test that an unknown order raises ValueError."""
        with pytest.raises(ValueError, match="Unknown sort order"):
            build_log_args("sideways", None)


class TestParseRevisions:
    """Tests for parse_revisions."""

    def test_empty_output(self):
        """Test that no output gives no revisions."""
        assert parse_revisions([]) == []

    def test_parses_all_fields(self):
        """Test that identifier, author, date and message are captured."""
        revisions = parse_revisions(THREE_COMMITS)

        assert [r.sha1 for r in revisions] == ["ccc333", "bbb222", "aaa111"]
        first = revisions[0]
        assert first.author == "Carol <carol@example.com>"
        assert first.date == datetime(2024, 1, 3, 12, 0, 0, tzinfo=timezone.utc)
        assert first.message == "Third"

    def test_single_commit_is_flushed_at_end(self):
        """Test that the last record is emitted at end of input."""
        lines = medium_entry("abc123", "Dev <dev@example.com>", "Mon Jan 1 00:00:00 2024 +0000", "Only")
        revisions = parse_revisions(lines)
        assert len(revisions) == 1
        assert revisions[0].sha1 == "abc123"

    def test_multiline_message_is_space_joined(self):
        """Test that subject and body paragraphs collapse into one line."""
        lines = medium_entry(
            "abc123",
            "Dev <dev@example.com>",
            "Mon Jan 1 00:00:00 2024 +0000",
            "Subject line",
            "",
            "Body line one",
            "  body line two  ",
        )
        message = parse_revisions(lines)[0].message
        assert message == "Subject line Body line one body line two"
        assert "\n" not in message
        assert message == message.strip()

    def test_whitespace_only_lines_ignored(self):
        """Test that indented blank lines do not add spaces to the message."""
        lines = ["commit abc123", "Author: Dev", "Date:   Mon Jan 1 00:00:00 2024 +0000", "", "    A", "    ", "    B"]
        assert parse_revisions(lines)[0].message == "A B"

    def test_malformed_date_keeps_record(self):
        """Test that a bad date degrades only the date field."""
        lines = medium_entry("abc123", "Dev <dev@example.com>", "not a date", "Message")
        revisions = parse_revisions(lines)
        assert len(revisions) == 1
        assert revisions[0].date is None
        assert revisions[0].message == "Message"

    def test_date_before_author_becomes_message_text(self):
        """Test that a Date line seen before the author is kept as message text."""
        lines = ["commit abc123", "Date:   Mon Jan 1 00:00:00 2024 +0000", "Author: Dev", "", "    Msg"]
        revision = parse_revisions(lines)[0]
        assert revision.date is None
        assert revision.author == "Dev"
        assert revision.message == "Date:   Mon Jan 1 00:00:00 2024 +0000 Msg"

    def test_date_before_any_author_in_second_record(self):
        """Test that the author reset at a boundary also gates the next Date line."""
        lines = [
            "commit bbb222",
            "Author: Bob",
            "Date:   Tue Jan 2 00:00:00 2024 +0000",
            "",
            "    Second",
            "commit aaa111",
            "Date:   Mon Jan 1 00:00:00 2024 +0000",
        ]
        revisions = parse_revisions(lines)
        assert revisions[0].date is not None
        assert revisions[1].date is None
        assert revisions[1].message == "Date:   Mon Jan 1 00:00:00 2024 +0000"

    def test_author_is_reset_between_records(self):
        """Test that a record without an Author line does not inherit one."""
        lines = [
            "commit bbb222",
            "Author: Bob",
            "Date:   Tue Jan 2 00:00:00 2024 +0000",
            "",
            "    Second",
            "commit aaa111",
            "",
            "    First",
        ]
        revisions = parse_revisions(lines)
        assert revisions[1].author is None
        assert revisions[1].message == "First"

    def test_decorated_commit_line(self):
        """Test that ref decorations after the hash are not part of the identifier."""
        lines = ["commit abc123 (HEAD -> main, origin/main)", "Author: Dev", "", "    Msg"]
        assert parse_revisions(lines)[0].sha1 == "abc123"

    def test_message_mentioning_commit_is_not_a_boundary(self):
        """Test that an indented line starting with 'commit' stays in the message."""
        lines = ["commit abc123", "Author: Dev", "", "    commit everything"]
        revisions = parse_revisions(lines)
        assert len(revisions) == 1
        assert revisions[0].message == "commit everything"

    def test_lines_before_first_commit_are_dropped(self):
        """Test that noise ahead of the first boundary creates no record."""
        lines = ["warning: something", "", *THREE_COMMITS]
        revisions = parse_revisions(lines)
        assert len(revisions) == 3
        assert revisions[0].message == "Third"

    def test_no_commit_line_gives_no_records(self):
        """Test that output without any boundary yields nothing."""
        assert parse_revisions(["just text", "more text"]) == []

    def test_stop_at_count(self):
        """Test that the scan stops once the requested count is collected."""
        revisions = parse_revisions(THREE_COMMITS, count=2, stop_at_count=True)
        assert [r.sha1 for r in revisions] == ["ccc333", "bbb222"]
        assert revisions[1].message == "Second"

    def test_count_without_stop_does_not_truncate(self):
        """Test that count alone leaves truncation to git."""
        revisions = parse_revisions(THREE_COMMITS, count=1, stop_at_count=False)
        assert len(revisions) == 3

    def test_count_larger_than_history(self):
        """Test that asking for more records than exist returns them all."""
        revisions = parse_revisions(THREE_COMMITS, count=1000, stop_at_count=True)
        assert len(revisions) == 3


class TestRevisionLogParser:
    """Tests for the RevisionLogParser state machine."""

    def test_record_emitted_only_at_next_boundary(self):
        """Test that a record is finalized when the next commit line arrives."""
        parser = RevisionLogParser()
        for line in medium_entry("aaa111", "A", "Mon Jan 1 00:00:00 2024 +0000", "One"):
            parser.feed(line)
        assert parser.revisions == []

        parser.feed("commit bbb222")
        assert [r.sha1 for r in parser.revisions] == ["aaa111"]
        assert parser.pending.sha1 == "bbb222"

    def test_feed_returns_false_when_budget_spent(self):
        """Test that feed reports when no more input is wanted."""
        parser = RevisionLogParser(count=1, stop_at_count=True)
        assert parser.remaining == 1
        assert parser.feed("commit aaa111") is True
        assert parser.feed("Author: A") is True
        assert parser.feed("commit bbb222") is False
        assert parser.remaining == 0
        assert parser.feed("commit ccc333") is False
        assert [r.sha1 for r in parser.finish()] == ["aaa111"]

    def test_unbounded_parser_has_no_remaining(self):
        """Test that remaining is None without a count budget."""
        assert RevisionLogParser(count=5).remaining is None
        assert RevisionLogParser(count=None, stop_at_count=True).remaining is None
