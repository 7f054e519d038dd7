"""Data models for parsed git output."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SortOrder(str, Enum):
    """Chronological direction of a revision listing."""

    ASC = "ASC"  # oldest first
    DESC = "DESC"  # newest first, git's natural order

    @classmethod
    def coerce(cls, value: "SortOrder | str") -> "SortOrder":
        """Accept a SortOrder or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown sort order {value!r}, expected ASC or DESC") from None


@dataclass(frozen=True)
class Revision:
    """A single commit as rendered by ``git log --format=medium``."""

    sha1: str
    author: str | None
    date: datetime | None  # None when git's date text could not be parsed
    message: str

    def to_dict(self) -> dict:
        return {
            "sha1": self.sha1,
            "author": self.author,
            "date": self.date.isoformat() if self.date else None,
            "message": self.message,
        }
