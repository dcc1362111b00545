"""Pure entry domain logic - no I/O dependencies."""

import time
from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum


class Mood(str, Enum):
    """The mood tag a roast is recorded with."""

    EXCITED = "excited"
    OK = "ok"
    TIRED = "tired"
    SAD = "sad"
    ANGRY = "angry"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def compute_year_month(occurred_at: int, tz: tzinfo | None = None) -> tuple[str, str]:
    """
    Derive the (year, month) calendar index for an epoch-ms timestamp.

    The instant is converted to the given timezone, or to the host's local
    time when tz is None. Month is zero-padded ("01".."12").
    """
    moment = datetime.fromtimestamp(occurred_at / 1000, tz=tz)
    return f"{moment.year:04d}", f"{moment.month:02d}"


@dataclass(frozen=True)
class EntrySummary:
    """The owner-facing view of an entry."""

    id: str
    mood: Mood
    note: str | None
    occurred_at: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "mood": self.mood.value,
            "note": self.note,
            "occurredAt": self.occurred_at,
        }


@dataclass
class Entry:
    """A stored roast: one user's mood for a given moment."""

    id: str
    owner_id: str
    mood: Mood
    occurred_at: int
    year: str
    month: str
    created_at: int
    updated_at: int
    note: str | None = None

    def summary(self) -> EntrySummary:
        """Strip owner, calendar index and timestamps."""
        return EntrySummary(
            id=self.id,
            mood=self.mood,
            note=self.note,
            occurred_at=self.occurred_at,
        )

    def to_record(self) -> dict:
        """Serialize to the stored document layout."""
        return {
            "id": self.id,
            "ownerId": self.owner_id,
            "mood": self.mood.value,
            "note": self.note,
            "occurredAt": self.occurred_at,
            "year": self.year,
            "month": self.month,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_record(cls, data: dict) -> "Entry":
        """Create Entry from a stored document."""
        return cls(
            id=data["id"],
            owner_id=data["ownerId"],
            mood=Mood(data["mood"]),
            note=data.get("note"),
            occurred_at=data["occurredAt"],
            year=data["year"],
            month=data["month"],
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
        )


# Entry attribute name -> stored document key
RECORD_KEYS = {
    "id": "id",
    "owner_id": "ownerId",
    "mood": "mood",
    "note": "note",
    "occurred_at": "occurredAt",
    "year": "year",
    "month": "month",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


def fields_to_record(fields: dict) -> dict:
    """Translate a partial set of Entry attributes to stored document keys."""
    record = {}
    for name, value in fields.items():
        if isinstance(value, Mood):
            value = value.value
        record[RECORD_KEYS[name]] = value
    return record


@dataclass
class EntryUpdate:
    """
    Partial changes to an entry.

    None means "not provided": the stored value is left untouched.
    """

    mood: Mood | None = None
    note: str | None = None
    occurred_at: int | None = None

    def provided(self) -> dict:
        """The fields the caller actually set."""
        changes = {}
        if self.mood is not None:
            changes["mood"] = Mood(self.mood)
        if self.note is not None:
            changes["note"] = self.note
        if self.occurred_at is not None:
            changes["occurred_at"] = self.occurred_at
        return changes


CalendarView = dict[str, dict[str, list[EntrySummary]]]


def sort_by_occurrence(entries: list[Entry]) -> list[Entry]:
    """Sort entries by when they happened, id breaking ties."""
    return sorted(entries, key=lambda e: (e.occurred_at, e.id))


def build_calendar(year: str, month: str, entries: list[Entry]) -> CalendarView:
    """Group one month's entries into a calendar view."""
    return {year: {month: [e.summary() for e in sort_by_occurrence(entries)]}}


def calendar_to_dict(view: CalendarView) -> dict:
    """Render a calendar view as plain JSON-ready data."""
    return {
        year: {month: [s.to_dict() for s in summaries] for month, summaries in months.items()}
        for year, months in view.items()
    }
