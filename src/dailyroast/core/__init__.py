"""Functional core - pure business logic with no I/O."""

from .entries import (
    CalendarView,
    Entry,
    EntrySummary,
    EntryUpdate,
    Mood,
    build_calendar,
    calendar_to_dict,
    compute_year_month,
    fields_to_record,
    now_ms,
)

__all__ = [
    "CalendarView",
    "Entry",
    "EntrySummary",
    "EntryUpdate",
    "Mood",
    "build_calendar",
    "calendar_to_dict",
    "compute_year_month",
    "fields_to_record",
    "now_ms",
]
