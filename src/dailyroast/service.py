"""Entry service - ownership rules and derived fields on top of an EntryStore.

This is the only code that reads or writes entries. The store is injected,
so the service never knows which backend it is talking to.
"""

import logging
import uuid
from datetime import tzinfo
from typing import Callable

from .core.entries import (
    CalendarView,
    Entry,
    EntrySummary,
    EntryUpdate,
    Mood,
    build_calendar,
    compute_year_month,
    now_ms,
)
from .errors import EntryForbiddenError, EntryNotFoundError
from .ports import EntryStore

logger = logging.getLogger(__name__)


def new_entry_id() -> str:
    return str(uuid.uuid4())


class EntryService:
    """Reads and writes roasts on behalf of an authenticated owner."""

    def __init__(
        self,
        store: EntryStore,
        tz: tzinfo | None = None,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_entry_id,
    ):
        self.store = store
        self.tz = tz
        self._clock = clock
        self._id_factory = id_factory

    def get_calendar(self, owner_id: str, year: str, month: str) -> CalendarView:
        """One month of an owner's roasts, as {year: {month: [summaries]}}."""
        entries = self.store.list(owner_id, year, month)
        return build_calendar(year, month, entries)

    def create_entry(
        self,
        owner_id: str,
        mood: Mood | str,
        occurred_at: int,
        note: str | None = None,
    ) -> EntrySummary:
        """Record a new roast under the caller's own namespace."""
        now = self._clock()
        year, month = compute_year_month(occurred_at, self.tz)
        entry = Entry(
            id=self._id_factory(),
            owner_id=owner_id,
            mood=Mood(mood),
            note=note,
            occurred_at=occurred_at,
            year=year,
            month=month,
            created_at=now,
            updated_at=now,
        )
        self.store.put(owner_id, entry)
        logger.info(f"Created roast {entry.id} for user {owner_id} ({year}-{month})")
        return entry.summary()

    def update_entry(self, owner_id: str, entry_id: str, changes: EntryUpdate) -> EntrySummary:
        """
        Apply partial changes to an owned roast.

        Omitted fields are untouched. A new occurred_at moves the entry to the
        matching year/month. updated_at is always refreshed.
        """
        existing = self._require_owned(owner_id, entry_id, "update")

        fields = changes.provided()
        if "occurred_at" in fields:
            fields["year"], fields["month"] = compute_year_month(fields["occurred_at"], self.tz)
        # A clock stepping backwards must not put updated_at before created_at
        fields["updated_at"] = max(self._clock(), existing.created_at)

        updated = self.store.patch(owner_id, entry_id, fields)
        if updated is None:
            # Deleted between the ownership check and the patch
            raise EntryNotFoundError(owner_id, entry_id)

        logger.info(f"Updated roast {entry_id} for user {owner_id}: {sorted(fields)}")
        return updated.summary()

    def delete_entry(self, owner_id: str, entry_id: str) -> None:
        """Remove an owned roast."""
        self._require_owned(owner_id, entry_id, "delete")
        self.store.remove(owner_id, entry_id)
        logger.info(f"Deleted roast {entry_id} for user {owner_id}")

    def _require_owned(self, owner_id: str, entry_id: str, action: str) -> Entry:
        """Fetch an entry, raising unless it exists and belongs to owner_id."""
        existing = self.store.get(owner_id, entry_id)
        if existing is None:
            raise EntryNotFoundError(owner_id, entry_id)
        if existing.owner_id != owner_id:
            logger.warning(
                f"User {owner_id} tried to {action} roast {entry_id} owned by someone else"
            )
            raise EntryForbiddenError(owner_id, entry_id)
        return existing
