"""Entry storage interface."""

from typing import Protocol

from dailyroast.core.entries import Entry


class EntryStore(Protocol):
    """
    Interface for storing entries scoped by owner.

    Lookups never check ownership; that is the service's job.
    """

    def list(self, owner_id: str, year: str, month: str) -> list[Entry]:
        """Entries of an owner in a year/month. Empty if none or unknown owner."""
        ...

    def get(self, owner_id: str, entry_id: str) -> Entry | None:
        """Read one entry. Returns None if not found."""
        ...

    def put(self, owner_id: str, entry: Entry) -> None:
        """Insert or fully overwrite an entry."""
        ...

    def patch(self, owner_id: str, entry_id: str, fields: dict) -> Entry | None:
        """Merge fields into an existing entry. Returns None if not found."""
        ...

    def remove(self, owner_id: str, entry_id: str) -> bool:
        """Delete an entry. Returns whether anything was deleted."""
        ...
