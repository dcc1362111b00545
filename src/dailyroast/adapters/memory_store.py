"""In-memory entry storage adapter."""

import copy
import dataclasses
import logging
import threading

from dailyroast.core.entries import Entry

logger = logging.getLogger(__name__)


class MemoryEntryStore:
    """
    Process-local entry storage for development and tests.

    Implements EntryStore protocol. Mirrors the Firestore layout of
    users/{owner_id}/roasts/{entry_id}. Data is lost when the process exits.
    """

    def __init__(self):
        self._entries: dict[str, dict[str, Entry]] = {}
        self._lock = threading.Lock()
        logger.warning("Using in-memory storage; data will be lost on restart")

    def list(self, owner_id: str, year: str, month: str) -> list[Entry]:
        with self._lock:
            owned = self._entries.get(owner_id, {})
            found = [
                dataclasses.replace(e)
                for e in owned.values()
                if e.year == year and e.month == month
            ]
        logger.debug(f"Retrieved {len(found)} roasts for user {owner_id} ({year}-{month})")
        return found

    def get(self, owner_id: str, entry_id: str) -> Entry | None:
        with self._lock:
            entry = self._entries.get(owner_id, {}).get(entry_id)
            return dataclasses.replace(entry) if entry else None

    def put(self, owner_id: str, entry: Entry) -> None:
        with self._lock:
            self._entries.setdefault(owner_id, {})[entry.id] = dataclasses.replace(entry)
        logger.debug(f"Stored roast {entry.id} for user {owner_id}")

    def patch(self, owner_id: str, entry_id: str, fields: dict) -> Entry | None:
        with self._lock:
            owned = self._entries.get(owner_id)
            if not owned or entry_id not in owned:
                return None
            merged = dataclasses.replace(owned[entry_id], **fields)
            owned[entry_id] = merged
        logger.debug(f"Patched roast {entry_id} for user {owner_id}")
        return dataclasses.replace(merged)

    def remove(self, owner_id: str, entry_id: str) -> bool:
        with self._lock:
            owned = self._entries.get(owner_id)
            deleted = bool(owned) and owned.pop(entry_id, None) is not None
        logger.debug(f"Deleted roast {entry_id} for user {owner_id}: {deleted}")
        return deleted

    def dump(self) -> dict[str, dict[str, Entry]]:
        """Snapshot of everything stored, keyed by owner then entry id."""
        with self._lock:
            return copy.deepcopy(self._entries)

    def clear(self) -> None:
        """Drop all stored entries."""
        with self._lock:
            self._entries.clear()
        logger.debug("Cleared in-memory storage")
