"""Adapters - I/O implementations of ports."""

from .memory_store import MemoryEntryStore
from .firestore_store import FirestoreEntryStore

__all__ = [
    "MemoryEntryStore",
    "FirestoreEntryStore",
]
