"""Process startup wiring: pick a storage backend and build the service."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .adapters.firestore_store import FirestoreEntryStore
from .adapters.memory_store import MemoryEntryStore
from .config import STORAGE_BACKENDS, Config, load_config
from .errors import ConfigurationError, StorageUnconfiguredError
from .ports import EntryStore
from .service import EntryService

logger = logging.getLogger(__name__)


def get_store(config: Config) -> EntryStore:
    """Build the configured storage backend. Raises StorageUnconfiguredError."""
    backend = "memory" if config.dev_mode else config.storage_backend

    if backend not in STORAGE_BACKENDS:
        raise StorageUnconfiguredError(
            f"Unknown storage backend '{backend}' (expected one of: {', '.join(STORAGE_BACKENDS)})"
        )

    if backend == "memory":
        if config.dev_mode:
            logger.warning("Development mode: using in-memory storage")
        return MemoryEntryStore()

    return FirestoreEntryStore.from_config(config)


def get_timezone(config: Config) -> ZoneInfo | None:
    """Resolve the configured timezone; None means host local time."""
    if not config.timezone:
        return None
    try:
        return ZoneInfo(config.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone '{config.timezone}'") from e


def get_service(config: Config | None = None, store: EntryStore | None = None) -> EntryService:
    """Build an EntryService from config, optionally with a prebuilt store."""
    config = config or load_config()
    return EntryService(store or get_store(config), tz=get_timezone(config))
