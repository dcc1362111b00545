"""Outcomes the entry layer signals to its callers."""


class DailyRoastError(Exception):
    """Base class for dailyroast errors."""

    pass


class EntryNotFoundError(DailyRoastError):
    """Raised when no entry exists at the owner's key."""

    def __init__(self, owner_id: str, entry_id: str):
        self.owner_id = owner_id
        self.entry_id = entry_id
        super().__init__(f"Roast {entry_id} not found")


class EntryForbiddenError(DailyRoastError):
    """Raised when an entry exists but belongs to someone else."""

    def __init__(self, owner_id: str, entry_id: str):
        self.owner_id = owner_id
        self.entry_id = entry_id
        super().__init__(f"You do not have permission to modify roast {entry_id}")


class ConfigurationError(DailyRoastError):
    """Raised at startup when configuration is unusable."""

    pass


class StorageUnconfiguredError(ConfigurationError):
    """Raised at startup when the storage backend cannot be set up."""

    pass
