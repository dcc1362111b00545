"""Tests for startup wiring."""

from unittest.mock import patch

import pytest

from dailyroast.adapters.memory_store import MemoryEntryStore
from dailyroast.bootstrap import get_service, get_store, get_timezone
from dailyroast.config import Config
from dailyroast.errors import ConfigurationError, StorageUnconfiguredError
from dailyroast.service import EntryService


class TestGetStore:
    """Tests for storage backend selection."""

    def test_memory(self):
        assert isinstance(get_store(Config(storage_backend="memory")), MemoryEntryStore)

    def test_unknown_backend(self):
        with pytest.raises(StorageUnconfiguredError, match="Unknown storage backend"):
            get_store(Config(storage_backend="postgres"))

    @patch("dailyroast.adapters.firestore_store.FirestoreEntryStore.from_config")
    def test_firestore(self, mock_from_config):
        config = Config(storage_backend="firestore")
        assert get_store(config) is mock_from_config.return_value
        mock_from_config.assert_called_once_with(config)

    def test_firestore_without_credentials(self):
        with pytest.raises(StorageUnconfiguredError):
            get_store(Config(storage_backend="firestore"))

    @patch("dailyroast.adapters.firestore_store.FirestoreEntryStore.from_config")
    def test_dev_mode_forces_memory(self, mock_from_config, monkeypatch):
        monkeypatch.setenv("ENABLE_DEV_AUTH", "true")
        monkeypatch.setenv("DAILYROAST_ENV", "development")
        assert isinstance(get_store(Config(storage_backend="firestore")), MemoryEntryStore)
        mock_from_config.assert_not_called()


class TestGetTimezone:
    """Tests for timezone resolution."""

    def test_local_when_unset(self):
        assert get_timezone(Config()) is None

    def test_named_zone(self):
        assert str(get_timezone(Config(timezone="UTC"))) == "UTC"

    def test_unknown_zone(self):
        with pytest.raises(ConfigurationError):
            get_timezone(Config(timezone="Mars/Olympus_Mons"))


class TestGetService:
    """Tests for EntryService construction."""

    def test_builds_from_config(self):
        service = get_service(Config(storage_backend="memory", timezone="UTC"))
        assert isinstance(service, EntryService)
        assert isinstance(service.store, MemoryEntryStore)
        assert str(service.tz) == "UTC"

    def test_uses_given_store(self):
        store = MemoryEntryStore()
        assert get_service(Config(), store=store).store is store

    def test_loads_config_when_missing(self, monkeypatch):
        monkeypatch.setenv("DAILYROAST_STORAGE", "memory")
        assert isinstance(get_service().store, MemoryEntryStore)
