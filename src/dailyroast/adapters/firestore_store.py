"""Firestore entry storage adapter."""

import logging

from dailyroast.config import Config
from dailyroast.core.entries import Entry, fields_to_record
from dailyroast.errors import StorageUnconfiguredError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"


class FirestoreEntryStore:
    """
    Durable entry storage backed by Cloud Firestore.

    Implements EntryStore protocol. Each owner gets a document under
    ``users`` with a ``roasts`` subcollection holding one document per entry.
    """

    def __init__(self, client):
        self._db = client

    @classmethod
    def from_config(cls, config: Config) -> "FirestoreEntryStore":
        """Initialise firebase-admin from config and wrap its Firestore client."""
        import firebase_admin
        from firebase_admin import credentials, firestore

        cred = cls._load_credentials(config, credentials)
        try:
            app = firebase_admin.get_app()
        except ValueError:
            options = {"projectId": config.firebase_project_id} if config.firebase_project_id else None
            app = firebase_admin.initialize_app(cred, options)
        logger.info(f"Connected to Firestore project {app.project_id or '(default)'}")
        return cls(firestore.client(app))

    @staticmethod
    def _load_credentials(config: Config, credentials):
        """Build service account credentials from a key file or inline fields."""
        if config.firebase_credentials_file:
            try:
                return credentials.Certificate(config.firebase_credentials_file)
            except (OSError, ValueError) as e:
                raise StorageUnconfiguredError(
                    f"Could not load Firebase credentials file: {e}"
                ) from e

        if not (
            config.firebase_project_id
            and config.firebase_client_email
            and config.firebase_private_key
        ):
            raise StorageUnconfiguredError(
                "Firebase credentials not properly configured. "
                "Set FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY."
            )

        try:
            return credentials.Certificate(
                {
                    "type": "service_account",
                    "project_id": config.firebase_project_id,
                    "client_email": config.firebase_client_email,
                    "private_key": config.firebase_private_key,
                    "token_uri": TOKEN_URI,
                }
            )
        except ValueError as e:
            raise StorageUnconfiguredError(f"Invalid Firebase credentials: {e}") from e

    def _roasts(self, owner_id: str):
        return self._db.collection("users").document(owner_id).collection("roasts")

    def list(self, owner_id: str, year: str, month: str) -> list[Entry]:
        from google.cloud.firestore_v1.base_query import FieldFilter

        query = (
            self._roasts(owner_id)
            .where(filter=FieldFilter("year", "==", year))
            .where(filter=FieldFilter("month", "==", month))
        )
        entries = [Entry.from_record(doc.to_dict()) for doc in query.stream()]
        logger.debug(f"Retrieved {len(entries)} roasts for user {owner_id} ({year}-{month})")
        return entries

    def get(self, owner_id: str, entry_id: str) -> Entry | None:
        doc = self._roasts(owner_id).document(entry_id).get()
        if not doc.exists:
            return None
        return Entry.from_record(doc.to_dict())

    def put(self, owner_id: str, entry: Entry) -> None:
        self._roasts(owner_id).document(entry.id).set(entry.to_record())
        logger.debug(f"Stored roast {entry.id} for user {owner_id}")

    def patch(self, owner_id: str, entry_id: str, fields: dict) -> Entry | None:
        ref = self._roasts(owner_id).document(entry_id)
        if not ref.get().exists:
            return None
        ref.update(fields_to_record(fields))
        logger.debug(f"Patched roast {entry_id} for user {owner_id}")
        return Entry.from_record(ref.get().to_dict())

    def remove(self, owner_id: str, entry_id: str) -> bool:
        ref = self._roasts(owner_id).document(entry_id)
        if not ref.get().exists:
            return False
        ref.delete()
        logger.debug(f"Deleted roast {entry_id} for user {owner_id}")
        return True
