"""Configuration management for Daily Roast."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DAILYROAST_HOME = Path(os.environ.get("DAILYROAST_HOME", Path.home() / ".dailyroast"))
CONFIG_FILE = DAILYROAST_HOME / "config" / "dailyroast.conf"

STORAGE_BACKENDS = ("firestore", "memory")

# Environment variable -> Config attribute. Environment wins over the file.
ENV_OVERRIDES = {
    "DAILYROAST_STORAGE": "storage_backend",
    "DAILYROAST_TIMEZONE": "timezone",
    "DAILYROAST_USER": "default_user",
    "FIREBASE_PROJECT_ID": "firebase_project_id",
    "FIREBASE_CLIENT_EMAIL": "firebase_client_email",
    "FIREBASE_PRIVATE_KEY": "firebase_private_key",
    "GOOGLE_APPLICATION_CREDENTIALS": "firebase_credentials_file",
}


@dataclass
class Config:
    """Daily Roast configuration."""

    storage_backend: str = "firestore"
    # Empty means the host's local time
    timezone: str = ""
    default_user: str = ""
    firebase_project_id: str = ""
    firebase_client_email: str = ""
    firebase_private_key: str = ""
    firebase_credentials_file: str = ""

    @property
    def dev_mode(self) -> bool:
        """Development mode forces the in-memory backend."""
        return (
            os.environ.get("ENABLE_DEV_AUTH", "").lower() == "true"
            and os.environ.get("DAILYROAST_ENV", "") == "development"
        )


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _apply(config: Config, key: str, value: str) -> None:
    match key:
        case "storage_backend":
            config.storage_backend = value.lower()
        case "timezone":
            config.timezone = value
        case "default_user":
            config.default_user = value
        case "firebase_project_id":
            config.firebase_project_id = value
        case "firebase_client_email":
            config.firebase_client_email = value
        case "firebase_private_key":
            # Keys pasted into env files usually carry literal \n sequences
            config.firebase_private_key = value.replace("\\n", "\n")
        case "firebase_credentials_file":
            config.firebase_credentials_file = str(Path(value).expanduser()) if value else ""
        case _:
            logger.warning(f"Ignoring unknown config key: {key}")


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from dailyroast.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            _apply(config, key.strip().lower(), _unquote(value.strip()))

    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            _apply(config, key, value)

    return config
