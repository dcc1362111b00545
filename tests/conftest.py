import pytest

from dailyroast.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the host's environment and config file out of the tests."""
    for name in [*ENV_OVERRIDES, "ENABLE_DEV_AUTH", "DAILYROAST_ENV"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dailyroast.config.CONFIG_FILE", tmp_path / "missing.conf")
