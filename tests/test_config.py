import pytest
from microcms_mcp.core.client import MicroCMSClient
from microcms_mcp.core.config import (
    DEFAULT_BASE_URL,
    MicroCMSConfig,
    load_config,
    log_level_from_env,
)
from microcms_mcp.core.errors import ConfigurationError, MissingApiKeyError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Prevent load_dotenv from repopulating values from .env files
    monkeypatch.setattr("microcms_mcp.core.config.load_dotenv", lambda *a, **k: None)
    monkeypatch.delenv("MICROCMS_API_KEY", raising=False)
    monkeypatch.delenv("MICROCMS_BASE_URL", raising=False)
    monkeypatch.delenv("MICROCMS_LOG_LEVEL", raising=False)


def test_missing_api_key_is_configuration_error():
    with pytest.raises(MissingApiKeyError) as exc:
        load_config()

    assert isinstance(exc.value, ConfigurationError)
    assert "MICROCMS_API_KEY" in str(exc.value)


def test_blank_api_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("MICROCMS_API_KEY", "   ")
    with pytest.raises(MissingApiKeyError):
        load_config()


def test_base_url_defaults_to_placeholder(monkeypatch):
    monkeypatch.setenv("MICROCMS_API_KEY", "key")
    cfg = load_config()
    assert cfg == MicroCMSConfig(api_key="key", base_url=DEFAULT_BASE_URL)


def test_base_url_from_env(monkeypatch):
    monkeypatch.setenv("MICROCMS_API_KEY", "key")
    monkeypatch.setenv("MICROCMS_BASE_URL", "https://demo.microcms.io/")
    cfg = load_config()
    assert cfg.base_url == "https://demo.microcms.io"


def test_config_is_immutable(monkeypatch):
    monkeypatch.setenv("MICROCMS_API_KEY", "key")
    cfg = load_config()
    with pytest.raises(AttributeError):
        cfg.api_key = "other"  # type: ignore[misc]


def test_dotenv_files_loaded_in_order(monkeypatch):
    loaded = []
    monkeypatch.setattr(
        "microcms_mcp.core.config.load_dotenv", lambda path: loaded.append(path)
    )
    monkeypatch.setenv("MICROCMS_API_KEY", "key")
    load_config(use_dotenv=True)
    assert loaded == [".env.local", ".env"]


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("MICROCMS_API_KEY", "key")
    monkeypatch.setenv("MICROCMS_BASE_URL", "https://demo.microcms.io")
    client = MicroCMSClient.from_env()
    assert client.base_url == "https://demo.microcms.io"
    assert client.http.headers["X-MICROCMS-API-KEY"] == "key"


def test_log_level_default_and_override(monkeypatch):
    assert log_level_from_env() == "INFO"
    monkeypatch.setenv("MICROCMS_LOG_LEVEL", "debug")
    assert log_level_from_env() == "debug"
