"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from discogstools.config import DEFAULT_USER_AGENT, ClientConfig
from discogstools.settings import AppSettings, load_settings


@pytest.fixture
def config_toml(tmp_path: Path) -> Path:
    """Create a minimal config.toml file."""
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        "[discogs]\n"
        'api_url = "http://localhost:8080/"\n'
        'user_agent = "TestAgent/0.1"\n'
        'username = "mxtcha616"\n'
        "timeout = 15\n"
        "\n"
        "[output]\n"
        "json_depth = 5\n"
    )
    return cfg


@pytest.fixture
def empty_config(tmp_path: Path) -> Path:
    """Create an empty config.toml file."""
    cfg = tmp_path / "config.toml"
    cfg.write_text("")
    return cfg


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop Discogs env vars from the test environment."""
    for name in (
        "DISCOGS_API_URL",
        "DISCOGS_USER_AGENT",
        "DISCOGS_USERNAME",
    ):
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.api_url == "https://api.discogs.com"
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.username == ""
        assert settings.timeout is None
        assert settings.json_depth == 10

    def test_frozen(self) -> None:
        settings = AppSettings()
        with pytest.raises(AttributeError):
            settings.username = "x"  # type: ignore[misc]

    def test_client_config(self) -> None:
        settings = AppSettings(user_agent="UA/1", timeout=3.0)
        assert settings.client_config() == ClientConfig(
            user_agent="UA/1",
            timeout=3.0,
        )


class TestClientConfig:
    def test_headers(self) -> None:
        assert dict(ClientConfig().headers) == {
            "User-Agent": DEFAULT_USER_AGENT,
        }

    def test_headers_read_only(self) -> None:
        headers = ClientConfig().headers
        with pytest.raises(TypeError):
            headers["User-Agent"] = "x"  # type: ignore[index]


class TestLoadSettings:
    def test_from_config_file(
        self,
        config_toml: Path,
    ) -> None:
        settings = load_settings(config_path=config_toml)
        assert settings.api_url == "http://localhost:8080"
        assert settings.user_agent == "TestAgent/0.1"
        assert settings.username == "mxtcha616"
        assert settings.timeout == 15.0
        assert settings.json_depth == 5

    def test_env_vars_override(
        self,
        config_toml: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("DISCOGS_API_URL", "http://env:9999")
        monkeypatch.setenv("DISCOGS_USER_AGENT", "EnvAgent/2.0")
        monkeypatch.setenv("DISCOGS_USERNAME", "someone")
        settings = load_settings(config_path=config_toml)
        assert settings.api_url == "http://env:9999"
        assert settings.user_agent == "EnvAgent/2.0"
        assert settings.username == "someone"

    def test_defaults_when_no_config(
        self,
        tmp_path: Path,
    ) -> None:
        missing = tmp_path / "nonexistent.toml"
        settings = load_settings(config_path=missing)
        assert settings == AppSettings()

    def test_empty_config_uses_defaults(
        self,
        empty_config: Path,
    ) -> None:
        settings = load_settings(config_path=empty_config)
        assert settings.json_depth == 10
        assert settings.timeout is None

    def test_invalid_values_fall_back(
        self,
        tmp_path: Path,
    ) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            '[discogs]\ntimeout = "soon"\n\n[output]\njson_depth = -1\n'
        )
        settings = load_settings(config_path=cfg)
        assert settings.timeout is None
        assert settings.json_depth == 10
