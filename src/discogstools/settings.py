"""Configuration loading from config.toml and env vars."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from discogstools.config import (
    DEFAULT_USER_AGENT,
    DISCOGS_API_URL,
    JSON_DEPTH,
    ClientConfig,
)


def _default_config_path() -> Path:
    """Return the default config file path."""
    return Path.home() / ".config" / "discogstools" / "config.toml"


@dataclass(frozen=True)
class AppSettings:
    """Application-wide settings.

    Loaded from config.toml and overridden by env vars.
    """

    api_url: str = DISCOGS_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    username: str = ""
    timeout: float | None = None
    json_depth: int = JSON_DEPTH

    def client_config(self) -> ClientConfig:
        """Build the per-request client configuration."""
        return ClientConfig(
            api_url=self.api_url,
            user_agent=self.user_agent,
            timeout=self.timeout,
            json_depth=self.json_depth,
        )


def load_settings(
    config_path: Path | None = None,
) -> AppSettings:
    """Load settings from config file and env vars.

    Priority: env vars > config.toml > defaults.

    Args:
        config_path: Path to config.toml. Uses default
            (~/.config/discogstools/config.toml) if None.

    Returns:
        Frozen AppSettings instance.
    """
    if config_path is None:
        config_path = _default_config_path()

    file_cfg: dict[str, dict[str, object]] = {}
    if config_path.exists():
        with open(config_path, "rb") as f:
            file_cfg = tomllib.load(f)

    discogs_cfg = file_cfg.get("discogs", {})
    output_cfg = file_cfg.get("output", {})

    api_url = str(discogs_cfg.get("api_url", DISCOGS_API_URL))
    user_agent = str(discogs_cfg.get("user_agent", DEFAULT_USER_AGENT))
    username = str(discogs_cfg.get("username", ""))

    api_url = os.environ.get("DISCOGS_API_URL", api_url)
    user_agent = os.environ.get("DISCOGS_USER_AGENT", user_agent)
    username = os.environ.get("DISCOGS_USERNAME", username)

    timeout_raw = discogs_cfg.get("timeout")
    timeout = (
        float(timeout_raw)
        if isinstance(timeout_raw, (int, float))
        and not isinstance(timeout_raw, bool)
        and timeout_raw > 0
        else None
    )
    depth_raw = output_cfg.get("json_depth", JSON_DEPTH)
    json_depth = (
        depth_raw
        if isinstance(depth_raw, int) and depth_raw > 0
        else JSON_DEPTH
    )

    return AppSettings(
        api_url=api_url.rstrip("/"),
        user_agent=user_agent,
        username=username,
        timeout=timeout,
        json_depth=json_depth,
    )
