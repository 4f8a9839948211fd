"""Configuration for discogstools."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DISCOGS_API_URL = "https://api.discogs.com"
DEFAULT_USER_AGENT = (
    "DiscogsTools/1.0 +https://github.com/discogstools/discogstools"
)

# Folder 0 holds every release in a collection.
ALL_FOLDER_ID = 0

# Nesting cap for compact JSON output.
JSON_DEPTH = 10


@dataclass(frozen=True)
class ClientConfig:
    """Values applied to every Discogs API request.

    Timeout is in seconds; None leaves it to requests.
    """

    api_url: str = DISCOGS_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None
    json_depth: int = JSON_DEPTH

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only identification headers."""
        return MappingProxyType({"User-Agent": self.user_agent})
