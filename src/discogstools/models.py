"""Domain models for discogstools."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from discogstools.resolver import InvalidInputError, resolve_username


class SortKey(Enum):
    """Collection sort keys accepted by the Discogs API."""

    LABEL = "label"
    ARTIST = "artist"
    TITLE = "title"
    CATNO = "catno"
    FORMAT = "format"
    RATING = "rating"
    ADDED = "added"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | SortKey) -> SortKey:
        """Coerce a raw value into a SortKey.

        Raises:
            InvalidInputError: If the value is not a known key.
        """
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise InvalidInputError(
                f"Unsupported sort key {value!r} (expected one of: {choices})"
            ) from None


class SortOrder(Enum):
    """Collection sort directions."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | SortOrder) -> SortOrder:
        """Coerce a raw value into a SortOrder.

        Raises:
            InvalidInputError: If the value is not asc or desc.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(
                f"Unsupported sort order {value!r} (expected asc or desc)"
            ) from None


@dataclass(frozen=True)
class Username:
    """A username supplied directly by the caller."""

    name: str

    def resolve(self) -> str:
        """Return the name as-is."""
        return self.name


@dataclass(frozen=True)
class ProfileUrl:
    """A Discogs profile URL naming a user."""

    url: str

    def resolve(self) -> str:
        """Parse the username out of the URL."""
        return resolve_username(self.url)


Selector = Username | ProfileUrl


def make_selector(
    username: str | None = None,
    url: str | None = None,
) -> Selector:
    """Build a selector from mutually exclusive arguments.

    Args:
        username: A bare Discogs username.
        url: A Discogs profile URL.

    Returns:
        Username or ProfileUrl, whichever was given.

    Raises:
        InvalidInputError: If both or neither are given.
    """
    if username is not None and url is not None:
        raise InvalidInputError("Pass either a username or a URL, not both")
    if username is not None:
        return Username(username)
    if url is not None:
        return ProfileUrl(url)
    raise InvalidInputError("A username or a profile URL is required")


@dataclass(frozen=True)
class Release:
    """A release entry from a collection or want-list."""

    artist: str
    title: str
    year: str

    def __str__(self) -> str:
        """Format as 'Artist - Title (Year)'."""
        if self.year:
            return f"{self.artist} - {self.title} ({self.year})"
        return f"{self.artist} - {self.title}"

    @classmethod
    def from_entry(cls, entry: dict[str, Any]) -> Release:
        """Build from a collection or want-list item.

        Args:
            entry: One item of ``releases`` or ``wants``.

        Returns:
            Release instance. A year of 0 means unknown.
        """
        info = entry.get("basic_information", {})
        artists = ", ".join(
            str(a.get("name", "")) for a in info.get("artists", [])
        )
        year = info.get("year") or ""
        return cls(
            artist=artists,
            title=str(info.get("title", "")),
            year=str(year),
        )
