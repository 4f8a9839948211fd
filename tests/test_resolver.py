"""Tests for profile URL resolution."""

from __future__ import annotations

import pytest

from discogstools.resolver import InvalidInputError, resolve_username


class TestResolveUsername:
    @pytest.mark.parametrize(
        "name",
        ["mxtcha616", "a", "DJ_Shadow-99", "user.name"],
    )
    def test_returns_username(self, name: str) -> None:
        url = f"https://www.discogs.com/user/{name}"
        assert resolve_username(url) == name

    def test_keeps_trailing_segments(self) -> None:
        url = "https://www.discogs.com/user/mxtcha616/collection"
        assert resolve_username(url) == "mxtcha616/collection"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "https://example.com/user/foo",
            "https://www.discogs.com/artist/foo",
            "https://www.discogs.com/user/",
            "http://www.discogs.com/user/foo",
            "see https://www.discogs.com/user/foo",
        ],
    )
    def test_rejects_non_profile_urls(self, url: str) -> None:
        with pytest.raises(InvalidInputError, match="profile URL"):
            resolve_username(url)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_username("nope")
