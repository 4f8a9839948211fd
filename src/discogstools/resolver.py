"""Resolve Discogs usernames from profile URLs."""

from __future__ import annotations

import re

_PROFILE_URL_RE = re.compile(r"^https://www\.discogs\.com/user/(.+)")


class InvalidInputError(ValueError):
    """Raised when caller input is rejected before any request."""


def resolve_username(url: str) -> str:
    """Extract the username from a Discogs profile URL.

    Everything after ``/user/`` is returned, including any
    trailing path segments.

    Args:
        url: A URL like ``https://www.discogs.com/user/<name>``.

    Returns:
        The username part of the URL.

    Raises:
        InvalidInputError: If the URL is not a Discogs profile URL.
    """
    match = _PROFILE_URL_RE.match(url)
    if not match:
        raise InvalidInputError(f"Not a Discogs profile URL: {url!r}")
    return match.group(1)
