"""Look up Discogs collections and want-lists."""

from discogstools.client import (
    RemoteFetchError,
    build_collection_url,
    build_wants_url,
    fetch_json,
    get_collection,
    get_wants,
    to_json,
)
from discogstools.config import ClientConfig
from discogstools.models import (
    ProfileUrl,
    Release,
    Selector,
    SortKey,
    SortOrder,
    Username,
    make_selector,
)
from discogstools.resolver import InvalidInputError, resolve_username
from discogstools.settings import AppSettings, load_settings

__all__ = [
    "AppSettings",
    "ClientConfig",
    "InvalidInputError",
    "ProfileUrl",
    "Release",
    "RemoteFetchError",
    "Selector",
    "SortKey",
    "SortOrder",
    "Username",
    "build_collection_url",
    "build_wants_url",
    "fetch_json",
    "get_collection",
    "get_wants",
    "load_settings",
    "make_selector",
    "resolve_username",
    "to_json",
]
