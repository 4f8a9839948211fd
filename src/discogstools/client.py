"""Thin wrapper around the Discogs REST API for discogstools."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import urlencode

import requests

from discogstools.config import ALL_FOLDER_ID, ClientConfig
from discogstools.models import SortKey, SortOrder, make_selector

logger = logging.getLogger(__name__)

ApiResult = dict[str, Any]

_DEFAULT_CONFIG = ClientConfig()


class RemoteFetchError(Exception):
    """Raised when a Discogs API request fails."""


def build_collection_url(
    username: str,
    sort: SortKey | None = None,
    sort_order: SortOrder | None = None,
    *,
    api_url: str = _DEFAULT_CONFIG.api_url,
) -> str:
    """Build the collection URL for a user's full collection.

    Only supplied sort parameters are appended.

    Args:
        username: Discogs username, used verbatim.
        sort: Optional sort key.
        sort_order: Optional sort direction.
        api_url: Base URL of the Discogs API.

    Returns:
        Absolute request URL.
    """
    params: list[tuple[str, str]] = []
    if sort is not None:
        params.append(("sort", sort.value))
    if sort_order is not None:
        params.append(("sort_order", sort_order.value))
    return (
        f"{api_url}/users/{username}/collection/folders/"
        f"{ALL_FOLDER_ID}/releases?{urlencode(params)}"
    )


def build_wants_url(
    username: str,
    *,
    api_url: str = _DEFAULT_CONFIG.api_url,
) -> str:
    """Build the want-list URL for a user."""
    return f"{api_url}/users/{username}/wants?"


def fetch_json(
    url: str,
    *,
    config: ClientConfig = _DEFAULT_CONFIG,
    session: requests.Session | None = None,
) -> ApiResult:
    """GET a Discogs API URL and decode the JSON body.

    Args:
        url: Absolute request URL.
        config: Client config supplying headers and timeout.
        session: Optional session to send the request with.

    Returns:
        Decoded response body.

    Raises:
        RemoteFetchError: On transport failure, non-2xx
            status or an unparseable body.
    """
    http = session if session is not None else requests
    logger.debug("GET %s", url)
    try:
        response = http.get(
            url,
            headers=dict(config.headers),
            timeout=config.timeout,
        )
        response.raise_for_status()
        data: ApiResult = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise RemoteFetchError(f"Request to {url} failed: {exc}") from exc
    return data


def _cap_depth(value: Any, depth: int) -> Any:
    """Replace containers nested deeper than depth with their str()."""
    if isinstance(value, dict):
        if depth <= 0:
            return str(value)
        return {k: _cap_depth(v, depth - 1) for k, v in value.items()}
    if isinstance(value, list):
        if depth <= 0:
            return str(value)
        return [_cap_depth(v, depth - 1) for v in value]
    return value


def to_json(data: Any, *, depth: int = _DEFAULT_CONFIG.json_depth) -> str:
    """Serialize a payload to compact JSON.

    Args:
        data: Decoded API payload.
        depth: Maximum container nesting to serialize.

    Returns:
        JSON text without whitespace.
    """
    return json.dumps(
        _cap_depth(data, depth),
        separators=(",", ":"),
        ensure_ascii=False,
    )


def _fetch_or_warn(
    url: str,
    *,
    as_json: bool,
    config: ClientConfig,
    session: requests.Session | None,
) -> ApiResult | str | None:
    """Fetch a URL, logging failures instead of raising."""
    try:
        data = fetch_json(url, config=config, session=session)
    except RemoteFetchError as exc:
        logger.warning("Discogs fetch failed: %s", exc)
        return None
    if as_json:
        return to_json(data, depth=config.json_depth)
    return data


def get_collection(
    username: str | None = None,
    url: str | None = None,
    *,
    sort: SortKey | str | None = None,
    sort_order: SortOrder | str | None = None,
    as_json: bool = False,
    config: ClientConfig = _DEFAULT_CONFIG,
    session: requests.Session | None = None,
) -> ApiResult | str | None:
    """Fetch a user's full collection.

    Exactly one of username and url must be given.

    Args:
        username: Discogs username.
        url: Discogs profile URL.
        sort: Optional sort key.
        sort_order: Optional sort direction.
        as_json: Return compact JSON text instead of a dict.
        config: Client config for the request.
        session: Optional session to send the request with.

    Returns:
        The collection payload, its JSON text, or None if
        the request failed.

    Raises:
        InvalidInputError: If the selector or sort values
            are invalid.
    """
    identifier = make_selector(username, url).resolve()
    sort_key = SortKey.parse(sort) if sort is not None else None
    order = SortOrder.parse(sort_order) if sort_order is not None else None
    request_url = build_collection_url(
        identifier,
        sort_key,
        order,
        api_url=config.api_url,
    )
    return _fetch_or_warn(
        request_url,
        as_json=as_json,
        config=config,
        session=session,
    )


def get_wants(
    username: str | None = None,
    url: str | None = None,
    *,
    as_json: bool = False,
    config: ClientConfig = _DEFAULT_CONFIG,
    session: requests.Session | None = None,
) -> ApiResult | str | None:
    """Fetch a user's want-list.

    Exactly one of username and url must be given.

    Args:
        username: Discogs username.
        url: Discogs profile URL.
        as_json: Return compact JSON text instead of a dict.
        config: Client config for the request.
        session: Optional session to send the request with.

    Returns:
        The want-list payload, its JSON text, or None if
        the request failed.

    Raises:
        InvalidInputError: If the selector is invalid.
    """
    identifier = make_selector(username, url).resolve()
    request_url = build_wants_url(identifier, api_url=config.api_url)
    return _fetch_or_warn(
        request_url,
        as_json=as_json,
        config=config,
        session=session,
    )
