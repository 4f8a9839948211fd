"""CLI entry point for discogstools with subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import requests

from discogstools.client import get_collection, get_wants
from discogstools.models import Release, SortKey, SortOrder
from discogstools.resolver import InvalidInputError
from discogstools.settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def _add_selector_args(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive username/URL options."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-u",
        "--username",
        help="Discogs username (default: from config)",
    )
    group.add_argument(
        "--url",
        help="Discogs profile URL",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print compact JSON instead of a release list",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write output to a file",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        description="Discogs collection and want-list lookup",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--config",
        help="Path to config.toml",
    )

    subs = parser.add_subparsers(dest="command")

    # collection
    p_collection = subs.add_parser(
        "collection",
        help="Show a user's collection",
    )
    _add_selector_args(p_collection)
    p_collection.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        help="Sort key",
    )
    p_collection.add_argument(
        "--sort-order",
        choices=[o.value for o in SortOrder],
        help="Sort direction",
    )

    # wants
    p_wants = subs.add_parser(
        "wants",
        help="Show a user's want-list",
    )
    _add_selector_args(p_wants)

    return parser


def _selector_kwargs(
    args: argparse.Namespace,
    settings: AppSettings,
) -> dict[str, str | None]:
    """Pick the username or URL, falling back to settings."""
    username = getattr(args, "username", None)
    url = getattr(args, "url", None)
    if username is None and url is None and settings.username:
        username = settings.username
    return {"username": username, "url": url}


def format_releases(result: dict[str, Any], key: str) -> str:
    """Render payload items as 'Artist - Title (Year)' lines.

    Args:
        result: Decoded collection or want-list payload.
        key: Item list key, ``releases`` or ``wants``.

    Returns:
        Newline-joined release lines.
    """
    return "\n".join(
        str(Release.from_entry(entry)) for entry in result.get(key, [])
    )


def _emit(text: str, output: str | None) -> None:
    """Write text to a file or stdout."""
    if not output:
        print(text)
        return
    output_path = Path(output)
    try:
        output_path.write_text(text + "\n")
    except OSError as exc:
        logger.error(
            "Failed to write %s: %s",
            output_path,
            exc,
        )
        sys.exit(1)
    logger.info("Output written to %s", output_path)


def _run_lookup(
    args: argparse.Namespace,
    settings: AppSettings,
) -> None:
    """Execute the collection or wants subcommand.

    Args:
        args: Parsed CLI arguments.
        settings: Application settings.
    """
    as_json = getattr(args, "json", False)
    config = settings.client_config()
    with requests.Session() as session:
        try:
            if args.command == "collection":
                result = get_collection(
                    **_selector_kwargs(args, settings),
                    sort=getattr(args, "sort", None),
                    sort_order=getattr(args, "sort_order", None),
                    as_json=as_json,
                    config=config,
                    session=session,
                )
            else:
                result = get_wants(
                    **_selector_kwargs(args, settings),
                    as_json=as_json,
                    config=config,
                    session=session,
                )
        except InvalidInputError as exc:
            logger.error("Invalid input: %s", exc)
            sys.exit(1)

    if result is None:
        logger.error("No %s data returned.", args.command)
        sys.exit(1)

    if isinstance(result, str):
        _emit(result, getattr(args, "output", None))
        return

    key = "releases" if args.command == "collection" else "wants"
    text = format_releases(result, key)
    logger.info(
        "%d releases in %s",
        len(result.get(key, [])),
        args.command,
    )
    _emit(text, getattr(args, "output", None))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Args:
        argv: Argument list. Uses sys.argv if None.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(
            logging.DEBUG
            if getattr(
                args,
                "verbose",
                False,
            )
            else logging.INFO
        ),
        format="%(levelname)s: %(message)s",
    )

    if not getattr(args, "command", None):
        parser.print_help()
        sys.exit(1)

    config_path = Path(args.config) if getattr(args, "config", None) else None
    settings = load_settings(config_path=config_path)

    _run_lookup(args, settings)
