"""
CLI (Command Line Interface).

    venuescrape sites
    venuescrape events <site> [--file page.html | --url URL] [--venue NAME] [--json]
    venuescrape links (--file page.html | --url URL) [--json]

`events` fetches the site's configured endpoint unless --file or --url is
given. Records go to stdout (one per line, or a JSON array with --json);
errors go to stderr with exit code 1. Nothing is printed for a page that
failed to fetch or parse.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from venuescrape.config import SITES, get_site
from venuescrape.document import DocumentSource
from venuescrape.errors import VenueScrapeError
from venuescrape.events import parse_events
from venuescrape.fetch import fetch_html
from venuescrape.links import parse_links
from venuescrape.model import Event, Link

logger = logging.getLogger(__name__)


def _load_document(file: Optional[str], url: Optional[str]) -> DocumentSource:
    """
    Return the raw document from a local file or a URL.
    """
    if file:
        logger.debug("Reading %s", file)
        return Path(file).read_bytes()
    if not url:
        raise VenueScrapeError("no document source given (use --file or --url)")
    return fetch_html(url)


def _print_json(records: list[Any]) -> None:
    print(json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2))


def _format_event(ev: Event) -> str:
    line = f"{ev.date or '-'} | {ev.venue} | {ev.title or '(no title)'}"
    if ev.description:
        line += f" | {ev.description}"
    if ev.missing:
        line += f"  [missing: {', '.join(ev.missing)}]"
    return line


def _format_link(link: Link) -> str:
    return f"{link.href} | {link.text}"


def _cmd_sites(args: argparse.Namespace) -> int:
    for name in sorted(SITES):
        site = SITES[name]
        print(f"{site.name} | {site.profile.venue} | {site.url}")
    return 0


def _cmd_events(args: argparse.Namespace) -> int:
    site = get_site(args.site)
    url = args.url or site.url
    document = _load_document(args.file, url)

    events = parse_events(document, site.profile, venue=args.venue)

    if args.json:
        _print_json(events)
        return 0

    if not events:
        print("No events found.")
        return 0

    for ev in events:
        print(_format_event(ev))
    return 0


def _cmd_links(args: argparse.Namespace) -> int:
    links = parse_links(_load_document(args.file, args.url))

    if args.json:
        _print_json(links)
        return 0

    if not links:
        print("No links found.")
        return 0

    for link in links:
        print(_format_link(link))
    return 0


def _add_source_args(p: argparse.ArgumentParser, required: bool = False) -> None:
    src = p.add_mutually_exclusive_group(required=required)
    src.add_argument("--file", "-f", type=str, help="Read the HTML document from a local file")
    src.add_argument("--url", "-u", type=str, help="Fetch the HTML document from this URL")
    p.add_argument("--json", action="store_true", help="Print records as a JSON array")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="venuescrape", description="Extract links and venue events from HTML pages")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("sites", help="List known sites")

    p_events = sub.add_parser("events", help="Extract events of a known site")
    p_events.add_argument("site", type=str, help="Site name (see 'sites')")
    p_events.add_argument("--venue", type=str, default=None, help="Override the venue name on every event")
    _add_source_args(p_events)

    p_links = sub.add_parser("links", help="Extract all links of a page")
    _add_source_args(p_links, required=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "sites": _cmd_sites,
        "events": _cmd_events,
        "links": _cmd_links,
    }

    try:
        raise SystemExit(handlers[args.command](args))
    except (VenueScrapeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)
