"""
venuescrape: extract links and venue event listings from HTML pages.

    from venuescrape import parse_events, parse_links

    events = parse_events(html, "pmk")
    links = parse_links(html)
"""

from venuescrape.errors import DocumentParseError, FetchError, ProfileNotFoundError, VenueScrapeError
from venuescrape.events import extract_events, parse_events
from venuescrape.links import extract_links, parse_links
from venuescrape.model import Event, Link
from venuescrape.profiles import Profile, get_profile, register_profile

__all__ = [
    "DocumentParseError",
    "Event",
    "FetchError",
    "Link",
    "Profile",
    "ProfileNotFoundError",
    "VenueScrapeError",
    "extract_events",
    "extract_links",
    "get_profile",
    "parse_events",
    "parse_links",
    "register_profile",
]
