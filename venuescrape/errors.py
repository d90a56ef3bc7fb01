"""
Exceptions raised by venuescrape.

Only failures that prevent building ANY result are exceptions:
- the document cannot be turned into a tree (DocumentParseError)
- the page could not be fetched (FetchError, raised by the glue layer)
- a profile/site name is unknown (ProfileNotFoundError)

A search that finds nothing is never an error: it shows up as an empty list
or an empty field.
"""

from __future__ import annotations

from typing import Optional


class VenueScrapeError(Exception):
    """Base class for all venuescrape errors."""


class DocumentParseError(VenueScrapeError):
    """The input could not be parsed into an HTML tree."""


class FetchError(VenueScrapeError):
    """
    A page could not be fetched.

    status_code is set when the server answered with a non-success status,
    and is None for transport or read failures (see __cause__).
    """

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{message}: {url}")
        self.url = url
        self.status_code = status_code


class ProfileNotFoundError(VenueScrapeError, KeyError):
    """No extraction profile or site is registered under the given name."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        known = ", ".join(self.known) if self.known else "none"
        return f"unknown site/profile {self.name!r} (known: {known})"
