"""
Known sites.

A Site couples an endpoint with the profile that understands its markup, so
callers pass one value around instead of a URL constant plus a separate
choice of parsing functions. The extraction core never sees URLs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from venuescrape.errors import ProfileNotFoundError
from venuescrape.profiles import PMK, TREIBHAUS, Profile

# ---------------------------------------------------------------------------
# HTTP defaults
# ---------------------------------------------------------------------------

DEFAULT_TIMEOUT = 30

USER_AGENT = "venuescrape/0.1 (+https://pypi.org/project/venuescrape/)"


# ---------------------------------------------------------------------------
# Sites
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Site:
    name: str
    url: str
    profile: Profile


SITES: Dict[str, Site] = {
    "treibhaus": Site(name="treibhaus", url="https://treibhaus.at/programm", profile=TREIBHAUS),
    "pmk": Site(name="pmk", url="https://www.pmk.or.at/termine", profile=PMK),
}


def get_site(name: str) -> Site:
    key = (name or "").strip().lower()
    try:
        return SITES[key]
    except KeyError:
        raise ProfileNotFoundError(name, sorted(SITES)) from None
