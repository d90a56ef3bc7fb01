"""
Event extraction (HTML + profile -> list[Event]).

One generic interpreter for every Profile:

1. find all container nodes (one per listing), in document order
2. for each container and each field rule, locate the field node inside the
   container and read its value
3. a field whose node cannot be located becomes "" and is listed in
   Event.missing; the listing itself is always emitted
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from venuescrape.document import DocumentSource, parse_document
from venuescrape.model import Event
from venuescrape.profiles import EVENT_FIELDS, Profile, get_profile
from venuescrape.tree import Node, find_all

logger = logging.getLogger(__name__)


def _resolve_profile(profile: Union[Profile, str]) -> Profile:
    if isinstance(profile, Profile):
        return profile
    return get_profile(profile)


def build_event(container: Node, profile: Profile, venue: Optional[str] = None) -> Event:
    """Build one Event from one listing container."""
    values: Dict[str, str] = {name: "" for name in EVENT_FIELDS}
    missing: List[str] = []

    for name, rule in profile.fields.items():
        node = rule.locate(container)
        if node is None:
            missing.append(name)
            continue
        values[name] = rule.reader.read(node)

    if missing:
        logger.debug("%s: listing without %s", profile.name, ", ".join(missing))

    return Event(
        venue=profile.venue if venue is None else venue,
        date=values["date"],
        title=values["title"],
        description=values["description"],
        missing=tuple(missing),
    )


def find_containers(root: Node, profile: Profile) -> List[Node]:
    return find_all(root, profile.container, descend_into_matches=profile.descend_into_containers)


def extract_events(root: Node, profile: Union[Profile, str], venue: Optional[str] = None) -> List[Event]:
    """
    One Event per listing container below `root`, in document order.

    `profile` is a Profile or the name of a registered one; `venue`
    overrides the profile's venue name.
    """
    prof = _resolve_profile(profile)
    containers = find_containers(root, prof)
    logger.debug("%s: found %d listing containers", prof.name, len(containers))
    return [build_event(container, prof, venue=venue) for container in containers]


def parse_events(
    document: DocumentSource,
    profile: Union[Profile, str],
    venue: Optional[str] = None,
) -> List[Event]:
    """
    Parse an HTML document and extract its events with `profile`.

    Raises DocumentParseError if the input cannot be parsed and
    ProfileNotFoundError for an unknown profile name. No containers found
    is not an error: the result is [].
    """
    prof = _resolve_profile(profile)
    return extract_events(parse_document(document), prof, venue=venue)
