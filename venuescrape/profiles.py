"""
Extraction profiles.

A profile describes how one site's markup maps to Event records, as data:

- container: predicate that picks the root node of ONE listing
- fields: field name -> FieldRule

A FieldRule tries its locators in order and reads the value from the first
node found:

- Search(predicate): find_first scoped to the container subtree
- Path(steps): fixed first-child / next-sibling chain from the container

and reads it with either Attr(name) (attribute value) or TEXT
(extract_text).

Adding a site means registering a new Profile; events.extract_events()
interprets all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

from venuescrape.errors import ProfileNotFoundError
from venuescrape.text import extract_text
from venuescrape.tree import (
    Node,
    Predicate,
    Step,
    attr_contains,
    find_first,
    follow_path,
    get_attr,
    has_attribute,
    tag_is,
)

FC = Step.FIRST_CHILD
NS = Step.NEXT_SIBLING

EVENT_FIELDS = ("date", "title", "description")


# ---------------------------------------------------------------------------
# Locators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Search:
    """Scoped predicate search below the container."""

    predicate: Predicate

    def locate(self, container: Node) -> Optional[Node]:
        return find_first(container, self.predicate)


@dataclass(frozen=True)
class Path:
    """Fixed structural path from the container. Fragile; use as a fallback."""

    steps: Tuple[Step, ...]

    def locate(self, container: Node) -> Optional[Node]:
        return follow_path(container, self.steps)


Locator = Union[Search, Path]


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Attr:
    """Read an attribute of the located node ("" if it is not set)."""

    name: str

    def read(self, node: Node) -> str:
        return get_attr(node, self.name)


@dataclass(frozen=True)
class Text:
    """Read the normalized text of the located node."""

    def read(self, node: Node) -> str:
        return extract_text(node)


TEXT = Text()

Reader = Union[Attr, Text]


@dataclass(frozen=True)
class FieldRule:
    locators: Tuple[Locator, ...]
    reader: Reader = TEXT

    def __post_init__(self) -> None:
        if not self.locators:
            raise ValueError("FieldRule needs at least one locator")

    def locate(self, container: Node) -> Optional[Node]:
        for locator in self.locators:
            node = locator.locate(container)
            if node is not None:
                return node
        return None


@dataclass(frozen=True, eq=False)
class Profile:
    """
    How to find listings and their fields in one site's markup.

    `venue` is stamped on every Event built with this profile; callers may
    override it per call.
    """

    name: str
    venue: str
    container: Predicate
    fields: Mapping[str, FieldRule] = field(default_factory=dict)
    descend_into_containers: bool = True

    def __post_init__(self) -> None:
        unknown = sorted(set(self.fields) - set(EVENT_FIELDS))
        if unknown:
            raise ValueError(f"profile {self.name!r} has unknown fields: {', '.join(unknown)}")


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

# treibhaus.at: one <div id="event-..."> per listing. The page has no stable
# class names, so the structural paths stay as fallbacks behind searches.
TREIBHAUS = Profile(
    name="treibhaus",
    venue="Treibhaus",
    container=attr_contains("div", "id", "event-"),
    fields={
        "date": FieldRule(
            locators=(
                Search(has_attribute(None, "content")),
                Path((FC, FC, FC, FC, FC, FC)),
            ),
            reader=Attr("content"),
        ),
        "title": FieldRule(
            locators=(
                Search(tag_is("h1", "h2", "h3", "h4", "h5", "h6")),
                Path((FC, FC, NS, FC, FC)),
            ),
        ),
        "description": FieldRule(
            locators=(
                Path((FC, FC, NS, FC, NS, FC)),
                Search(attr_contains(None, "class", "description")),
            ),
        ),
    },
)

# pmk.or.at (Drupal): listings are layout blocks, fields carry field--* classes.
PMK = Profile(
    name="pmk",
    venue="PMK",
    container=attr_contains("div", "class", "layout--pmktermin"),
    fields={
        "date": FieldRule(
            locators=(Search(has_attribute("time", "datetime")),),
            reader=Attr("datetime"),
        ),
        "title": FieldRule(
            locators=(Search(attr_contains("div", "class", "field--name-field-titel")),),
        ),
        "description": FieldRule(
            locators=(Search(attr_contains("div", "class", "field--type-text-with-summary")),),
        ),
    },
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_REGISTRY: Dict[str, Profile] = {}


def register_profile(profile: Profile, replace: bool = False) -> Profile:
    key = profile.name.strip().lower()
    if not key:
        raise ValueError("profile name must not be empty")
    if key in _REGISTRY and not replace:
        raise ValueError(f"profile {key!r} is already registered")
    _REGISTRY[key] = profile
    return profile


def unregister_profile(name: str) -> None:
    _REGISTRY.pop(name.strip().lower(), None)


def get_profile(name: str) -> Profile:
    key = (name or "").strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise ProfileNotFoundError(name, profile_names()) from None


def profile_names() -> list[str]:
    return sorted(_REGISTRY)


register_profile(TREIBHAUS)
register_profile(PMK)
