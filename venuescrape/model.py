"""
Record types produced by the extractors.

Link and Event are immutable: they are built completely by the extractors
and only then handed to the caller.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Link:
    """
    One <a> element: its href attribute and its normalized text.
    """

    href: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Event:
    """
    One venue listing.

    Every field is a normalized string and may be empty. `missing` lists the
    fields whose source node could not be located in the listing's markup,
    so an empty title from "<h2></h2>" can be told apart from no title node
    at all.
    """

    venue: str
    date: str
    title: str
    description: str
    missing: Tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["missing"] = list(self.missing)
        return data
