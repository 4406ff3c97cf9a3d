from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class FeedEntry:
    """Single RSS <item>, projected from a published post."""

    title: str
    link: str
    description: str
    pub_date: str
    guid: str


@dataclass(frozen=True)
class FeedChannel:
    """RSS <channel> with its items in collection order."""

    title: str
    link: str
    description: str
    language: str
    items: List[FeedEntry] = field(default_factory=list)
