# appcast_scout/extractor/models.py
"""
Data models for the appcast extractor.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple


class Priority(IntEnum):
    """Rank of a candidate URL, lower is better.

    FEED_* values are URLs whose path ends in ``.xml`` or ``.appcast``,
    LINK_* values are keyword matches only.
    """

    FEED_RELEASE = 0
    FEED = 1
    FEED_PRERELEASE = 2
    LINK_RELEASE = 3
    LINK = 4
    LINK_PRERELEASE = 5


@dataclass(frozen=True, slots=True)
class Candidate:
    """A scanned token accepted as a plausible appcast URL."""

    url: str
    priority: Priority


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Output of one extraction: the newline-separated buffer and what went into it."""

    buffer: bytes = b""
    length: int = 0
    candidates: Tuple[Candidate, ...] = field(default_factory=tuple)

    @property
    def urls(self) -> List[str]:
        return [c.url for c in self.candidates]

    def __bool__(self) -> bool:
        return self.length > 0
