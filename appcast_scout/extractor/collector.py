# appcast_scout/extractor/collector.py
"""
Bounded, deduplicating collection of candidates and their final ordering.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Set

from appcast_scout.constants import MAX_URLS
from appcast_scout.extractor.models import Candidate

__all__ = ["CandidateCollector", "sort_candidates"]

logger = logging.getLogger("AppcastScout.collector")


class CandidateCollector:
    """Keeps candidates in discovery order, at most ``capacity`` distinct URLs.

    The first occurrence of a URL wins; a later duplicate never updates its
    priority. Once full, further candidates are dropped without error.
    """

    def __init__(self, capacity: int = MAX_URLS) -> None:
        self.capacity = capacity
        self._items: List[Candidate] = []
        self._seen: Set[str] = set()
        self.dropped = 0

    def insert(self, candidate: Candidate) -> bool:
        """Add *candidate*; return False when it was a duplicate or did not fit."""
        if candidate.url in self._seen:
            return False
        if len(self._items) >= self.capacity:
            self.dropped += 1
            logger.debug("Collection full (%d), dropping %s", self.capacity, candidate.url)
            return False
        self._items.append(candidate)
        self._seen.add(candidate.url)
        return True

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


def sort_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Order by priority, then byte-wise by URL."""
    return sorted(candidates, key=lambda c: (c.priority, c.url.encode("ascii")))
