# appcast_scout/extractor/classifier.py
"""
Two-tier appcast URL classifier and priority ranking.

Tier 1 accepts URLs whose path (before ``?``/``#``) ends in a feed file
extension. Tier 2 accepts URLs containing an update-related keyword.
Keywords are matched as plain substrings, so ``"updates"`` inside an
unrelated longer word still counts.
"""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appcast_scout.constants import MIN_URL_LENGTH
from appcast_scout.extractor.models import Candidate, Priority

__all__ = ["ClassifierRules", "UrlClassifier"]


class ClassifierRules(BaseModel):
    """Keyword tables and thresholds used by :class:`UrlClassifier`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    schemes: Tuple[str, ...] = Field(("http://", "https://"), min_length=1)
    min_length: int = Field(MIN_URL_LENGTH, ge=1)
    feed_extensions: Tuple[str, ...] = (".xml", ".appcast")
    feed_keywords: Tuple[str, ...] = (
        "appcast",
        "update",
        "updates",
        "sparkle",
        "release",
        "releases",
        "version",
        "versions",
        "feed",
        "rss",
        "changelog",
        "download",
        "downloads",
    )
    release_keywords: Tuple[str, ...] = ("release", "prod", "stable")
    prerelease_keywords: Tuple[str, ...] = (
        "beta",
        "alpha",
        "nightly",
        "dev",
        "tip",
        "test",
        "rc",
        "preview",
    )

    @field_validator(
        "feed_extensions",
        "feed_keywords",
        "release_keywords",
        "prerelease_keywords",
        mode="after",
    )
    def _lowercase(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not word for word in v):
            raise ValueError("keywords must be non-empty strings")
        return tuple(word.lower() for word in v)


_URL_TERMINATORS = (" ", "\t", "\r", "\n")
_PATH_TERMINATORS = ("?", "#")


def _first_index(text: str, chars: Tuple[str, ...], end: int) -> int:
    """Index of the first of *chars* in ``text[:end]``, or *end*."""
    found = end
    for ch in chars:
        idx = text.find(ch, 0, found)
        if idx != -1:
            found = idx
    return found


class UrlClassifier:
    """Decides whether a token is an appcast URL and ranks accepted ones.

    The keyword tables are fixed; every instance shares the same frozen rules.
    """

    rules: ClassifierRules = ClassifierRules()

    def _bounds(self, token: str) -> Optional[Tuple[int, int]]:
        """Return ``(url_end, path_end)`` or None if the prefilter rejects *token*."""
        if not token.startswith(self.rules.schemes):
            return None
        if len(token) < self.rules.min_length:
            return None
        url_end = _first_index(token, _URL_TERMINATORS, len(token))
        path_end = _first_index(token, _PATH_TERMINATORS, url_end)
        return url_end, path_end

    def _is_feed_path(self, token: str, path_end: int) -> bool:
        return token[:path_end].lower().endswith(self.rules.feed_extensions)

    @staticmethod
    def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
        return any(word in text for word in keywords)

    def is_appcast_url(self, token: str) -> bool:
        bounds = self._bounds(token)
        if bounds is None:
            return False
        url_end, path_end = bounds
        if self._is_feed_path(token, path_end):
            return True
        return self._contains_any(token[:url_end].lower(), self.rules.feed_keywords)

    def _rank(self, lowered: str, is_feed: bool) -> Priority:
        has_release = self._contains_any(lowered, self.rules.release_keywords)
        has_prerelease = self._contains_any(lowered, self.rules.prerelease_keywords)
        if is_feed:
            if has_release:
                return Priority.FEED_RELEASE
            if has_prerelease:
                return Priority.FEED_PRERELEASE
            return Priority.FEED
        if has_release:
            return Priority.LINK_RELEASE
        if has_prerelease:
            return Priority.LINK_PRERELEASE
        return Priority.LINK

    def priority(self, url: str) -> Priority:
        """Rank *url*; only meaningful for URLs accepted by :meth:`is_appcast_url`."""
        url_end = _first_index(url, _URL_TERMINATORS, len(url))
        path_end = _first_index(url, _PATH_TERMINATORS, url_end)
        return self._rank(url[:url_end].lower(), self._is_feed_path(url, path_end))

    def classify(self, token: str) -> Optional[Candidate]:
        """Return a :class:`Candidate` for an accepted token, else None."""
        bounds = self._bounds(token)
        if bounds is None:
            return None
        url_end, path_end = bounds
        lowered = token[:url_end].lower()
        is_feed = self._is_feed_path(token, path_end)
        if not is_feed and not self._contains_any(lowered, self.rules.feed_keywords):
            return None
        return Candidate(url=token, priority=self._rank(lowered, is_feed))
