# File: appcast_scout/errors.py
"""appcast_scout.errors: Fatal errors of the appcast extraction pipeline.

Only two conditions abort an extraction. Garbled or non-textual input is
never an error, it simply yields no candidates.
"""
from __future__ import annotations

from typing import Any

__all__ = ["ExtractionError", "SourceReadError", "OutputAllocationError"]


class ExtractionError(Exception):
    """Base class for fatal extraction failures.

    ``source`` is whatever was passed to the extractor (a path or a stream).
    """

    def __init__(self, source: Any, msg: str = "") -> None:
        super().__init__(msg or f"extraction failed for {source!r}")
        self.source = source


class SourceReadError(ExtractionError):
    """The byte source could not be opened or read."""


class OutputAllocationError(ExtractionError):
    """The output buffer could not be allocated."""
