# File: appcast_scout/aggregator.py
"""appcast_scout.aggregator: Collects per-file extraction results into one report."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, TypedDict, Union

from appcast_scout.errors import ExtractionError
from appcast_scout.extractor import ExtractionResult


class UrlInfo(TypedDict):
    """One URL and its rank."""

    url: str
    priority: int


class FileResult(TypedDict, total=False):
    """Outcome for a single scanned file."""

    path: str
    urls: List[UrlInfo]
    length: int
    error: Union[str, None]


@dataclass(slots=True)
class ScanReport:
    """Results of scanning one or more files."""

    files: List[FileResult] = field(default_factory=list)

    @property
    def failed(self) -> List[FileResult]:
        return [f for f in self.files if f.get("error")]

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def _file_result(path: Union[str, Path], outcome: Union[ExtractionResult, ExtractionError]) -> FileResult:
    if isinstance(outcome, ExtractionError):
        return {
            "path": str(path),
            "urls": [],
            "length": 0,
            "error": f"{type(outcome).__name__}: {outcome}",
        }
    return {
        "path": str(path),
        "urls": [{"url": c.url, "priority": int(c.priority)} for c in outcome.candidates],
        "length": outcome.length,
        "error": None,
    }


def aggregate_results(
    results: Iterable[Tuple[Union[str, Path], Union[ExtractionResult, ExtractionError]]],
) -> ScanReport:
    """Build a ScanReport from ``(path, result-or-error)`` pairs, keeping their order."""
    return ScanReport(files=[_file_result(path, outcome) for path, outcome in results])
