# File: appcast_scout/engine.py
"""appcast_scout.engine: Runs the extraction pipeline over one byte source.

Scanner → classifier → collector → sorter → output builder. Each call owns its
own buffers, so independent calls may run in parallel threads.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import BinaryIO, Iterator, List, Optional, Union

from appcast_scout.config import ExtractorConfig
from appcast_scout.errors import OutputAllocationError, SourceReadError
from appcast_scout.extractor import (
    CandidateCollector,
    ExtractionResult,
    UrlClassifier,
    build_output,
    iter_tokens,
    sort_candidates,
)
from appcast_scout.logger import logger

__all__ = ["extract_appcast_urls", "find_appcast_urls", "SourceT"]

SourceT = Union[str, "os.PathLike[str]", BinaryIO]


@contextmanager
def _open_source(source: SourceT) -> Iterator[BinaryIO]:
    """Yield a binary stream for *source*; streams passed in are not closed."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as fh:
            yield fh
    else:
        yield source


def _collect(stream: BinaryIO, config: ExtractorConfig) -> CandidateCollector:
    classifier = UrlClassifier()
    collector = CandidateCollector(config.max_urls)
    for raw in iter_tokens(stream, config.max_url_length, config.chunk_size):
        candidate = classifier.classify(raw.decode("ascii"))
        if candidate is not None:
            collector.insert(candidate)
    return collector


def extract_appcast_urls(
    source: SourceT, config: Optional[ExtractorConfig] = None
) -> ExtractionResult:
    """Scan *source* for appcast URLs.

    Returns an :class:`ExtractionResult` whose buffer holds up to
    ``config.max_urls`` URLs, one per line, best first. Raises
    :class:`SourceReadError` if the source cannot be opened or read and
    :class:`OutputAllocationError` if the output buffer cannot be allocated.
    """
    cfg = config or ExtractorConfig()
    try:
        with _open_source(source) as stream:
            collector = _collect(stream, cfg)
    except OSError as exc:
        logger.error("Cannot read %s: %s", source, exc)
        raise SourceReadError(source, f"cannot read {source}: {exc}") from exc

    if collector.dropped:
        logger.debug("%s: %d candidates over capacity were dropped", source, collector.dropped)

    ordered = sort_candidates(collector)
    try:
        buffer, length, written = build_output(ordered, cfg.output_capacity)
    except MemoryError as exc:
        logger.error("Cannot allocate %d-byte output buffer for %s", cfg.output_capacity, source)
        raise OutputAllocationError(source, "cannot allocate output buffer") from exc

    logger.debug("%s: %d appcast URL(s), %d bytes", source, len(written), length)
    return ExtractionResult(buffer=buffer, length=length, candidates=tuple(written))


def find_appcast_urls(source: SourceT, config: Optional[ExtractorConfig] = None) -> List[str]:
    """Convenience wrapper returning just the URLs, best first."""
    return extract_appcast_urls(source, config).urls
