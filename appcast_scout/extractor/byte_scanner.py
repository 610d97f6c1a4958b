# appcast_scout/extractor/byte_scanner.py
"""
Byte scanner: splits a raw binary stream into runs of printable ASCII text.
"""
from __future__ import annotations

import re
from typing import BinaryIO, Iterator

from appcast_scout.constants import DEFAULT_CHUNK_SIZE, MAX_URL_LENGTH

__all__ = ["iter_tokens", "is_printable"]

# Printable ASCII plus horizontal tab.
_PRINTABLE_RUN = re.compile(rb"[\t\x20-\x7e]+")


def is_printable(byte: int) -> bool:
    """True for bytes that may appear inside a token."""
    return 0x20 <= byte <= 0x7E or byte == 0x09


def iter_tokens(
    stream: BinaryIO,
    max_length: int = MAX_URL_LENGTH,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[bytes]:
    """
    Yield every maximal run of printable bytes read from *stream*.

    The stream is pulled ``chunk_size`` bytes at a time; a run crossing a
    chunk boundary is still yielded once. Only the first ``max_length - 1``
    bytes of a run are kept, the remainder is read and discarded.
    """
    limit = max_length - 1
    pending = bytearray()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if pending and not is_printable(chunk[0]):
            yield bytes(pending)
            pending.clear()
        size = len(chunk)
        for match in _PRINTABLE_RUN.finditer(chunk):
            start, end = match.span()
            room = limit - len(pending)
            if room > 0:
                pending += chunk[start:min(end, start + room)]
            if end < size:
                yield bytes(pending)
                pending.clear()
    if pending:
        yield bytes(pending)
