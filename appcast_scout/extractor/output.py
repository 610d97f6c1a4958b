# appcast_scout/extractor/output.py
"""
Output builder: serializes sorted candidates into a fixed-capacity buffer.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from appcast_scout.constants import OUTPUT_CAPACITY, OUTPUT_SENTINEL
from appcast_scout.extractor.models import Candidate

__all__ = ["OutputBuffer", "build_output"]

logger = logging.getLogger("AppcastScout.output")


class OutputBuffer:
    """Pre-allocated byte buffer holding ``url\\n`` lines.

    An entry is accepted only if one byte is still free after it, so the
    sentinel always fits. Rejected entries leave the buffer untouched.
    Allocation failure surfaces as :class:`MemoryError`.
    """

    def __init__(self, capacity: int = OUTPUT_CAPACITY) -> None:
        self.capacity = capacity
        self._buf = bytearray(capacity)
        self._pos = 0

    def append(self, line: bytes) -> bool:
        size = len(line) + 1
        if self._pos + size >= self.capacity:
            return False
        end = self._pos + len(line)
        self._buf[self._pos:end] = line
        self._buf[end] = 0x0A
        self._pos = end + 1
        return True

    def terminate(self) -> None:
        if self._pos < self.capacity:
            self._buf[self._pos:self._pos + 1] = OUTPUT_SENTINEL

    def __len__(self) -> int:
        return self._pos

    def getvalue(self) -> bytes:
        """Payload without the sentinel."""
        return bytes(self._buf[:self._pos])


def build_output(
    candidates: Iterable[Candidate], capacity: int = OUTPUT_CAPACITY
) -> Tuple[bytes, int, List[Candidate]]:
    """
    Write each candidate's URL and a newline, in the given order.

    Entries that would overflow are skipped and the next one is tried.
    Returns the payload, its length and the candidates actually written.
    """
    out = OutputBuffer(capacity)
    written: List[Candidate] = []
    for candidate in candidates:
        if out.append(candidate.url.encode("ascii")):
            written.append(candidate)
        else:
            logger.debug("Output buffer full, skipping %s", candidate.url)
    out.terminate()
    return out.getvalue(), len(out), written
