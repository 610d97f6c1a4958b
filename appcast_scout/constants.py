# File: appcast_scout/constants.py
"""appcast_scout.constants: Fixed capacities of the appcast extractor.

Every limit below is enforced with an explicit accept/reject decision:

* ``MAX_URL_LENGTH`` counts the C-style terminator, so a token keeps at most
  ``MAX_URL_LENGTH - 1`` bytes; the rest of a longer run is discarded.
* ``MAX_URLS`` caps the number of distinct candidates; later ones are dropped.
* ``OUTPUT_CAPACITY`` caps the output buffer; entries that do not fit (with
  room left for the sentinel byte) are skipped.
"""
from __future__ import annotations

from typing import Final

MAX_URL_LENGTH: Final[int] = 2048
MAX_URLS: Final[int] = 50
OUTPUT_CAPACITY: Final[int] = 10240

# "https://a.co/x" is the shortest URL worth looking at.
MIN_URL_LENGTH: Final[int] = 15

OUTPUT_SENTINEL: Final[bytes] = b"\x00"

# Read size for the byte scanner; only affects memory, never results.
DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024

# Size limits applied to secondary binaries of an app bundle.
FRAMEWORK_SIZE_LIMIT: Final[int] = 30_000_000
PLUGIN_SIZE_LIMIT: Final[int] = 15_000_000

__all__ = [
    "MAX_URL_LENGTH",
    "MAX_URLS",
    "OUTPUT_CAPACITY",
    "MIN_URL_LENGTH",
    "OUTPUT_SENTINEL",
    "DEFAULT_CHUNK_SIZE",
    "FRAMEWORK_SIZE_LIMIT",
    "PLUGIN_SIZE_LIMIT",
]
