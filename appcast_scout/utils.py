# File: appcast_scout/utils.py
"""appcast_scout.utils: Small helpers for paths, URL lists and log output."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Union

from appcast_scout.logger import logger

__all__: Sequence[str] = (
    "resolve_path",
    "remove_duplicates",
    "format_size",
)


def resolve_path(path: Union[str, Path]) -> Path:
    """Expand `~`, check existence and return a Path."""
    p = Path(path).expanduser()
    if not p.exists():
        logger.error("Path not found: %s", p)
        raise FileNotFoundError(f"Path not found: {p}")
    return p


def remove_duplicates(urls: Iterable[str]) -> List[str]:
    """Drop repeated URLs, keeping the first occurrence and the order."""
    items = list(urls)
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique


def format_size(num_bytes: int) -> str:
    """Human readable size with decimal units, e.g. ``30 MB``."""
    if num_bytes < 1000:
        return f"{num_bytes} bytes"
    size = float(num_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1000
        if size < 1000:
            break
    text = f"{size:.1f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"
