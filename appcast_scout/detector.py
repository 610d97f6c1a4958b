# File: appcast_scout/detector.py
"""appcast_scout.detector: Finds the appcast URLs of a whole app bundle.

The main executable is scanned first and wins outright if it contains any
URL. Otherwise every other selected binary is scanned and the results are
merged, ranked and narrowed to the host architecture when possible.
"""

from __future__ import annotations

import platform
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from appcast_scout.bundle import BinaryTarget, collect_binaries, read_executable_name
from appcast_scout.config import ScoutConfig
from appcast_scout.engine import extract_appcast_urls
from appcast_scout.errors import ExtractionError
from appcast_scout.extractor import UrlClassifier
from appcast_scout.logger import logger
from appcast_scout.utils import format_size, remove_duplicates, resolve_path

__all__ = ["AppcastDetector", "host_architecture"]


def host_architecture() -> str:
    """Normalized machine name: ``arm64``, ``x86_64`` or whatever platform reports."""
    machine = platform.machine().lower()
    if machine in ("arm64", "aarch64"):
        return "arm64"
    if machine in ("x86_64", "amd64"):
        return "x86_64"
    return machine


class AppcastDetector:
    """Facade for the CLI and tests: scan an app bundle for its update feed."""

    def __init__(self, config: Optional[ScoutConfig] = None, arch: Optional[str] = None) -> None:
        self.config = config or ScoutConfig()
        self.arch = arch or host_architecture()
        self.classifier = UrlClassifier()

    def scan_binary(self, target: BinaryTarget) -> List[str]:
        """URLs found in one binary; missing, oversized or unreadable files give []."""
        if not target.path.is_file():
            return []
        if target.size_limit is not None and target.size > target.size_limit:
            logger.info(
                "Skipped %s (file too large: %s > %s)",
                target.path.name,
                format_size(target.size),
                format_size(target.size_limit),
            )
            return []
        try:
            result = extract_appcast_urls(target.path, self.config.extractor)
        except ExtractionError as exc:
            logger.warning("Scan of %s failed (%s): %s", target.path, type(exc).__name__, exc)
            return []
        if result.urls:
            logger.info("Found %d URL(s) in %s", len(result.urls), target.path.name)
        return result.urls

    def rank(self, urls: Sequence[str]) -> List[str]:
        """Stable sort by priority, then drop repeats keeping the best-ranked copy."""
        ranked = sorted(urls, key=self.classifier.priority)
        return remove_duplicates(ranked)

    def prefer_architecture(self, urls: List[str]) -> List[str]:
        """Keep only URLs naming the host architecture, if there are several and any do."""
        keywords: Tuple[str, ...] = tuple(self.config.bundle.arch_keywords.get(self.arch, ()))
        if len(urls) <= 1 or not keywords:
            return urls
        specific = [u for u in urls if any(k in u.lower() for k in keywords)]
        return specific or urls

    def detect(self, app_path: Union[str, Path], executable: Optional[str] = None) -> List[str]:
        """Return candidate feed URLs for *app_path*, best first."""
        app = resolve_path(app_path)
        name = executable or read_executable_name(app)
        binaries = collect_binaries(app, name, self.config.bundle)
        if not binaries:
            logger.info("No binaries found to scan in %s", app)
            return []
        logger.info("Found %d binaries to scan in %s", len(binaries), app)

        main = [b for b in binaries if b.kind == "main"]
        others = [b for b in binaries if b.kind != "main"]
        for target in main:
            urls = self.scan_binary(target)
            if urls:
                return urls

        merged: List[str] = []
        for target in others:
            merged.extend(self.scan_binary(target))
        if not merged:
            logger.info("No appcast URLs found in any binary of %s", app)
            return []
        return self.prefer_architecture(self.rank(merged))
