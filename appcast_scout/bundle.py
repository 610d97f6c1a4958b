# File: appcast_scout/bundle.py
"""appcast_scout.bundle: Picks the binaries of a macOS app bundle worth scanning.

Order matters: the main executable comes first, then up to
``max_frameworks`` framework binaries, then up to ``max_plugins`` plugins.
"""

from __future__ import annotations

import os
import plistlib
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from appcast_scout.config import BundleConfig
from appcast_scout.logger import logger
from appcast_scout.utils import format_size

__all__ = ["BinaryTarget", "collect_binaries", "read_executable_name", "should_scan"]


@dataclass(frozen=True, slots=True)
class BinaryTarget:
    """A binary selected for scanning. ``size_limit`` None means unlimited."""

    path: Path
    kind: str
    size: int
    size_limit: Optional[int] = None


def read_executable_name(app_path: Union[str, Path]) -> str:
    """CFBundleExecutable from Info.plist, or the bundle name without ``.app``."""
    app = Path(app_path)
    info = app / "Contents" / "Info.plist"
    if info.is_file():
        try:
            with info.open("rb") as fh:
                name = plistlib.load(fh).get("CFBundleExecutable")
        except (plistlib.InvalidFileException, ValueError, OSError) as exc:
            logger.warning("Cannot read %s: %s", info, exc)
        else:
            if isinstance(name, str) and name:
                return name
    return app.stem


def should_scan(name: str, config: BundleConfig) -> bool:
    """Update-related names always pass; otherwise skip excluded library names."""
    lowered = name.lower()
    if any(p in lowered for p in config.priority_patterns):
        return True
    return not any(p in lowered for p in config.exclude_patterns)


def _file_size(path: Path) -> Optional[int]:
    try:
        if not path.is_file():
            return None
        return path.stat().st_size
    except OSError:
        return None


def _framework_binaries(frameworks: Path, config: BundleConfig) -> List[Tuple[Path, str, int]]:
    """(binary, name used for filtering, size) for every framework-like entry."""
    found: List[Tuple[Path, str, int]] = []
    for entry in sorted(frameworks.iterdir()):
        name = entry.stem
        if entry.suffix == ".framework":
            if name.lower().startswith(config.skip_framework_prefixes):
                continue
            binary = entry / "Versions" / "A" / name
        elif entry.suffix == ".dylib":
            binary = entry
        elif entry.suffix == ".bundle":
            binary = entry / "Contents" / "MacOS" / name
        else:
            continue
        size = _file_size(binary)
        if size is not None:
            found.append((binary, name, size))
    return found


def _plugin_binaries(plugins: Path) -> List[Tuple[Path, int]]:
    found: List[Tuple[Path, int]] = []
    for entry in sorted(plugins.iterdir()):
        size = _file_size(entry)
        if size is not None and os.access(entry, os.X_OK):
            found.append((entry, size))
    return found


def collect_binaries(
    app_path: Union[str, Path],
    executable: str,
    config: Optional[BundleConfig] = None,
) -> List[BinaryTarget]:
    """Return the binaries of *app_path* to scan, main executable first."""
    cfg = config or BundleConfig()
    app = Path(app_path)
    targets: List[BinaryTarget] = []

    main = app / "Contents" / "MacOS" / executable
    main_size = _file_size(main)
    if main_size is not None:
        targets.append(BinaryTarget(main, "main", main_size))
        logger.info("Main executable: %s", executable)

    frameworks = app / "Contents" / "Frameworks"
    if frameworks.is_dir():
        candidates = [
            (binary, size)
            for binary, name, size in _framework_binaries(frameworks, cfg)
            if should_scan(name, cfg)
        ]
        candidates.sort(key=lambda item: item[1], reverse=True)
        for binary, size in candidates[: cfg.max_frameworks]:
            targets.append(BinaryTarget(binary, "framework", size, cfg.framework_size_limit))
            logger.info("Framework: %s (%s)", binary.name, format_size(size))

    plugins = app / "Contents" / "MacOS" / "plugins"
    if plugins.is_dir():
        allowed = [(p, size) for p, size in _plugin_binaries(plugins) if should_scan(p.stem, cfg)]

        def _is_ui(p: Path) -> bool:
            return any(pat in p.name.lower() for pat in cfg.plugin_ui_patterns)

        preferred = sorted((item for item in allowed if _is_ui(item[0])), key=lambda i: i[1], reverse=True)
        rest = sorted((item for item in allowed if not _is_ui(item[0])), key=lambda i: i[1], reverse=True)
        for plugin, size in (preferred + rest)[: cfg.max_plugins]:
            targets.append(BinaryTarget(plugin, "plugin", size, cfg.plugin_size_limit))
            logger.info("Plugin: %s (%s)", plugin.name, format_size(size))

    return targets
