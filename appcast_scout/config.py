# === FILE: appcast_scout/config.py ===
"""
Loading and validation of AppcastScout settings.
Pydantic describes the schema and validates the data; files are YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from appcast_scout.constants import (
    DEFAULT_CHUNK_SIZE,
    FRAMEWORK_SIZE_LIMIT,
    MAX_URL_LENGTH,
    MAX_URLS,
    MIN_URL_LENGTH,
    OUTPUT_CAPACITY,
    PLUGIN_SIZE_LIMIT,
)


class ExtractorConfig(BaseModel):
    """Capacities of a single extraction.

    The built-in constants are upper bounds: a config file may only tighten them.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_urls: int = Field(
        MAX_URLS, ge=1, le=MAX_URLS, description="Distinct candidates kept per file."
    )
    max_url_length: int = Field(
        MAX_URL_LENGTH,
        ge=MIN_URL_LENGTH + 1,
        le=MAX_URL_LENGTH,
        description="Token buffer size including the terminator.",
    )
    output_capacity: int = Field(
        OUTPUT_CAPACITY, ge=2, le=OUTPUT_CAPACITY, description="Output buffer size in bytes."
    )
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, ge=1, description="Bytes pulled per read.")


class BundleConfig(BaseModel):
    """Which binaries of an app bundle get scanned, and how big they may be."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    framework_size_limit: int = Field(FRAMEWORK_SIZE_LIMIT, ge=1)
    plugin_size_limit: int = Field(PLUGIN_SIZE_LIMIT, ge=1)
    max_frameworks: int = Field(10, ge=0)
    max_plugins: int = Field(5, ge=0)
    skip_framework_prefixes: Tuple[str, ...] = ("sparkle",)
    priority_patterns: Tuple[str, ...] = ("update", "sparkle", "autoupdate", "updater", "upgrade")
    exclude_patterns: Tuple[str, ...] = (
        # Swift runtime
        "libswift", "swift_concurrency",
        # codecs
        "codec", "encoder", "decoder", "avcodec", "avformat",
        "h264", "h265", "vp9", "vpx", "aac", "mp3", "flac", "opus", "vorbis", "mpeg",
        "webrtc", "audio", "livekit",
        # images
        "webp", "tiff", "png", "jpeg", "gif", "freetype", "harfbuzz", "graphite",
        # media processing
        "filter", "video", "demux", "mux", "spu", "lottie",
        # hardware acceleration
        "vaapi", "vdpau", "cuda", "nvenc", "videotoolbox",
        # container formats
        "avi", "mp4", "mkv", "ogg", "bluray",
        # network protocols
        "access", "stream", "http", "ftp", "rtsp", "network", "socket",
        # compression, crypto
        "crypto", "ssl", "gnutls", "tls", "sodium", "brotli", "zstd",
        # system libraries
        "icu", "dbus", "glib", "gio", "gobject", "gthread", "kirigami", "libqt",
        # dev tools
        "libclang", "liblto", "xcodebuildloader",
        # databases, text
        "sqlite", "postgres", "xml", "hunspell",
        # C++ runtime
        "double-conversion", "cares", "c++", "stdc++",
        # monitoring
        "sentry", "recording", "assettype",
    )
    plugin_ui_patterns: Tuple[str, ...] = ("macosx", "cocoa", "ui", "qt", "update", "sparkle")
    arch_keywords: Dict[str, Tuple[str, ...]] = Field(
        default_factory=lambda: {
            "arm64": ("arm64", "apple"),
            "x86_64": ("intel", "x86_64", "x64"),
        },
        description="URL keywords preferred on each host architecture.",
    )

    @field_validator(
        "skip_framework_prefixes",
        "priority_patterns",
        "exclude_patterns",
        "plugin_ui_patterns",
        mode="after",
    )
    def _lowercase(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(p.lower() for p in v)


class ScoutConfig(BaseModel):
    """Top-level configuration."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    bundle: BundleConfig = Field(default_factory=BundleConfig)


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScoutConfig:
    """
    Read YAML or JSON and return a validated ScoutConfig.
    Without a path, ``configs/default.yaml`` is used when present, else the
    built-in defaults. A missing explicit path raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScoutConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ScoutConfig(**data)


__all__ = ["ExtractorConfig", "BundleConfig", "ScoutConfig", "load_config"]
