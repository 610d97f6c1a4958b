# File: tests/conftest.py
import os
import plistlib
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from appcast_scout.config import ExtractorConfig, ScoutConfig


@pytest.fixture()
def write_binary(tmp_path) -> Callable[..., Path]:
    """
    Factory writing raw bytes to a temporary file.
    Returns the path of the file.
    """
    counter = {"n": 0}

    def _write(data: bytes, name: Optional[str] = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"binary_{counter['n']}.bin")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture()
def default_config() -> ScoutConfig:
    return ScoutConfig()


@pytest.fixture()
def extractor_config() -> ExtractorConfig:
    return ExtractorConfig()


@pytest.fixture()
def make_app(tmp_path) -> Callable[..., Path]:
    """
    Build a minimal .app bundle.

    ``main`` is the main executable content (None: no executable);
    ``frameworks`` maps a relative path under Contents/Frameworks to content;
    ``plugins`` maps a file name under Contents/MacOS/plugins to content.
    """

    def _make(
        name: str = "Demo",
        main: Optional[bytes] = b"",
        frameworks: Optional[Dict[str, bytes]] = None,
        plugins: Optional[Dict[str, bytes]] = None,
        executable: Optional[str] = None,
    ) -> Path:
        app = tmp_path / f"{name}.app"
        macos = app / "Contents" / "MacOS"
        macos.mkdir(parents=True)
        if executable:
            with (app / "Contents" / "Info.plist").open("wb") as fh:
                plistlib.dump({"CFBundleExecutable": executable}, fh)
        if main is not None:
            (macos / (executable or name)).write_bytes(main)
        for rel, content in (frameworks or {}).items():
            target = app / "Contents" / "Frameworks" / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        for fname, content in (plugins or {}).items():
            target = macos / "plugins" / fname
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
            os.chmod(target, 0o755)
        return app

    return _make
