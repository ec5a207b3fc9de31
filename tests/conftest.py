"""Pytest configuration and shared fixtures."""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture
def exiftool() -> Dict[str, Any]:
    """Create an empty exiftool-style tag dictionary with every namespace present."""
    return {
        "SourceFile": "",
        "File": {},
        "EXIF": {},
        "H264": {},
        "QuickTime": {},
        "IPTC": {},
        "XMP": {},
    }


@pytest.fixture
def local_millis() -> Callable[[str], int]:
    """Convert "YYYY-MM-DD HH:MM:SS" local time to epoch milliseconds."""
    def convert(text: str) -> int:
        moment = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
        return int(moment.timestamp() * 1000)

    return convert


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML content to a temporary config file and return its path."""
    def write(content: str) -> Path:
        path = tmp_path / "media_metadata.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return write
