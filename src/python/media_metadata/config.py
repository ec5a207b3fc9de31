"""
Configuration management for media-metadata.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Default locations to search for the config file
CONFIG_SEARCH_PATHS = [
    Path("media_metadata.yaml"),
    Path("src/python/media_metadata.yaml"),
    Path.home() / ".media_metadata" / "config.yaml",
]


@dataclass(frozen=True)
class DeriverOptions:
    """
    Policies applied while deriving metadata.

    Attributes:
        coerce_numeric_strings: Accept numeric strings ("3") for rating and
            frame counts. When False, only real numbers are used and strings
            are treated as missing.
        embed_exif: Keep a read-only copy of the raw EXIF tags on the record.
    """
    coerce_numeric_strings: bool = True
    embed_exif: bool = False


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default locations.

    Returns:
        Dictionary containing configuration.

    Raises:
        FileNotFoundError: If no config file is found.
    """
    path_to_load = None

    if config_path:
        if config_path.exists():
            path_to_load = config_path
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    if not path_to_load:
        raise FileNotFoundError(
            "No config file found. Please create media_metadata.yaml or provide a path."
        )

    logger.info("Loading config from %s", path_to_load)

    with open(path_to_load, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    return config or {}


def get_deriver_options(config: Dict[str, Any]) -> DeriverOptions:
    """
    Get the deriver options from config.

    Args:
        config: Configuration dictionary

    Returns:
        DeriverOptions built from the 'deriver' section, defaults if it is missing

    Raises:
        ValueError: If the section holds unknown keys or non-boolean values
    """
    section = config.get("deriver")
    if not section:
        return DeriverOptions()

    if not isinstance(section, dict):
        raise ValueError("Config 'deriver' section must be a mapping.")

    known = {f.name for f in fields(DeriverOptions)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown deriver option(s): {', '.join(unknown)}")

    for name, value in section.items():
        if not isinstance(value, bool):
            raise ValueError(f"Deriver option '{name}' must be true or false, got {value!r}")

    return DeriverOptions(**section)
