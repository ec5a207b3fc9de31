"""Data models for media_metadata."""

from media_metadata.models.enums import MediaCategory
from media_metadata.models.metadata import Metadata
from media_metadata.models.tags import SidecarMetadata, TagDictionary

__all__ = [
    "MediaCategory",
    "Metadata",
    "SidecarMetadata",
    "TagDictionary",
]
