"""Enumerations for media_metadata models."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class MediaCategory(Enum):
    """
    Top-level category of a MIME type.

    Only the part before the slash matters when classifying a file:
    - IMAGE: Photos and animated images (image/jpeg, image/gif)
    - VIDEO: Movies (video/mp4, video/quicktime)
    - AUDIO: Sound files
    - OTHER: A well-formed MIME type of any other category
    - UNKNOWN: Missing or malformed MIME type
    """
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def from_mime_type(cls, mime_type) -> "MediaCategory":
        """
        Get MediaCategory from a MIME type value.

        Args:
            mime_type: MIME type as reported by the extractor (e.g., "video/mp4")

        Returns:
            The matching MediaCategory, or UNKNOWN if missing or malformed

        Examples:
            >>> MediaCategory.from_mime_type("image/gif")
            MediaCategory.IMAGE
            >>> MediaCategory.from_mime_type("video/mp4")
            MediaCategory.VIDEO
            >>> MediaCategory.from_mime_type("garbage")
            MediaCategory.UNKNOWN
        """
        if not isinstance(mime_type, str):
            return cls.UNKNOWN

        category, slash, subtype = mime_type.strip().partition("/")
        if not slash or not category or not subtype:
            logger.debug("Malformed MIME type '%s'", mime_type)
            return cls.UNKNOWN

        category = category.lower()
        for member in (cls.IMAGE, cls.VIDEO, cls.AUDIO):
            if member.value == category:
                return member

        return cls.OTHER

    @property
    def is_video(self) -> bool:
        """Check if this category is a video category."""
        return self is MediaCategory.VIDEO

    @property
    def is_image(self) -> bool:
        """Check if this category is an image category."""
        return self is MediaCategory.IMAGE
