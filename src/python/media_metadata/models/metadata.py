"""
The derived metadata record.

A Metadata instance is the single canonical view of one media file, computed
once from the extractor tags and the optional sidecar. It is frozen: nothing
recomputes or mutates it after construction.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Metadata:
    """
    Canonical metadata for one media file.

    Attributes:
        date: When the media was taken, in epoch milliseconds (naive local time)
        video: True if the MIME type is a video type
        animated: True if the file is an image with more than one frame
        caption: First non-empty caption tag, or None
        keywords: Keywords in source order (duplicates kept, may be empty)
        rating: XMP rating, 0 when missing
        favourite: True if the sidecar marks the file as starred
        width: Display width in pixels (orientation applied), if known
        height: Display height in pixels (orientation applied), if known
        exif: Raw EXIF tags, only when embedding is enabled
    """
    date: int
    video: bool = False
    animated: bool = False
    caption: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    rating: int = 0
    favourite: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    exif: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_tags(cls, tags, sidecar=None, options=None) -> "Metadata":
        """
        Derive a Metadata record from extractor tags and an optional sidecar.

        Convenience alias for ``media_metadata.deriver.derive_metadata``.
        """
        from media_metadata.deriver import derive_metadata

        return derive_metadata(tags, sidecar, options)

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame."""
        data: Dict[str, Any] = {
            "date": self.date,
            "video": self.video,
            "animated": self.animated,
            "caption": self.caption,
            "keywords": list(self.keywords),
            "rating": self.rating,
            "favourite": self.favourite,
            "width": self.width,
            "height": self.height,
        }
        if self.exif is not None:
            data["exif"] = dict(self.exif)
        return data
