"""
Derive one canonical Metadata record from extractor tags and a sidecar.

Several tags can answer the same question ("when was this taken?", "what is
the caption?") with different reliability. Each field below is resolved by a
precedence chain, first source with a usable value wins. A missing namespace,
a missing tag, or a malformed value never raises; it just falls through to
the next source and ultimately to the field's default.
"""

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from media_metadata.config import DeriverOptions
from media_metadata.deriver.dates import parse_tag_date, to_epoch_millis
from media_metadata.deriver.patterns import infer_date_from_filename
from media_metadata.deriver.precedence import first_present, resolve
from media_metadata.models.enums import MediaCategory
from media_metadata.models.metadata import Metadata
from media_metadata.models.tags import SidecarMetadata, TagDictionary

logger = logging.getLogger(__name__)

# Composite:ImageSize is "4000x3000" (or "4000 3000" with -n)
IMAGE_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[x ]\s*(\d+)\s*$")

# EXIF orientations 5-8 are rotated by 90 or 270 degrees
ROTATED_ORIENTATIONS = {5, 6, 7, 8}


@dataclass(frozen=True)
class Sources:
    """Everything an extractor in a precedence chain may look at."""
    tags: TagDictionary
    sidecar: Optional[SidecarMetadata]
    options: DeriverOptions


def _text(value: Any) -> Optional[str]:
    """Return a non-empty caption string, or None."""
    # exiftool emits numbers for numeric-looking text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def _number(value: Any, options: DeriverOptions) -> Optional[int]:
    """Convert a numeric tag to int according to the coercion policy."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        if not options.coerce_numeric_strings:
            logger.debug("Ignoring non-numeric value '%s'", value)
            return None
        try:
            value = float(value.strip())
        except ValueError:
            logger.debug("Ignoring unparsable number '%s'", value)
            return None

    if isinstance(value, int):
        return value

    if isinstance(value, float) and math.isfinite(value):
        return int(value)

    logger.debug("Ignoring unusable number %r", value)
    return None


def split_keywords(value: Any) -> Tuple[str, ...]:
    """
    Split a raw keyword value into individual keywords.

    Commas separate keywords; each keyword is trimmed and empty ones are
    dropped. Order and duplicates are kept. A list (repeated IPTC keywords)
    is split element by element.

    Examples:
        >>> split_keywords("beach, sunset,,beach")
        ('beach', 'sunset', 'beach')
        >>> split_keywords(["beach", "sunset,sea"])
        ('beach', 'sunset', 'sea')
    """
    parts = value if isinstance(value, list) else [value]
    keywords = []
    for part in parts:
        if part is None or isinstance(part, bool):
            continue
        keywords.extend(token.strip() for token in str(part).split(","))
    return tuple(keyword for keyword in keywords if keyword)


def _keywords(value: Any) -> Optional[Tuple[str, ...]]:
    return split_keywords(value) or None


def _pair(width: Any, height: Any, options: DeriverOptions) -> Optional[Tuple[int, int]]:
    width = _number(width, options)
    height = _number(height, options)
    if width is None or height is None or width <= 0 or height <= 0:
        return None
    return width, height


def _image_size(value: Any) -> Optional[Tuple[int, int]]:
    if not isinstance(value, str):
        return None
    match = IMAGE_SIZE_PATTERN.match(value)
    if not match:
        logger.debug("Ignoring image size '%s'", value)
        return None
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        return None
    return width, height


def _is_rotated(orientation: Any) -> bool:
    """Check if an EXIF orientation swaps width and height."""
    if isinstance(orientation, bool):
        return False
    if isinstance(orientation, int):
        return orientation in ROTATED_ORIENTATIONS
    # exiftool prints orientations as text unless -n is used, e.g. "Rotate 90 CW"
    if isinstance(orientation, str):
        return "90" in orientation or "270" in orientation
    return False


DATE_CHAIN = [
    ("EXIF:DateTimeOriginal", lambda s: parse_tag_date(s.tags.exif.date_time_original)),
    ("H264:DateTimeOriginal", lambda s: parse_tag_date(s.tags.h264.date_time_original)),
    ("QuickTime:CreationDate", lambda s: parse_tag_date(s.tags.quicktime.creation_date)),
    ("QuickTime:CreateDate", lambda s: parse_tag_date(s.tags.quicktime.create_date)),
    # Only reached when the file has no embedded date at all
    ("filename", lambda s: infer_date_from_filename(s.tags.source_file)),
    ("File:FileModifyDate", lambda s: parse_tag_date(s.tags.file.file_modify_date)),
]

CAPTION_CHAIN = [
    ("EXIF:ImageDescription", lambda s: _text(s.tags.exif.image_description)),
    ("IPTC:Caption-Abstract", lambda s: _text(s.tags.iptc.caption_abstract)),
    ("IPTC:Headline", lambda s: _text(s.tags.iptc.headline)),
    ("XMP:Description", lambda s: _text(s.tags.xmp.description)),
    ("XMP:Title", lambda s: _text(s.tags.xmp.title)),
    ("XMP:Label", lambda s: _text(s.tags.xmp.label)),
]

KEYWORDS_CHAIN = [
    ("IPTC:Keywords", lambda s: _keywords(s.tags.iptc.keywords)),
    ("sidecar:keywords", lambda s: _keywords(s.sidecar.keywords) if s.sidecar else None),
]

RATING_CHAIN = [
    ("XMP:Rating", lambda s: _number(s.tags.xmp.rating, s.options)),
]

FRAME_COUNT_CHAIN = [
    ("GIF:FrameCount", lambda s: _number(s.tags.gif.frame_count, s.options)),
    ("PNG:AnimationFrames", lambda s: _number(s.tags.png.animation_frames, s.options)),
]

DIMENSIONS_CHAIN = [
    ("Composite:ImageSize", lambda s: _image_size(s.tags.composite.image_size)),
    ("File:ImageWidth/ImageHeight",
     lambda s: _pair(s.tags.file.image_width, s.tags.file.image_height, s.options)),
    ("EXIF:ExifImageWidth/ExifImageHeight",
     lambda s: _pair(s.tags.exif.exif_image_width, s.tags.exif.exif_image_height, s.options)),
    ("QuickTime:ImageWidth/ImageHeight",
     lambda s: _pair(s.tags.quicktime.image_width, s.tags.quicktime.image_height, s.options)),
]


def resolve_date(sources: Sources) -> int:
    """Resolve the capture date in epoch milliseconds, falling back to now."""
    found = first_present(DATE_CHAIN, sources)
    if found is None:
        logger.debug("No date found for %s, using current time", sources.tags.source_file)
        return to_epoch_millis(datetime.now())
    return to_epoch_millis(found[1])


def resolve_dimensions(sources: Sources) -> Tuple[Optional[int], Optional[int]]:
    """Resolve display width and height, applying the EXIF orientation."""
    size = resolve(DIMENSIONS_CHAIN, sources)
    if size is None:
        return None, None
    width, height = size
    if _is_rotated(sources.tags.exif.orientation):
        return height, width
    return width, height


def derive_metadata(tags, sidecar=None, options: Optional[DeriverOptions] = None) -> Metadata:
    """
    Derive the canonical metadata record for one file.

    Never raises for malformed input: every field degrades to its default.

    Args:
        tags: Extractor output for the file, as a nested mapping
              (namespace -> tag -> value) or a TagDictionary
        sidecar: Optional legacy sidecar, as a flat mapping or SidecarMetadata
        options: Derivation policies. Defaults to DeriverOptions().

    Returns:
        A frozen Metadata record

    Example:
        >>> meta = derive_metadata(
        ...     {"EXIF": {"DateTimeOriginal": "2016:10:28 17:34:58"},
        ...      "File": {"MIMEType": "video/mp4"}},
        ...     {"star": "yes"},
        ... )
        >>> meta.video, meta.favourite
        (True, True)
    """
    sources = Sources(
        tags=TagDictionary.from_dict(tags),
        sidecar=SidecarMetadata.from_dict(sidecar),
        options=options or DeriverOptions(),
    )

    category = MediaCategory.from_mime_type(sources.tags.file.mime_type)
    frame_count = resolve(FRAME_COUNT_CHAIN, sources)
    width, height = resolve_dimensions(sources)

    return Metadata(
        date=resolve_date(sources),
        video=category.is_video,
        animated=category.is_image and frame_count is not None and frame_count > 1,
        caption=resolve(CAPTION_CHAIN, sources),
        keywords=resolve(KEYWORDS_CHAIN, sources, default=()),
        rating=resolve(RATING_CHAIN, sources, default=0),
        favourite=sources.sidecar is not None and sources.sidecar.star == "yes",
        width=width,
        height=height,
        exif=sources.tags.raw_exif if sources.options.embed_exif else None,
    )
