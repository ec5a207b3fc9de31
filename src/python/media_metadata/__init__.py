"""
media_metadata - canonical metadata for photo and video libraries.

This package turns the raw tag dump of a metadata extractor (exiftool
EXIF/IPTC/XMP/QuickTime groups) and an optional legacy sidecar (Picasa
keywords and stars) into one typed, immutable record per media file.

Core Concepts:
- TagDictionary: The consumed subset of one file's extractor output
- SidecarMetadata: Keywords and stars from an older photo organizer
- Metadata: The derived record (date, video, animated, caption, keywords,
  rating, favourite, dimensions)

Usage:
    from media_metadata import derive_metadata

    meta = derive_metadata(
        {"SourceFile": "holidays/IMG_20170220_114006.jpg",
         "File": {"MIMEType": "image/jpeg"},
         "IPTC": {"Keywords": "beach,sunset"}},
        {"star": "yes"},
    )
    print(meta.date, meta.keywords, meta.favourite)
"""

from media_metadata.__version__ import __version__
from media_metadata.catalog import derive_catalog, metadata_to_dataframe
from media_metadata.config import DeriverOptions, get_deriver_options, load_config
from media_metadata.deriver import (
    derive_metadata,
    infer_date_from_filename,
    parse_tag_date,
    split_keywords,
)
from media_metadata.models import MediaCategory, Metadata, SidecarMetadata, TagDictionary

__all__ = [
    "__version__",
    # Models
    "MediaCategory",
    "Metadata",
    "SidecarMetadata",
    "TagDictionary",
    # Config
    "DeriverOptions",
    "get_deriver_options",
    "load_config",
    # Deriver
    "derive_metadata",
    "infer_date_from_filename",
    "parse_tag_date",
    "split_keywords",
    # Catalog
    "derive_catalog",
    "metadata_to_dataframe",
]
