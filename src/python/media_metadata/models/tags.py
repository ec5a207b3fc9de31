"""
Typed views over the raw metadata handed to the deriver.

The metadata extractor produces a nested mapping grouped by namespace
(exiftool ``-G -json`` layout)::

    {
        "SourceFile": "holidays/IMG_1234.jpg",
        "File": {"MIMEType": "image/jpeg", "FileModifyDate": "2016:10:28 17:34:58"},
        "EXIF": {"DateTimeOriginal": "2016:10:28 17:34:58"},
        "XMP": {"Rating": 3},
    }

These models pick out the tags the deriver consumes, one optional field per
tag, so every lookup downstream is a plain attribute access that may be
None. Unknown tags are ignored; a missing namespace is an empty one.

A legacy sidecar (Picasa-style ``keywords`` and ``star``) gets its own flat
model.
"""

import logging
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Scalars as emitted by the extractor. Repeated tags (IPTC keywords) may
# arrive as a list of scalars.
TagValue = Union[str, int, float, list]


def tag(name: str):
    """Declare a namespace field read from the extractor tag ``name``."""
    return field(default=None, metadata={"tag": name})


class _Namespace:
    """Shared constructor for namespace models."""

    @classmethod
    def from_mapping(cls, values: Any):
        """
        Build the namespace from the extractor's tag mapping.

        Args:
            values: Mapping of tag name to value, or anything else for "absent"

        Returns:
            Namespace instance with every consumed tag populated or None
        """
        if not isinstance(values, Mapping):
            return cls()
        return cls(**{f.name: values.get(f.metadata["tag"]) for f in fields(cls)})


@dataclass(frozen=True)
class FileTags(_Namespace):
    source_file: Optional[TagValue] = tag("SourceFile")
    file_modify_date: Optional[TagValue] = tag("FileModifyDate")
    mime_type: Optional[TagValue] = tag("MIMEType")
    image_width: Optional[TagValue] = tag("ImageWidth")
    image_height: Optional[TagValue] = tag("ImageHeight")


@dataclass(frozen=True)
class ExifTags(_Namespace):
    date_time_original: Optional[TagValue] = tag("DateTimeOriginal")
    image_description: Optional[TagValue] = tag("ImageDescription")
    orientation: Optional[TagValue] = tag("Orientation")
    exif_image_width: Optional[TagValue] = tag("ExifImageWidth")
    exif_image_height: Optional[TagValue] = tag("ExifImageHeight")


@dataclass(frozen=True)
class H264Tags(_Namespace):
    date_time_original: Optional[TagValue] = tag("DateTimeOriginal")


@dataclass(frozen=True)
class QuickTimeTags(_Namespace):
    creation_date: Optional[TagValue] = tag("CreationDate")
    create_date: Optional[TagValue] = tag("CreateDate")
    image_width: Optional[TagValue] = tag("ImageWidth")
    image_height: Optional[TagValue] = tag("ImageHeight")


@dataclass(frozen=True)
class GifTags(_Namespace):
    frame_count: Optional[TagValue] = tag("FrameCount")


@dataclass(frozen=True)
class PngTags(_Namespace):
    animation_frames: Optional[TagValue] = tag("AnimationFrames")


@dataclass(frozen=True)
class IptcTags(_Namespace):
    caption_abstract: Optional[TagValue] = tag("Caption-Abstract")
    headline: Optional[TagValue] = tag("Headline")
    keywords: Optional[TagValue] = tag("Keywords")


@dataclass(frozen=True)
class XmpTags(_Namespace):
    description: Optional[TagValue] = tag("Description")
    title: Optional[TagValue] = tag("Title")
    label: Optional[TagValue] = tag("Label")
    rating: Optional[TagValue] = tag("Rating")


@dataclass(frozen=True)
class CompositeTags(_Namespace):
    image_size: Optional[TagValue] = tag("ImageSize")


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class TagDictionary:
    """
    The consumed subset of one file's extractor output.

    Attributes:
        source_file: Original path of the file (used for filename dates only)
        file: File namespace (MIME type, modification date, dimensions)
        exif: EXIF namespace
        h264: H264 namespace (AVCHD video dates)
        quicktime: QuickTime namespace (MP4/MOV dates and dimensions)
        gif: GIF namespace (frame count)
        png: PNG namespace (APNG frame count)
        iptc: IPTC namespace (captions, keywords)
        xmp: XMP namespace (captions, rating)
        composite: Composite namespace (derived image size)
        raw_exif: Read-only copy of the whole EXIF namespace
    """
    source_file: Optional[str] = None
    file: FileTags = field(default_factory=FileTags)
    exif: ExifTags = field(default_factory=ExifTags)
    h264: H264Tags = field(default_factory=H264Tags)
    quicktime: QuickTimeTags = field(default_factory=QuickTimeTags)
    gif: GifTags = field(default_factory=GifTags)
    png: PngTags = field(default_factory=PngTags)
    iptc: IptcTags = field(default_factory=IptcTags)
    xmp: XmpTags = field(default_factory=XmpTags)
    composite: CompositeTags = field(default_factory=CompositeTags)
    raw_exif: Mapping[str, Any] = field(default_factory=_empty_mapping, compare=False)

    # Extractor namespace name -> (attribute, model)
    NAMESPACES: ClassVar[Dict[str, Tuple[str, type]]] = {
        "File": ("file", FileTags),
        "EXIF": ("exif", ExifTags),
        "H264": ("h264", H264Tags),
        "QuickTime": ("quicktime", QuickTimeTags),
        "GIF": ("gif", GifTags),
        "PNG": ("png", PngTags),
        "IPTC": ("iptc", IptcTags),
        "XMP": ("xmp", XmpTags),
        "Composite": ("composite", CompositeTags),
    }

    @classmethod
    def from_dict(cls, raw: Any) -> "TagDictionary":
        """
        Create a TagDictionary from the extractor's nested mapping.

        Args:
            raw: Mapping of namespace name to tag mapping. An existing
                 TagDictionary is returned unchanged; anything that is not a
                 mapping yields an empty dictionary.

        Returns:
            A TagDictionary with every consumed tag populated or None
        """
        if isinstance(raw, TagDictionary):
            return raw

        if not isinstance(raw, Mapping):
            logger.debug("Tag dictionary is not a mapping (type: %s), using empty tags", type(raw))
            return cls()

        namespaces = {
            attribute: model.from_mapping(raw.get(name))
            for name, (attribute, model) in cls.NAMESPACES.items()
        }

        # exiftool puts SourceFile at the top level; some callers nest it under File
        source_file = raw.get("SourceFile")
        if not isinstance(source_file, str):
            source_file = namespaces["file"].source_file
        if not isinstance(source_file, str):
            source_file = None

        exif = raw.get("EXIF")
        raw_exif = MappingProxyType(dict(exif)) if isinstance(exif, Mapping) else _empty_mapping()

        return cls(source_file=source_file, raw_exif=raw_exif, **namespaces)


@dataclass(frozen=True)
class SidecarMetadata:
    """
    Legacy per-file metadata from an older photo organizer (Picasa .ini).

    Attributes:
        keywords: Comma-separated keyword string
        star: "yes" when the file was starred
    """
    keywords: Optional[TagValue] = None
    star: Optional[TagValue] = None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["SidecarMetadata"]:
        """
        Create SidecarMetadata from a flat mapping.

        Returns None when there is no sidecar (None or not a mapping).
        """
        if raw is None or isinstance(raw, SidecarMetadata):
            return raw

        if not isinstance(raw, Mapping):
            logger.debug("Sidecar is not a mapping (type: %s), ignoring it", type(raw))
            return None

        return cls(keywords=raw.get("keywords"), star=raw.get("star"))
