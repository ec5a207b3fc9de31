"""Deriver module for resolving canonical metadata from extractor tags."""

from media_metadata.deriver.dates import parse_tag_date, to_epoch_millis
from media_metadata.deriver.derive import derive_metadata, split_keywords
from media_metadata.deriver.patterns import infer_date_from_filename
from media_metadata.deriver.precedence import first_present

__all__ = [
    "derive_metadata",
    "first_present",
    "infer_date_from_filename",
    "parse_tag_date",
    "split_keywords",
    "to_epoch_millis",
]
