"""
Date parsing for metadata tags.

Extractor dates use the EXIF layout "YYYY:MM:DD HH:MM:SS" and carry no
timezone. They are read as naive local time and stored as epoch
milliseconds.
"""

import logging
import re
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

TAG_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"

# strptime alone accepts single-digit fields, so the layout is checked first
TAG_DATE_PATTERN = re.compile(r"\d{4}:\d{2}:\d{2} \d{2}:\d{2}:\d{2}")


def parse_tag_date(value) -> Optional[datetime]:
    """
    Parse an extractor date tag to a naive datetime.

    Only the exact layout "YYYY:MM:DD HH:MM:SS" is accepted. Values with a
    timezone offset, sub-seconds, another layout, or an impossible date
    (cameras often write "0000:00:00 00:00:00") are rejected.

    Args:
        value: Raw tag value

    Returns:
        datetime object or None if the value is not a valid tag date
    """
    if not isinstance(value, str):
        return None

    if not TAG_DATE_PATTERN.fullmatch(value):
        logger.debug("Ignoring date '%s': not in YYYY:MM:DD HH:MM:SS format", value)
        return None

    try:
        return datetime.strptime(value, TAG_DATE_FORMAT)
    except ValueError as e:
        logger.debug("Failed to parse datetime '%s': %s", value, e)
        return None


def to_epoch_millis(moment: datetime) -> int:
    """
    Convert a naive local datetime to epoch milliseconds.

    Args:
        moment: Naive datetime, interpreted in the local timezone

    Returns:
        Milliseconds since the Unix epoch
    """
    return int(round(moment.timestamp() * 1000))
