"""
Date inference from filenames.

Some devices and tools encode the capture time in the filename but write no
date tag. Only the last path segment is inspected.

Supported patterns:
1. Android camera: IMG_20170220_114006.jpg, VID_20170220_114006.mp4
2. Dropbox camera upload: 2017-03-24 19.42.30.jpg, 2017-03-24 19.42.30-1.jpg

A name that merely contains digits is never approximated: either one of the
patterns matches completely and names a real date, or nothing is inferred.
"""

import logging
import re
from datetime import datetime
from pathlib import PurePosixPath
from typing import Optional

logger = logging.getLogger(__name__)

# Each pattern captures year, month, day, hour, minute, second
FILENAME_DATE_PATTERNS = [
    # Android: IMG_YYYYMMDD_HHMMSS / VID_YYYYMMDD_HHMMSS
    ("android", re.compile(r"^(?:IMG|VID)_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})(?!\d)")),
    # Dropbox: YYYY-MM-DD HH.MM.SS, optionally followed by more text
    ("dropbox", re.compile(r"^(\d{4})-(\d{2})-(\d{2}) (\d{2})\.(\d{2})\.(\d{2})(?!\d)")),
]


def get_filename(path: str) -> str:
    """
    Get the last segment of a path.

    Handles both POSIX and Windows separators, e.g.
    "C:\\photos\\IMG_1.jpg" -> "IMG_1.jpg"
    """
    return PurePosixPath(path.replace("\\", "/")).name


def infer_date_from_filename(path: Optional[str]) -> Optional[datetime]:
    """
    Infer the capture date from a filename.

    Args:
        path: File path or bare filename

    Returns:
        Naive local datetime if a pattern matches, else None

    Examples:
        >>> infer_date_from_filename("folder/VID_20170220_114006.mp4")
        datetime.datetime(2017, 2, 20, 11, 40, 6)

        >>> infer_date_from_filename("folder/2017-03-24 19.42.30.jpg")
        datetime.datetime(2017, 3, 24, 19, 42, 30)

        >>> infer_date_from_filename("folder/IMG_1234.jpg") is None
        True
    """
    if not isinstance(path, str) or not path:
        return None

    filename = get_filename(path)

    for name, pattern in FILENAME_DATE_PATTERNS:
        match = pattern.match(filename)
        if not match:
            continue
        try:
            return datetime(*(int(group) for group in match.groups()))
        except ValueError as e:
            logger.debug("Filename '%s' looks like a %s date but is invalid: %s", filename, name, e)
            return None

    return None
