"""
Batch derivation into pandas DataFrames.

An extractor run over a folder produces one tag dictionary per file; this
module derives a Metadata record for each and returns the results as a
DataFrame for easy analysis.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

import pandas as pd

from media_metadata.config import DeriverOptions
from media_metadata.deriver import derive_metadata
from media_metadata.models.metadata import Metadata
from media_metadata.models.tags import TagDictionary

logger = logging.getLogger(__name__)


def derive_catalog(
    entries: Iterable[Tuple[Any, Any]],
    options: Optional[DeriverOptions] = None,
) -> pd.DataFrame:
    """
    Derive metadata for many files and return a DataFrame.

    Args:
        entries: (tags, sidecar) pairs, one per file. Tags and sidecar take
                 the same forms as in derive_metadata; sidecar may be None.
        options: Derivation policies shared by every entry

    Returns:
        DataFrame with one row per entry: a "source_file" column followed
        by the Metadata fields

    Example:
        >>> exiftool_output = json.loads(subprocess.check_output(
        ...     ["exiftool", "-G", "-json", "photos/"]))
        >>> df = derive_catalog((tags, None) for tags in exiftool_output)
        >>> print(df[['source_file', 'date', 'caption']].head())
    """
    rows = []
    for tags, sidecar in entries:
        tag_dictionary = TagDictionary.from_dict(tags)
        metadata = derive_metadata(tag_dictionary, sidecar, options)
        row = {"source_file": tag_dictionary.source_file}
        row.update(metadata.to_dict())
        rows.append(row)

    logger.debug("Derived metadata for %d files", len(rows))

    if not rows:
        return pd.DataFrame()

    return pd.DataFrame(rows)


def metadata_to_dataframe(records: List[Metadata]) -> pd.DataFrame:
    """
    Convert a list of Metadata records to a pandas DataFrame.

    Args:
        records: List of Metadata objects

    Returns:
        DataFrame with one row per record
    """
    if not records:
        return pd.DataFrame()

    data = [record.to_dict() for record in records]
    return pd.DataFrame(data)
