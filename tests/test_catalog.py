"""Unit tests for catalog module."""

import pandas as pd

from media_metadata.catalog import derive_catalog, metadata_to_dataframe
from media_metadata.config import DeriverOptions
from media_metadata.models import Metadata


class TestDeriveCatalog:
    """Tests for derive_catalog() function."""

    def test_empty_input(self):
        """Test that no entries give an empty DataFrame."""
        df = derive_catalog([])
        assert isinstance(df, pd.DataFrame)
        assert df.empty

    def test_one_row_per_entry(self, local_millis):
        """Test that each entry becomes one row."""
        entries = [
            ({"SourceFile": "a/VID_20170220_114006.mp4", "File": {"MIMEType": "video/mp4"}}, None),
            ({"SourceFile": "a/photo.jpg", "XMP": {"Rating": 4},
              "EXIF": {"DateTimeOriginal": "2016:10:28 17:34:58"}}, {"star": "yes"}),
        ]

        df = derive_catalog(entries)

        assert len(df) == 2
        assert list(df["source_file"]) == ["a/VID_20170220_114006.mp4", "a/photo.jpg"]
        assert list(df["video"]) == [True, False]
        assert list(df["rating"]) == [0, 4]
        assert list(df["favourite"]) == [False, True]
        assert df["date"].iloc[0] == local_millis("2017-02-20 11:40:06")
        assert df["date"].iloc[1] == local_millis("2016-10-28 17:34:58")

    def test_columns(self):
        """Test the expected columns."""
        df = derive_catalog([({}, None)])
        assert list(df.columns) == [
            "source_file", "date", "video", "animated", "caption",
            "keywords", "rating", "favourite", "width", "height",
        ]

    def test_options_are_applied(self):
        """Test that options reach every derivation."""
        entries = [({"EXIF": {"Make": "Canon"}}, None)]
        df = derive_catalog(entries, DeriverOptions(embed_exif=True))
        assert df["exif"].iloc[0] == {"Make": "Canon"}

    def test_accepts_generator(self):
        """Test that entries may be a generator."""
        df = derive_catalog(({"XMP": {"Rating": n}}, None) for n in range(3))
        assert list(df["rating"]) == [0, 1, 2]


class TestMetadataToDataframe:
    """Tests for metadata_to_dataframe() function."""

    def test_empty(self):
        """Test that no records give an empty DataFrame."""
        assert metadata_to_dataframe([]).empty

    def test_records(self):
        """Test one row per record."""
        df = metadata_to_dataframe([Metadata(date=1, keywords=("a",)), Metadata(date=2)])
        assert list(df["date"]) == [1, 2]
        assert list(df["keywords"]) == [["a"], []]
