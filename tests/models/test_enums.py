"""Unit tests for the MediaCategory enum."""

import pytest

from media_metadata.models import MediaCategory


class TestMediaCategory:
    """Tests for the MediaCategory enum."""

    def test_category_count(self):
        """Test the expected number of MediaCategory values."""
        assert len(MediaCategory) == 5

    @pytest.mark.parametrize("mime_type,expected", [
        ("image/jpeg", MediaCategory.IMAGE),
        ("image/gif", MediaCategory.IMAGE),
        ("IMAGE/PNG", MediaCategory.IMAGE),
        ("video/mp4", MediaCategory.VIDEO),
        ("video/quicktime", MediaCategory.VIDEO),
        ("audio/mpeg", MediaCategory.AUDIO),
        ("application/pdf", MediaCategory.OTHER),
        (" video/mp4 ", MediaCategory.VIDEO),
    ])
    def test_from_mime_type(self, mime_type, expected):
        """Test MIME type classification."""
        assert MediaCategory.from_mime_type(mime_type) == expected

    @pytest.mark.parametrize("mime_type", [None, "", "video", "video/", "/mp4", 42, ["video/mp4"]])
    def test_from_mime_type_malformed(self, mime_type):
        """Test that malformed MIME types are UNKNOWN."""
        assert MediaCategory.from_mime_type(mime_type) == MediaCategory.UNKNOWN

    def test_is_video(self):
        """Test the is_video property."""
        assert MediaCategory.VIDEO.is_video is True
        assert MediaCategory.IMAGE.is_video is False
        assert MediaCategory.UNKNOWN.is_video is False

    def test_is_image(self):
        """Test the is_image property."""
        assert MediaCategory.IMAGE.is_image is True
        assert MediaCategory.VIDEO.is_image is False
        assert MediaCategory.OTHER.is_image is False
