"""Tests for mimetype helpers."""

import pytest

from fileuploader.utils import filter_mimetypes, get_mimetype_group


class TestMimetypeHelpers:
    """Test cases for mimetype helpers."""

    @pytest.mark.parametrize("mimetype, group", [
        ("image/png", "image"),
        ("Video/MP4", "video"),
        ("*/*", "*"),
        ("invalid", None),
        ("/png", None),
        (None, None),
    ])
    def test_get_mimetype_group(self, mimetype, group):
        assert get_mimetype_group(mimetype) == group

    def test_filter_mimetypes_keeps_order(self):
        mimetypes = ["image/png", "application/pdf", "image/jpeg", "image/png"]

        assert filter_mimetypes(mimetypes, "image") == ["image/png", "image/jpeg", "image/png"]

    def test_filter_mimetypes_wildcards(self):
        assert filter_mimetypes(["*/*", "image/*", "audio/*"], "IMAGE") == ["*/*", "image/*"]

    def test_filter_mimetypes_empty(self):
        assert filter_mimetypes([], "image") == []
