"""Utilities."""

from .mimetypes import filter_mimetypes, get_mimetype_group

__all__ = ["filter_mimetypes", "get_mimetype_group"]
