"""Protocols and interfaces for the file uploader."""

from .handler import DelegateHandler, FileUploaderHandler, SupportsAllMimetypes
from .sites import SiteProtocol, SitesProviderProtocol

__all__ = [
    "DelegateHandler",
    "FileUploaderHandler",
    "SupportsAllMimetypes",
    "SiteProtocol",
    "SitesProviderProtocol",
]
