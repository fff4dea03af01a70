"""Site (session) management."""

from .sites_provider import Site, SitesProvider

__all__ = ["Site", "SitesProvider"]
