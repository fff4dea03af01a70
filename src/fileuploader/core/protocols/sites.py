"""Protocols for the session (site) collaborators."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class SiteProtocol(Protocol):
    """Protocol for a logged in site."""

    @property
    def id(self) -> str:
        """Site identifier."""
        ...

    def is_feature_disabled(self, name: str) -> bool:
        """Check whether the site disabled a feature."""
        ...


@runtime_checkable
class SitesProviderProtocol(Protocol):
    """Protocol for the provider that knows the current site."""

    def get_current_site(self) -> Optional[SiteProtocol]:
        """Get the current site, None when logged out."""
        ...

    def is_logged_in(self) -> bool:
        """Check whether there is a current site."""
        ...
