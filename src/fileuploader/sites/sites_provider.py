"""In-memory site (session) tracking."""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from ..events import EventsProvider


@dataclass(frozen=True)
class Site:
    """A logged in site and the features it disabled."""
    id: str
    disabled_features: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("Site id cannot be empty")

    def is_feature_disabled(self, name: str) -> bool:
        """Check whether a feature is disabled in this site."""
        return name in self.disabled_features


class SitesProvider:
    """
    Keeps the current site and announces session changes.

    Triggers LOGIN on login, SITE_UPDATED when the current site changes its
    configuration and LOGOUT on logout.
    """

    def __init__(self, events_provider: EventsProvider):
        self._events = events_provider
        self._current_site: Optional[Site] = None
        self._logger = logging.getLogger(__name__)

    def get_current_site(self) -> Optional[Site]:
        return self._current_site

    def get_current_site_id(self) -> Optional[str]:
        return self._current_site.id if self._current_site else None

    def is_logged_in(self) -> bool:
        return self._current_site is not None

    def login(self, site: Site) -> None:
        """Set the current site and notify listeners."""
        self._current_site = site
        self._logger.info(f"Logged in site '{site.id}'")
        self._events.trigger(EventsProvider.LOGIN, {"site_id": site.id})

    def update_site(self, disabled_features: Iterable[str]) -> None:
        """Replace the disabled features of the current site."""
        if self._current_site is None:
            self._logger.warning("Cannot update site: no site logged in")
            return

        self._current_site = Site(
            id=self._current_site.id,
            disabled_features=frozenset(disabled_features),
        )
        self._events.trigger(EventsProvider.SITE_UPDATED, {"site_id": self._current_site.id})

    def logout(self) -> None:
        """Forget the current site and notify listeners."""
        site_id = self.get_current_site_id()
        self._current_site = None
        self._logger.info(f"Logged out site '{site_id}'")
        self._events.trigger(EventsProvider.LOGOUT, {"site_id": site_id})
