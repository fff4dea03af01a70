"""Tests for site tracking."""

from unittest.mock import MagicMock

import pytest

from fileuploader.core.protocols import SiteProtocol, SitesProviderProtocol
from fileuploader.events import EventsProvider
from fileuploader.sites import Site


class TestSite:
    """Test cases for Site."""

    def test_feature_disabled(self):
        site = Site(id="s1", disabled_features=frozenset({"Feature"}))

        assert site.is_feature_disabled("Feature")
        assert not site.is_feature_disabled("Other")
        assert isinstance(site, SiteProtocol)

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError, match="Site id cannot be empty"):
            Site(id=" ")


class TestSitesProvider:
    """Test cases for SitesProvider."""

    def test_login_and_logout(self, sites_provider, events_provider, sample_site):
        login = MagicMock()
        logout = MagicMock()
        events_provider.on(EventsProvider.LOGIN, login)
        events_provider.on(EventsProvider.LOGOUT, logout)

        sites_provider.login(sample_site)
        assert sites_provider.is_logged_in()
        assert sites_provider.get_current_site() is sample_site
        login.assert_called_once_with({"site_id": "site-1"})

        sites_provider.logout()
        assert not sites_provider.is_logged_in()
        assert sites_provider.get_current_site_id() is None
        logout.assert_called_once_with({"site_id": "site-1"})

    def test_update_site(self, sites_provider, events_provider, sample_site):
        updated = MagicMock()
        events_provider.on(EventsProvider.SITE_UPDATED, updated)
        sites_provider.login(sample_site)

        sites_provider.update_site(["Feature"])

        assert sites_provider.get_current_site().is_feature_disabled("Feature")
        updated.assert_called_once_with({"site_id": "site-1"})

    def test_update_site_when_logged_out(self, sites_provider, events_provider):
        updated = MagicMock()
        events_provider.on(EventsProvider.SITE_UPDATED, updated)

        sites_provider.update_site(["Feature"])

        updated.assert_not_called()

    def test_implements_protocol(self, sites_provider):
        assert isinstance(sites_provider, SitesProviderProtocol)
