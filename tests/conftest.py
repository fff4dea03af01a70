"""Pytest configuration and fixtures for fileuploader tests."""

from typing import List, Optional

import pytest

from fileuploader.config import get_settings
from fileuploader.core.protocols import FileUploaderHandler
from fileuploader.core.value_objects import HandlerData
from fileuploader.delegates import FileUploaderDelegate
from fileuploader.events import EventsProvider
from fileuploader.sites import Site, SitesProvider


class StubHandler(FileUploaderHandler):
    """Handler with a fixed set of supported mimetypes.

    ``supported=None`` keeps the base behaviour (no declared support).
    """

    def __init__(
        self,
        name: str,
        priority: Optional[int] = None,
        supported: Optional[List[str]] = None,
        title: Optional[str] = None,
        enabled: bool = True,
    ):
        self.name = name
        self.priority = priority
        self.supported = supported
        self.title = title or f"Handler {name}"
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        if self.supported is None:
            return super().get_supported_mimetypes(mimetypes)
        return [mimetype for mimetype in mimetypes if mimetype in self.supported]

    def get_data(self) -> HandlerData:
        return HandlerData(title=self.title, icon="icon-" + self.name.lower())


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached, reset them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def events_provider():
    return EventsProvider()


@pytest.fixture
def sites_provider(events_provider):
    return SitesProvider(events_provider)


@pytest.fixture
def delegate(sites_provider, events_provider):
    return FileUploaderDelegate(sites_provider, events_provider)


@pytest.fixture
def sample_site():
    return Site(id="site-1")


@pytest.fixture
def handler_a():
    return StubHandler("A", priority=10, supported=["image/jpeg"])


@pytest.fixture
def handler_b():
    return StubHandler("B", priority=5)


@pytest.fixture
def handler_c():
    return StubHandler("C", priority=20, supported=["image/png", "image/jpeg"])


@pytest.fixture
def abc_delegate(delegate, sites_provider, sample_site, handler_a, handler_b, handler_c):
    """Delegate with handlers A, B and C registered and enabled for a site."""
    for handler in (handler_a, handler_b, handler_c):
        delegate.register_handler(handler)
    sites_provider.login(sample_site)
    return delegate
