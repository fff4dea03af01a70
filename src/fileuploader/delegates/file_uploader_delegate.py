"""Delegate to register handlers to be shown in the file picker."""

from typing import Any, Dict, List, Optional, Sequence

from ..config import get_settings
from ..core.protocols import SitesProviderProtocol
from ..core.value_objects import HandlerData, HandlerDataToReturn
from ..events import EventsProvider, get_events_provider
from ..sites import SitesProvider
from .handler_delegate import HandlerDelegate


class FileUploaderDelegate(HandlerDelegate):
    """
    Delegate holding the file picker handlers.

    Site enabled handlers are dropped on logout; registrations survive and
    are enabled again on the next login.
    """

    def __init__(
        self,
        sites_provider: SitesProviderProtocol,
        events_provider: EventsProvider,
        delegate_name: Optional[str] = None,
        feature_prefix: Optional[str] = None,
    ):
        settings = get_settings()
        super().__init__(
            delegate_name or settings.delegate_name,
            sites_provider,
            events_provider,
            feature_prefix=feature_prefix if feature_prefix is not None else settings.feature_prefix,
        )

        events_provider.on(EventsProvider.LOGOUT, self._on_logout)

    def clear_site_handlers(self) -> None:
        """Clear current site handlers. Registered handlers are kept."""
        with self._lock:
            self.enabled_handlers = {}

        self.logger.debug("Cleared site handlers")

    def get_handlers(self, mimetypes: Optional[Sequence[str]] = None) -> List[HandlerDataToReturn]:
        """
        Get the handlers for the current site.

        Records come out in enablement order; ``priority`` is attached for the
        caller to sort by.

        Args:
            mimetypes: Mimetypes the picker accepts. None means all mimetypes,
                and no mimetype resolution is done.

        Returns:
            List of handlers data
        """
        handlers = []

        for handler in self.get_enabled_handlers():
            supported_mimetypes = None

            if mimetypes is not None:
                get_supported = getattr(handler, "get_supported_mimetypes", None)
                if not callable(get_supported):
                    self.logger.debug(f"Handler '{handler.name}' can't filter mimetypes, skipping")
                    continue

                try:
                    supported_mimetypes = get_supported(list(mimetypes))
                except Exception as e:
                    self.logger.error(f"Error getting mimetypes of handler '{handler.name}': {e}", exc_info=True)
                    continue

                if not supported_mimetypes:
                    # Handler doesn't support any of the mimetypes.
                    continue

            get_data = getattr(handler, "get_data", None)
            if not callable(get_data):
                self.logger.debug(f"Handler '{handler.name}' has no data to display, skipping")
                continue

            try:
                data = get_data()
            except Exception as e:
                self.logger.error(f"Error getting data of handler '{handler.name}': {e}", exc_info=True)
                continue

            if not isinstance(data, HandlerData):
                self.logger.debug(f"Handler '{handler.name}' returned invalid data, skipping")
                continue

            handlers.append(HandlerDataToReturn.from_handler_data(
                data,
                priority=getattr(handler, "priority", None),
                mimetypes=supported_mimetypes,
            ))

        return handlers

    def _on_logout(self, data: Optional[Dict[str, Any]] = None) -> None:
        self.clear_site_handlers()


# Singleton instance
_file_uploader_delegate: Optional[FileUploaderDelegate] = None


def get_file_uploader_delegate() -> FileUploaderDelegate:
    """
    Get the global file uploader delegate.

    Built on first use with the global events provider and a SitesProvider
    bound to it.
    """
    global _file_uploader_delegate
    if _file_uploader_delegate is None:
        events_provider = get_events_provider()
        _file_uploader_delegate = FileUploaderDelegate(
            SitesProvider(events_provider),
            events_provider,
        )
    return _file_uploader_delegate
