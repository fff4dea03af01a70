"""Generic registry of named handlers enabled per site."""

import logging
import threading
from typing import Any, Dict, List, Optional

from ..core.exceptions import HandlerNotFoundError
from ..core.protocols import DelegateHandler, SitesProviderProtocol
from ..events import EventsProvider


class HandlerDelegate:
    """
    Registry for handlers that extend a feature of the application.

    Keeps two ordered stores keyed by handler name: every registered
    handler, and the handlers enabled for the current site. The enabled
    store is recomputed on login and site updates. Subclasses decide what
    happens on logout.
    """

    def __init__(
        self,
        delegate_name: str,
        sites_provider: SitesProviderProtocol,
        events_provider: EventsProvider,
        feature_prefix: Optional[str] = None,
    ):
        self.delegate_name = delegate_name
        self.feature_prefix = feature_prefix if feature_prefix is not None else f"{delegate_name}_"
        self.sites_provider = sites_provider
        self.events_provider = events_provider

        self.handlers: Dict[str, DelegateHandler] = {}  # All registered handlers.
        self.enabled_handlers: Dict[str, DelegateHandler] = {}  # Handlers enabled for the current site.
        self._lock = threading.RLock()
        self.logger = logging.getLogger(f"fileuploader.delegates.{delegate_name}")

        events_provider.on(EventsProvider.LOGIN, self._on_site_changed)
        events_provider.on(EventsProvider.SITE_UPDATED, self._on_site_changed)

    def register_handler(self, handler: DelegateHandler) -> bool:
        """
        Register a handler. A handler already registered under the same
        name is replaced.

        Args:
            handler: Handler to register

        Returns:
            True if registered, False if the handler has no usable name
        """
        name = getattr(handler, "name", None)
        if not isinstance(name, str) or not name.strip():
            self.logger.error(f"Cannot register handler without a name: {handler!r}")
            return False

        with self._lock:
            if name in self.handlers:
                self.logger.warning(f"Handler '{name}' already registered, replacing")

            self.handlers[name] = handler
            if name in self.enabled_handlers:
                # Keep the enablement slot, point it to the new handler.
                self.enabled_handlers[name] = handler

        self.logger.info(f"Registered handler '{name}'")

        if self.sites_provider.is_logged_in():
            self.update_handler(handler)

        return True

    def unregister_handler(self, name: str) -> bool:
        """
        Remove a handler from both stores.

        Returns:
            True if the handler was registered
        """
        with self._lock:
            self.enabled_handlers.pop(name, None)
            removed = self.handlers.pop(name, None)

        if removed is not None:
            self.logger.info(f"Unregistered handler '{name}'")
            return True
        return False

    def has_handler(self, name: str, enabled: bool = False) -> bool:
        """Check if a handler is registered, or enabled when ``enabled`` is True."""
        with self._lock:
            store = self.enabled_handlers if enabled else self.handlers
            return name in store

    def get_handler(self, name: str, enabled: bool = False) -> Optional[DelegateHandler]:
        """Get a registered handler, or an enabled one when ``enabled`` is True."""
        with self._lock:
            store = self.enabled_handlers if enabled else self.handlers
            return store.get(name)

    def is_handler_enabled(self, name: str) -> bool:
        """Check if a handler is enabled for the current site."""
        return self.has_handler(name, enabled=True)

    def get_enabled_handlers(self) -> List[DelegateHandler]:
        """Snapshot of the enabled handlers in enablement order."""
        with self._lock:
            return list(self.enabled_handlers.values())

    def enable_handler(self, name: str) -> None:
        """
        Mark a registered handler as enabled for the current site.

        Raises:
            HandlerNotFoundError: If no handler is registered with that name
        """
        with self._lock:
            handler = self.handlers.get(name)
            if handler is None:
                raise HandlerNotFoundError(name, self.delegate_name)
            self.enabled_handlers[name] = handler

        self.logger.debug(f"Enabled handler '{name}'")

    def disable_handler(self, name: str) -> bool:
        """
        Remove a handler from the enabled store. The registration is kept.

        Returns:
            True if the handler was enabled
        """
        with self._lock:
            removed = self.enabled_handlers.pop(name, None)

        if removed is not None:
            self.logger.debug(f"Disabled handler '{name}'")
            return True
        return False

    def is_feature_disabled(self, handler: DelegateHandler) -> bool:
        """Check if the current site disabled the handler's feature."""
        site = self.sites_provider.get_current_site()
        return site is not None and site.is_feature_disabled(self.feature_prefix + handler.name)

    def update_handler(self, handler: DelegateHandler) -> bool:
        """
        Recompute whether a handler is enabled for the current site.

        Returns:
            Whether the handler ended up enabled
        """
        if not self.sites_provider.is_logged_in() or self.is_feature_disabled(handler):
            enabled = False
        else:
            try:
                enabled = bool(handler.is_enabled())
            except Exception as e:
                self.logger.error(f"Error checking if handler '{handler.name}' is enabled: {e}", exc_info=True)
                enabled = False

        with self._lock:
            if self.handlers.get(handler.name) is not handler:
                # Replaced or unregistered meanwhile.
                return False

            if enabled:
                self.enabled_handlers[handler.name] = handler
            else:
                self.enabled_handlers.pop(handler.name, None)

        return enabled

    def update_handlers(self) -> None:
        """Recompute the enabled store for the current site."""
        self.logger.debug("Updating handlers for current site")

        with self._lock:
            handlers = list(self.handlers.values())

        for handler in handlers:
            self.update_handler(handler)

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        with self._lock:
            return {
                "delegate_name": self.delegate_name,
                "registered_handlers": len(self.handlers),
                "enabled_handlers": len(self.enabled_handlers),
                "handler_names": list(self.handlers.keys()),
                "enabled_handler_names": list(self.enabled_handlers.keys()),
            }

    def _on_site_changed(self, data: Optional[Dict[str, Any]] = None) -> None:
        self.update_handlers()
