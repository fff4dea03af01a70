"""Handler interfaces consumed by the delegates."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..value_objects import HandlerData


class DelegateHandler(ABC):
    """
    Base class for anything registered in a HandlerDelegate.

    The ``name`` is the handler identity: registering another handler with
    the same name replaces the previous one.
    """

    name: str = ""

    def is_enabled(self) -> bool:
        """Whether the handler can be used in the current site."""
        return True


class FileUploaderHandler(DelegateHandler):
    """
    Interface that all file picker handlers must implement.

    Subclasses must provide ``get_data``. The default
    ``get_supported_mimetypes`` declares no support at all, so the handler
    is only listed when the picker does not filter by mimetype. Handlers
    able to pick any kind of file should use SupportsAllMimetypes.
    """

    # The highest priority, the highest position.
    priority: Optional[int] = None

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        """
        Given a list of mimetypes, return the ones supported by the handler.

        Args:
            mimetypes: Requested mimetypes

        Returns:
            Supported subset, empty if none
        """
        return []

    @abstractmethod
    def get_data(self) -> HandlerData:
        """Get the data to display the handler."""
        pass


class SupportsAllMimetypes:
    """Mixin for handlers that can pick files of any type."""

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        return list(mimetypes)
